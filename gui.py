import os

import pgzrun
import pygame
from logzero import logger

from pathfinder.config import Algorithm, Heuristic, SearchConfig
from pathfinder.constant import CONSTANT
from pathfinder.errors import RunInProgressError
from pathfinder.simulation import Pathfinder
from pathfinder.ui.board import BoardDisplay, to_coordinate
from pathfinder.ui.stats import StatsDisplay
from pathfinder.utils import logging

# intializes font for text rendering
pygame.font.init()

# Force window to be centered
os.environ["SDL_VIDEO_CENTERED"] = "1"
TITLE = "jPathfinder"
WIDTH = CONSTANT.SCREEN.WIDTH_PX
HEIGHT = CONSTANT.SCREEN.HEIGHT_PX

# Configurable parameters
map_filepath = os.environ.get(f"{CONSTANT.ENV_PREFIX}MAP", str(CONSTANT.MAP_FILE.DEFAULT_PATH))
refresh_rate = CONSTANT.SPEED.SLOWER_INTERVAL

# Initialize program
logging.setup_logger(CONSTANT.LOG_DIR)
board_display = BoardDisplay()
stats_display = StatsDisplay()
pathfinder = Pathfinder(SearchConfig.from_env())


def refresh():
    board_display.update(pathfinder.snapshot())
    stats_display.update(pathfinder.export_statistics())


def draw():
    screen.clear()
    board_display.draw(screen)
    stats_display.draw(screen)


def process():
    # Execute one search step
    if pathfinder.is_running():
        pathfinder.update()
    refresh()

    # Stop ticking once the run terminated
    if not pathfinder.is_running():
        clock.unschedule(process)


def start_run():
    if pathfinder.is_running():
        return
    pathfinder.reset_run()
    if pathfinder.start():
        clock.schedule_interval(process, refresh_rate)


def toggle_speed():
    global refresh_rate
    if refresh_rate == CONSTANT.SPEED.SLOWER_INTERVAL:
        refresh_rate = CONSTANT.SPEED.FASTER_INTERVAL
    else:
        refresh_rate = CONSTANT.SPEED.SLOWER_INTERVAL
    logger.info(f"Step interval: {refresh_rate}s")

    # Reschedule a run in progress with the new interval
    if pathfinder.is_running():
        clock.unschedule(process)
        clock.schedule_interval(process, refresh_rate)


def next_heuristic(heuristic: Heuristic) -> Heuristic:
    members = list(Heuristic)
    return members[(members.index(heuristic) + 1) % len(members)]


def edit_cell(pos, button):
    coord = to_coordinate(pos)
    if coord is None:
        return
    if button == mouse.RIGHT:
        pathfinder.unblock(coord)
    elif button == mouse.LEFT:
        if keyboard.lctrl or keyboard.rctrl:
            pathfinder.set_origin(coord)
        elif keyboard.lalt or keyboard.ralt:
            pathfinder.set_destination(coord)
        else:
            pathfinder.set_blocked(coord)


def on_mouse_down(pos, button):
    if pathfinder.is_running():
        return
    edit_cell(pos, button)
    refresh()


# click+drag to draw or remove walls
def on_mouse_move(pos, rel, buttons):
    if pathfinder.is_running():
        return
    coord = to_coordinate(pos)
    if coord is None:
        return
    if mouse.LEFT in buttons:
        pathfinder.set_blocked(coord)
    elif mouse.RIGHT in buttons:
        pathfinder.unblock(coord)
    else:
        return
    refresh()


def on_key_down(key):
    if key == keys.F:
        toggle_speed()
        return

    try:
        if key == keys.SPACE:
            start_run()
        elif key == keys.R:
            pathfinder.reset_run()
        elif key == keys.S:
            pathfinder.save_map(map_filepath)
        elif key == keys.L:
            pathfinder.load_map(map_filepath)
        elif key == keys.O:
            pathfinder.swap_endpoints()
        elif key == keys.A:
            if pathfinder.config.algorithm == Algorithm.ASTAR:
                pathfinder.set_algorithm(Algorithm.DIJKSTRA)
            else:
                pathfinder.set_algorithm(Algorithm.ASTAR)
        elif key == keys.H:
            pathfinder.set_heuristic(next_heuristic(pathfinder.config.heuristic))
        elif key == keys.D:
            pathfinder.set_allow_diagonals(not pathfinder.config.allow_diagonals)
        elif key == keys.P:
            pathfinder.set_path_correction(not pathfinder.config.path_correction)
    except RunInProgressError as e:
        logger.warning(e)
    except OSError as e:
        logger.error(f"Map file {map_filepath} failed: {e}")
    refresh()


refresh()
pgzrun.go()
