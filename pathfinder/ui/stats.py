from typing import Any, Dict

import pygame

from pathfinder.constant import CONSTANT
from pathfinder.ui.draw import draw_text_on_screen

CONTROLS_HELP = (
    "SPACE start | R reset | S save | L load | O swap O/D | F speed\n"
    "A algorithm | H heuristic | D diagonals | P path correction\n"
    "click wall | right click erase | ctrl+click origin | alt+click destination"
)


class StatsDisplay:
    """
    Displays the search settings and the statistics of the current run below the board.

    Attributes
    ----------
    data : dict
        A nested dictionary as produced by `Pathfinder.export_statistics()`:

        - 'SEARCH': algorithm, heuristic, diagonal and path correction settings.
        - 'RUN': status, settled and unsettled counts, total steps.
        - 'ENDPOINTS': origin and destination labels.
        - 'PATH': length and cost of the path found, or None.
    """

    def __init__(self):
        self.data: Dict[str, Any] = {
            "SEARCH": {},
            "RUN": {"STATUS": "IDLE", "SETTLED": 0, "UNSETTLED": 0, "STEPS": 0},
            "ENDPOINTS": {"ORIGIN": "-", "DESTINATION": "-"},
            "PATH": None,
        }
        self.font = None

    def update(self, data: Dict[str, Any]):
        self.data = data

    def get_search_status(self) -> str:
        return " ".join(f"{attr}:{val}" for attr, val in self.data["SEARCH"].items())

    def get_run_status(self) -> str:
        run = self.data["RUN"]
        return (
            f"Settled nodes: {run['SETTLED']:,}, unsettled nodes: {run['UNSETTLED']:,}, "
            f"total steps: {run['STEPS']:,} [{run['STATUS']}]"
        )

    def get_endpoints_status(self) -> str:
        endpoints = self.data["ENDPOINTS"]
        return f"Origin: {endpoints['ORIGIN']}  Destination: {endpoints['DESTINATION']}"

    def get_path_status(self) -> str:
        path = self.data["PATH"]
        if path is None:
            if self.data["RUN"]["STATUS"] == "FAILURE":
                return "No path found!"
            return ""
        return f"Path length: {path['LENGTH']}, cost: {path['COST']:.2f}"

    def get_text(self) -> str:
        lines = [
            f"{self.get_endpoints_status()}  {self.get_search_status()}",
            f"{self.get_run_status()}  {self.get_path_status()}",
        ]
        return "\n".join(lines)

    def draw(self, screen: Any):
        if self.font is None:
            self.font = pygame.font.SysFont(CONSTANT.PANEL.FONT_NAME, CONSTANT.PANEL.FONT_SIZE)

        panel = CONSTANT.PANEL
        y_start = CONSTANT.BOARD.HEIGHT_PX
        screen.draw.filled_rect(
            pygame.Rect(0, y_start, CONSTANT.SCREEN.WIDTH_PX, panel.HEIGHT_PX),
            panel.BACKGROUND_COLOR,
        )
        draw_text_on_screen(
            screen,
            f"{self.get_text()}\n{CONTROLS_HELP}",
            x=panel.MARGIN_PX,
            y=y_start + panel.MARGIN_PX,
            max_y=y_start + panel.HEIGHT_PX - panel.MARGIN_PX,
            color=panel.TEXT_COLOR,
            font=self.font,
            line_spacing=2,
        )
