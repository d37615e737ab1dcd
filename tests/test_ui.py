import numpy as np

from pathfinder.constant import CONSTANT
from pathfinder.grid import Coordinate
from pathfinder.snapshot import CellKind
from pathfinder.ui.board import painted_cells, to_coordinate
from pathfinder.ui.stats import StatsDisplay

C = Coordinate


def test_to_coordinate():
    assert to_coordinate((0, 0), cell_size_px=10) == C(0, 0)
    assert to_coordinate((25, 9), cell_size_px=10) == C(2, 0)
    assert to_coordinate((-1, 5), cell_size_px=10) is None

    size = CONSTANT.BOARD.CELL_SIZE_PX
    assert to_coordinate((CONSTANT.BOARD.WIDTH_PX, 0)) is None
    # the statistics panel is below the board
    assert to_coordinate((0, CONSTANT.BOARD.HEIGHT_PX + size)) is None


def test_painted_cells_skip_empty():
    cells = np.zeros((2, 3), dtype=np.int8)
    cells[1, 2] = CellKind.BLOCKED
    cells[0, 1] = CellKind.ORIGIN
    assert painted_cells(cells) == {
        C(2, 1): CONSTANT.CELL_COLOR.BLOCKED,
        C(1, 0): CONSTANT.CELL_COLOR.ORIGIN,
    }


def statistics(status="IDLE", path=None):
    return {
        "SEARCH": {"ALGORITHM": "ASTAR", "HEURISTIC": "EUCLIDEAN", "DIAGONALS": "ON", "CORRECTION": "OFF"},
        "RUN": {"STATUS": status, "SETTLED": 1234, "UNSETTLED": 56, "STEPS": 7890},
        "ENDPOINTS": {"ORIGIN": "(00,00)", "DESTINATION": "(05,05)"},
        "PATH": path,
    }


def test_stats_text():
    stats_display = StatsDisplay()
    stats_display.update(statistics("CONTINUE"))

    assert stats_display.get_run_status() == (
        "Settled nodes: 1,234, unsettled nodes: 56, total steps: 7,890 [CONTINUE]"
    )
    assert stats_display.get_search_status() == "ALGORITHM:ASTAR HEURISTIC:EUCLIDEAN DIAGONALS:ON CORRECTION:OFF"
    assert stats_display.get_endpoints_status() == "Origin: (00,00)  Destination: (05,05)"
    assert stats_display.get_path_status() == ""


def test_stats_path_status():
    stats_display = StatsDisplay()
    stats_display.update(statistics("SUCCESS", {"LENGTH": 5, "COST": 7.07}))
    assert stats_display.get_path_status() == "Path length: 5, cost: 7.07"

    stats_display.update(statistics("FAILURE"))
    assert stats_display.get_path_status() == "No path found!"
    assert "No path found!" in stats_display.get_text()
