from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple, Union

Color = Union[str, Tuple[int, ...]]


@dataclass(frozen=True)
class Board:
    NUMBER_OF_COLUMNS: int = 75
    NUMBER_OF_ROWS: int = 50
    CELL_SIZE_PX: int = 15
    WIDTH_PX: int = CELL_SIZE_PX * NUMBER_OF_COLUMNS
    HEIGHT_PX: int = CELL_SIZE_PX * NUMBER_OF_ROWS


@dataclass(frozen=True)
class Panel:
    HEIGHT_PX: int = 110
    MARGIN_PX: int = 8
    FONT_NAME: str = "Courier New"
    FONT_SIZE: int = 14
    BACKGROUND_COLOR: Color = (32, 38, 52)
    TEXT_COLOR: Color = (230, 235, 240)


@dataclass(frozen=True)
class Screen:
    WIDTH_PX: int = Board.WIDTH_PX
    HEIGHT_PX: int = Board.HEIGHT_PX + Panel.HEIGHT_PX


@dataclass(frozen=True)
class CellColor:
    EMPTY: Color = "white"
    GRID_LINE: Color = "lightgray"
    SETTLED: Color = "salmon"
    FRONTIER: Color = "lightsteelblue"
    BLOCKED: Color = "black"
    PATH: Color = "darkred"
    CURRENT: Color = "fuchsia"
    ORIGIN: Color = "green"
    DESTINATION: Color = "blue"


@dataclass(frozen=True)
class Speed:
    # seconds between two engine steps
    FASTER_INTERVAL: float = 0.005
    SLOWER_INTERVAL: float = 0.1


@dataclass(frozen=True)
class SearchDefault:
    ALGORITHM: str = "ASTAR"
    HEURISTIC: str = "EUCLIDEAN"
    ALLOW_DIAGONALS: bool = True
    PATH_CORRECTION: bool = False


@dataclass(frozen=True)
class MapFile:
    EXTENSION: str = ".pathmap"
    DEFAULT_PATH: Path = Path("maps/default.pathmap")
    ORIGIN_TAG: str = "O"
    DESTINATION_TAG: str = "D"
    BLOCKED_TAG: str = "B"


@dataclass(frozen=True)
class Report:
    DEFAULT_PATH: Path = Path("data/run_report.csv")
    COLUMNS: Tuple[str, ...] = field(
        default_factory=lambda: (
            "tick",
            "status",
            "current",
            "settled",
            "frontier",
            "steps",
        )
    )


@dataclass(frozen=True)
class UIConstant:
    BOARD: Board = Board()
    PANEL: Panel = Panel()
    SCREEN: Screen = Screen()
    CELL_COLOR: CellColor = CellColor()
    SPEED: Speed = Speed()
    SEARCH_DEFAULT: SearchDefault = SearchDefault()
    MAP_FILE: MapFile = MapFile()
    REPORT: Report = Report()

    LOG_DIR: str = "logs"
    ENV_PREFIX: str = "PATHFINDER_"


CONSTANT = UIConstant()
