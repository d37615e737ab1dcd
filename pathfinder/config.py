import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from pathfinder.constant import CONSTANT


class Algorithm(Enum):
    DIJKSTRA = 0
    ASTAR = 1


class Heuristic(Enum):
    MANHATTAN = 0
    EUCLIDEAN = 1
    QUADRATIC = 2
    DIAGONAL = 3


def parse_algorithm(value: str) -> Algorithm:
    name = value.strip().upper().replace("*", "STAR").replace("-", "")
    try:
        return Algorithm[name]
    except KeyError:
        raise ValueError(f"The algorithm is invalid: {value}") from None


def parse_heuristic(value: str) -> Heuristic:
    try:
        return Heuristic[value.strip().upper()]
    except KeyError:
        raise ValueError(f"The heuristic is invalid: {value}") from None


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class SearchConfig:
    """Settings of one search run. Fixed for the whole run.

    Parameters
    ----------
    algorithm : Algorithm
        Dijkstra ignores the heuristic, A* adds it to the priority.
    heuristic : Heuristic
        Distance estimate used by A*.
    allow_diagonals : bool
        Whether the 4 diagonal moves are considered.
    path_correction : bool
        Enables the on-the-fly relaxation of frontier cells (A* only).
    width, height : int
        Size of the board in cells.
    """

    algorithm: Algorithm = Algorithm[CONSTANT.SEARCH_DEFAULT.ALGORITHM]
    heuristic: Heuristic = Heuristic[CONSTANT.SEARCH_DEFAULT.HEURISTIC]
    allow_diagonals: bool = CONSTANT.SEARCH_DEFAULT.ALLOW_DIAGONALS
    path_correction: bool = CONSTANT.SEARCH_DEFAULT.PATH_CORRECTION
    width: int = CONSTANT.BOARD.NUMBER_OF_COLUMNS
    height: int = CONSTANT.BOARD.NUMBER_OF_ROWS

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not isinstance(self.algorithm, Algorithm):
            raise ValueError(f"The algorithm is invalid: {self.algorithm}")
        if not isinstance(self.heuristic, Heuristic):
            raise ValueError(f"The heuristic is invalid: {self.heuristic}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board size must be positive: width={self.width}, height={self.height}"
            )

    @property
    def uses_heuristic(self) -> bool:
        return self.algorithm == Algorithm.ASTAR

    def with_changes(self, **changes) -> "SearchConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "SearchConfig":
        prefix = CONSTANT.ENV_PREFIX
        cfg = cls()
        changes = dict()
        if os.environ.get(f"{prefix}ALGORITHM"):
            changes["algorithm"] = parse_algorithm(os.environ[f"{prefix}ALGORITHM"])
        if os.environ.get(f"{prefix}HEURISTIC"):
            changes["heuristic"] = parse_heuristic(os.environ[f"{prefix}HEURISTIC"])
        changes["allow_diagonals"] = _parse_bool(
            os.environ.get(f"{prefix}ALLOW_DIAGONALS"), cfg.allow_diagonals
        )
        changes["path_correction"] = _parse_bool(
            os.environ.get(f"{prefix}PATH_CORRECTION"), cfg.path_correction
        )
        if os.environ.get(f"{prefix}WIDTH"):
            changes["width"] = int(os.environ[f"{prefix}WIDTH"])
        if os.environ.get(f"{prefix}HEIGHT"):
            changes["height"] = int(os.environ[f"{prefix}HEIGHT"])
        return cfg.with_changes(**changes)

    def __str__(self):
        diagonals = "on" if self.allow_diagonals else "off"
        correction = "on" if self.path_correction else "off"
        return (
            f"SearchConfig(algorithm={self.algorithm.name}, heuristic={self.heuristic.name}, "
            f"diagonals={diagonals}, path_correction={correction}, board={self.width}x{self.height})"
        )
