from dataclasses import dataclass
from enum import IntEnum
from typing import FrozenSet, Optional, Tuple

import numpy as np

from pathfinder.grid import Coordinate


class CellKind(IntEnum):
    EMPTY = 0
    SETTLED = 1
    FRONTIER = 2
    BLOCKED = 3
    PATH = 4
    CURRENT = 5
    ORIGIN = 6
    DESTINATION = 7


@dataclass(frozen=True)
class SearchSnapshot:
    """Read-only picture of a search, taken between two steps for rendering."""

    width: int
    height: int
    settled: FrozenSet[Coordinate]
    frontier: FrozenSet[Coordinate]
    blocked: FrozenSet[Coordinate]
    current: Optional[Coordinate] = None
    origin: Optional[Coordinate] = None
    destination: Optional[Coordinate] = None
    path: Tuple[Coordinate, ...] = ()

    @classmethod
    def of(cls, state, path: Tuple[Coordinate, ...] = ()) -> "SearchSnapshot":
        return cls(
            width=state.width,
            height=state.height,
            settled=state.get_settled(),
            frontier=state.get_frontier(),
            blocked=state.get_blocked(),
            current=state.current,
            origin=state.origin,
            destination=state.destination,
            path=tuple(path),
        )

    def to_array(self) -> np.ndarray:
        """Board as a [row][col] array of CellKind, later layers painted over earlier ones."""
        cells = np.full((self.height, self.width), CellKind.EMPTY, dtype=np.int8)

        # paint order: settled, frontier, blocked, path, then the single-cell markers
        layers = [
            (CellKind.SETTLED, self.settled),
            (CellKind.FRONTIER, self.frontier),
            (CellKind.BLOCKED, self.blocked),
            (CellKind.PATH, self.path),
        ]
        for kind, coords in layers:
            for coord in coords:
                cells[coord.y, coord.x] = kind

        markers = [
            (CellKind.CURRENT, self.current),
            (CellKind.ORIGIN, self.origin),
            (CellKind.DESTINATION, self.destination),
        ]
        for kind, coord in markers:
            if coord is not None:
                cells[coord.y, coord.x] = kind
        return cells
