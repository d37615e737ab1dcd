from dataclasses import dataclass
from typing import List, Tuple

from pathfinder.errors import NoPathError
from pathfinder.grid import Coordinate
from pathfinder.search.cost import step_cost


@dataclass(frozen=True)
class Path:
    """Route found by a search.

    Parameters
    ----------
    origin : Coordinate
        Where the route starts. Not part of `cells`.
    cells : Tuple[Coordinate, ...]
        Every cell visited after the origin, ending with the destination.
    cost : float
        Sum of the Euclidean cost of every move.
    """

    origin: Coordinate
    cells: Tuple[Coordinate, ...]
    cost: float

    @property
    def destination(self) -> Coordinate:
        return self.cells[-1]

    @property
    def intermediates(self) -> Tuple[Coordinate, ...]:
        return self.cells[:-1]

    def waypoints(self) -> List[Coordinate]:
        return [self.origin, *self.cells]

    def __len__(self):
        return len(self.cells)

    def __str__(self):
        return f"Path(length={len(self.cells)}, cost={self.cost:.2f}, [{self.origin}...{self.destination}])"


class PathReconstructor:
    """Walks predecessor links of a finished search back from destination to origin."""

    def __init__(self, state):
        self.state = state

    def reconstruct(self) -> Path:
        origin = self.state.origin
        destination = self.state.destination
        if origin is None or destination is None:
            raise NoPathError()

        # collect every predecessor strictly between origin and destination
        intermediates: List[Coordinate] = list()
        max_length = self.state.width * self.state.height
        cursor = self.state.get_parent(destination)
        while cursor != origin:
            if cursor is None or len(intermediates) > max_length:
                raise NoPathError()
            intermediates.append(cursor)
            cursor = self.state.get_parent(cursor)
        intermediates.reverse()

        cells = tuple(intermediates) + (destination,)
        return Path(origin=origin, cells=cells, cost=path_cost([origin, *cells]))


def path_cost(waypoints: List[Coordinate]) -> float:
    return sum(
        step_cost(to_coord.x - from_coord.x, to_coord.y - from_coord.y)
        for from_coord, to_coord in zip(waypoints[:-1], waypoints[1:])
    )
