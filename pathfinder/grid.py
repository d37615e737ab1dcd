from dataclasses import dataclass
from typing import Iterator, Tuple


# Datastructure to capture 2-D Coordinate on the board, keyed on (x, y) only
@dataclass(frozen=True, order=True)
class Coordinate:
    x: int
    y: int

    def __post_init__(self):
        # negative components are clamped to the board edge
        object.__setattr__(self, "x", max(int(self.x), 0))
        object.__setattr__(self, "y", max(int(self.y), 0))

    def offset(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def __str__(self):
        return f"({self.x:02d},{self.y:02d})"


# The 8 moves around a cell, column-wise then row-wise
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def is_diagonal(dx: int, dy: int) -> bool:
    return dx != 0 and dy != 0


def iter_neighbors(
    coord: Coordinate, width: int, height: int
) -> Iterator[Tuple[Coordinate, int, int]]:
    """Yield (neighbor, dx, dy) for every in-bounds cell around `coord`."""
    for dx, dy in NEIGHBOR_OFFSETS:
        next_x, next_y = coord.x + dx, coord.y + dy
        if not (0 <= next_x < width and 0 <= next_y < height):
            continue
        yield Coordinate(next_x, next_y), dx, dy


class CellRecord:
    """Mutable search bookkeeping for one discovered coordinate.

    Parameters
    ----------
    g : float
        Cost of the cheapest known route from origin to this cell.
    h : float
        Heuristic estimate of the remaining cost to destination.
    f : float
        Priority of the cell in the frontier, `g + h` (or `g` for Dijkstra).
    seq : int
        Order in which the cell first entered the frontier, used to break ties.
    """

    def __init__(self, g: float = 0.0, h: float = 0.0, f: float = 0.0, seq: int = 0):
        self.g: float = max(g, 0.0)
        self.h: float = max(h, 0.0)
        self.f: float = max(f, 0.0)
        self.seq: int = seq

    def update_g(self, g: float, use_heuristic: bool = True):
        self.g = max(g, 0.0)
        self.f = self.g + self.h if use_heuristic else self.g

    def priority(self) -> Tuple[float, float, int]:
        return self.f, self.h, self.seq

    def __repr__(self):
        return f"CellRecord(g={self.g:.3f}, h={self.h:.3f}, f={self.f:.3f}, seq={self.seq})"
