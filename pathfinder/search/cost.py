import math

from pathfinder.config import Algorithm, Heuristic, SearchConfig
from pathfinder.grid import Coordinate


def step_cost(dx: int, dy: int) -> float:
    """Cost of one move. Always Euclidean, whatever the heuristic."""
    return math.sqrt(dx * dx + dy * dy)


def heuristic_cost(cell: Coordinate, destination: Coordinate, heuristic: Heuristic) -> float:
    dx = abs(cell.x - destination.x)
    dy = abs(cell.y - destination.y)
    if heuristic == Heuristic.MANHATTAN:
        return float(dx + dy)
    elif heuristic == Heuristic.EUCLIDEAN:
        return math.sqrt(dx * dx + dy * dy)
    elif heuristic == Heuristic.QUADRATIC:
        return float(dx * dx + dy * dy)
    elif heuristic == Heuristic.DIAGONAL:
        return float(max(dx, dy))
    else:
        raise ValueError(f"The heuristic is invalid: {heuristic}")


def estimate(cell: Coordinate, destination: Coordinate, config: SearchConfig) -> float:
    """Heuristic part of the priority under `config` (0 for Dijkstra)."""
    if config.algorithm == Algorithm.DIJKSTRA:
        return 0.0
    return heuristic_cost(cell, destination, config.heuristic)
