import math

import pytest

from pathfinder.config import Algorithm, Heuristic, SearchConfig
from pathfinder.grid import Coordinate
from pathfinder.search.cost import estimate, heuristic_cost, step_cost


def test_step_cost_is_euclidean():
    assert step_cost(1, 0) == 1.0
    assert step_cost(0, -1) == 1.0
    assert step_cost(1, 1) == pytest.approx(math.sqrt(2))


@pytest.mark.parametrize(
    "heuristic, expected",
    [
        (Heuristic.MANHATTAN, 7.0),
        (Heuristic.EUCLIDEAN, 5.0),
        (Heuristic.QUADRATIC, 25.0),
        (Heuristic.DIAGONAL, 4.0),
    ],
)
def test_heuristic_cost(heuristic, expected):
    # dx = 3, dy = 4
    assert heuristic_cost(Coordinate(1, 6), Coordinate(4, 2), heuristic) == pytest.approx(expected)


def test_heuristic_is_zero_at_destination():
    for heuristic in Heuristic:
        assert heuristic_cost(Coordinate(2, 2), Coordinate(2, 2), heuristic) == 0.0


def test_dijkstra_ignores_heuristic():
    config = SearchConfig(algorithm=Algorithm.DIJKSTRA, heuristic=Heuristic.QUADRATIC)
    assert estimate(Coordinate(0, 0), Coordinate(10, 10), config) == 0.0


def test_astar_uses_configured_heuristic():
    config = SearchConfig(algorithm=Algorithm.ASTAR, heuristic=Heuristic.MANHATTAN)
    assert estimate(Coordinate(0, 0), Coordinate(10, 10), config) == 20.0
