from typing import Iterable, Tuple

import pytest

from pathfinder.config import SearchConfig
from pathfinder.grid import Coordinate
from pathfinder.search.engine import StepEngine
from pathfinder.search.state import SearchState


def build_engine(
    width: int,
    height: int,
    origin: Tuple[int, int],
    destination: Tuple[int, int],
    blocked: Iterable[Tuple[int, int]] = (),
    **config_changes,
) -> StepEngine:
    config = SearchConfig(width=width, height=height, **config_changes)
    state = SearchState(width, height)
    assert state.set_origin(Coordinate(*origin))
    assert state.set_destination(Coordinate(*destination))
    for x, y in blocked:
        assert state.set_blocked(Coordinate(x, y))
    return StepEngine(config, state)


@pytest.fixture
def make_engine():
    return build_engine
