import pytest

from pathfinder.config import Algorithm, Heuristic, SearchConfig, parse_algorithm, parse_heuristic


def test_defaults():
    config = SearchConfig()
    assert config.algorithm == Algorithm.ASTAR
    assert config.heuristic == Heuristic.EUCLIDEAN
    assert config.allow_diagonals is True
    assert config.path_correction is False
    assert (config.width, config.height) == (75, 50)


def test_invalid_board_size():
    with pytest.raises(ValueError):
        SearchConfig(width=0, height=5)


def test_invalid_algorithm():
    with pytest.raises(ValueError):
        SearchConfig(algorithm="ASTAR")


def test_with_changes_returns_new_config():
    config = SearchConfig()
    changed = config.with_changes(allow_diagonals=False)
    assert config.allow_diagonals is True
    assert changed.allow_diagonals is False


@pytest.mark.parametrize("value", ["A*", "astar", "a-star", "ASTAR"])
def test_parse_algorithm_astar(value):
    assert parse_algorithm(value) == Algorithm.ASTAR


def test_parse_algorithm_invalid():
    with pytest.raises(ValueError):
        parse_algorithm("bfs")


def test_parse_heuristic():
    assert parse_heuristic(" diagonal ") == Heuristic.DIAGONAL
    with pytest.raises(ValueError):
        parse_heuristic("octile")


def test_from_env(monkeypatch):
    monkeypatch.setenv("PATHFINDER_ALGORITHM", "dijkstra")
    monkeypatch.setenv("PATHFINDER_HEURISTIC", "manhattan")
    monkeypatch.setenv("PATHFINDER_ALLOW_DIAGONALS", "off")
    monkeypatch.setenv("PATHFINDER_PATH_CORRECTION", "yes")
    monkeypatch.setenv("PATHFINDER_WIDTH", "20")
    monkeypatch.setenv("PATHFINDER_HEIGHT", "10")

    config = SearchConfig.from_env()
    assert config.algorithm == Algorithm.DIJKSTRA
    assert config.heuristic == Heuristic.MANHATTAN
    assert config.allow_diagonals is False
    assert config.path_correction is True
    assert (config.width, config.height) == (20, 10)
