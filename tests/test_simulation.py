import math

import pandas as pd
import pytest

from pathfinder.config import Algorithm, Heuristic, SearchConfig
from pathfinder.errors import NoPathError, RunInProgressError
from pathfinder.grid import Coordinate
from pathfinder.search.engine import StepStatus
from pathfinder.simulation import Pathfinder
from pathfinder.snapshot import CellKind

C = Coordinate


@pytest.fixture
def pathfinder():
    pathfinder = Pathfinder(SearchConfig(width=6, height=6))
    pathfinder.set_origin(C(0, 0))
    pathfinder.set_destination(C(5, 5))
    return pathfinder


def test_start_needs_endpoints():
    pathfinder = Pathfinder(SearchConfig(width=6, height=6))
    pathfinder.set_origin(C(0, 0))
    assert not pathfinder.start()
    assert pathfinder.get_status() == StepStatus.IDLE


def test_run_to_completion(pathfinder):
    result = pathfinder.run_to_completion()

    assert result.status == StepStatus.SUCCESS
    assert pathfinder.has_found_path()
    assert not pathfinder.is_running()
    path = pathfinder.reconstruct_path()
    assert path.cells[-1] == C(5, 5)
    assert path.cost == pytest.approx(5 * math.sqrt(2))
    assert pathfinder.run_tracker.get_number_of_ticks() == 5
    assert pathfinder.run_tracker.get_latest()["status"] == "SUCCESS"


def test_update_ticks_one_step(pathfinder):
    assert pathfinder.start()
    result = pathfinder.update()
    assert result.status == StepStatus.CONTINUE
    assert result.cell == C(1, 1)
    assert pathfinder.is_running()
    assert pathfinder.get_step_count() == result.step_count


def test_failed_run(pathfinder):
    for y in range(6):
        pathfinder.set_blocked(C(3, y))
    result = pathfinder.run_to_completion()

    assert result.status == StepStatus.FAILURE
    assert pathfinder.has_failed()
    with pytest.raises(NoPathError):
        pathfinder.reconstruct_path()
    assert pathfinder.export_statistics()["PATH"] is None


def test_edits_rejected_during_run(pathfinder, tmp_path):
    pathfinder.start()
    with pytest.raises(RunInProgressError):
        pathfinder.set_blocked(C(2, 2))
    with pytest.raises(RunInProgressError):
        pathfinder.unblock(C(2, 2))
    with pytest.raises(RunInProgressError):
        pathfinder.set_origin(C(1, 0))
    with pytest.raises(RunInProgressError):
        pathfinder.set_destination(C(1, 0))
    with pytest.raises(RunInProgressError):
        pathfinder.swap_endpoints()
    with pytest.raises(RunInProgressError):
        pathfinder.save_map(tmp_path / "map.pathmap")
    with pytest.raises(RunInProgressError):
        pathfinder.start()
    assert pathfinder.state.get_blocked() == frozenset()


def test_configuration_frozen_during_run(pathfinder):
    pathfinder.start()
    with pytest.raises(RunInProgressError):
        pathfinder.set_algorithm(Algorithm.DIJKSTRA)
    with pytest.raises(RunInProgressError):
        pathfinder.set_heuristic(Heuristic.MANHATTAN)
    with pytest.raises(RunInProgressError):
        pathfinder.set_allow_diagonals(False)
    with pytest.raises(RunInProgressError):
        pathfinder.set_path_correction(True)
    assert pathfinder.config.algorithm == Algorithm.ASTAR


def test_reconfigure_resets_finished_run(pathfinder):
    pathfinder.run_to_completion()
    pathfinder.set_allow_diagonals(False)

    assert pathfinder.get_status() == StepStatus.IDLE
    assert pathfinder.state.count_settled() == 0
    assert pathfinder.engine.config.allow_diagonals is False

    pathfinder.run_to_completion()
    assert pathfinder.reconstruct_path().cost == pytest.approx(10.0)


def test_reset_keeps_map(pathfinder):
    pathfinder.set_blocked(C(2, 2))
    pathfinder.run_to_completion()
    pathfinder.reset_run()

    assert pathfinder.get_status() == StepStatus.IDLE
    assert pathfinder.path is None
    assert pathfinder.run_tracker.get_number_of_ticks() == 0
    assert pathfinder.state.get_blocked() == {C(2, 2)}
    assert pathfinder.state.origin == C(0, 0)

    pathfinder.clear()
    assert pathfinder.state.origin is None
    assert pathfinder.state.get_blocked() == frozenset()


def test_swap_endpoints(pathfinder):
    assert pathfinder.swap_endpoints()
    assert pathfinder.state.origin == C(5, 5)
    assert pathfinder.state.destination == C(0, 0)


def test_load_map_resets_run(pathfinder, tmp_path):
    pathfinder.set_blocked(C(2, 3))
    assert pathfinder.save_map(tmp_path / "map.pathmap")
    pathfinder.run_to_completion()

    pathfinder.load_map(tmp_path / "map.pathmap")
    assert pathfinder.get_status() == StepStatus.IDLE
    assert pathfinder.state.count_settled() == 0
    assert pathfinder.state.get_blocked() == {C(2, 3)}


def test_export_statistics(pathfinder):
    statistics = pathfinder.export_statistics()
    assert statistics["SEARCH"] == {
        "ALGORITHM": "ASTAR",
        "HEURISTIC": "EUCLIDEAN",
        "DIAGONALS": "ON",
        "CORRECTION": "OFF",
    }
    assert statistics["RUN"]["STATUS"] == "IDLE"
    assert statistics["ENDPOINTS"] == {"ORIGIN": "(00,00)", "DESTINATION": "(05,05)"}

    pathfinder.run_to_completion()
    statistics = pathfinder.export_statistics()
    assert statistics["RUN"]["STATUS"] == "SUCCESS"
    assert statistics["RUN"]["SETTLED"] == 6
    assert statistics["PATH"] == {"LENGTH": 5, "COST": round(5 * math.sqrt(2), 2)}


def test_export_run_report(pathfinder, tmp_path):
    pathfinder.run_to_completion()
    filepath = tmp_path / "data" / "report.csv"
    report_df = pathfinder.export_run_report(filepath)

    assert filepath.exists()
    assert len(report_df) == 5
    saved_df = pd.read_csv(filepath)
    assert list(saved_df.columns) == [
        "tick",
        "status",
        "current",
        "settled",
        "frontier",
        "steps",
        "path_length",
        "path_cost",
    ]
    assert saved_df["tick"].tolist() == [1, 2, 3, 4, 5]
    assert saved_df["status"].iloc[-1] == "SUCCESS"
    assert (saved_df["path_length"] == 5).all()


def test_snapshot_shows_path(pathfinder):
    pathfinder.run_to_completion()
    cells = pathfinder.snapshot().to_array()

    assert cells[0, 0] == CellKind.ORIGIN
    assert cells[5, 5] == CellKind.DESTINATION
    for i in range(1, 5):
        assert cells[i, i] == CellKind.PATH
