from pathlib import Path as FilePath
from typing import Any, Dict, Optional, Union

from logzero import logger

from pathfinder.config import Algorithm, Heuristic, SearchConfig
from pathfinder.constant import CONSTANT
from pathfinder.errors import NoPathError, RunInProgressError
from pathfinder.grid import Coordinate
from pathfinder.mapfile import load_map, save_map
from pathfinder.search.engine import StepEngine, StepResult, StepStatus
from pathfinder.search.path import Path
from pathfinder.search.state import SearchState
from pathfinder.search.tracker import RunTracker
from pathfinder.snapshot import SearchSnapshot


class Pathfinder:
    """
    Coordinates the search state, the step engine and the run tracker for a driver such as
    the GUI timer or the command line loop.

    The driver calls `update()` once per tick. Map edits and configuration changes are only
    accepted while no run is in progress.

    Parameters
    ----------
    config : SearchConfig, optional
        Initial search settings. Defaults to `SearchConfig()`.

    Attributes
    ----------
    config : SearchConfig
        Settings applied to the next run.
    state : SearchState
        Settled, frontier and blocked cells plus origin and destination.
    engine : StepEngine
        Engine of the current (or last) run.
    run_tracker : RunTracker
        Per-step statistics of the current run.
    path : Path or None
        Path of the last successful run.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config: SearchConfig = config if config is not None else SearchConfig()
        self.state: SearchState = SearchState(self.config.width, self.config.height)
        self.engine: StepEngine = StepEngine(self.config, self.state)
        self.run_tracker: RunTracker = RunTracker()
        self.path: Optional[Path] = None

    # -------------------- configuration --------------------

    def __reconfigure(self, **changes):
        if self.is_running():
            raise RunInProgressError("change the configuration")
        self.config = self.config.with_changes(**changes)
        self.engine = StepEngine(self.config, self.state)
        # a finished run belongs to the old settings
        self.reset_run()

    def set_algorithm(self, algorithm: Algorithm):
        self.__reconfigure(algorithm=algorithm)

    def set_heuristic(self, heuristic: Heuristic):
        self.__reconfigure(heuristic=heuristic)

    def set_allow_diagonals(self, allow_diagonals: bool):
        self.__reconfigure(allow_diagonals=allow_diagonals)

    def set_path_correction(self, path_correction: bool):
        self.__reconfigure(path_correction=path_correction)

    # -------------------- map editing --------------------

    def __check_idle(self, action: str):
        if self.is_running():
            raise RunInProgressError(action)

    def set_origin(self, coord: Coordinate) -> bool:
        self.__check_idle("move the origin")
        return self.state.set_origin(coord)

    def set_destination(self, coord: Coordinate) -> bool:
        self.__check_idle("move the destination")
        return self.state.set_destination(coord)

    def set_blocked(self, coord: Coordinate) -> bool:
        self.__check_idle("add a wall")
        return self.state.set_blocked(coord)

    def unblock(self, coord: Coordinate) -> bool:
        self.__check_idle("remove a wall")
        return self.state.unblock(coord)

    def swap_endpoints(self) -> bool:
        self.__check_idle("swap origin and destination")
        return self.state.swap_endpoints()

    def save_map(self, filepath: Union[str, FilePath]) -> bool:
        self.__check_idle("save the map")
        return save_map(filepath, self.state)

    def load_map(self, filepath: Union[str, FilePath]):
        self.__check_idle("load a map")
        load_map(filepath, self.state)
        self.reset_run()

    # -------------------- run control --------------------

    def start(self) -> bool:
        """Begin a new run. Returns False when origin or destination is missing."""
        if self.is_running():
            raise RunInProgressError("start another run")
        if not self.state.is_ready():
            logger.warning("Run not started, origin and destination must be set.")
            return False
        self.run_tracker.reset()
        self.path = None
        self.engine.start()
        return True

    def update(self) -> StepResult:
        """Primary method to advance the search by one step per tick"""
        result = self.engine.advance()
        self.run_tracker.record(result, self.state)
        if result.status == StepStatus.SUCCESS:
            self.path = self.engine.reconstruct_path()
            self.run_tracker.record_path(self.path)
            logger.info(f"Path found: {self.path}")
        return result

    def run_to_completion(self) -> StepResult:
        if not self.is_running() and not self.start():
            return StepResult(status=StepStatus.IDLE)
        result = StepResult(status=self.engine.status)
        while self.is_running():
            result = self.update()
        return result

    def reset_run(self):
        """Clear the search but keep walls, origin and destination."""
        self.engine.reset_run()
        self.run_tracker.reset()
        self.path = None

    def clear(self):
        self.engine.reset_run()
        self.state.clear()
        self.run_tracker.reset()
        self.path = None

    def is_running(self) -> bool:
        return self.engine.is_running()

    def has_found_path(self) -> bool:
        return self.engine.status == StepStatus.SUCCESS

    def has_failed(self) -> bool:
        return self.engine.status == StepStatus.FAILURE

    def get_status(self) -> StepStatus:
        return self.engine.status

    def get_step_count(self) -> int:
        return self.engine.step_count

    def reconstruct_path(self) -> Path:
        if self.path is None:
            raise NoPathError()
        return self.path

    # -------------------- export --------------------

    def snapshot(self) -> SearchSnapshot:
        path_cells = self.path.intermediates if self.path is not None else ()
        return SearchSnapshot.of(self.state, path=path_cells)

    def export_statistics(self) -> Dict[str, Any]:
        """Extract run status to feed into the statistics panel."""
        data = {
            "SEARCH": {
                "ALGORITHM": self.config.algorithm.name,
                "HEURISTIC": self.config.heuristic.name,
                "DIAGONALS": "ON" if self.config.allow_diagonals else "OFF",
                "CORRECTION": "ON" if self.config.path_correction else "OFF",
            },
            "RUN": {
                "STATUS": self.engine.status.name,
                "SETTLED": self.state.count_settled(),
                "UNSETTLED": self.state.count_frontier(),
                "STEPS": self.engine.step_count,
            },
            "ENDPOINTS": {
                "ORIGIN": str(self.state.origin) if self.state.origin else "-",
                "DESTINATION": str(self.state.destination) if self.state.destination else "-",
            },
            "PATH": None,
        }
        if self.path is not None:
            data["PATH"] = {"LENGTH": len(self.path), "COST": round(self.path.cost, 2)}
        return data

    def export_run_report(self, filepath: Union[str, FilePath] = CONSTANT.REPORT.DEFAULT_PATH):
        """Export per-step statistics of the last run as a CSV report."""
        output_df = self.run_tracker.export_run_report()
        filepath = FilePath(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        output_df.to_csv(filepath, index=False)
        logger.info(f"Output run report: {filepath}")
        return output_df
