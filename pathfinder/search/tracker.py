from typing import Any, Dict, List, Optional

import pandas as pd

from pathfinder.constant import CONSTANT
from pathfinder.search.engine import StepResult
from pathfinder.search.path import Path
from pathfinder.search.state import SearchState


class RunTracker:
    """
    Records the progress of a run, one row per engine step, to feed the statistics panel
    and the CSV run report.

    Attributes
    ----------
    rows : List[Dict[str, Any]]
        One entry per step with the columns listed in `CONSTANT.REPORT.COLUMNS`.
    path : Path or None
        The path of the run once it succeeded.
    """

    def __init__(self):
        self.rows: List[Dict[str, Any]] = list()
        self.path: Optional[Path] = None

    def reset(self):
        self.rows = list()
        self.path = None

    def record(self, result: StepResult, state: SearchState):
        self.rows.append(
            {
                "tick": len(self.rows) + 1,
                "status": result.status.name,
                "current": str(result.cell) if result.cell is not None else "",
                "settled": state.count_settled(),
                "frontier": state.count_frontier(),
                "steps": result.step_count,
            }
        )

    def record_path(self, path: Path):
        self.path = path

    def get_number_of_ticks(self) -> int:
        return len(self.rows)

    def get_latest(self) -> Optional[Dict[str, Any]]:
        if self.rows:
            return self.rows[-1]

    def export_run_report(self) -> pd.DataFrame:
        columns = list(CONSTANT.REPORT.COLUMNS)
        report_df = pd.DataFrame(self.rows, columns=columns)
        report_df["path_length"] = len(self.path) if self.path is not None else 0
        report_df["path_cost"] = round(self.path.cost, 4) if self.path is not None else None
        return report_df
