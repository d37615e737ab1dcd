from dataclasses import dataclass
from enum import Enum
from typing import Optional

from logzero import logger

from pathfinder.config import SearchConfig
from pathfinder.errors import (
    NoPathError,
    SearchError,
    SearchFinishedError,
    SearchNotStartedError,
)
from pathfinder.grid import NEIGHBOR_OFFSETS, CellRecord, Coordinate, is_diagonal, iter_neighbors
from pathfinder.search.cost import estimate, step_cost
from pathfinder.search.path import Path, PathReconstructor
from pathfinder.search.state import SearchState


# Outcome of one engine step
class StepStatus(Enum):
    IDLE = 0
    CONTINUE = 1
    SUCCESS = 2
    FAILURE = 3


@dataclass(frozen=True)
class StepResult:
    status: StepStatus
    cell: Optional[Coordinate] = None
    record: Optional[CellRecord] = None
    step_count: int = 0

    def is_terminal(self) -> bool:
        return self.status in (StepStatus.SUCCESS, StepStatus.FAILURE)


class StepEngine:
    """
    Incremental A*/Dijkstra search. Each call to `advance()` opens the neighbours of the last
    settled cell and settles the cheapest frontier cell, so a driver can render between steps.

    A cell's cost is fixed when it is first discovered; it is never re-expanded. The optional
    path correction is the only place where frontier costs are lowered afterwards.

    Parameters
    ----------
    config : SearchConfig
        Settings of the run. Re-validated by `start()`.
    state : SearchState
        The node sets this engine mutates. Must match the board size of `config`.

    Attributes
    ----------
    step_count : int
        Statistics counter: +1 per opened cell, +1 per selection attempt (including the
        last one that finds the frontier empty) and +1 per neighbour examined by path correction.
    status : StepStatus
        IDLE before `start()`, CONTINUE while running, SUCCESS or FAILURE once terminated.
    """

    def __init__(self, config: SearchConfig, state: SearchState):
        if (state.width, state.height) != (config.width, config.height):
            raise ValueError(
                f"Board size mismatch: config={config.width}x{config.height}, state={state.width}x{state.height}"
            )
        self.config: SearchConfig = config
        self.state: SearchState = state
        self.step_count: int = 0
        self.status: StepStatus = StepStatus.IDLE
        self.path_reconstructor: PathReconstructor = PathReconstructor(state)

    # -------------------- lifecycle --------------------

    def start(self):
        """Clear the previous run and settle the origin."""
        if not self.state.is_ready():
            raise SearchNotStartedError()
        self.config.validate()
        self.state.reset_run()
        self.step_count = 0

        origin = self.state.origin
        h = estimate(origin, self.state.destination, self.config)
        self.state.seed(CellRecord(g=0.0, h=h, f=h))
        self.status = StepStatus.CONTINUE
        logger.info(f"Run started from {origin} to {self.state.destination} with {self.config}")

    def reset_run(self):
        self.state.reset_run()
        self.step_count = 0
        self.status = StepStatus.IDLE

    def is_running(self) -> bool:
        return self.status == StepStatus.CONTINUE

    def is_terminated(self) -> bool:
        return self.status in (StepStatus.SUCCESS, StepStatus.FAILURE)

    # -------------------- main stepping logic --------------------

    def advance(self, previous: Optional[Coordinate] = None) -> StepResult:
        """
        Run ONE search step from `previous` (the last settled cell, the current cell by default):
          - Open its unexplored neighbours into the frontier.
          - Pick the lowest-cost frontier cell, FAILURE if there is none.
          - Apply path correction around it if enabled.
          - Settle it, SUCCESS if it is the destination.
        """
        if self.status == StepStatus.IDLE:
            raise SearchNotStartedError()
        if self.is_terminated():
            raise SearchFinishedError()

        if previous is None:
            previous = self.state.current
        if not self.state.is_settled(previous):
            raise SearchError(f"{previous} has not been settled.")

        self.__expand(previous)

        next_coord = self.state.select_lowest_cost()
        # moving into a frontier cell counts as a step, even when there is none left
        self.step_count += 1
        if next_coord is None:
            self.status = StepStatus.FAILURE
            self.state.current = None
            logger.info(f"No path found after {self.step_count} steps.")
            return StepResult(status=self.status, step_count=self.step_count)

        if self.config.path_correction and self.config.uses_heuristic:
            self.correct_paths(next_coord)

        record = self.state.get_frontier_record(next_coord)
        self.state.settle(next_coord)
        if next_coord == self.state.destination:
            self.status = StepStatus.SUCCESS
            logger.info(
                f"Destination {next_coord} reached after {self.step_count} steps, "
                f"{self.state.count_settled()} settled cells."
            )
        return StepResult(
            status=self.status, cell=next_coord, record=record, step_count=self.step_count
        )

    def run_to_completion(self, max_steps: Optional[int] = None) -> StepResult:
        """Advance until a terminal status. Every step settles a cell, so the board size bounds it."""
        if max_steps is None:
            max_steps = self.config.width * self.config.height
        if self.status == StepStatus.IDLE:
            self.start()

        result = StepResult(status=self.status, cell=self.state.current, step_count=self.step_count)
        for _ in range(max_steps):
            result = self.advance()
            if result.is_terminal():
                return result
        raise SearchError(f"Search did not terminate within {max_steps} steps.")

    def reconstruct_path(self) -> Path:
        if self.status != StepStatus.SUCCESS:
            raise NoPathError()
        return self.path_reconstructor.reconstruct()

    # -------------------- helpers --------------------

    def __cuts_corner(self, from_coord: Coordinate, to_coord: Coordinate) -> bool:
        # a diagonal move may not pass next to a blocked cell
        return self.state.is_blocked(
            Coordinate(to_coord.x, from_coord.y)
        ) or self.state.is_blocked(Coordinate(from_coord.x, to_coord.y))

    def __expand(self, previous: Coordinate):
        previous_record = self.state.get_record(previous)
        destination = self.state.destination
        for neighbor, dx, dy in iter_neighbors(previous, self.config.width, self.config.height):
            if is_diagonal(dx, dy):
                if self.__cuts_corner(previous, neighbor):
                    continue
                if not self.config.allow_diagonals:
                    continue

            # cells are opened once; their cost is never revisited here
            if (
                self.state.is_settled(neighbor)
                or self.state.is_blocked(neighbor)
                or self.state.is_in_frontier(neighbor)
            ):
                continue

            g = previous_record.g + step_cost(dx, dy)
            h = estimate(neighbor, destination, self.config)
            f = g + h if self.config.uses_heuristic else g
            self.state.add_to_frontier(neighbor, CellRecord(g=g, h=h, f=f), parent=previous)
            # opening a cell counts as a step
            self.step_count += 1

    def correct_paths(self, coord: Coordinate):
        """
        On-the-fly path correction around the frontier cell `coord`: every neighbouring frontier
        cell that is cheaper to reach through `coord` takes `coord` as its predecessor.
        """
        record = self.state.get_record(coord)
        for dx, dy in NEIGHBOR_OFFSETS:
            if not self.config.allow_diagonals and is_diagonal(dx, dy):
                continue
            self.step_count += 1

            next_x, next_y = coord.x + dx, coord.y + dy
            if not (0 <= next_x < self.config.width and 0 <= next_y < self.config.height):
                continue
            neighbor = Coordinate(next_x, next_y)
            if is_diagonal(dx, dy) and self.__cuts_corner(coord, neighbor):
                continue

            neighbor_record = self.state.get_frontier_record(neighbor)
            if neighbor_record is None:
                continue
            g = record.g + step_cost(dx, dy)
            if g < neighbor_record.g:
                self.state.relax(neighbor, g, parent=coord, use_heuristic=self.config.uses_heuristic)
