import heapq
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from logzero import logger

from pathfinder.grid import CellRecord, Coordinate


class SearchState:
    """
    Holds the three node sets of a search (settled, frontier, blocked) together with the
    origin, destination and current pointers, and owns every rule for moving cells between them.

    Editing blocked cells, origin or destination is only allowed while no run is in progress.
    The driver enforces this; the state itself does not track the run.

    Parameters
    ----------
    width : int
        Number of columns of the board.
    height : int
        Number of rows of the board.

    Attributes
    ----------
    __settled : Dict[Coordinate, CellRecord]
        Finalized cells. Never revisited.
    __frontier : Dict[Coordinate, CellRecord]
        Discovered cells waiting to be settled.
    __frontier_heap : List[Tuple[float, float, int, Coordinate]]
        Priority queue over the frontier, (f, h, seq, coord). Entries whose f no longer matches
        the frontier record are stale and skipped when popped.
    __blocked : Set[Coordinate]
        Impassable cells.
    __parents : Dict[Coordinate, Coordinate]
        Predecessor of every discovered cell but the origin.
    """

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        self.origin: Optional[Coordinate] = None
        self.destination: Optional[Coordinate] = None
        self.current: Optional[Coordinate] = None

        self.__blocked: Set[Coordinate] = set()
        self.__settled: Dict[Coordinate, CellRecord] = dict()
        self.__frontier: Dict[Coordinate, CellRecord] = dict()
        self.__frontier_heap: List[Tuple[float, float, int, Coordinate]] = list()
        self.__parents: Dict[Coordinate, Coordinate] = dict()
        self.__seq: int = 0

    # -------------------- map editing --------------------

    def in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def set_origin(self, coord: Coordinate) -> bool:
        if coord is None or not self.in_bounds(coord):
            logger.debug(f"Origin rejected, {coord} is off the board.")
            return False
        if coord == self.destination:
            logger.debug(f"Origin rejected, {coord} is the destination.")
            return False
        self.__blocked.discard(coord)
        self.origin = coord
        return True

    def set_destination(self, coord: Coordinate) -> bool:
        if coord is None or not self.in_bounds(coord):
            logger.debug(f"Destination rejected, {coord} is off the board.")
            return False
        if coord == self.origin:
            logger.debug(f"Destination rejected, {coord} is the origin.")
            return False
        self.__blocked.discard(coord)
        self.destination = coord
        return True

    def set_blocked(self, coord: Coordinate) -> bool:
        if coord is None or not self.in_bounds(coord):
            return False
        # origin and destination can't be blocked
        if coord == self.origin or coord == self.destination:
            logger.debug(f"Wall rejected, {coord} is an endpoint.")
            return False
        self.__blocked.add(coord)
        return True

    def unblock(self, coord: Coordinate) -> bool:
        if coord not in self.__blocked:
            return False
        self.__blocked.remove(coord)
        return True

    def swap_endpoints(self) -> bool:
        if self.origin is None or self.destination is None:
            return False
        self.origin, self.destination = self.destination, self.origin
        return True

    def clear(self):
        """Forget everything, including the map."""
        self.reset_run()
        self.__blocked.clear()
        self.origin = None
        self.destination = None

    def reset_run(self):
        """Drop the search bookkeeping but keep blocked cells, origin and destination."""
        self.__settled.clear()
        self.__frontier.clear()
        self.__frontier_heap.clear()
        self.__parents.clear()
        self.__seq = 0
        self.current = None

    # -------------------- search bookkeeping --------------------

    def is_ready(self) -> bool:
        return self.origin is not None and self.destination is not None

    def is_blocked(self, coord: Coordinate) -> bool:
        return coord in self.__blocked

    def is_settled(self, coord: Coordinate) -> bool:
        return coord in self.__settled

    def is_in_frontier(self, coord: Coordinate) -> bool:
        return coord in self.__frontier

    def is_discovered(self, coord: Coordinate) -> bool:
        return coord in self.__settled or coord in self.__frontier

    def seed(self, record: CellRecord):
        """Settle the origin as the first node of a run."""
        self.__settled[self.origin] = record
        self.current = self.origin

    def add_to_frontier(self, coord: Coordinate, record: CellRecord, parent: Coordinate):
        if self.is_discovered(coord):
            raise ValueError(f"{coord} is discovered already.")
        record.seq = self.__seq
        self.__seq += 1
        self.__frontier[coord] = record
        self.__parents[coord] = parent
        heapq.heappush(self.__frontier_heap, (*record.priority(), coord))

    def relax(self, coord: Coordinate, g: float, parent: Coordinate, use_heuristic: bool = True):
        """Lower the cost of a frontier cell and hang it under `parent`."""
        record = self.__frontier.get(coord)
        if record is None:
            raise ValueError(f"{coord} is not in the frontier.")
        record.update_g(g, use_heuristic)
        self.__parents[coord] = parent
        heapq.heappush(self.__frontier_heap, (*record.priority(), coord))

    def select_lowest_cost(self) -> Optional[Coordinate]:
        """Pop the frontier cell with the lowest (f, h, seq). None if the frontier is empty."""
        while self.__frontier_heap:
            f, _, _, coord = heapq.heappop(self.__frontier_heap)
            record = self.__frontier.get(coord)
            # skip stale entries left behind by relax()
            if record is None or record.f != f:
                continue
            return coord
        return None

    def settle(self, coord: Coordinate):
        record = self.__frontier.pop(coord)
        self.__settled[coord] = record
        self.current = coord

    def get_record(self, coord: Coordinate) -> Optional[CellRecord]:
        record = self.__frontier.get(coord)
        if record is None:
            record = self.__settled.get(coord)
        return record

    def get_frontier_record(self, coord: Coordinate) -> Optional[CellRecord]:
        return self.__frontier.get(coord)

    def get_parent(self, coord: Coordinate) -> Optional[Coordinate]:
        return self.__parents.get(coord)

    # -------------------- read-only views --------------------

    def get_settled(self) -> FrozenSet[Coordinate]:
        return frozenset(self.__settled)

    def get_frontier(self) -> FrozenSet[Coordinate]:
        return frozenset(self.__frontier)

    def get_blocked(self) -> FrozenSet[Coordinate]:
        return frozenset(self.__blocked)

    def count_settled(self) -> int:
        return len(self.__settled)

    def count_frontier(self) -> int:
        return len(self.__frontier)

    def __str__(self):
        return (
            f"SearchState(origin={self.origin}, destination={self.destination}, current={self.current}, "
            f"settled={len(self.__settled)}, frontier={len(self.__frontier)}, blocked={len(self.__blocked)})"
        )
