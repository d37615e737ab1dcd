from collections import namedtuple
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd
from logzero import logger

from pathfinder.constant import CONSTANT
from pathfinder.grid import Coordinate
from pathfinder.search.state import SearchState

# One line of a map file. Example: "B,12,7" -> MapRecord("B", Coordinate(12, 7))
MapRecord = namedtuple("MapRecord", ["tag", "coord"])

MAP_COLUMNS = ["tag", "x", "y"]


def _skip_bad_line(fields: List[str]) -> None:
    logger.warning(f"Skipped map line with {len(fields)} fields: {','.join(fields)}")


def _parse_int(value) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


def read_map(filepath: Union[str, Path]) -> List[MapRecord]:
    """Parse a map file into records, in file order. Malformed lines are skipped."""
    with open(filepath) as f:
        lines = pd.Series(f.read().splitlines(), dtype=object)
    if lines.empty:
        logger.warning(f"Map file {filepath} is empty.")
        return list()

    # trailing separators carry no field: "B,3,4," reads as "B,3,4"
    rows = lines.str.rstrip(",").str.split(",")
    records = list()
    for line, fields in zip(lines, rows):
        if not line.strip():
            continue
        if len(fields) != len(MAP_COLUMNS):
            _skip_bad_line(fields)
            continue
        tag, x, y = fields
        x, y = _parse_int(x), _parse_int(y)
        if x is None or y is None:
            logger.warning(f"Skipped map line with invalid coordinates: {line}")
            continue
        records.append(MapRecord(tag.strip(), Coordinate(x, y)))
    return records


def apply_map(state: SearchState, records: List[MapRecord]):
    """Replace the map of `state` with `records`, applied in order through the usual editing rules."""
    state.clear()
    for record in records:
        if record.tag == CONSTANT.MAP_FILE.ORIGIN_TAG:
            state.set_origin(record.coord)
        elif record.tag == CONSTANT.MAP_FILE.DESTINATION_TAG:
            state.set_destination(record.coord)
        elif record.tag == CONSTANT.MAP_FILE.BLOCKED_TAG:
            state.set_blocked(record.coord)
        else:
            logger.debug(f"Ignored map record with unknown tag: {record.tag}")

    if state.origin is None:
        logger.warning("Map has no origin.")
    if state.destination is None:
        logger.warning("Map has no destination.")


def load_map(filepath: Union[str, Path], state: SearchState):
    records = read_map(filepath)
    apply_map(state, records)
    logger.info(f"Loaded map {filepath}: {state}")


def save_map(filepath: Union[str, Path], state: SearchState) -> bool:
    """Write origin, destination then every blocked cell. Nothing is written without both endpoints."""
    if not state.is_ready():
        logger.warning("Map not saved, origin and destination must be set.")
        return False

    rows = [
        (CONSTANT.MAP_FILE.ORIGIN_TAG, state.origin.x, state.origin.y),
        (CONSTANT.MAP_FILE.DESTINATION_TAG, state.destination.x, state.destination.y),
    ]
    for coord in sorted(state.get_blocked(), key=lambda c: (c.y, c.x)):
        rows.append((CONSTANT.MAP_FILE.BLOCKED_TAG, coord.x, coord.y))

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=MAP_COLUMNS).to_csv(filepath, header=False, index=False)
    logger.info(f"Saved map {filepath}: {state}")
    return True
