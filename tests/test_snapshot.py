import numpy as np

from pathfinder.grid import Coordinate
from pathfinder.search.state import SearchState
from pathfinder.snapshot import CellKind, SearchSnapshot

C = Coordinate


def test_empty_board():
    snapshot = SearchSnapshot(width=4, height=3, settled=frozenset(), frontier=frozenset(), blocked=frozenset())
    cells = snapshot.to_array()
    assert cells.shape == (3, 4)
    assert (cells == CellKind.EMPTY).all()


def test_layers_are_indexed_by_row():
    snapshot = SearchSnapshot(
        width=4,
        height=3,
        settled=frozenset({C(1, 0)}),
        frontier=frozenset({C(2, 0)}),
        blocked=frozenset({C(3, 2)}),
        current=C(1, 0),
        origin=C(0, 0),
        destination=C(0, 2),
        path=(C(0, 1),),
    )
    expected = np.array(
        [
            [CellKind.ORIGIN, CellKind.CURRENT, CellKind.FRONTIER, CellKind.EMPTY],
            [CellKind.PATH, CellKind.EMPTY, CellKind.EMPTY, CellKind.EMPTY],
            [CellKind.DESTINATION, CellKind.EMPTY, CellKind.EMPTY, CellKind.BLOCKED],
        ],
        dtype=np.int8,
    )
    np.testing.assert_array_equal(snapshot.to_array(), expected)


def test_path_is_painted_over_settled_cells():
    snapshot = SearchSnapshot(
        width=3,
        height=1,
        settled=frozenset({C(0, 0), C(1, 0)}),
        frontier=frozenset(),
        blocked=frozenset(),
        path=(C(1, 0),),
    )
    assert snapshot.to_array()[0].tolist() == [CellKind.SETTLED, CellKind.PATH, CellKind.EMPTY]


def test_snapshot_of_state_is_detached():
    state = SearchState(3, 3)
    state.set_origin(C(0, 0))
    state.set_destination(C(2, 2))
    state.set_blocked(C(1, 1))
    snapshot = SearchSnapshot.of(state)

    state.unblock(C(1, 1))
    assert snapshot.blocked == {C(1, 1)}
    assert snapshot.to_array()[1, 1] == CellKind.BLOCKED
