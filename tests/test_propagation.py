from cpsudoku.grid_codec import parse_grid
from cpsudoku.state import GridState

from conftest import EASY


def _snapshot(state):
    return {s: set(vs) for s, vs in state.values.items()}


def test_assign_propagates_to_peers(topology):
    state = GridState()
    assert state.assign(("A", "1"), 7)
    assert state.values[("A", "1")] == {7}
    for p in topology.peers[("A", "1")]:
        assert 7 not in state.values[p]
    assert state.is_consistent()


def test_reassign_is_noop():
    state = GridState()
    assert state.assign(("E", "5"), 3)
    before = _snapshot(state)
    assert state.assign(("E", "5"), 3)
    assert _snapshot(state) == before


def test_eliminate_absent_value_is_noop():
    state = GridState()
    assert state.eliminate(("B", "2"), 4)
    before = _snapshot(state)
    assert state.eliminate(("B", "2"), 4)
    assert _snapshot(state) == before


def test_eliminating_last_candidate_fails():
    state = GridState()
    assert state.assign(("A", "1"), 1)
    assert state.eliminate(("A", "1"), 1) is False


def test_assign_conflicting_peer_fails():
    state = GridState()
    assert state.assign(("A", "1"), 5)
    assert state.assign(("A", "2"), 5) is False


def test_hidden_single_is_placed():
    state = GridState()
    row = [("A", c) for c in "12345678"]
    for s in row:
        assert state.eliminate(s, 9)
    # only A9 can hold 9 in row A
    assert state.values[("A", "9")] == {9}
    assert all(9 not in state.values[p] for p in state.topology.peers[("A", "9")])


def test_candidate_sets_only_shrink():
    state = GridState()
    for s, v in parse_grid(EASY):
        if not v:
            continue
        before = _snapshot(state)
        assert state.assign(s, v)
        for sq, vs in state.values.items():
            assert vs <= before[sq]
            assert 1 <= len(vs) <= 9
    assert state.is_consistent()


def test_clues_alone_solve_easy_puzzle():
    state = GridState()
    assert state.apply_start_state(parse_grid(EASY))
    assert state.is_solved()


def test_clone_is_independent():
    state = GridState()
    child = state.clone()
    assert child.assign(("A", "1"), 1)
    assert state.values[("A", "1")] == set(range(1, 10))
    assert child.topology is state.topology


def test_encode_lists_singletons_row_major():
    state = GridState()
    assert state.assign(("B", "3"), 4)
    assert state.assign(("A", "7"), 2)
    assert state.encode() == [(("A", "7"), 2), (("B", "3"), 4)]


def test_str_renders_box_separators():
    state = GridState()
    text = str(state)
    lines = text.splitlines()
    assert len(lines) == 11
    assert lines[3].count("+") == 2
    assert lines[0].count("|") == 2
