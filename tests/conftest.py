# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps" and "cpsudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cpsudoku.topology import get_topology  # noqa: E402

EASY = "..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3.."
HARD = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"


@pytest.fixture
def topology():
    return get_topology()


def assert_valid_solution(state):
    """Every square resolved and every unit holds 1..9 exactly once."""
    assert state.is_solved()
    for unit in state.topology.unitlist:
        assert sorted(state.value_of(s) for s in unit) == list(range(1, 10))


def assert_respects_clues(state, start_state):
    for s, v in start_state:
        if v:
            assert state.value_of(s) == v
