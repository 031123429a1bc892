"""Conversions between 81-char grid strings, 9x9 integer rows and start states."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from .errors import MalformedInputError
from .topology import Square, Topology, get_topology
from .types_sudoku import Grid, StartState

if TYPE_CHECKING:
    from .state import GridState

GRID_LEN = 81
BLANK = "."


def parse_grid(text: str, topology: Topology | None = None) -> StartState:
    """Row-major clues from an 81-char string. Anything but 1-9 is a blank (digit 0)."""
    topology = topology or get_topology()
    if len(text) != GRID_LEN:
        raise MalformedInputError(f"Incorrect length: expected {GRID_LEN} characters, got {len(text)}")
    return [
        (s, int(ch) if ch in "123456789" else 0)
        for s, ch in zip(topology.squares, text)
    ]


def encode_grid(start_state: Iterable[tuple[Square, int]], topology: Topology | None = None) -> str:
    topology = topology or get_topology()
    chars = [BLANK] * GRID_LEN
    for s, v in start_state:
        if v:
            chars[topology.index_of(s)] = str(v)
    return "".join(chars)


def grid_to_string(state: GridState) -> str:
    """Resolved digits of `state` as 81 chars; unresolved squares render as '.'."""
    return "".join(str(state.value_of(s) or BLANK) for s in state.topology.squares)


def to_rows(state: GridState) -> Grid:
    flat = [state.value_of(s) for s in state.topology.squares]
    return [flat[i:i + 9] for i in range(0, GRID_LEN, 9)]


def from_rows(rows: Grid, topology: Topology | None = None) -> StartState:
    topology = topology or get_topology()
    if len(rows) != 9 or any(len(row) != 9 for row in rows):
        raise MalformedInputError("Grid must be 9 rows of 9 integers")
    flat = [v for row in rows for v in row]
    if any(not 0 <= v <= 9 for v in flat):
        raise MalformedInputError("Grid values must be in 0..9")
    return list(zip(topology.squares, flat))


def format_grid(text: str) -> str:
    """Pretty print an 81-char grid (blank = '.') with 3x3 box separators."""
    if len(text) != GRID_LEN:
        raise MalformedInputError(f"Incorrect length: expected {GRID_LEN} characters, got {len(text)}")
    lines = []
    for r in range(9):
        row = []
        for c in range(9):
            ch = text[r * 9 + c]
            row.append(ch if ch in "123456789" else BLANK)
            if c in (2, 5):
                row.append("|")
        lines.append(" ".join(row))
        if r in (2, 5):
            lines.append("------+-------+------")
    return "\n".join(lines)
