"""Static board topology: square ids, the 27 units and each square's 20 peers. Built once and shared by every grid state."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

ROWS = "ABCDEFGHI"
COLS = "123456789"
DIGITS = frozenset(range(1, 10))

Square = tuple[str, str]  # (row label, column label), e.g. ('A', '1')
Unit = tuple[Square, ...]


def cross(rows: str, cols: str) -> list[Square]:
    return [(r, c) for r in rows for c in cols]


def rc_to_key(square: Square) -> str:
    r, c = square
    return f"r{ROWS.index(r) + 1}c{c}"


def key_to_rc(key: str) -> Square:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    if not (1 <= r <= 9 and 1 <= c <= 9):
        raise ValueError(f"cell key out of range: {key}")
    return (ROWS[r - 1], COLS[c - 1])


def unit_cells_row(r: int) -> Unit:
    return tuple(cross(ROWS[r - 1], COLS))


def unit_cells_col(c: int) -> Unit:
    return tuple(cross(ROWS, COLS[c - 1]))


def unit_cells_box(b: int) -> Unit:
    br = (b - 1) // 3
    bc = (b - 1) % 3
    return tuple(cross(ROWS[3 * br:3 * br + 3], COLS[3 * bc:3 * bc + 3]))


@dataclass(frozen=True)
class Topology:
    squares: tuple[Square, ...]
    unitlist: tuple[Unit, ...]
    units: dict[Square, tuple[Unit, ...]] = field(repr=False)
    peers: dict[Square, frozenset[Square]] = field(repr=False)
    digits: frozenset[int] = DIGITS

    def index_of(self, square: Square) -> int:
        r, c = square
        return ROWS.index(r) * 9 + COLS.index(c)

    def initial_values(self) -> dict[Square, set[int]]:
        return {s: set(self.digits) for s in self.squares}


def build_topology() -> Topology:
    squares = tuple(cross(ROWS, COLS))
    unitlist = tuple(
        [unit_cells_row(r) for r in range(1, 10)]
        + [unit_cells_col(c) for c in range(1, 10)]
        + [unit_cells_box(b) for b in range(1, 10)]
    )
    units = {s: tuple(u for u in unitlist if s in u) for s in squares}
    peers = {
        s: frozenset(s2 for u in units[s] for s2 in u if s2 != s)
        for s in squares
    }
    return Topology(squares=squares, unitlist=unitlist, units=units, peers=peers)


@lru_cache(maxsize=1)
def get_topology() -> Topology:
    """Process-wide topology; never mutated after construction."""
    return build_topology()
