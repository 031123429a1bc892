"""Grid state and constraint propagation.

A `GridState` maps every square to its set of candidate digits. `assign` and
`eliminate` keep the state consistent using two rules, applied transitively:

1. A square reduced to one digit removes that digit from all of its peers.
2. A unit with a single remaining place for a digit puts the digit there.

Both return ``False`` on contradiction (an empty candidate set, or a digit with
no place left in some unit). After a ``False`` the state is partially updated
and must be discarded; search always works on clones for that reason.
"""

from __future__ import annotations

import random
from typing import Iterable

from .search import SearchStats, search
from .topology import Square, Topology, get_topology
from .types_sudoku import StartState, Values

GENERATE_MIN_DISTINCT = 8


class GridState:
    def __init__(self, topology: Topology | None = None, values: Values | None = None) -> None:
        self.topology = topology or get_topology()
        self.values: Values = values if values is not None else self.topology.initial_values()

    def clone(self) -> GridState:
        return GridState(self.topology, {s: set(vs) for s, vs in self.values.items()})

    # ------------------------------------------------------------------
    # propagation

    def assign(self, square: Square, value: int) -> bool:
        """Eliminate every candidate of `square` except `value`."""
        others = self.values[square] - {value}
        return all(self.eliminate(square, d2) for d2 in others)

    def eliminate(self, square: Square, value: int) -> bool:
        vs = self.values[square]
        if value not in vs:
            return True  # already eliminated
        vs.discard(value)
        if not vs:
            return False
        if len(vs) == 1:
            d2 = next(iter(vs))
            if not all(self.eliminate(s2, d2) for s2 in self.topology.peers[square]):
                return False
        for u in self.topology.units[square]:
            places = [s for s in u if value in self.values[s]]
            if not places:
                return False
            if len(places) == 1 and not self.assign(places[0], value):
                return False
        return True

    def apply_start_state(self, start_state: Iterable[tuple[Square, int]]) -> bool:
        for s, v in start_state:
            if v and not self.assign(s, v):
                return False
        return True

    # ------------------------------------------------------------------
    # queries

    def is_solved(self) -> bool:
        return all(len(self.values[s]) == 1 for s in self.topology.squares)

    def is_consistent(self) -> bool:
        if any(not vs for vs in self.values.values()):
            return False
        for u in self.topology.unitlist:
            present = set().union(*(self.values[s] for s in u))
            if present != self.topology.digits:
                return False
        return True

    def value_of(self, square: Square) -> int:
        """Return the resolved digit if the square is a singleton, else 0."""
        vs = self.values[square]
        return next(iter(vs)) if len(vs) == 1 else 0

    def singletons(self) -> list[int]:
        return [next(iter(vs)) for vs in self.values.values() if len(vs) == 1]

    def encode(self) -> StartState:
        """Singleton squares as (square, digit) clues, row-major."""
        return [(s, self.value_of(s)) for s in self.topology.squares if len(self.values[s]) == 1]

    # ------------------------------------------------------------------
    # drivers

    def solve(self, start_state: Iterable[tuple[Square, int]], stats: SearchStats | None = None) -> bool:
        if not self.apply_start_state(start_state):
            return False
        return search(self, stats)

    def generate(self, n: int, rng: random.Random | None = None) -> StartState | None:
        """One generation attempt; None when it hits a contradiction or runs out of squares."""
        rng = rng or random.Random()
        squares = list(self.topology.squares)
        rng.shuffle(squares)
        for s in squares:
            if not self.assign(s, rng.choice(sorted(self.values[s]))):
                return None
            digits = self.singletons()
            if len(digits) >= n and len(set(digits)) >= GENERATE_MIN_DISTINCT:
                return self.encode()
        return None

    def __str__(self) -> str:
        width = max(3, 1 + max(len(vs) for vs in self.values.values()))

        def cell(s: Square) -> str:
            return "".join(str(d) for d in sorted(self.values[s])).center(width)

        sep = "+".join(["-" * (width * 3)] * 3)
        lines = []
        for i in range(9):
            row = self.topology.squares[i * 9:i * 9 + 9]
            lines.append("|".join("".join(cell(s) for s in row[j:j + 3]) for j in (0, 3, 6)))
            if i in (2, 5):
                lines.append(sep)
        return "\n".join(lines) + "\n"
