"""Depth-first search over grid states, run after propagation reaches a fixed point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .logutil import ProgressPrinter
from .topology import Square

if TYPE_CHECKING:
    from .state import GridState


@dataclass
class SearchStats:
    nodes: int = 0
    backtracks: int = 0
    max_depth: int = 0
    progress: ProgressPrinter | None = field(default=None, repr=False)


def select_square(state: GridState) -> Square:
    """Unsolved square with the fewest candidates (MRV); ties go to row-major order."""
    return min(
        (s for s in state.topology.squares if len(state.values[s]) > 1),
        key=lambda s: len(state.values[s]),
    )


def sort_values(state: GridState, square: Square) -> list[int]:
    """Candidates of `square`, least popular across the whole grid first.

    Popularity is a fresh scan every call; the state changes under propagation.
    """
    counts = {
        d: sum(1 for vs in state.values.values() if d in vs)
        for d in state.values[square]
    }
    return sorted(counts, key=lambda d: (counts[d], d))


def search(state: GridState, stats: SearchStats | None = None, depth: int = 0) -> bool:
    """Solve `state` in place. On success its values are the winning branch's values."""
    if state.is_solved():
        return True
    if stats is not None:
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, depth)
        if stats.progress is not None:
            stats.progress.maybe_print(stats.nodes, extra=f"depth={depth}")
    square = select_square(state)
    for d in sort_values(state, square):
        child = state.clone()
        if child.assign(square, d) and search(child, stats, depth + 1):
            state.values = child.values
            return True
        if stats is not None:
            stats.backtracks += 1
    return False
