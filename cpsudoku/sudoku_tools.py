"""Solver and generator front doors, plus dict-returning helpers for the API and CLI layers."""

from __future__ import annotations

import random
import time

from .config import SolverSettings
from .errors import ContradictionError, GenerationError, UnsolvableError
from .grid_codec import encode_grid, from_rows, grid_to_string, parse_grid, to_rows
from .logutil import ProgressConfig, ProgressPrinter, log
from .search import SearchStats, search
from .state import GridState
from .topology import Topology, get_topology, rc_to_key
from .types_sudoku import Candidates, GeneratePayload, Grid, Issue, SolvePayload, StartState


class Solver:
    def __init__(self, settings: SolverSettings | None = None, topology: Topology | None = None) -> None:
        self.settings = settings or SolverSettings()
        self.topology = topology or get_topology()

    def solve(self, start_state: StartState) -> GridState:
        quiet = not self.settings.verbose
        stats = SearchStats(
            progress=None if quiet else ProgressPrinter(
                ProgressConfig(self.settings.report_every_nodes, self.settings.report_every_secs)
            )
        )
        t0 = time.time()
        log("[solver] solve start", quiet=quiet)
        state = GridState(self.topology)
        if not state.apply_start_state(start_state):
            log("[solver] clues contradict each other", quiet=quiet)
            raise UnsolvableError("Failed solving puzzle") from ContradictionError("clues contradict each other")
        ok = search(state, stats)
        duration_ms = int((time.time() - t0) * 1000)
        log(
            f"[solver] solve end in {duration_ms} ms; nodes={stats.nodes} "
            f"backtracks={stats.backtracks} depth={stats.max_depth} ok={ok}",
            quiet=quiet,
        )
        if not ok or not state.is_solved():
            raise UnsolvableError("Failed solving puzzle")
        return state

    def solve_str(self, grid: str) -> GridState:
        return self.solve(parse_grid(grid, self.topology))


class Generator:
    def __init__(
        self,
        settings: SolverSettings | None = None,
        seed: int | None = None,
        topology: Topology | None = None,
    ) -> None:
        self.settings = settings or SolverSettings()
        self.topology = topology or get_topology()
        if seed is None:
            seed = self.settings.seed
        self.rng = random.Random(seed)
        self.last_attempts = 0

    def generate(self, n: int) -> StartState:
        """Retry fresh attempts until one yields >= n clues with >= 8 distinct digits.

        Unbounded unless settings.max_attempts > 0, in which case GenerationError
        is raised once that many attempts have failed.
        """
        quiet = not self.settings.verbose
        limit = self.settings.max_attempts
        attempts = 0
        while not limit or attempts < limit:
            attempts += 1
            start_state = GridState(self.topology).generate(n, self.rng)
            if start_state is not None:
                self.last_attempts = attempts
                log(f"[generator] n={n}: {len(start_state)} clues after {attempts} attempt(s)", quiet=quiet)
                return start_state
        self.last_attempts = attempts
        raise GenerationError(attempts)

    def generate_str(self, n: int) -> str:
        return encode_grid(self.generate(n), self.topology)


def solve_tool(grid: str | Grid, settings: SolverSettings | None = None) -> SolvePayload:
    """Solve an 81-char string or 9x9 rows. Returns {'solution', 'grid', 'duration_ms'}."""
    solver = Solver(settings)
    start_state = parse_grid(grid) if isinstance(grid, str) else from_rows(grid)
    t0 = time.time()
    state = solver.solve(start_state)
    return {
        "solution": grid_to_string(state),
        "grid": to_rows(state),
        "duration_ms": int((time.time() - t0) * 1000),
    }


def generate_tool(n: int, seed: int | None = None, settings: SolverSettings | None = None) -> GeneratePayload:
    gen = Generator(settings, seed=seed)
    start_state = gen.generate(n)
    return {
        "puzzle": encode_grid(start_state),
        "clues": len(start_state),
        "distinct": len({v for _, v in start_state}),
        "attempts": gen.last_attempts,
    }


def candidates_tool(grid: str | Grid) -> dict:
    """Candidates after propagating the clues only (no search). 'ok' is False on contradiction."""
    start_state = parse_grid(grid) if isinstance(grid, str) else from_rows(grid)
    state = GridState()
    ok = state.apply_start_state(start_state)
    cands: Candidates = {rc_to_key(s): sorted(state.values[s]) for s in state.topology.squares}
    return {"candidates": cands, "ok": ok, "solved": ok and state.is_solved()}


def _duplicates_in_unit(vals: list[int]) -> set[int]:
    seen = set(); dups = set()
    for v in vals:
        if v == 0: continue
        if v in seen: dups.add(v)
        seen.add(v)
    return dups


def _unit_label(i: int) -> str:
    # unitlist order: rows, columns, boxes
    return "rcb"[i // 9] + str(i % 9 + 1)


def sanity_check(original: Grid, current: Grid) -> dict:
    """Report givens that were overwritten and digits repeated inside a unit."""
    topology = get_topology()
    orig = dict(from_rows(original, topology))
    cur = dict(from_rows(current, topology))
    issues: list[Issue] = []
    for s in topology.squares:
        if orig[s] != 0 and cur[s] not in (0, orig[s]):
            issues.append({"type": "given_overwritten", "cell": rc_to_key(s),
                           "given": orig[s], "found": cur[s]})
    for i, unit in enumerate(topology.unitlist):
        dups = _duplicates_in_unit([cur[s] for s in unit])
        if dups:
            cells = [rc_to_key(s) for s in unit if cur[s] in dups]
            issues.append({"type": "duplicate", "unit": _unit_label(i),
                           "digits": sorted(dups), "cells": cells})
    return {"ok": len(issues) == 0, "issues": issues}
