# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

from .topology import Square

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

StartValue = tuple[Square, int]
"""A clue: (square, digit). Digit 0 means no clue at that square."""

StartState = list[StartValue]
"""Ordered clues, row-major when produced by the codec."""

Values = dict[Square, set[int]]
"""Map from square to its current candidate digits."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a sorted list of candidate digits (1..9)."""


class SolvePayload(TypedDict):
    """Result of `solve_tool`, shaped for the API and CLI layers."""

    solution: str  # 81 chars, row-major
    grid: Grid
    duration_ms: int


class GeneratePayload(TypedDict):
    puzzle: str  # 81 chars, '.' for blanks
    clues: int  # number of given squares
    distinct: int  # number of distinct given digits
    attempts: int  # generation attempts used, including the successful one


class Issue(TypedDict, total=False):
    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # e.g. 'r3', 'c7', 'b5'
    cell: str
    cells: list[str]
    digits: list[int]
    given: int
    found: int
