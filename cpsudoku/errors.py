"""Exception types raised at the solver/generator boundary.

Propagation itself never raises: a contradiction is reported as ``False`` and
simply prunes the current search branch. Only failures a caller can act on
become exceptions.
"""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for all cpsudoku errors."""


class ContradictionError(SudokuError):
    """A candidate set or a unit became unsatisfiable."""


class UnsolvableError(SudokuError):
    """The clues contradict each other or search exhausted every branch."""


class MalformedInputError(SudokuError, ValueError):
    """Grid text or rows have the wrong length or shape."""


class GenerationError(SudokuError):
    """Generation gave up after the configured number of attempts."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No puzzle generated after {attempts} attempts")
        self.attempts = attempts
