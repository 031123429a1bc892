"""Constraint-propagation Sudoku solver and generator."""

from .config import SolverSettings, load_settings
from .errors import (
    ContradictionError,
    GenerationError,
    MalformedInputError,
    SudokuError,
    UnsolvableError,
)
from .grid_codec import encode_grid, format_grid, grid_to_string, parse_grid
from .state import GridState
from .sudoku_tools import Generator, Solver
from .topology import Topology, get_topology

__all__ = [
    "ContradictionError",
    "GenerationError",
    "Generator",
    "GridState",
    "MalformedInputError",
    "Solver",
    "SolverSettings",
    "SudokuError",
    "Topology",
    "UnsolvableError",
    "encode_grid",
    "format_grid",
    "get_topology",
    "grid_to_string",
    "load_settings",
    "parse_grid",
]
