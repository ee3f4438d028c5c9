"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, InvalidGridError, Grid, SIZE, BOX_SIZE
from .validator import (
    Conflicts,
    is_valid_placement,
    find_conflicts,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "InvalidGridError",
    "Grid",
    "SIZE",
    "BOX_SIZE",
    "Conflicts",
    "is_valid_placement",
    "find_conflicts",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
]
