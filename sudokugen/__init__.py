"""Sudoku puzzle generator with uniqueness-checked cell removal."""

from .core import SudokuBoard, InvalidGridError, is_valid_placement, count_solutions, has_unique_solution
from .solvers import solve
from .generator import SudokuGenerator, Difficulty, GenerationError, generate_puzzle

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "InvalidGridError",
    "is_valid_placement",
    "count_solutions",
    "has_unique_solution",
    "solve",
    "SudokuGenerator",
    "Difficulty",
    "GenerationError",
    "generate_puzzle",
]
