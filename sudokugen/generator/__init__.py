"""Generator module for creating Sudoku puzzles."""

from .generator import (
    SudokuGenerator,
    Difficulty,
    GenerationError,
    GenerationStats,
    generate_puzzle,
)

__all__ = [
    "SudokuGenerator",
    "Difficulty",
    "GenerationError",
    "GenerationStats",
    "generate_puzzle",
]
