"""Sudoku puzzle generator with fixed removal counts per difficulty."""

from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..core.board import SudokuBoard, Grid, SIZE, BOX_SIZE
from ..core.validator import has_unique_solution
from ..solvers.backtracking_solver import solve

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when the seeded grid cannot be completed into a solution."""


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        """Number of cells the generator tries to empty for this level."""
        counts = {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 50,
            Difficulty.HARD: 57,
        }
        return counts[self]

    @classmethod
    def parse(cls, value: Union[Difficulty, str]) -> Difficulty:
        """Accept a Difficulty or its string value ("easy", "medium", "hard")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}, expected one of: {choices}") from None


@dataclass
class GenerationStats:
    """Bookkeeping from the last generated puzzle."""
    difficulty: str = ""
    requested: int = 0
    removed: int = 0
    uniqueness_checks: int = 0
    time_seconds: float = 0.0

    @property
    def shortfall(self) -> int:
        """Cells that could not be removed without losing uniqueness."""
        return self.requested - self.removed


class SudokuGenerator:
    """
    Generator for Sudoku puzzles with various difficulty levels.

    Algorithm:
    1. Seed the three diagonal boxes with random permutations of 1-9
    2. Complete the grid with the randomized backtracking solver
    3. Empty cells in random order, keeping each removal only while the
       puzzle still has exactly one solution

    Each generator owns its random source, so separate generators never
    share state.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to use instead of seeding a new one.
        """
        self.rng = rng or random.Random(seed)
        self.last_stats: Optional[GenerationStats] = None

    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> SudokuBoard:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            A SudokuBoard with the puzzle (with clues only, no solution).
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_batch(
        self, count: int, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM
    ) -> List[SudokuBoard]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.

        Returns:
            List of SudokuBoard puzzles.
        """
        return [self.generate(difficulty) for _ in range(count)]

    def generate_with_solution(
        self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM
    ) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards.

        Raises:
            GenerationError: If the seeded grid could not be completed.
        """
        difficulty = Difficulty.parse(difficulty)
        start_time = time.perf_counter()

        solution = self._generate_complete_board()
        puzzle = self._remove_cells(solution, difficulty)

        self.last_stats.time_seconds = time.perf_counter() - start_time
        logger.debug(
            "Generated %s puzzle: %d/%d cells removed in %.3fs",
            difficulty.value, self.last_stats.removed,
            self.last_stats.requested, self.last_stats.time_seconds
        )
        return puzzle, solution

    def _generate_complete_board(self) -> SudokuBoard:
        """Generate a complete valid Sudoku board."""
        board = SudokuBoard()

        # Diagonal boxes share no row, column or box, so they fill freely
        for start in range(0, SIZE, BOX_SIZE):
            self._fill_box(board, start, start)

        if not solve(board, rng=self.rng):
            raise GenerationError("Could not complete the seeded grid")
        return board

    def _fill_box(self, board: SudokuBoard, start_row: int, start_col: int) -> None:
        """Fill a single box with a random permutation of 1-9."""
        values = list(range(1, SIZE + 1))
        self.rng.shuffle(values)

        idx = 0
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                board.set(start_row + i, start_col + j, values[idx])
                idx += 1

    def _remove_cells(self, solution: SudokuBoard, difficulty: Difficulty) -> SudokuBoard:
        """
        Remove cells from a complete solution to create a puzzle.

        Each removal is kept only if the whole grid still has a unique
        solution. If every position has been tried before reaching the
        target, the puzzle keeps the extra clues.
        """
        puzzle = solution.copy()
        cells_to_remove = difficulty.cells_to_remove
        stats = GenerationStats(difficulty=difficulty.value, requested=cells_to_remove)
        self.last_stats = stats

        positions = [(i, j) for i in range(SIZE) for j in range(SIZE)]
        self.rng.shuffle(positions)

        for row, col in positions:
            if stats.removed >= cells_to_remove:
                break

            saved_value = puzzle.get(row, col)
            puzzle.clear(row, col)

            stats.uniqueness_checks += 1
            if has_unique_solution(puzzle):
                stats.removed += 1
            else:
                puzzle.set(row, col, saved_value)

        if stats.shortfall:
            logger.debug(
                "Exhausted positions for %s puzzle: %d cells short of %d",
                difficulty.value, stats.shortfall, cells_to_remove
            )
        return puzzle


def generate_puzzle(
    difficulty: Union[Difficulty, str], rng: Optional[random.Random] = None
) -> Grid:
    """
    Generate a puzzle and return it as a row-major 9x9 list of lists.

    Args:
        difficulty: "easy", "medium", "hard" or a Difficulty.
        rng: Optional random source; a fresh one is used by default.

    Returns:
        The puzzle grid, 0 marking empty cells.
    """
    return SudokuGenerator(rng=rng).generate(difficulty).to_list()
