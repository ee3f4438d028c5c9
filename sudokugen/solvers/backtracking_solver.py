"""Randomized depth-first backtracking solver."""

from __future__ import annotations
import logging
import random
import time
import tracemalloc
from dataclasses import dataclass
from typing import Any, Dict, MutableSequence, Optional, Tuple

import numpy as np

from ..core.board import SudokuBoard, Grid, SIZE
from ..core.validator import GridLike, find_conflicts, is_valid_placement, working_copy

logger = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0
    backtracks: int = 0
    algorithm: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "algorithm": self.algorithm,
        }


def _fill(cells: Grid, rng: random.Random, stats: Optional[SolverStats] = None) -> bool:
    """
    Fill the empty cells of a nested-list grid in place.

    Cells are visited in row-major order and candidates 1-9 are tried in a
    freshly shuffled order at each one. On failure every cell touched is
    reset to 0.
    """
    if stats is not None:
        stats.iterations += 1

    for row in range(SIZE):
        for col in range(SIZE):
            if cells[row][col] != 0:
                continue

            numbers = list(range(1, SIZE + 1))
            rng.shuffle(numbers)

            for num in numbers:
                if is_valid_placement(cells, row, col, num):
                    cells[row][col] = num
                    if _fill(cells, rng, stats):
                        return True
                    cells[row][col] = 0
                    if stats is not None:
                        stats.backtracks += 1
            return False

    return True


def solve(grid: GridLike, rng: Optional[random.Random] = None) -> bool:
    """
    Fill an incomplete grid into one valid complete solution.

    Args:
        grid: A SudokuBoard or mutable 9x9 nested list, updated in place when
            a solution is found and left unchanged otherwise.
        rng: Random source for the candidate order. Defaults to a fresh
            unseeded ``random.Random``.

    Returns:
        True if the grid was completed, False if no completion exists.

    Raises:
        InvalidGridError: If the grid is not 9x9 or holds values outside 0-9.
        TypeError: If the grid is a nested sequence whose rows cannot be
            assigned to, such as tuples.
    """
    rng = rng or random.Random()
    work = working_copy(grid)

    if not isinstance(grid, (SudokuBoard, np.ndarray)):
        if not all(isinstance(row, MutableSequence) for row in grid):
            raise TypeError("solve needs a SudokuBoard or a grid with mutable rows")

    # Clashing givens admit no completion
    if find_conflicts(work):
        return False

    if not _fill(work, rng):
        return False

    if isinstance(grid, SudokuBoard):
        grid.grid[:, :] = work
    else:
        for row in range(SIZE):
            grid[row][:] = work[row]
    return True


class BacktrackingSolver:
    """
    Depth-first search solver using randomized recursive backtracking.

    The same search the generator uses to build solution grids, wrapped with
    timing, memory and node statistics.
    """

    name = "Backtracking"

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            seed: Random seed for the candidate order.
        """
        self.rng = random.Random(seed)
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> Tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        The caller's board is never modified.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = None
            if board.is_valid():
                work = board.to_list()
                if _fill(work, self.rng, self.stats):
                    solution = SudokuBoard.from_2d_list(work)
            self.stats.solved = solution is not None and solution.is_solved()
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        logger.debug(
            "%s finished: solved=%s in %.4fs (%d iterations)",
            self.name, self.stats.solved, self.stats.time_seconds, self.stats.iterations
        )
        return solution, self.stats
