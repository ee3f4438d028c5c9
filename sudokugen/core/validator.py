"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Sequence, Tuple, Union

from .board import SudokuBoard, Grid, SIZE, BOX_SIZE

GridLike = Union[SudokuBoard, Sequence[Sequence[int]]]


@dataclass(frozen=True)
class Conflicts:
    """Rows, columns and boxes that hold a repeated value."""
    rows: FrozenSet[int] = field(default_factory=frozenset)
    cols: FrozenSet[int] = field(default_factory=frozenset)
    boxes: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)

    def __bool__(self) -> bool:
        return bool(self.rows or self.cols or self.boxes)


def working_copy(grid: GridLike) -> Grid:
    """
    Validate a grid and return a private nested-list copy of it.

    Raises:
        InvalidGridError: If the grid is not 9x9 or holds values outside 0-9.
    """
    if isinstance(grid, SudokuBoard):
        return grid.to_list()
    return SudokuBoard.from_2d_list(grid).to_list()


def is_valid_placement(grid: GridLike, row: int, col: int, num: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    The cell itself is scanned too, so call this before writing the value.

    Args:
        grid: A SudokuBoard or a 9x9 nested list.
        row: Row index.
        col: Column index.
        num: Value to check (1 to 9).

    Returns:
        True if num does not already appear in the row, column or box.
    """
    if num < 1 or num > SIZE:
        return False
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the grid")

    cells = grid.grid if isinstance(grid, SudokuBoard) else grid

    # Check row
    if num in cells[row]:
        return False

    # Check column
    for r in range(SIZE):
        if cells[r][col] == num:
            return False

    # Check box
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if cells[r][c] == num:
                return False

    return True


def find_conflicts(grid: GridLike) -> Conflicts:
    """Find every row, column and box containing a duplicated value."""
    cells = working_copy(grid)

    def has_duplicate(values) -> bool:
        filled = [v for v in values if v != 0]
        return len(filled) != len(set(filled))

    rows = frozenset(r for r in range(SIZE) if has_duplicate(cells[r]))
    cols = frozenset(
        c for c in range(SIZE) if has_duplicate(cells[r][c] for r in range(SIZE))
    )
    boxes = frozenset(
        (br, bc)
        for br in range(BOX_SIZE)
        for bc in range(BOX_SIZE)
        if has_duplicate(
            cells[r][c]
            for r in range(br * BOX_SIZE, br * BOX_SIZE + BOX_SIZE)
            for c in range(bc * BOX_SIZE, bc * BOX_SIZE + BOX_SIZE)
        )
    )
    return Conflicts(rows=rows, cols=cols, boxes=boxes)


def count_solutions(grid: GridLike, max_count: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to max_count).

    Backtracks over empty cells in row-major order, trying 1-9 in ascending
    order at each one. The search runs on a private copy and stops as soon
    as max_count completions have been found.

    Args:
        grid: The puzzle, a SudokuBoard or 9x9 nested list. Left unmodified.
        max_count: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to max_count).
    """
    if max_count < 1:
        raise ValueError(f"max_count must be at least 1, got {max_count}")

    work = working_copy(grid)
    if find_conflicts(work):
        return 0
    count = 0

    def search() -> None:
        nonlocal count
        if count >= max_count:
            return

        for row in range(SIZE):
            for col in range(SIZE):
                if work[row][col] != 0:
                    continue
                for num in range(1, SIZE + 1):
                    if is_valid_placement(work, row, col, num):
                        work[row][col] = num
                        search()
                        work[row][col] = 0
                        if count >= max_count:
                            return
                return

        # No empty cell left: one complete solution
        count += 1

    search()
    return count


def has_unique_solution(grid: GridLike) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        grid: The puzzle, a SudokuBoard or 9x9 nested list.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(grid, max_count=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    for i in range(SIZE):
        for j in range(SIZE):
            if not puzzle.is_empty(i, j):
                if puzzle.get(i, j) != solution.get(i, j):
                    return False

    return solution.is_solved()
