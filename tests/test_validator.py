"""Unit tests for placement checks and solution counting."""

import random

import pytest
from sudokugen.core.board import SudokuBoard, InvalidGridError
from sudokugen.core.validator import (
    is_valid_placement,
    find_conflicts,
    count_solutions,
    has_unique_solution,
    validate_solution,
)
from sudokugen.solvers import solve


def _random_solution(seed):
    board = SudokuBoard()
    assert solve(board, rng=random.Random(seed))
    return board


class TestIsValidPlacement:
    """Tests for the constraint checker."""

    def test_row_column_box(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

        # Unrelated cell
        assert is_valid_placement(board, 4, 4, 5)

    def test_accepts_nested_lists(self, puzzle_string):
        grid = SudokuBoard.from_string(puzzle_string).to_list()
        assert not is_valid_placement(grid, 0, 2, 5)
        assert is_valid_placement(grid, 0, 2, 4)

    def test_out_of_range_value(self):
        board = SudokuBoard()
        assert not is_valid_placement(board, 0, 0, 0)
        assert not is_valid_placement(board, 0, 0, 10)

    def test_out_of_range_cell(self):
        with pytest.raises(ValueError):
            is_valid_placement(SudokuBoard(), 9, 0, 1)

    def test_scans_target_cell(self):
        """The cell's own value counts, so validate before writing."""
        board = SudokuBoard()
        board.set(3, 3, 4)
        assert not is_valid_placement(board, 3, 3, 4)

    def test_does_not_mutate(self, puzzle_string):
        grid = SudokuBoard.from_string(puzzle_string).to_list()
        snapshot = [row[:] for row in grid]
        is_valid_placement(grid, 4, 4, 5)
        assert grid == snapshot

    def test_idempotent(self, puzzle_string):
        """Same arguments and no mutation give the same answer."""
        board = SudokuBoard.from_string(puzzle_string)
        for row in range(9):
            for col in range(9):
                for num in range(1, 10):
                    first = is_valid_placement(board, row, col, num)
                    assert is_valid_placement(board, row, col, num) == first

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_invariant_under_band_row_swap_and_relabel(self, seed):
        """Swapping two rows of a band and relabeling digits preserves validity."""
        rng = random.Random(seed)
        grid = _random_solution(seed).to_list()
        for row in range(9):
            for col in range(9):
                if rng.random() < 0.5:
                    grid[row][col] = 0

        band = rng.randrange(3) * 3
        r1, r2 = rng.sample(range(band, band + 3), 2)
        perm = list(range(1, 10))
        rng.shuffle(perm)
        relabel = {0: 0, **{n: perm[n - 1] for n in range(1, 10)}}

        swapped = [row[:] for row in grid]
        swapped[r1], swapped[r2] = swapped[r2], swapped[r1]
        transformed = [[relabel[v] for v in row] for row in swapped]

        def moved(row):
            return {r1: r2, r2: r1}.get(row, row)

        for row in range(9):
            for col in range(9):
                for num in range(1, 10):
                    assert is_valid_placement(grid, row, col, num) == \
                        is_valid_placement(transformed, moved(row), col, relabel[num])


class TestFindConflicts:

    def test_clean_grid(self, puzzle_string):
        conflicts = find_conflicts(SudokuBoard.from_string(puzzle_string))
        assert not conflicts

    def test_duplicates_reported_per_unit(self, puzzle_string):
        board = SudokuBoard.from_string(puzzle_string)
        board.set(0, 2, 5)
        conflicts = find_conflicts(board)
        assert conflicts.rows == {0}
        assert conflicts.cols == frozenset()
        assert conflicts.boxes == {(0, 0)}


class TestCountSolutions:
    """Tests for the bounded solution counter."""

    def test_known_puzzle_is_unique(self, puzzle_string):
        board = SudokuBoard.from_string(puzzle_string)
        assert count_solutions(board) == 1
        assert has_unique_solution(board)

    def test_solved_grid_counts_one(self, solution_string):
        assert count_solutions(SudokuBoard.from_string(solution_string), 2) == 1

    @pytest.mark.parametrize("max_count", [2, 3, 5])
    def test_empty_grid_has_many(self, max_count):
        count = count_solutions(SudokuBoard(), max_count)
        assert count >= 2
        assert count == max_count

    def test_stops_at_max_count(self):
        assert count_solutions(SudokuBoard(), max_count=1) == 1

    def test_invalid_max_count(self):
        with pytest.raises(ValueError):
            count_solutions(SudokuBoard(), max_count=0)

    def test_caller_grid_unchanged(self, puzzle_string):
        board = SudokuBoard.from_string(puzzle_string)
        grid = board.to_list()
        count_solutions(board)
        count_solutions(grid)
        assert board == SudokuBoard.from_string(puzzle_string)
        assert grid == SudokuBoard.from_string(puzzle_string).to_list()

    def test_conflicting_givens_have_no_solution(self, puzzle_string):
        board = SudokuBoard.from_string(puzzle_string)
        board.set(0, 2, 5)
        assert count_solutions(board) == 0
        assert not has_unique_solution(board)

    def test_ambiguous_puzzle(self, solution_string):
        """Emptying a whole band allows its rows to be permuted."""
        board = SudokuBoard.from_string(solution_string)
        for row in range(3):
            for col in range(9):
                board.clear(row, col)
        assert count_solutions(board) == 2
        assert not has_unique_solution(board)

    def test_single_removal_from_solution(self, solution_string):
        board = SudokuBoard.from_string(solution_string)
        board.clear(4, 4)
        assert isinstance(has_unique_solution(board), bool)
        assert count_solutions(board) >= 1

    def test_rejects_malformed_grid(self):
        with pytest.raises(InvalidGridError):
            count_solutions([[0] * 9] * 3)
        with pytest.raises(InvalidGridError):
            count_solutions([[11] * 9] * 9)


class TestValidateSolution:

    def test_matching_solution(self, puzzle_string, solution_string):
        puzzle = SudokuBoard.from_string(puzzle_string)
        solution = SudokuBoard.from_string(solution_string)
        assert validate_solution(puzzle, solution)

    def test_solution_must_keep_clues(self, solution_string):
        puzzle = SudokuBoard()
        puzzle.set(0, 0, 1)
        assert not validate_solution(puzzle, SudokuBoard.from_string(solution_string))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
