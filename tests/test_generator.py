"""Unit tests for puzzle generator."""

import random

import pytest
from sudokugen.core.board import SudokuBoard
from sudokugen.core.validator import count_solutions, has_unique_solution, validate_solution
from sudokugen.generator import SudokuGenerator, Difficulty, GenerationError, generate_puzzle
from sudokugen.generator import generator as generator_module
from sudokugen.solvers import solve


class TestSudokuGenerator:
    """Tests for SudokuGenerator class."""

    def test_generate_creates_valid_puzzle(self):
        """Test that generated puzzles are valid."""
        generator = SudokuGenerator(seed=42)
        puzzle = generator.generate(Difficulty.EASY)

        assert puzzle.is_valid()
        assert puzzle.count_empty() > 0
        assert puzzle.count_filled() > 0

    def test_easy_clue_floor_and_uniqueness(self):
        """Easy removes at most 40 cells and stays unique."""
        puzzle = SudokuGenerator(seed=7).generate("easy")

        assert puzzle.count_filled() >= 81 - 40
        assert count_solutions(puzzle, 2) == 1

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_every_difficulty_is_unique_and_solvable(self, difficulty):
        generator = SudokuGenerator(seed=2024)
        puzzle, solution = generator.generate_with_solution(difficulty)

        assert has_unique_solution(puzzle)
        assert puzzle.count_empty() <= difficulty.cells_to_remove

        completed = puzzle.copy()
        assert solve(completed)
        assert completed.is_solved()
        assert completed == solution

    def test_generate_with_solution(self):
        """Test generating puzzle with solution."""
        generator = SudokuGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution(Difficulty.MEDIUM)

        assert puzzle.is_valid()
        assert solution.is_solved()
        assert validate_solution(puzzle, solution)

    def test_stats_recorded(self):
        generator = SudokuGenerator(seed=3)
        puzzle = generator.generate(Difficulty.EASY)
        stats = generator.last_stats

        assert stats.difficulty == "easy"
        assert stats.requested == 40
        assert stats.removed == puzzle.count_empty()
        assert stats.uniqueness_checks >= stats.removed
        assert stats.shortfall == 40 - stats.removed
        assert stats.time_seconds > 0

    def test_generate_batch(self):
        """Test batch generation."""
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(3, Difficulty.EASY)

        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.is_valid()
        assert len(set(puzzles)) == 3

    def test_seed_is_reproducible(self):
        a = SudokuGenerator(seed=11).generate(Difficulty.EASY)
        b = SudokuGenerator(seed=11).generate(Difficulty.EASY)
        assert a == b

    def test_different_seeds_differ(self):
        """Test that different generators produce different puzzles."""
        puzzle1 = SudokuGenerator(seed=123).generate(Difficulty.EASY)
        puzzle2 = SudokuGenerator(seed=456).generate(Difficulty.EASY)

        assert puzzle1.is_valid()
        assert puzzle2.is_valid()
        assert puzzle1 != puzzle2

    def test_diagonal_boxes_are_permutations(self):
        board = SudokuGenerator(seed=5)._generate_complete_board()
        for start in (0, 3, 6):
            box = board.get_box(start, start)
            assert sorted(box.tolist()) == list(range(1, 10))
        assert board.is_solved()

    def test_unsolvable_seed_raises(self, monkeypatch):
        monkeypatch.setattr(generator_module, "solve", lambda board, rng=None: False)
        with pytest.raises(GenerationError):
            SudokuGenerator(seed=1).generate(Difficulty.EASY)

    def test_shortfall_is_accepted(self, monkeypatch):
        """When few removals keep uniqueness, the puzzle keeps extra clues."""
        calls = []

        def unique_first_ten(puzzle):
            calls.append(1)
            return len(calls) <= 10

        monkeypatch.setattr(generator_module, "has_unique_solution", unique_first_ten)
        generator = SudokuGenerator(seed=1)
        puzzle = generator.generate(Difficulty.HARD)

        assert puzzle.count_empty() == 10
        assert generator.last_stats.uniqueness_checks == 81
        assert generator.last_stats.shortfall == 47


class TestGeneratePuzzle:
    """Tests for the module-level entry point."""

    def test_returns_nested_list(self):
        grid = generate_puzzle("easy", rng=random.Random(8))

        assert len(grid) == 9
        assert all(len(row) == 9 for row in grid)
        assert all(isinstance(v, int) and 0 <= v <= 9 for row in grid for v in row)
        assert has_unique_solution(grid)

    def test_independent_random_sources(self):
        a = generate_puzzle("easy", rng=random.Random(1))
        b = generate_puzzle("easy", rng=random.Random(1))
        c = generate_puzzle("easy", rng=random.Random(2))
        assert a == b
        assert a != c

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            generate_puzzle("extreme")


class TestDifficultyLevels:
    """Test difficulty level removal counts."""

    def test_cells_to_remove(self):
        assert Difficulty.EASY.cells_to_remove == 40
        assert Difficulty.MEDIUM.cells_to_remove == 50
        assert Difficulty.HARD.cells_to_remove == 57

    def test_parse(self):
        assert Difficulty.parse("hard") is Difficulty.HARD
        assert Difficulty.parse("Medium") is Difficulty.MEDIUM
        assert Difficulty.parse(Difficulty.EASY) is Difficulty.EASY
        with pytest.raises(ValueError):
            Difficulty.parse("expert")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
