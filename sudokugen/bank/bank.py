"""In-memory bank of pregenerated puzzles, grouped by difficulty."""

from __future__ import annotations
import logging
import random
from typing import Dict, Iterable, List, Optional, Union

from tqdm import tqdm

from ..core.board import Grid, SudokuBoard
from ..generator import SudokuGenerator, Difficulty

logger = logging.getLogger(__name__)


class PuzzleBank:
    """
    Ordered lists of puzzles per difficulty tier.

    Games draw from the bank instead of generating on demand, which keeps
    starting a new game instant. Puzzles handed out are deep copies.
    """

    def __init__(self):
        self._puzzles: Dict[Difficulty, List[Grid]] = {d: [] for d in Difficulty}

    @classmethod
    def build(
        cls,
        count: int,
        difficulties: Optional[Iterable[Union[Difficulty, str]]] = None,
        seed: Optional[int] = None,
        show_progress: bool = False,
    ) -> PuzzleBank:
        """
        Generate a bank holding ``count`` puzzles for each difficulty.

        Args:
            count: Puzzles to generate per difficulty.
            difficulties: Tiers to fill (default: all).
            seed: Random seed for reproducibility.
            show_progress: Show a progress bar per tier.
        """
        bank = cls()
        generator = SudokuGenerator(seed=seed)
        tiers = [Difficulty.parse(d) for d in (difficulties or list(Difficulty))]

        for difficulty in tiers:
            logger.info("Generating %d %s puzzles", count, difficulty.value)
            for _ in tqdm(range(count), desc=difficulty.value, disable=not show_progress):
                bank.add(difficulty, generator.generate(difficulty))

        return bank

    def add(self, difficulty: Union[Difficulty, str], puzzle: Union[SudokuBoard, Grid]) -> None:
        """Append a puzzle to a tier, validating it as a 9x9 grid."""
        if not isinstance(puzzle, SudokuBoard):
            puzzle = SudokuBoard.from_2d_list(puzzle)
        self._puzzles[Difficulty.parse(difficulty)].append(puzzle.to_list())

    def puzzles(self, difficulty: Union[Difficulty, str]) -> List[Grid]:
        """Return copies of all puzzles in a tier, in insertion order."""
        return [[row[:] for row in grid] for grid in self._puzzles[Difficulty.parse(difficulty)]]

    def random_puzzle(
        self, difficulty: Union[Difficulty, str], rng: Optional[random.Random] = None
    ) -> Grid:
        """
        Pick a random puzzle from a tier.

        Returns:
            A deep copy of the stored grid.

        Raises:
            KeyError: If the tier holds no puzzles.
        """
        difficulty = Difficulty.parse(difficulty)
        tier = self._puzzles[difficulty]
        if not tier:
            raise KeyError(f"No {difficulty.value} puzzles in the bank")

        grid = (rng or random).choice(tier)
        return [row[:] for row in grid]

    def __len__(self) -> int:
        return sum(len(tier) for tier in self._puzzles.values())

    def __repr__(self) -> str:
        sizes = ", ".join(f"{d.value}={len(t)}" for d, t in self._puzzles.items())
        return f"PuzzleBank({sizes})"
