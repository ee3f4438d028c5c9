"""Benchmarking the puzzle generator across difficulty tiers."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Union
import json
import logging
import os

from tqdm import tqdm

from ..generator import SudokuGenerator, Difficulty

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    difficulty: str
    time_seconds: float
    clues: int
    requested: int
    removed: int
    uniqueness_checks: int

    @property
    def shortfall(self) -> int:
        return self.requested - self.removed

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "time_seconds": self.time_seconds,
            "clues": self.clues,
            "requested": self.requested,
            "removed": self.removed,
            "shortfall": self.shortfall,
            "uniqueness_checks": self.uniqueness_checks,
        }


class GenerationBenchmark:
    """
    Measures how long puzzle generation takes per difficulty.

    The uniqueness check after every removal dominates the cost, so the
    number of checks is recorded alongside wall time and final clue count.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Union[Difficulty, str]]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = [Difficulty.parse(d) for d in (difficulties or list(Difficulty))]
        self.seed = seed
        self.results: List[GenerationResult] = []

    def run(self, show_progress: bool = True) -> List[GenerationResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of GenerationResult objects.
        """
        generator = SudokuGenerator(seed=self.seed)
        self.results = []

        total = len(self.difficulties) * self.puzzles_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for difficulty in self.difficulties:
            for puzzle_id in range(self.puzzles_per_difficulty):
                puzzle = generator.generate(difficulty)
                stats = generator.last_stats
                self.results.append(GenerationResult(
                    puzzle_id=puzzle_id,
                    difficulty=difficulty.value,
                    time_seconds=stats.time_seconds,
                    clues=puzzle.count_filled(),
                    requested=stats.requested,
                    removed=stats.removed,
                    uniqueness_checks=stats.uniqueness_checks,
                ))
                pbar.update(1)

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                continue

            times = [r.time_seconds for r in diff_results]
            clues = [r.clues for r in diff_results]
            short = [r for r in diff_results if r.shortfall > 0]

            summary["results_by_difficulty"][difficulty.value] = {
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_clues": sum(clues) / len(clues),
                "min_clues": min(clues),
                "max_clues": max(clues),
                "short_puzzles": len(short),
                "avg_uniqueness_checks": sum(r.uniqueness_checks for r in diff_results) / len(diff_results),
                "tested": len(diff_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info("Results saved to %s", output_dir)
