"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationResult


class Visualizer:
    """
    Chart generator for puzzle generation benchmark results.
    """

    # Color palette for difficulty tiers
    COLORS = {
        "easy": "#2ecc71",      # Green
        "medium": "#f39c12",    # Orange
        "hard": "#e74c3c",      # Red
    }

    DIFFICULTY_ORDER = ["easy", "medium", "hard"]

    def __init__(self, results: List[GenerationResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of generation results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def _difficulties(self) -> List[str]:
        present = set(r.difficulty for r in self.results)
        return [d for d in self.DIFFICULTY_ORDER if d in present]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_difficulty(),
            self.plot_clue_distribution(),
            self.plot_uniqueness_checks(),
        ]

    def plot_time_by_difficulty(self) -> str:
        """Create bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == d])
            for d in difficulties
        ]
        colors = [self.COLORS.get(d, "#95a5a6") for d in difficulties]

        bars = ax.bar([d.capitalize() for d in difficulties], avg_times,
                      color=colors, edgecolor='black', linewidth=0.5)

        for bar, t in zip(bars, avg_times):
            ax.annotate(f'{t:.3f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_difficulty.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_clue_distribution(self) -> str:
        """Create strip plot of final clue counts per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        sns.stripplot(
            x=[r.difficulty for r in self.results],
            y=[r.clues for r in self.results],
            hue=[r.difficulty for r in self.results],
            order=difficulties,
            palette=self.COLORS,
            legend=False,
            jitter=0.2,
            ax=ax,
        )

        # Nominal clue count for each tier
        for i, d in enumerate(difficulties):
            nominal = 81 - next(r.requested for r in self.results if r.difficulty == d)
            ax.hlines(nominal, i - 0.4, i + 0.4, colors='gray', linestyles='--', alpha=0.6)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Clues', fontsize=12)
        ax.set_title('Clue Count per Generated Puzzle', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "clue_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_uniqueness_checks(self) -> str:
        """Create box plot of uniqueness checks per puzzle."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        data = [
            [r.uniqueness_checks for r in self.results if r.difficulty == d]
            for d in difficulties
        ]

        bp = ax.boxplot(data, patch_artist=True)
        ax.set_xticks(range(1, len(difficulties) + 1))
        ax.set_xticklabels([d.capitalize() for d in difficulties])

        for patch, d in zip(bp['boxes'], difficulties):
            patch.set_facecolor(self.COLORS.get(d, "#95a5a6"))
            patch.set_alpha(0.7)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Uniqueness Checks', fontsize=12)
        ax.set_title('Uniqueness Checks per Puzzle', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "uniqueness_checks.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Benchmark Summary\n",
            "| Difficulty | Puzzles | Avg Time | Avg Clues | Short Puzzles | Avg Checks |",
            "|------------|---------|----------|-----------|---------------|------------|"
        ]

        for d in self._difficulties():
            diff_results = [r for r in self.results if r.difficulty == d]

            avg_time = np.mean([r.time_seconds for r in diff_results])
            avg_clues = np.mean([r.clues for r in diff_results])
            short = sum(1 for r in diff_results if r.shortfall > 0)
            avg_checks = np.mean([r.uniqueness_checks for r in diff_results])

            lines.append(
                f"| {d.capitalize()} | {len(diff_results)} | {avg_time:.4f}s | "
                f"{avg_clues:.1f} | {short} | {avg_checks:.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "generation_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
