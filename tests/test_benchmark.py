"""Unit tests for the generation benchmark."""

import json
import os

import pytest
from sudokugen.benchmark import GenerationBenchmark
from sudokugen.benchmark.visualizer import Visualizer


@pytest.fixture(scope="module")
def benchmark():
    bench = GenerationBenchmark(puzzles_per_difficulty=2, difficulties=["easy"], seed=1)
    bench.run(show_progress=False)
    return bench


class TestGenerationBenchmark:

    def test_results(self, benchmark):
        assert len(benchmark.results) == 2
        for result in benchmark.results:
            assert result.difficulty == "easy"
            assert result.requested == 40
            assert result.clues == 81 - result.removed
            assert result.time_seconds > 0
            assert result.to_dict()["shortfall"] == result.shortfall

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()
        easy = summary["results_by_difficulty"]["easy"]

        assert summary["total_puzzles"] == 2
        assert summary["difficulties"] == ["easy"]
        assert easy["tested"] == 2
        assert easy["min_clues"] >= 41
        assert easy["min_time_seconds"] <= easy["avg_time_seconds"] <= easy["max_time_seconds"]

    def test_save_results(self, benchmark, tmp_path):
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "generation_results.json") as f:
            results = json.load(f)
        assert len(results) == 2
        assert (tmp_path / "generation_summary.json").exists()


class TestVisualizer:

    def test_generate_all(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()

        assert len(charts) == 3
        for chart in charts:
            assert os.path.exists(chart)

    def test_summary_table(self, benchmark, tmp_path):
        path = Visualizer(benchmark.results, str(tmp_path)).generate_summary_table()
        with open(path) as f:
            content = f.read()
        assert "| Easy | 2 |" in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
