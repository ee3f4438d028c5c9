"""Benchmark module for measuring puzzle generation."""

from .benchmark import GenerationBenchmark, GenerationResult

__all__ = ["GenerationBenchmark", "GenerationResult"]
