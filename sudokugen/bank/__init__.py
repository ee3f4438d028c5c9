"""Puzzle bank for serving pregenerated puzzles."""

from .bank import PuzzleBank

__all__ = ["PuzzleBank"]
