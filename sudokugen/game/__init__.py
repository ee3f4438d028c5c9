"""Game session state consumed by a user interface."""

from .session import GameSession, HistoryEntry

__all__ = ["GameSession", "HistoryEntry"]
