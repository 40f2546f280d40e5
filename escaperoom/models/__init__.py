"""Escape room engine models."""

from escaperoom.models.state import GameStatus, TurnResult

__all__ = [
    "GameStatus",
    "TurnResult",
]
