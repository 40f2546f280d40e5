"""
Game session state models.

Example:
    >>> result = app.play_turn("look")
    >>> result.claimed
    True
    >>> result.status
    <GameStatus.PLAYING: 'playing'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GameStatus(str, Enum):
    """Lifecycle of a game session.

    PLAYING is the only non-terminal status.
    """

    PLAYING = "playing"
    ESCAPED = "escaped"
    FAILED = "failed"
    ABANDONED = "abandoned"  # Input ran out before the game ended

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.PLAYING


class TurnResult(BaseModel):
    """Outcome of dispatching one line of player input.

    Attributes:
        command: The command as dispatched (whitespace stripped)
        claimed: Whether some handler in the chain processed it
        attempt: 1-based count of inputs dispatched this session
        status: The session status after win/loss checks
    """

    command: str
    claimed: bool
    attempt: int = Field(ge=0)
    status: GameStatus = GameStatus.PLAYING

    @property
    def game_over(self) -> bool:
        return self.status.is_over
