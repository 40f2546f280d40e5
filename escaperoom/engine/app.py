"""
EscapeApp: the read-dispatch-check loop.

This module implements the main orchestrator for an escape room session,
coordinating the handler chain and the room's turn and win/loss hooks.

Turn pipeline:
    1. Dispatch: offer the command to each handler until one claims it
    2. Account: room.on_command_attempted(command, claimed), exactly once
    3. Check: escaped() first, then failed(); narrate the terminal outcome
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from escaperoom.engine.registry import HandlerRegistry
from escaperoom.models.state import GameStatus, TurnResult

if TYPE_CHECKING:
    from escaperoom.engine.protocols import CommandHandler
    from escaperoom.engine.room import Room

logger = logging.getLogger(__name__)

NOT_UNDERSTOOD = "I don't understand that."
GAME_OVER = "The game has ended. Start a new game to play again."


def _prompt_for_command() -> str:
    return input("> ")


class HelpHandler:
    """Built-in handler for "help": prints every handler's usage text."""

    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, command: str) -> bool:
        if command.strip() != "help":
            return False
        for handler in self._registry.handlers():
            handler.print_help()
        return True

    def print_help(self) -> None:
        print("help lists the commands you can use")


class EscapeApp:
    """Drives one game session in a single room.

    The app owns the handler chain. The built-in help handler is registered
    first; attaching the room then registers the room and its handler items.

    Attributes:
        room: The room being played
        registry: The ordered handler chain
        status: Current session status
        attempts: Number of inputs dispatched so far

    Example:
        >>> app = EscapeApp(create_wizards_lab())
        >>> result = app.play_turn("use scrap_of_paper")
        >>> result.claimed
        True
    """

    def __init__(
        self,
        room: "Room",
        read_command: Callable[[], str] | None = None,
    ):
        """Initialize the app and attach the room.

        Args:
            room: The room to play
            read_command: Returns the next line of player input and raises
                EOFError when input is exhausted (defaults to stdin)
        """
        self.registry = HandlerRegistry()
        self.registry.add_handler(HelpHandler(self.registry))
        self.room = room
        self.status = GameStatus.PLAYING
        self.attempts = 0
        self._read_command = read_command or _prompt_for_command
        room.attach_to_engine(self)

    def add_handler(self, handler: "CommandHandler") -> None:
        self.registry.add_handler(handler)

    def remove_handler(self, handler: "CommandHandler") -> None:
        self.registry.remove_handler(handler)

    def play_turn(self, command: str) -> TurnResult:
        """Process one line of player input.

        Args:
            command: The raw player command

        Returns:
            TurnResult describing what happened
        """
        command = command.strip()

        if self.status.is_over:
            print(GAME_OVER)
            return TurnResult(
                command=command,
                claimed=False,
                attempt=self.attempts,
                status=self.status,
            )

        self.attempts += 1
        claimed = self.registry.dispatch(command)
        if not claimed:
            print(NOT_UNDERSTOOD)

        self.room.on_command_attempted(command, claimed)
        self._check_outcome()

        return TurnResult(
            command=command,
            claimed=claimed,
            attempt=self.attempts,
            status=self.status,
        )

    def _check_outcome(self) -> None:
        if self.room.escaped():
            self.status = GameStatus.ESCAPED
            logger.info(f"Player escaped after {self.attempts} attempts")
            self.room.on_escaped()
        elif self.room.failed():
            self.status = GameStatus.FAILED
            logger.info(f"Player failed after {self.attempts} attempts")
            self.room.on_failed()

    def run_game(self) -> GameStatus:
        """Play until the room is escaped, failed, or input runs out.

        Blank lines are not player input: they are re-prompted without a
        dispatch, so on_command_attempted does not fire for them.

        Returns:
            The final GameStatus
        """
        logger.info(f"Starting game in {type(self.room).__name__}")
        self.room.print_intro()
        print()
        self.room.print_description()

        while not self.status.is_over:
            print()
            self.room.print_room_prompt()
            try:
                command = self._read_command()
            except EOFError:
                logger.info("Input closed, abandoning game")
                self.status = GameStatus.ABANDONED
                break
            if not command.strip():
                continue
            self.play_turn(command)

        logger.info(f"Game finished with status {self.status.value}")
        return self.status
