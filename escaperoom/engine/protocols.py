"""
Protocol definitions for the escape room engine.

This module defines the two seams between the room-state core and the
driving loop:

- CommandHandler: anything that can claim a line of player input
- HandlerHost: anything that keeps an ordered chain of CommandHandlers

Component Flow:
    Player Input -> EscapeApp -> HandlerRegistry.dispatch()
                                        |
                                        v
                      Room / handler items (execute -> claimed?)
                                        |
                                        v
                      Room.on_command_attempted -> escaped()/failed()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandHandler(Protocol):
    """Protocol for objects that can process a line of player input.

    A handler inspects the raw command text. If it recognizes the command
    and fully processes it (including any output and side effects) it
    returns True and no other handler in the chain is consulted. If it does
    not recognize the command it returns False and the chain continues.

    Example implementations:
        - Room: look, use, combine
        - Container: take, put, open
        - PasswordLockedContainer: unlock
    """

    def execute(self, command: str) -> bool:
        """Try to process a command.

        Args:
            command: The raw player command

        Returns:
            True if this handler claimed the command, False otherwise
        """
        ...

    def print_help(self) -> None:
        """Print usage text for the commands this handler understands."""
        ...


@runtime_checkable
class HandlerHost(Protocol):
    """Protocol for the owner of the handler chain.

    Rooms call these synchronously whenever their containment changes, so
    implementations must tolerate redundant calls: adding a handler that is
    already registered, or removing one that is not, is a no-op.
    """

    def add_handler(self, handler: CommandHandler) -> None:
        """Append a handler to the end of the chain."""
        ...

    def remove_handler(self, handler: CommandHandler) -> None:
        """Remove a handler from the chain."""
        ...
