"""
Ordered handler chain for the escape room engine.

The registry is keyed by object identity, never by equality, so two
distinct items that happen to compare equal are still tracked separately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from escaperoom.engine.protocols import CommandHandler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered, duplicate-free list of active command handlers.

    Consultation order equals registration order. Rooms drive add/remove
    calls synchronously from their own add/remove, so membership always
    mirrors what the player can reach.

    Example:
        >>> registry = HandlerRegistry()
        >>> registry.add_handler(room)
        True
        >>> registry.dispatch("look")
        True
    """

    def __init__(self) -> None:
        self._handlers: list[CommandHandler] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[CommandHandler]:
        return iter(list(self._handlers))

    def __contains__(self, handler: object) -> bool:
        return self._index_of(handler) is not None

    def _index_of(self, handler: object) -> int | None:
        for index, registered in enumerate(self._handlers):
            if registered is handler:
                return index
        return None

    def add_handler(self, handler: CommandHandler) -> bool:
        """Register a handler at the end of the chain.

        Args:
            handler: The handler to register

        Returns:
            True if the handler was added, False if it was already registered
        """
        if handler in self:
            return False
        self._handlers.append(handler)
        logger.debug(f"Registered handler {handler!r} (chain size {len(self)})")
        return True

    def remove_handler(self, handler: CommandHandler) -> bool:
        """Deregister a handler.

        Args:
            handler: The handler to remove

        Returns:
            True if the handler was removed, False if it was not registered
        """
        index = self._index_of(handler)
        if index is None:
            return False
        del self._handlers[index]
        logger.debug(f"Deregistered handler {handler!r} (chain size {len(self)})")
        return True

    def handlers(self) -> list[CommandHandler]:
        """Return a snapshot of the chain in consultation order."""
        return list(self._handlers)

    def dispatch(self, command: str) -> bool:
        """Offer a command to each handler in order until one claims it.

        The chain is snapshotted first: a claiming handler may add or remove
        handlers (e.g. an item spawning another item) without disturbing the
        iteration.

        Args:
            command: The raw player command

        Returns:
            True if some handler claimed the command
        """
        for handler in self.handlers():
            if handler.execute(command):
                logger.debug(f"Command {command!r} claimed by {handler!r}")
                return True
        logger.debug(f"Command {command!r} not claimed by any handler")
        return False
