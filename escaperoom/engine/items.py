"""
Item model for the escape room engine.

Items are named, described things the player can use. An item's name is a
single word because the combine command splits item names on whitespace.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from escaperoom.engine.holder import ItemHolder
    from escaperoom.engine.room import Room


class Item(ABC):
    """Base class for everything that can sit in a room or container.

    Attributes:
        handles_commands: True if instances also implement CommandHandler.
            Rooms register such items in the handler chain while they hold
            them. This is declared, never inferred.
        description: Short description shown in room listings

    Example:
        >>> item = TextItem("note", "a folded note", "Meet me at dawn.")
        >>> room.add(item)
        >>> item.room is room
        True
    """

    handles_commands: ClassVar[bool] = False

    def __init__(self, name: str, description: str):
        if not name or any(ch.isspace() for ch in name):
            raise ValueError(f"Item name must be a single non-empty word, got {name!r}")
        self._name = name
        self.description = description
        self._holder: ItemHolder | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def holder(self) -> ItemHolder | None:
        """The room or container currently holding this item.

        This is a non-owning back-reference maintained by the holder.
        """
        return self._holder

    @property
    def room(self) -> Room | None:
        """The room this item is in, looking through any containers."""
        if self._holder is None:
            return None
        return self._holder.room

    @abstractmethod
    def use(self) -> None:
        """Trigger the item's effect."""

    def __str__(self) -> str:
        return f"{self.name} - {self.description}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class TextItem(Item):
    """An item that prints a fixed text when used (notes, signs, books)."""

    def __init__(self, name: str, description: str, text: str):
        super().__init__(name, description)
        self.text = text

    def use(self) -> None:
        print(self.text)


class UselessItem(Item):
    """An item with no effect of its own; typically a recipe ingredient."""

    def use(self) -> None:
        print(f"You can't figure out how to use the {self.name} on its own.")
