"""
Shared item ownership for rooms and containers.

An ItemHolder owns an insertion-ordered, name-unique collection of items.
Ownership is exclusive: adding an item that is held elsewhere moves it,
and the item's back-reference always names its current holder.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from escaperoom.errors import NameConflictError

if TYPE_CHECKING:
    from escaperoom.engine.items import Item
    from escaperoom.engine.room import Room

logger = logging.getLogger(__name__)


class ItemHolder(ABC):
    """Base class for anything that can hold items.

    Subclasses hook into containment changes through _on_item_added and
    _on_item_removed; Room uses them to keep the handler chain in sync.

    Attributes:
        holder: The holder this holder itself sits in (None for rooms)
    """

    holder: ItemHolder | None = None

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def __contains__(self, item: object) -> bool:
        name = getattr(item, "name", None)
        return name is not None and self._items.get(name) is item

    def __len__(self) -> int:
        return len(self._items)

    # An empty container is still a real object.
    def __bool__(self) -> bool:
        return True

    @property
    def holder_label(self) -> str:
        """How this holder is referred to in error messages."""
        return type(self).__name__

    @property
    @abstractmethod
    def room(self) -> Room | None:
        """The room this holder ultimately belongs to, if any."""

    def add(self, item: Item) -> None:
        """Take ownership of an item.

        The name check happens before anything is touched, so a conflict
        leaves both this holder and the item's previous holder unchanged.

        Args:
            item: The item to add

        Raises:
            NameConflictError: If an item with the same name is already held
            ValueError: If the item would end up inside itself
        """
        if item.name in self._items:
            raise NameConflictError(self.holder_label, item.name)
        if self._is_within(item):
            raise ValueError(f"{item.name} cannot be placed inside itself")

        previous = item.holder
        if previous is not None:
            previous.remove(item)

        self._items[item.name] = item
        item._holder = self
        logger.debug(f"{self.holder_label} now holds {item.name}")
        self._on_item_added(item)

    def remove(self, item: Item) -> bool:
        """Give up ownership of an item.

        Args:
            item: The item to remove

        Returns:
            True if the item was removed, False if it was not held here
        """
        if self._items.get(item.name) is not item:
            return False
        del self._items[item.name]
        self._on_item_removed(item)
        item._holder = None
        logger.debug(f"{self.holder_label} released {item.name}")
        return True

    def get_item(self, name: str) -> Item | None:
        """Look up an item by exact name.

        Returns:
            The item, or None if nothing by that name is held here
        """
        return self._items.get(name)

    def get_items(self) -> list[Item]:
        """Return a snapshot of the held items in insertion order.

        Mutating the returned list never affects this holder.
        """
        return list(self._items.values())

    def _is_within(self, item: Item) -> bool:
        node: ItemHolder | None = self
        while node is not None:
            if node is item:
                return True
            node = node.holder
        return False

    def _on_item_added(self, item: Item) -> None:
        pass

    def _on_item_removed(self, item: Item) -> None:
        pass
