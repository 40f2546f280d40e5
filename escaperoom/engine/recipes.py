"""
Recipes: rules for combining items.

A recipe is an immutable matcher over item names plus a combination effect.
Unordered recipes compare the multiset of names (duplicates counted), so any
permutation of the same ingredients matches. Ordered recipes compare the
exact sequence.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter
from typing import TYPE_CHECKING, Callable, Sequence

from escaperoom.errors import ItemNotPresentError

if TYPE_CHECKING:
    from escaperoom.engine.items import Item
    from escaperoom.engine.room import Room

logger = logging.getLogger(__name__)


class Recipe(ABC):
    """Base class for item combination rules.

    Attributes:
        ordered: Whether the ingredients must be supplied in sequence
        ingredients: The required item names

    Example:
        >>> recipe = SomeRecipe(False, "flint", "steel")
        >>> recipe.matches([steel, flint])
        True
    """

    def __init__(self, ordered: bool, *ingredients: str):
        if not ingredients:
            raise ValueError("A recipe needs at least one ingredient")
        self._ordered = ordered
        self._ingredients = tuple(ingredients)
        self._counts = Counter(ingredients)

    @property
    def ordered(self) -> bool:
        return self._ordered

    @property
    def ingredients(self) -> tuple[str, ...]:
        return self._ingredients

    def matches(self, items: Sequence[Item]) -> bool:
        """Check whether the supplied items are exactly this recipe's ingredients.

        Args:
            items: The candidate items, in the order the player named them

        Returns:
            True if the names match (as a sequence when ordered, as a
            multiset otherwise) with nothing missing and nothing extra
        """
        names = [item.name for item in items]
        if self._ordered:
            return tuple(names) == self._ingredients
        return Counter(names) == self._counts

    @abstractmethod
    def combine_in_room(self, room: Room) -> None:
        """Apply the combination effect to the room."""

    def __repr__(self) -> str:
        kind = "ordered" if self._ordered else "unordered"
        return f"{type(self).__name__}({kind}, {', '.join(self._ingredients)})"


class CraftingRecipe(Recipe):
    """A recipe that consumes its ingredients and produces a new item.

    The swap goes through Room.transform, so the room is never observed
    holding both the inputs and the product, or neither.

    Args:
        product_factory: Builds a fresh product item each time the recipe fires
        ingredients: The required item names, each distinct since a room
            holds at most one item per name
        ordered: Whether the ingredients must be supplied in sequence
        message: Printed when the combination succeeds
    """

    def __init__(
        self,
        product_factory: Callable[[], Item],
        *ingredients: str,
        ordered: bool = False,
        message: str | None = None,
    ):
        if len(set(ingredients)) != len(ingredients):
            raise ValueError(
                f"Crafting ingredients must be distinct items, got {', '.join(ingredients)}"
            )
        super().__init__(ordered, *ingredients)
        self._product_factory = product_factory
        self._message = message

    def combine_in_room(self, room: Room) -> None:
        product = self._product_factory()
        consumed = []
        for name in self.ingredients:
            item = room.get_item(name)
            if item is None:
                raise ItemNotPresentError(name)
            consumed.append(item)
        room.transform(consumed, [product])
        logger.info(f"Crafted {product.name} from {', '.join(self.ingredients)}")
        print(self._message or f"You created a {product.name}!")
