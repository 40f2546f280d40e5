"""
Room: the item/recipe state of an escape room and its core commands.

The room owns its items and recipes and is itself the first command handler
in the chain. Whenever an item that handles commands enters or leaves the
room, the room registers or deregisters it with its engine in the same call,
so the handler chain never drifts from what the room actually holds.

Commands:
    - look: show the description and item listing
    - use <item>: trigger an item's effect
    - combine <item1> <item2> ...: try the room's recipes
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from escaperoom.engine.holder import ItemHolder
from escaperoom.errors import ItemNotPresentError, NameConflictError

if TYPE_CHECKING:
    from escaperoom.engine.items import Item
    from escaperoom.engine.protocols import HandlerHost
    from escaperoom.engine.recipes import Recipe

logger = logging.getLogger(__name__)


class Room(ItemHolder, ABC):
    """Abstract escape room.

    Scenarios subclass Room and implement the turn accounting and
    win/loss hooks. The engine calls them once per player input:

        execute() chain -> on_command_attempted() -> escaped() / failed()

    Attributes:
        description: Printed at the start of the game and by "look"
        intro: The scenario introduction printed once at the start

    Example:
        >>> lab = WizardsLab(max_turns=15)
        >>> app = EscapeApp(lab)
        >>> lab.engine is app
        True
    """

    def __init__(self, description: str, intro: str):
        super().__init__()
        self.description = description
        self.intro = intro
        self._recipes: list[Recipe] = []
        self._engine: HandlerHost | None = None

    @property
    def holder_label(self) -> str:
        return "This room"

    @property
    def room(self) -> Room:
        return self

    @property
    def engine(self) -> HandlerHost | None:
        """The engine this room is attached to, if any."""
        return self._engine

    # =========================================================================
    # Items and recipes
    # =========================================================================

    def _on_item_added(self, item: Item) -> None:
        if self._engine is not None and item.handles_commands:
            self._engine.add_handler(item)

    def _on_item_removed(self, item: Item) -> None:
        if self._engine is not None and item.handles_commands:
            self._engine.remove_handler(item)

    def _handler_items(self) -> list[Item]:
        return [item for item in self.get_items() if item.handles_commands]

    def add_recipe(self, recipe: Recipe) -> None:
        """Register a recipe. Recipes are tried in registration order."""
        self._recipes.append(recipe)

    def get_recipes(self) -> list[Recipe]:
        """Return a snapshot of the registered recipes."""
        return list(self._recipes)

    def transform(self, consumed: Sequence[Item], produced: Sequence[Item]) -> None:
        """Swap a set of items for another in one step.

        Every check runs before anything is mutated, so either the whole
        swap happens or the room is left untouched. Consumed items are
        removed before produced items are added, which lets a product
        reuse the name of one of its inputs.

        Args:
            consumed: Items currently in this room that are used up
            produced: New items to add

        Raises:
            ItemNotPresentError: If a consumed item is not in this room
            NameConflictError: If a produced item's name is still taken
        """
        for item in consumed:
            if item not in self:
                raise ItemNotPresentError(item.name)

        freed = {item.name for item in consumed}
        claimed: set[str] = set()
        for item in produced:
            taken = self.get_item(item.name) is not None and item.name not in freed
            if taken or item.name in claimed:
                raise NameConflictError(self.holder_label, item.name)
            claimed.add(item.name)

        for item in consumed:
            self.remove(item)
        for item in produced:
            self.add(item)

    # =========================================================================
    # Engine attachment
    # =========================================================================

    def attach_to_engine(self, engine: HandlerHost) -> None:
        """Re-parent this room to an engine.

        Deregisters the room and its handler items from the previous engine,
        then registers them with the new one, room first and items in room
        order. Attaching to the same engine again is harmless because the
        registry ignores duplicates.

        Args:
            engine: The engine that will dispatch commands to this room
        """
        self.detach_from_engine()
        self._engine = engine
        engine.add_handler(self)
        for item in self._handler_items():
            engine.add_handler(item)
        logger.debug(f"{type(self).__name__} attached to {engine!r}")

    def detach_from_engine(self) -> None:
        """Deregister this room and its handler items from its engine."""
        if self._engine is None:
            return
        old = self._engine
        old.remove_handler(self)
        for item in self._handler_items():
            old.remove_handler(item)
        self._engine = None

    # =========================================================================
    # Display
    # =========================================================================

    def print_intro(self) -> None:
        print(self.intro)

    def print_description(self) -> None:
        """Print the room description followed by the item listing."""
        print(self.description)
        self.list_items()

    def list_items(self) -> None:
        print("\nYou can see:")
        items = self.get_items()
        if not items:
            print("  nothing of interest")
        for item in items:
            print(f"  {item}")

    # =========================================================================
    # Combining
    # =========================================================================

    def combine(self, items: Sequence[Item]) -> bool:
        """Apply the first registered recipe that matches the items.

        Args:
            items: The items the player wants to combine

        Returns:
            True if a recipe was applied, False if none matched
        """
        for recipe in self._recipes:
            if recipe.matches(items):
                logger.info(f"Applying {recipe!r}")
                recipe.combine_in_room(self)
                return True
        logger.debug(f"No recipe matches {[item.name for item in items]}")
        self.on_combine_failed(items)
        return False

    def on_combine_failed(self, items: Sequence[Item]) -> None:
        """Called when no recipe matches. Override for custom feedback."""
        print("Nothing happens.")

    # =========================================================================
    # CommandHandler
    # =========================================================================

    def execute(self, command: str) -> bool:
        parts = command.split(None, 1)
        if not parts:
            return False
        verb = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""

        if verb == "look" and not rest:
            self.print_description()
            return True
        if verb == "use":
            self._handle_use(rest)
            return True
        if verb == "combine":
            self._handle_combine(rest.split())
            return True
        return False

    def print_help(self) -> None:
        print("look prints the room description")
        print("use <item> uses an item")
        print("combine <item1> <item2> ... attempts to combine a list of items")

    def _handle_use(self, item_name: str) -> None:
        if not item_name:
            print("Use what?")
            return
        item = self.get_item(item_name)
        if item is None:
            print(f"There is no {item_name} here.")
            return
        item.use()

    def _handle_combine(self, names: list[str]) -> None:
        items = []
        for name in names:
            item = self.get_item(name)
            if item is None:
                print(f"There is no {name} here.")
                return
            if any(chosen is item for chosen in items):
                print(f"You can't combine the {name} with itself.")
                return
            items.append(item)

        if not items:
            print("Combine what?")
        elif len(items) == 1:
            print(f"Combine {items[0].name} with what?")
        else:
            names_text = ", ".join(item.name for item in items)
            print(f"You attempt to combine the following items: {names_text}")
            self.combine(items)

    # =========================================================================
    # Scenario hooks
    # =========================================================================

    @abstractmethod
    def print_room_prompt(self) -> None:
        """Print the status line shown before each command."""

    @abstractmethod
    def on_command_attempted(self, command: str, claimed: bool) -> None:
        """Called once after every dispatched command."""

    @abstractmethod
    def escaped(self) -> bool:
        """Whether the player has won."""

    @abstractmethod
    def failed(self) -> bool:
        """Whether the player has lost."""

    @abstractmethod
    def on_escaped(self) -> None:
        """Print the victory narration."""

    @abstractmethod
    def on_failed(self) -> None:
        """Print the defeat narration."""


class TurnLimitedRoom(Room):
    """A room the player must escape within a fixed number of turns.

    Only claimed commands count as turns; input nobody understood is free.

    Attributes:
        max_turns: Turns available before failed() becomes true
        num_turns: Turns taken so far
    """

    def __init__(self, description: str, intro: str, max_turns: int):
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {max_turns}")
        super().__init__(description, intro)
        self.max_turns = max_turns
        self.num_turns = 0

    @property
    def turns_left(self) -> int:
        return max(self.max_turns - self.num_turns, 0)

    def print_room_prompt(self) -> None:
        print(
            f"You have taken {self.num_turns} turns. "
            f"You have {self.turns_left} turns left to escape."
        )

    def on_command_attempted(self, command: str, claimed: bool) -> None:
        if claimed:
            self.num_turns += 1

    def failed(self) -> bool:
        return self.num_turns >= self.max_turns
