"""Escape room engine - room state, items, recipes and the handler chain.

Key components:
- EscapeApp: Read-dispatch-check loop (app.py)
- HandlerRegistry: Ordered handler chain (registry.py)
- Room / TurnLimitedRoom: Item and recipe state, look/use/combine (room.py)
- Item / TextItem / UselessItem: Usable things (items.py)
- Container / PasswordLockedContainer: Items holding items (containers.py)
- Recipe / CraftingRecipe: Item combination rules (recipes.py)
"""

from escaperoom.engine.app import EscapeApp
from escaperoom.engine.containers import Container, PasswordLockedContainer
from escaperoom.engine.items import Item, TextItem, UselessItem
from escaperoom.engine.recipes import CraftingRecipe, Recipe
from escaperoom.engine.registry import HandlerRegistry
from escaperoom.engine.room import Room, TurnLimitedRoom

__all__ = [
    "EscapeApp",
    "HandlerRegistry",
    "Room",
    "TurnLimitedRoom",
    "Item",
    "TextItem",
    "UselessItem",
    "Container",
    "PasswordLockedContainer",
    "Recipe",
    "CraftingRecipe",
]
