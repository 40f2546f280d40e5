"""Unit tests for Recipe matching and CraftingRecipe.

Tests cover:
- Unordered matching is permutation-independent and multiset-exact
- Ordered matching requires the exact sequence
- CraftingRecipe consumes inputs and produces an item in one step
"""

from itertools import permutations

import pytest

from escaperoom.engine.items import UselessItem
from escaperoom.engine.recipes import CraftingRecipe
from escaperoom.errors import ItemNotPresentError
from tests.mocks.rooms import Lever, RecordingRecipe


def items(*names: str) -> list[UselessItem]:
    return [UselessItem(name, f"a {name}") for name in names]


class TestUnorderedMatching:
    """Tests for unordered recipes."""

    @pytest.fixture
    def recipe(self) -> RecordingRecipe:
        return RecordingRecipe("torch", "stick", "cloth", "oil")

    def test_every_permutation_matches(self, recipe) -> None:
        """Any order of the same ingredients matches."""
        for names in permutations(["stick", "cloth", "oil"]):
            assert recipe.matches(items(*names)) is True

    def test_missing_ingredient(self, recipe) -> None:
        """A subset of the ingredients does not match."""
        assert recipe.matches(items("stick", "cloth")) is False

    def test_extra_ingredient(self, recipe) -> None:
        """A superset of the ingredients does not match."""
        assert recipe.matches(items("stick", "cloth", "oil", "rope")) is False

    def test_duplicates_are_counted(self) -> None:
        """A recipe needing two of something needs exactly two."""
        recipe = RecordingRecipe("pair", "sock", "sock")

        assert recipe.matches(items("sock", "sock")) is True
        assert recipe.matches(items("sock")) is False
        assert recipe.matches(items("sock", "sock", "sock")) is False

    def test_wrong_names(self, recipe) -> None:
        """Same count, different names does not match."""
        assert recipe.matches(items("stick", "cloth", "water")) is False


class TestOrderedMatching:
    """Tests for ordered recipes."""

    @pytest.fixture
    def recipe(self) -> RecordingRecipe:
        return RecordingRecipe("spell", "eye", "of", "newt", ordered=True)

    def test_exact_sequence_matches(self, recipe) -> None:
        assert recipe.matches(items("eye", "of", "newt")) is True

    def test_reordered_sequence_fails(self, recipe) -> None:
        """Ordered recipes reject any other order."""
        assert recipe.matches(items("newt", "of", "eye")) is False

    def test_flags_exposed(self, recipe) -> None:
        assert recipe.ordered is True
        assert recipe.ingredients == ("eye", "of", "newt")


class TestRecipeConstruction:
    """Tests for recipe construction."""

    def test_needs_ingredients(self) -> None:
        """A recipe with no ingredients is a content bug."""
        with pytest.raises(ValueError):
            RecordingRecipe("nothing")


class TestCraftingRecipe:
    """Tests for CraftingRecipe.combine_in_room()."""

    @pytest.fixture
    def recipe(self) -> CraftingRecipe:
        return CraftingRecipe(
            lambda: UselessItem("torch", "a burning torch"),
            "stick",
            "cloth",
            message="You made a torch!",
        )

    def test_duplicate_ingredients_rejected(self) -> None:
        """A room holds one item per name, so crafting inputs must differ."""
        with pytest.raises(ValueError):
            CraftingRecipe(lambda: UselessItem("pile", "a pile"), "coin", "coin")

    def test_consumes_and_produces(self, room, recipe, capsys) -> None:
        """Inputs leave the room and the product arrives."""
        for item in items("stick", "cloth", "rock"):
            room.add(item)

        recipe.combine_in_room(room)

        names = [item.name for item in room.get_items()]
        assert names == ["rock", "torch"]
        assert room.get_item("torch").room is room
        assert "You made a torch!" in capsys.readouterr().out

    def test_default_message(self, room, capsys) -> None:
        """Without a message the product is announced by name."""
        recipe = CraftingRecipe(lambda: UselessItem("torch", "a torch"), "stick", "cloth")
        for item in items("stick", "cloth"):
            room.add(item)

        recipe.combine_in_room(room)

        assert "You created a torch!" in capsys.readouterr().out

    def test_consumed_items_lose_back_reference(self, room, recipe) -> None:
        """Consumed items no longer point at the room."""
        stick, cloth = items("stick", "cloth")
        room.add(stick)
        room.add(cloth)

        recipe.combine_in_room(room)

        assert stick.holder is None
        assert cloth.holder is None

    def test_missing_ingredient_changes_nothing(self, room, recipe) -> None:
        """Applying without all inputs raises before mutating the room."""
        (stick,) = items("stick")
        room.add(stick)

        with pytest.raises(ItemNotPresentError):
            recipe.combine_in_room(room)

        assert room.get_items() == [stick]

    def test_product_handler_registered(self, app, room) -> None:
        """A handler-capable product joins the chain immediately."""
        recipe = CraftingRecipe(lambda: Lever("crank"), "gear", "handle")
        for item in items("gear", "handle"):
            room.add(item)

        recipe.combine_in_room(room)

        crank = room.get_item("crank")
        assert crank in app.registry
        assert app.play_turn("pull crank").claimed is True
