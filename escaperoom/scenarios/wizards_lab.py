"""
The wizard laboratory.

The player has broken into a magic professor's lab and the door has sealed
behind them. The limerick on the scrap of paper hints at the chest's
password; the chest holds four components that combine into a wand, and the
wand summons the key to the door.

Walkthrough:
    unlock silver_chest hocus pocus
    take all from silver_chest
    combine runed_stick phoenix_feather sapphire unicorn_tears
    use wand_of_key_summoning
"""

from __future__ import annotations

from escaperoom.engine.containers import PasswordLockedContainer
from escaperoom.engine.items import Item, TextItem, UselessItem
from escaperoom.engine.recipes import CraftingRecipe
from escaperoom.engine.room import TurnLimitedRoom

DESCRIPTION = "This is a wizards lab."

INTRO = (
    "Welcome to the Wizard Laboratory!\n"
    "You have just broken into your magic professor's laboratory\n"
    "(without his knowledge!) in the early hours of the morning.\n"
    "Unfortunately, the door magically seals itself behind you\n"
    "and you estimate that you have a couple of hours to explore\n"
    "and escape before he wakes up.  Get what you need and get out!"
)

LIMERICK = (
    "The paper contains the following text:\n"
    "There once was a wizard with focus\n"
    "when facing a swarm of locusts\n"
    "he said in a puff\n"
    "I know just the stuff\n"
    "and he chanted the spell ***** *****."
)

CHEST_PASSWORD = "hocus pocus"
WAND_NAME = "wand_of_key_summoning"
KEY_NAME = "gold_key"
MAX_TURNS = 15


class WandOfKeySummoning(Item):
    """Summons the gold key into whatever room the wand is in."""

    def __init__(self) -> None:
        super().__init__(WAND_NAME, "a magical wand that summons a key")

    def use(self) -> None:
        room = self.room
        if room is None or room.get_item(KEY_NAME) is not None:
            print("The wand fizzles. Nothing happens.")
            return
        print(
            "Gold sparkles burst from the wand! A gold key appears. "
            "This appears to be the key to the door."
        )
        room.add(UselessItem(KEY_NAME, "a key that is gold"))


class WandOfKeySummoningRecipe(CraftingRecipe):
    """runed_stick + phoenix_feather + sapphire + unicorn_tears, any order."""

    def __init__(self) -> None:
        super().__init__(
            WandOfKeySummoning,
            "runed_stick",
            "phoenix_feather",
            "sapphire",
            "unicorn_tears",
            message=f"You created a {WAND_NAME}!",
        )


class WizardsLab(TurnLimitedRoom):
    """Escape by summoning the gold key before the professor wakes up."""

    def __init__(
        self,
        description: str = DESCRIPTION,
        intro: str = INTRO,
        max_turns: int = MAX_TURNS,
    ):
        super().__init__(description, intro, max_turns)
        self.add_recipe(WandOfKeySummoningRecipe())

        chest = PasswordLockedContainer(
            "silver_chest",
            "a silver chest decorated with pictures of locusts.",
            CHEST_PASSWORD,
        )
        chest.add(UselessItem("runed_stick", "a stick decorated with many magical runes"))
        chest.add(UselessItem("phoenix_feather", "a feather that is warm to the touch"))
        chest.add(UselessItem("sapphire", "a deep blue gemstone"))
        chest.add(UselessItem("unicorn_tears", "a tiny vial of shimmering tears"))
        self.add(chest)

        self.add(
            TextItem(
                "scrap_of_paper",
                "a scrap of paper with an unfinished limerick scrawled on it.",
                LIMERICK,
            )
        )

    def escaped(self) -> bool:
        return self.get_item(KEY_NAME) is not None

    def on_escaped(self) -> None:
        print(
            "Using the gold key, you open the magical door and escape to freedom! "
            f"Congratulations, you have escaped in {self.num_turns} turns!"
        )

    def on_failed(self) -> None:
        print("Oh no! Your professor has returned and now you are in big trouble!")
        print("Game Over")


def create_wizards_lab(max_turns: int = MAX_TURNS) -> WizardsLab:
    """Build the wizard laboratory with its default text."""
    return WizardsLab(max_turns=max_turns)
