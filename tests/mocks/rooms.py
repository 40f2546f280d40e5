"""
Test rooms, items and recipes.

These are small concrete implementations of the engine's abstract
classes, with hooks that record what the engine did to them.
"""

from __future__ import annotations

from escaperoom.engine.items import Item
from escaperoom.engine.recipes import Recipe
from escaperoom.engine.room import Room, TurnLimitedRoom


class RecordingRoom(TurnLimitedRoom):
    """A turn-limited room that records every on_command_attempted call.

    The player escapes when escape_flag is set.
    """

    def __init__(self, max_turns: int = 5):
        super().__init__("A plain test room.", "Welcome to the test room.", max_turns)
        self.attempts: list[tuple[str, bool]] = []
        self.escape_flag = False

    def on_command_attempted(self, command: str, claimed: bool) -> None:
        self.attempts.append((command, claimed))
        super().on_command_attempted(command, claimed)

    def escaped(self) -> bool:
        return self.escape_flag

    def on_escaped(self) -> None:
        print("You escaped the test room!")

    def on_failed(self) -> None:
        print("You failed the test room.")


class Lever(Item):
    """An item that is also a command handler ("pull <name>")."""

    handles_commands = True

    def __init__(self, name: str = "lever"):
        super().__init__(name, "a rusty lever")
        self.pulls = 0

    def use(self) -> None:
        print(f"The {self.name} creaks.")

    def execute(self, command: str) -> bool:
        if command == f"pull {self.name}":
            self.pulls += 1
            print(f"You pull the {self.name}.")
            return True
        return False

    def print_help(self) -> None:
        print(f"pull {self.name} pulls the {self.name}")


class EscapeLever(Lever):
    """Pulling this lever opens the exit of a RecordingRoom."""

    def execute(self, command: str) -> bool:
        claimed = super().execute(command)
        room = self.room
        if claimed and isinstance(room, RecordingRoom):
            room.escape_flag = True
        return claimed


class Pebble(Item):
    """A plain item with a visible use effect."""

    def __init__(self, name: str, description: str = "a smooth pebble"):
        super().__init__(name, description)
        self.uses = 0

    def use(self) -> None:
        self.uses += 1
        print(f"You turn the {self.name} over in your hand.")


class RecordingRecipe(Recipe):
    """A recipe that only records that it fired."""

    def __init__(self, label: str, *ingredients: str, ordered: bool = False):
        super().__init__(ordered, *ingredients)
        self.label = label
        self.fired_in: list[Room] = []

    def combine_in_room(self, room: Room) -> None:
        self.fired_in.append(room)
        print(f"{self.label} fired")


class FakeEngine:
    """Minimal HandlerHost that logs every call it receives."""

    def __init__(self) -> None:
        self.handlers: list[object] = []
        self.calls: list[tuple[str, object]] = []

    def add_handler(self, handler: object) -> None:
        self.calls.append(("add", handler))
        if not any(h is handler for h in self.handlers):
            self.handlers.append(handler)

    def remove_handler(self, handler: object) -> None:
        self.calls.append(("remove", handler))
        self.handlers = [h for h in self.handlers if h is not handler]
