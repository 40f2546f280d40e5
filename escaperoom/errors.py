"""
Exceptions raised by the escape room engine.

Player mistakes (unknown items, missing arguments) are never exceptions;
they are reported to the player as plain messages. The errors here signal
scenario-authoring bugs or misuse of the engine API.
"""


class EscapeRoomError(Exception):
    """Base class for engine errors."""


class NameConflictError(EscapeRoomError, ValueError):
    """An item with the same name is already held by the target holder."""

    def __init__(self, holder_name: str, item_name: str):
        self.holder_name = holder_name
        self.item_name = item_name
        super().__init__(f"{holder_name} already contains a {item_name}")


class ItemNotPresentError(EscapeRoomError, LookupError):
    """An operation referenced an item the room does not hold."""

    def __init__(self, item_name: str):
        self.item_name = item_name
        super().__init__(f"The room does not contain a {item_name}")
