"""
Containers: items that hold other items.

A container is both an Item (it sits in a room and can be used) and an
ItemHolder (it owns items of its own). Items inside a container are not
part of the handler chain and cannot be used or combined until the player
takes them out into the room.

Commands understood by every container:
    - open <container>
    - take <item> from <container>
    - take all from <container>
    - put <item> in <container>

PasswordLockedContainer adds:
    - unlock <container> <password>
"""

from __future__ import annotations

import logging
from typing import ClassVar

from escaperoom.engine.holder import ItemHolder
from escaperoom.engine.items import Item

logger = logging.getLogger(__name__)


class Container(Item, ItemHolder):
    """An item that holds other items and handles its own commands.

    Example:
        >>> chest = Container("chest", "an oak chest")
        >>> chest.add(UselessItem("coin", "a copper coin"))
        >>> room.add(chest)
        >>> app.play_turn("take coin from chest").claimed
        True
    """

    handles_commands: ClassVar[bool] = True

    def __init__(self, name: str, description: str):
        Item.__init__(self, name, description)
        ItemHolder.__init__(self)

    @property
    def holder_label(self) -> str:
        return self.name

    @property
    def is_locked(self) -> bool:
        """Whether access to the contents is currently blocked."""
        return False

    def use(self) -> None:
        if self.is_locked:
            self._print_locked()
            return
        items = self.get_items()
        if not items:
            print(f"The {self.name} is empty.")
            return
        print(f"The {self.name} contains:")
        for item in items:
            print(f"  {item}")

    def execute(self, command: str) -> bool:
        words = command.split()
        if words == ["open", self.name]:
            self.use()
            return True
        if len(words) == 4 and words[3] == self.name:
            verb, item_name, preposition = words[0], words[1], words[2]
            if verb == "take" and preposition == "from":
                if item_name == "all":
                    self._take_all()
                else:
                    self._take(item_name)
                return True
            if verb == "put" and preposition == "in":
                self._put(item_name)
                return True
        return False

    def print_help(self) -> None:
        print(f"open {self.name} shows what the {self.name} holds")
        print(f"take <item> from {self.name} takes an item out of the {self.name}")
        print(f"take all from {self.name} takes everything out of the {self.name}")
        print(f"put <item> in {self.name} puts an item into the {self.name}")

    def _print_locked(self) -> None:
        print(f"The {self.name} is locked.")

    def _take(self, item_name: str) -> None:
        if self.is_locked:
            self._print_locked()
            return
        room = self.room
        item = self.get_item(item_name)
        if item is None:
            print(f"There is no {item_name} in the {self.name}.")
        elif room is None:
            print(f"There is nowhere to put the {item_name}.")
        elif room.get_item(item_name) is not None:
            print(f"There is already a {item_name} here.")
        else:
            room.add(item)
            logger.info(f"Moved {item_name} from {self.name} into the room")
            print(f"You take the {item_name} from the {self.name}.")

    def _take_all(self) -> None:
        if self.is_locked:
            self._print_locked()
            return
        items = self.get_items()
        if not items:
            print(f"The {self.name} is empty.")
            return
        for item in items:
            self._take(item.name)

    def _put(self, item_name: str) -> None:
        if self.is_locked:
            self._print_locked()
            return
        room = self.room
        item = room.get_item(item_name) if room is not None else None
        if item is None:
            print(f"There is no {item_name} here.")
        elif item is self:
            print(f"You can't put the {self.name} inside itself.")
        elif self.get_item(item_name) is not None:
            print(f"The {self.name} already holds a {item_name}.")
        else:
            self.add(item)
            logger.info(f"Moved {item_name} from the room into {self.name}")
            print(f"You put the {item_name} in the {self.name}.")


class PasswordLockedContainer(Container):
    """A container that stays locked until the player says the password.

    The password is given on the same line as the command, so unlocking
    never blocks for a second line of input mid-turn.

    Example:
        >>> chest = PasswordLockedContainer("chest", "an oak chest", "open sesame")
        >>> chest.execute("unlock chest open sesame")
        The chest unlocks with a soft click.
        True
    """

    def __init__(self, name: str, description: str, password: str):
        super().__init__(name, description)
        self._password = " ".join(password.split())
        self._locked = True

    @property
    def is_locked(self) -> bool:
        return self._locked

    def unlock(self, password: str) -> bool:
        """Attempt to unlock with a password.

        Whitespace between words is normalized before comparing.

        Returns:
            True if the container is unlocked afterwards
        """
        if " ".join(password.split()) == self._password:
            self._locked = False
        return not self._locked

    def execute(self, command: str) -> bool:
        words = command.split()
        if len(words) >= 2 and words[0] == "unlock" and words[1] == self.name:
            self._handle_unlock(" ".join(words[2:]))
            return True
        return super().execute(command)

    def print_help(self) -> None:
        print(f"unlock {self.name} <password> unlocks the {self.name}")
        super().print_help()

    def _handle_unlock(self, password: str) -> None:
        if not self._locked:
            print(f"The {self.name} is already unlocked.")
        elif not password:
            print(f"Unlock {self.name} with what password?")
        elif self.unlock(password):
            logger.info(f"{self.name} unlocked")
            print(f"The {self.name} unlocks with a soft click.")
        else:
            print("Nothing happens. That must not be the password.")
