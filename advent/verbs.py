"""Global actions available everywhere in the world."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actions import HANDLED, Action, DirectionAction, MovementAction, Outcome
from .direction import Direction
from .errors import QuitGame
from .item import Fixture

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .world import World

NOTHING_HAPPENS = "A gust of wind blows, but nothing happens."


class Take(Action):
    def __init__(self) -> None:
        super().__init__("take", "get", "pick")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        player = world.player
        if not subjects:
            world.say("Take what?")
        elif "all" in subjects:
            self.take_all(world)
        else:
            item = next((found for found in map(player.room.find_item, subjects) if found is not None), None)
            if item is not None:
                item.move_to(player)
            else:
                held = player.find_item(subjects)
                if held is not None:
                    world.say(f"You already have the {held}.")
                else:
                    world.say("There is no such thing here.")
        return HANDLED

    def take_all(self, world: World) -> None:
        player = world.player
        # moving an item changes the room's item list
        candidates = [item for item in player.room.visible_items if not item.is_hidden]
        if not candidates:
            world.say("There is nothing here to take.")
        for item in candidates:
            item.move_to(player)


class Drop(Action):
    def __init__(self) -> None:
        super().__init__("drop")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        player = world.player
        item = player.find_item(subjects)
        if item is None:
            world.say("You don't have that.")
        else:
            item.move_to(player.room)
        return HANDLED


class Inventory(Action):
    def __init__(self) -> None:
        super().__init__("inventory", "i", "inv")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        items = world.player.items
        if not items:
            world.say("You are carrying nothing.")
        else:
            world.say("You are currently holding the following:")
            for item in items:
                world.say(item.inventory_description)
        return HANDLED


class Look(Action):
    def __init__(self) -> None:
        super().__init__("look", "l")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        if subjects:
            world.say("You don't see any such thing.")
        else:
            world.player.room.print_full_description()
        return HANDLED


class Go(MovementAction):
    def __init__(self) -> None:
        super().__init__("go")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        if not subjects:
            world.say("Go where?")
        else:
            self.move_player(world, subjects[0])
        return HANDLED


class Quit(Action):
    def __init__(self) -> None:
        super().__init__("quit", "bye")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        raise QuitGame()


class Summon(Action):
    """Debugging aid: bring any declared item into the player's room."""

    def __init__(self) -> None:
        super().__init__("summon")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        player = world.player
        for name in subjects:
            item = world.find_item(name)
            if item is None:
                continue
            if player.has(item):
                world.say(f"You already own the {item}.")
                return HANDLED
            an_item = str(item) if item.is_plural else f"{item.indefinite_article} {item}"
            if isinstance(item, Fixture):
                world.say(
                    f"For a brief moment, you see a shimmering outline of {an_item}\n"
                    'floating in the air. It disappears with a loud "pop!"'
                )
            else:
                drops = "drop" if item.is_plural else "drops"
                world.say(
                    f"You see a shimmering outline of {an_item} floating in the air.\n"
                    f"It quickly solidifies, and the {item} {drops} to the ground."
                )
                item.primitive_move_to(player.room)
            return HANDLED
        world.say(NOTHING_HAPPENS)
        return HANDLED


class Teleport(Action):
    """Debugging aid: put the player in any declared room."""

    def __init__(self) -> None:
        super().__init__("teleport")

    def act(self, world: World, subjects: list[str]) -> Outcome:
        for name in subjects:
            room = world.find_room(name)
            if room is not None:
                world.say(">>Foof!<<")
                world.player.internal_move_to(room)
                return HANDLED
        world.say(NOTHING_HAPPENS)
        return HANDLED


def global_vocabulary() -> dict[str, Action]:
    """Return the standard global actions keyed by each of their words."""
    vocabulary: dict[str, Action] = {}
    for action in (Drop(), Go(), Inventory(), Look(), Quit(), Summon(), Take(), Teleport()):
        for word in action.words:
            vocabulary.setdefault(word, action)
    for word in Direction.words():
        vocabulary.setdefault(word, DirectionAction(word))
    return vocabulary


__all__ = [
    "Take",
    "Drop",
    "Inventory",
    "Look",
    "Go",
    "Quit",
    "Summon",
    "Teleport",
    "global_vocabulary",
]
