"""Actions: the units of behavior selected and run by the parser."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Union

from .direction import Direction
from .errors import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .item import Item
    from .player import Player
    from .room import Room
    from .world import World


class Outcome(Enum):
    """Result of running an action."""

    HANDLED = "handled"
    PASS = "pass"


HANDLED = Outcome.HANDLED
PASS = Outcome.PASS

Effect = Callable[["LocalAction"], Union[Outcome, None]]


class Action:
    """A handler of user input identified by one or more words.

    An action can be global, attached to a room, or attached to an item. Its
    :meth:`act` returns :data:`PASS` to hand the input over to the next, less
    specific applicable action, or :data:`HANDLED` to stop the search.
    """

    def __init__(self, *words: str) -> None:
        if not words:
            raise ConfigurationError(f"{type(self).__name__} needs at least one word")
        self.words: tuple[str, ...] = tuple(words)

    def act(self, world: World, subjects: list[str]) -> Outcome:  # pragma: no cover - interface
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}{list(self.words)}"


class LocalAction(Action):
    """An action whose behavior is an effect callable, attached to a room or an item.

    The effect receives the action itself, which exposes the current
    ``subjects``, the ``world`` and a few shortcuts. An effect returns
    :data:`PASS` to defer to the next applicable action; any other return
    value counts as handled.
    """

    def __init__(self, words: Iterable[str], effect: Effect) -> None:
        super().__init__(*words)
        self._effect = effect
        self.subjects: list[str] = []
        self.world: World | None = None

    @property
    def player(self) -> Player:
        assert self.world is not None
        return self.world.player

    @property
    def room(self) -> Room:
        return self.player.room

    def say(self, message: str) -> None:
        assert self.world is not None
        self.world.say(message)

    def referring_to(self, item: Item) -> bool:
        """Whether any of the current subject words is a name of ``item``."""
        return any(word in item.names for word in self.subjects)

    def guarded_by(self, guard: Callable[[], bool], message: str) -> LocalAction:
        """Only run the effect while ``guard()`` is true, otherwise print ``message``.

        Guards can be chained; the one added last is checked first. A failing
        guard consumes the input: the parser does not try other actions.
        """

        original = self._effect

        def guarded(action: LocalAction) -> Outcome | None:
            if guard():
                return original(action)
            action.say(message)
            return HANDLED

        self._effect = guarded
        return self

    def act(self, world: World, subjects: list[str]) -> Outcome:
        self.world = world
        self.subjects = list(subjects)
        result = self._effect(self)
        return PASS if result is PASS else HANDLED


class ItemAction(LocalAction):
    """An action attached to an item, held or vicinity.

    It passes without running its effect (guards included) unless one of the
    subject words names the item.
    """

    def __init__(self, item: Item, words: Iterable[str], effect: Effect) -> None:
        super().__init__(words, effect)
        self.item = item

    def act(self, world: World, subjects: list[str]) -> Outcome:
        if not any(word in self.item.names for word in subjects):
            return PASS
        return super().act(world, subjects)


class MovementAction(Action):
    """An action that moves the player through an exit of the current room."""

    def move_player(self, world: World, where: str) -> None:
        room = world.player.room
        direction = Direction.named(where)
        if direction is not None:
            destination = room.exit_to(direction)
            if destination is None:
                world.say(f"You can't go {direction}.")
                return
        else:
            destination = room.exit_to(where)
            if destination is None:
                world.say(f"You can't go to '{where}'.")
                return
        world.player.move_to(destination)


class DirectionAction(MovementAction):
    """A direction used as a command by itself, such as "north" or "downstream"."""

    def act(self, world: World, subjects: list[str]) -> Outcome:
        self.move_player(world, self.words[0])
        return HANDLED


__all__ = [
    "Outcome",
    "HANDLED",
    "PASS",
    "Effect",
    "Action",
    "LocalAction",
    "ItemAction",
    "MovementAction",
    "DirectionAction",
]
