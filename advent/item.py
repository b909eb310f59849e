"""Items: things that can be carried, or refuse to be."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Union

from .actions import Action, Effect, ItemAction
from .errors import ConfigurationError
from .owner import LIMBO, ItemOwner
from .text import indefinite_article

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .world import ConfigurationContext, World

Text = Union[str, Callable[[], str]]
ItemConfigurator = Callable[["Item"], None]
MoveApprover = Callable[[ItemOwner], bool]
MoveReactor = Callable[[ItemOwner, ItemOwner], None]

LOOK_WORDS = ("look", "l", "examine", "x")


def _render(text: Text) -> str:
    return text() if callable(text) else text


class Item:
    """An item (or a character) in the game world.

    An item can be picked up and carried by the player unless the game logic
    prohibits it, either through a move approver (:meth:`allow_move`) or by
    being a :class:`Fixture`. A new item is in :data:`LIMBO` until it is placed.

    Descriptions are either strings or callables evaluated every time the
    description is shown, so they can depend on the game state.
    """

    def __init__(
        self,
        *names: str,
        owned: Text | None = None,
        dropped: Text | None = None,
        configure: ItemConfigurator | None = None,
    ) -> None:
        if not names:
            raise ConfigurationError("An item needs at least one name")
        self.names: tuple[str, ...] = tuple(dict.fromkeys(names))
        self._owned: Text = owned if owned is not None else f"<no inventory description for {names[0]}>"
        self._dropped: Text = dropped if dropped is not None else f"<no description for {names[0]}>"
        self.is_plural = False
        self.is_hidden = False
        self.world: World | None = None
        self.owner: ItemOwner = LIMBO
        LIMBO.primitive_add_item(self)
        self._vocabulary: dict[str, Action] = {}
        self._vicinity_vocabulary: dict[str, Action] = {}
        self._configurators: list[ItemConfigurator] = [configure] if configure else []
        self._move_approvers: list[MoveApprover] = []
        self._move_reactors: list[MoveReactor] = []
        self._turn_end_reactors: list[Callable[[], None]] = []
        self._look = ItemAction(self, LOOK_WORDS, lambda action: action.say(self.description))
        self._look_held = ItemAction(self, LOOK_WORDS, lambda action: action.say(self.inventory_description))

    @property
    def primary_name(self) -> str:
        return self.names[0]

    @property
    def indefinite_article(self) -> str:
        return indefinite_article(self.primary_name, self.is_plural)

    @property
    def description(self) -> str:
        """The description shown when the item is not held by the player."""
        return _render(self._dropped)

    @description.setter
    def description(self, text: Text) -> None:
        self._dropped = text

    @property
    def inventory_description(self) -> str:
        """The description shown when the item is in the player's inventory."""
        return _render(self._owned)

    @property
    def gives_light(self) -> bool:
        return False

    def is_in(self, owner: ItemOwner) -> bool:
        return self.owner is owner

    # --- world binding and configuration ---

    def bind(self, world: World) -> None:
        """Attach the item to ``world`` and make its action words known there."""
        self.world = world
        for action in [*self._vocabulary.values(), *self._vicinity_vocabulary.values()]:
            world.register_words(action.words)
        world.register_words(LOOK_WORDS)

    def add_configurator(self, configurator: ItemConfigurator) -> None:
        self._configurators.append(configurator)

    def configure(self, context: ConfigurationContext) -> None:
        for configurator in self._configurators:
            configurator(self)

    def say(self, message: str) -> None:
        if self.world is None:
            raise ConfigurationError(f"Item '{self}' is not part of a world")
        self.world.say(message)

    # --- vocabulary ---

    def action(self, *words: str, effect: Effect | None = None):
        """Declare an action considered by the parser while the player holds the item.

        Usable directly with ``effect=`` or as a decorator; either way the
        created :class:`ItemAction` is returned so guards can be chained.
        """
        return self._declare(self._vocabulary, words, effect)

    def vicinity_action(self, *words: str, effect: Effect | None = None):
        """Declare an action considered while the item is in the player's room."""
        return self._declare(self._vicinity_vocabulary, words, effect)

    def _declare(self, vocabulary: dict[str, Action], words: tuple[str, ...], effect: Effect | None):
        def attach(fn: Effect) -> ItemAction:
            action = ItemAction(self, words, fn)
            for word in words:
                vocabulary[word] = action
            if self.world is not None:
                self.world.register_words(words)
            return action

        return attach if effect is None else attach(effect)

    def find_action(self, word: str) -> Action | None:
        action = self._vocabulary.get(word)
        if action is None and word in LOOK_WORDS:
            return self._look_held
        return action

    def find_vicinity_action(self, word: str) -> Action | None:
        action = self._vicinity_vocabulary.get(word)
        if action is None and word in LOOK_WORDS and not self.is_hidden:
            return self._look
        return action

    # --- move protocol ---

    def allow_move(self, approver: MoveApprover) -> None:
        """Add a predicate asked before the item moves; it receives the new owner."""
        self._move_approvers.append(approver)

    def allow_move_to(self, owner_of_interest: ItemOwner, approver: Callable[[], bool]) -> None:
        """Add a predicate asked only before moves to ``owner_of_interest``."""
        self.allow_move(lambda new_owner: approver() if new_owner is owner_of_interest else True)

    def decline(self, message: str) -> bool:
        self.say(message)
        return False

    def decline_if(self, condition: Callable[[], bool], message: str) -> bool:
        """Print ``message`` and return False if ``condition()`` holds, else return True."""
        if condition():
            return self.decline(message)
        return True

    def approve_move_to(self, new_owner: ItemOwner) -> bool:
        return all(approver(new_owner) for approver in self._move_approvers)

    def on_move(self, reactor: MoveReactor) -> None:
        """Add a block run after every completed move with the new and the old owner."""
        self._move_reactors.append(reactor)

    def notice_move(self, new_owner: ItemOwner, old_owner: ItemOwner) -> None:
        for reactor in self._move_reactors:
            reactor(new_owner, old_owner)

    def move_to(self, new_owner: ItemOwner) -> bool:
        """Move the item to ``new_owner`` if the item and both owners agree.

        The item is asked first, then its current owner, then the new owner.
        When all approve, the item is relocated and the same three parties are
        notified in the same order. Returns whether the move happened.
        """

        old_owner = self.owner
        if not (
            self.approve_move_to(new_owner)
            and old_owner.approve_item_move_to(new_owner, self)
            and new_owner.approve_item_move_from(old_owner, self)
        ):
            self._debug(f"item {self} move to {new_owner!r} vetoed")
            return False
        self.primitive_move_to(new_owner)
        self.notice_move(new_owner, old_owner)
        old_owner.notice_item_move_to(new_owner, self)
        new_owner.notice_item_move_from(old_owner, self)
        return True

    def primitive_move_to(self, new_owner: ItemOwner) -> None:
        """Relocate the item without asking or notifying anyone.

        For world setup and debugging commands only.
        """

        self.owner.primitive_remove_item(self)
        self.owner = new_owner
        new_owner.primitive_add_item(self)
        self._debug(f"item {self} owner {new_owner!r}")

    # --- turn end ---

    def on_turn_end(self, reactor: Callable[[], None]) -> None:
        self._turn_end_reactors.append(reactor)

    def notice_turn_end(self) -> None:
        for reactor in self._turn_end_reactors:
            reactor()

    def _debug(self, message: str) -> None:
        if self.world is not None:
            self.world.debug(message)

    def __str__(self) -> str:
        return self.primary_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.primary_name!r})"


class Fixture(Item):
    """An item that can't be picked up or otherwise moved by the regular protocol.

    Moves out of or into :data:`LIMBO` are still allowed, so game logic can
    make a fixture appear or disappear.
    """

    def __init__(self, *names: str, message: Text | None = None, configure: ItemConfigurator | None = None) -> None:
        super().__init__(*names, owned=message, dropped=message, configure=configure)
        self.cant_take_message = f"The {self.primary_name} is fixed in place."

    def approve_move_to(self, new_owner: ItemOwner) -> bool:
        if self.owner is not LIMBO and new_owner is not LIMBO:
            return self.decline(self.cant_take_message)
        return super().approve_move_to(new_owner)


class Detail(Fixture):
    """A hidden fixture that only answers looking at it, and optionally a few more verbs."""

    def __init__(
        self,
        *names: str,
        description: str,
        extra_verbs: Iterable[str] = (),
        cant_take_message: str | None = None,
    ) -> None:
        super().__init__(*names, message=description)
        self.is_hidden = True
        self.extra_verbs: list[str] = list(extra_verbs)
        if cant_take_message is not None:
            self.cant_take_message = cant_take_message

    def configure(self, context: ConfigurationContext) -> None:
        super().configure(context)
        verbs = list(dict.fromkeys([*self.extra_verbs, *LOOK_WORDS]))
        self.vicinity_action(*verbs, effect=lambda action: action.say(self.description))


__all__ = ["Item", "Fixture", "Detail", "Text", "LOOK_WORDS"]
