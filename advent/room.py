"""Game locations."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Union

from .actions import Action, DirectionAction, Effect, LocalAction
from .direction import COMPASS_DIRECTIONS, CustomDirection, Direction
from .errors import ConfigurationError
from .item import Detail, Item
from .owner import LIMBO, ItemOwner

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .world import ConfigurationContext, World

AnyDirection = Union[Direction, CustomDirection]
PlayerApprover = Callable[["Room"], bool]
PlayerReactor = Callable[["Room"], None]
ItemApprover = Callable[[ItemOwner, Item], bool]
ItemReactor = Callable[[ItemOwner, Item], None]
RoomConfigurator = Callable[["Room"], None]

CANT_GO_THAT_WAY = "You can't go that way."
DARK_MESSAGE = "It is now pitch dark. If you proceed you will likely fall into a pit."


def _to_direction(direction: AnyDirection | str) -> AnyDirection:
    if isinstance(direction, (Direction, CustomDirection)):
        return direction
    return Direction.named(direction) or CustomDirection(direction)


class Room(ItemOwner):
    """A game location.

    A room has a long description printed on the first visit and on "look",
    and a short one printed when the player comes back. Exits, items, actions
    and the approve/react hooks are normally set up by configurators, which
    run during the world's setup pass when every other declared object
    already exists.
    """

    def __init__(self, short_description: str, description: str, configure: RoomConfigurator | None = None) -> None:
        super().__init__()
        self.short_description = short_description
        self.description = description
        self.visited = False
        self.world: World | None = None
        self.exits: dict[AnyDirection, Room] = {}
        self.also_visible: list[Item] = []
        self.vocabulary: dict[str, Action] = {}
        self.deferred_output: list[str] = []
        self._configurators: list[RoomConfigurator] = [configure] if configure else []
        self._player_entry_approvers: list[PlayerApprover] = []
        self._player_exit_approvers: list[PlayerApprover] = []
        self._player_entry_reactors: list[PlayerReactor] = []
        self._player_exit_reactors: list[PlayerReactor] = []
        self._item_in_approvers: list[ItemApprover] = []
        self._item_out_approvers: list[ItemApprover] = []
        self._item_in_reactors: list[ItemReactor] = []
        self._item_out_reactors: list[ItemReactor] = []
        self._turn_end_reactors: list[Callable[[], None]] = []

    @property
    def visible_items(self) -> list[Item]:
        """Items owned by the room followed by items only visible from it."""
        return [*self.items, *(item for item in self.also_visible if item.owner is not self)]

    def find_item(self, words: str | Iterable[str]) -> Item | None:
        wanted = {words} if isinstance(words, str) else set(words)
        for item in self.visible_items:
            if any(name in wanted for name in item.names):
                return item
        return None

    # --- world binding and configuration ---

    def bind(self, world: World) -> None:
        self.world = world
        for action in self.vocabulary.values():
            world.register_words(action.words)
        for target in self.exits.values():
            if isinstance(target, UnenterableRoom) and target.world is None:
                target.bind(world)

    def add_configurator(self, configurator: RoomConfigurator) -> None:
        self._configurators.append(configurator)

    def configure(self, context: ConfigurationContext) -> None:
        for configurator in self._configurators:
            configurator(self)
        # Items placed by the configurators, details in particular, may not be
        # declared on the world, so they are configured through the room.
        for item in self.visible_items:
            if item.world is None and self.world is not None:
                item.bind(self.world)
            context.configure(item)

    def say(self, message: str) -> None:
        if self.world is None:
            raise ConfigurationError(f"{self!r} is not part of a world")
        self.world.say(message)

    def say_later(self, message: str) -> None:
        """Print ``message`` after the room description when the player enters."""
        self.deferred_output.append(message)

    # --- contents ---

    def add_item(self, item: Item) -> None:
        """Place ``item`` in this room.

        An item still in limbo becomes owned by the room. An item that already
        has an owner is only made visible from here, as with a grate seen from
        above and below.
        """

        if item.owner is LIMBO:
            item.primitive_move_to(self)
        elif item.owner is not self:
            self.show_item(item)

    def show_item(self, item: Item) -> None:
        """Make ``item`` visible from this room without taking ownership of it."""
        if item not in self.also_visible:
            self.also_visible.append(item)

    def detail(
        self,
        *names: str,
        description: str,
        extra_verbs: Iterable[str] = (),
        cant_take_message: str | None = None,
    ) -> Detail:
        """Add scenery the player can look at but not take."""
        detail = Detail(*names, description=description, extra_verbs=extra_verbs, cant_take_message=cant_take_message)
        if self.world is not None:
            detail.bind(self.world)
        detail.primitive_move_to(self)
        return detail

    # --- vocabulary ---

    def action(self, *words: str, effect: Effect | None = None):
        """Declare an action considered by the parser while the player is in this room.

        The room keeps one action per word and the first declaration of a word
        wins. Usable directly with ``effect=`` or as a decorator.
        """

        def attach(fn: Effect) -> LocalAction:
            action = LocalAction(words, fn)
            self._add_action(action)
            return action

        return attach if effect is None else attach(effect)

    def _add_action(self, action: Action) -> None:
        for word in action.words:
            self.vocabulary.setdefault(word, action)
        if self.world is not None:
            self.world.register_words(action.words)

    def find_action(self, word: str) -> Action | None:
        return self.vocabulary.get(word)

    # --- exits ---

    def _claim(self, direction: AnyDirection) -> None:
        if direction in self.exits:
            raise ConfigurationError(f"Exit {direction} already exists in {self!r}")

    def one_way(self, target: Room, *directions: AnyDirection | str) -> None:
        resolved = [_to_direction(d) for d in directions]
        for direction in resolved:
            self._claim(direction)
        if len(set(resolved)) != len(resolved):
            raise ConfigurationError(f"Duplicate exit directions {resolved} in {self!r}")
        for direction in resolved:
            self.exits[direction] = target

    def two_way(self, target: Room, *directions: AnyDirection | str) -> None:
        """Connect this room to ``target`` through ``directions`` and back through their opposites.

        Nothing is installed if any of the slots on either side is taken.
        """

        pairs: list[tuple[AnyDirection, AnyDirection]] = []
        for direction in (_to_direction(d) for d in directions):
            opposite = direction.opposite()
            if opposite is None:
                raise ConfigurationError(f"Exit {direction} of {self!r} has no opposite direction")
            self._claim(direction)
            target._claim(opposite)
            pairs.append((direction, opposite))
        if len({d for d, _ in pairs}) != len(pairs):
            raise ConfigurationError(f"Duplicate exit directions in {self!r}")
        for direction, opposite in pairs:
            self.exits[direction] = target
            target.exits[opposite] = self

    def no_entry(self, message: str, *directions: AnyDirection | str) -> UnenterableRoom:
        """Make ``directions`` lead to a room that refuses entry with ``message``."""
        blocked = UnenterableRoom(message)
        if self.world is not None:
            blocked.bind(self.world)
        self.one_way(blocked, *directions)
        return blocked

    def custom_exit(self, name: str, target: Room) -> CustomDirection:
        """Add an exit with a non-standard name, usable as a command in this room."""
        direction = CustomDirection(name)
        self.one_way(target, direction)
        self._add_action(DirectionAction(name))
        return direction

    def guard_exit(self, *directions: AnyDirection | str, unless: Callable[[], bool], message: str = CANT_GO_THAT_WAY) -> None:
        """Refuse moves toward the targets of ``directions`` while ``unless()`` is true."""
        resolved = [_to_direction(d) for d in directions]

        def approve(new_room: Room) -> bool:
            targets = [self.exits.get(d) for d in resolved]
            if any(new_room is t for t in targets) and unless():
                self.say(message)
                return False
            return True

        self.allow_player_exit(approve)

    def exit_to(self, direction: AnyDirection | str) -> Room | None:
        if isinstance(direction, str):
            standard = Direction.named(direction)
            if standard is not None:
                return self.exit_to(standard)
            wanted = direction.casefold()
            for key, target in self.exits.items():
                if isinstance(key, CustomDirection) and key.name.casefold() == wanted:
                    return target
            return None
        return self.exits.get(direction)

    # --- player moves ---

    def allow_player_entry(self, approver: PlayerApprover) -> None:
        """Add a predicate asked before the player enters; it receives the room being left."""
        self._player_entry_approvers.append(approver)

    def allow_player_exit(self, approver: PlayerApprover) -> None:
        """Add a predicate asked before the player leaves; it receives the destination."""
        self._player_exit_approvers.append(approver)

    def on_player_entry(self, reactor: PlayerReactor) -> None:
        self._player_entry_reactors.append(reactor)

    def on_player_exit(self, reactor: PlayerReactor) -> None:
        self._player_exit_reactors.append(reactor)

    def approve_player_move_in(self, old_room: Room) -> bool:
        return all(approver(old_room) for approver in self._player_entry_approvers)

    def approve_player_move_out(self, new_room: Room) -> bool:
        return all(approver(new_room) for approver in self._player_exit_approvers)

    def notice_player_move_to(self, new_room: Room) -> None:
        for reactor in self._player_exit_reactors:
            reactor(new_room)

    def notice_player_move_from(self, old_room: Room) -> None:
        """The player has entered. Reactors run first, then the room is described."""
        self.deferred_output.clear()
        for reactor in self._player_entry_reactors:
            reactor(old_room)
        self.print_description()
        self.visited = True
        for message in self.deferred_output:
            self.say(message)
        self.deferred_output.clear()

    # --- item moves ---

    def allow_item_move_in(self, approver: ItemApprover, item: Item | None = None) -> None:
        """Add a predicate asked before an item (or only ``item``) is moved into the room."""
        self._item_in_approvers.append(_filtered(approver, item, True))

    def allow_item_move_out(self, approver: ItemApprover, item: Item | None = None) -> None:
        self._item_out_approvers.append(_filtered(approver, item, True))

    def on_item_move_in(self, reactor: ItemReactor, item: Item | None = None) -> None:
        self._item_in_reactors.append(_filtered(reactor, item, None))

    def on_item_move_out(self, reactor: ItemReactor, item: Item | None = None) -> None:
        self._item_out_reactors.append(_filtered(reactor, item, None))

    def approve_item_move_to(self, new_owner: ItemOwner, item: Item) -> bool:
        return all(approver(new_owner, item) for approver in self._item_out_approvers)

    def approve_item_move_from(self, old_owner: ItemOwner, item: Item) -> bool:
        return all(approver(old_owner, item) for approver in self._item_in_approvers)

    def notice_item_move_to(self, new_owner: ItemOwner, item: Item) -> None:
        for reactor in self._item_out_reactors:
            reactor(new_owner, item)

    def notice_item_move_from(self, old_owner: ItemOwner, item: Item) -> None:
        for reactor in self._item_in_reactors:
            reactor(old_owner, item)

    # --- turn end ---

    def on_turn_end(self, reactor: Callable[[], None]) -> None:
        """Add a block run after every command that leaves the player in this room."""
        self._turn_end_reactors.append(reactor)

    def notice_turn_end(self) -> None:
        for reactor in self._turn_end_reactors:
            reactor()

    # --- descriptions ---

    def print_description(self) -> None:
        """Print the blurb shown on entry: short text once visited, then the items."""
        self.say(self.short_description if self.visited else self.description)
        self._print_items()

    def print_full_description(self) -> None:
        self.say(self.description)
        self._print_items()

    def _print_items(self) -> None:
        visible = [item for item in self.visible_items if not item.is_hidden]
        if visible:
            self.say("")
            for item in visible:
                self.say(item.description)

    def __repr__(self) -> str:
        return f'Room "{self.short_description}"'


def _filtered(hook, item: Item | None, default):
    if item is None:
        return hook

    def only_for_item(owner: ItemOwner, moved: Item):
        return hook(owner, moved) if moved is item else default

    return only_for_item


class DarkRoom(Room):
    """A room the player can only see in while a light source is here or carried."""

    def is_lit(self) -> bool:
        if self.world is None:
            return False
        player = self.world.player
        return any(item.gives_light for item in player.items) or any(
            item.gives_light for item in self.visible_items
        )

    def print_description(self) -> None:
        if self.is_lit():
            super().print_description()
        else:
            self.say(DARK_MESSAGE)

    def print_full_description(self) -> None:
        if self.is_lit():
            super().print_full_description()
        else:
            self.say(DARK_MESSAGE)


class OpenSpace(Room):
    """An outdoor room. Compass directions without an explicit exit lead to the default room."""

    def __init__(
        self,
        short_description: str,
        description: str,
        default_exit: Callable[[], Room],
        configure: RoomConfigurator | None = None,
    ) -> None:
        super().__init__(short_description, description, configure)
        self.default_exit = default_exit

    def exit_to(self, direction: AnyDirection | str) -> Room | None:
        target = super().exit_to(direction)
        if target is None and direction in COMPASS_DIRECTIONS:
            return self.default_exit()
        return target


class UnenterableRoom(Room):
    """The target of an exit that can't be taken. Refuses the player with a message."""

    def __init__(self, message: str) -> None:
        super().__init__("", "")
        self.message = message

    def configure(self, context: ConfigurationContext) -> None:
        return None

    def approve_player_move_in(self, old_room: Room) -> bool:
        self.say(self.message)
        return False


NOWHERE = Room("You're nowhere.", "This is exactly what the middle of nowhere looks like.")


__all__ = [
    "Room",
    "DarkRoom",
    "OpenSpace",
    "UnenterableRoom",
    "NOWHERE",
    "DARK_MESSAGE",
    "CANT_GO_THAT_WAY",
]
