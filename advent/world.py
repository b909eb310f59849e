"""The game world: declared objects, global vocabulary and per-turn processing."""

from __future__ import annotations

import inspect
import os
import random
import sys
from collections.abc import Callable
from pathlib import Path

import yaml

from .actions import Action, Effect, LocalAction
from .errors import ConfigurationError
from .integrity import validate_world_spec
from .interfaces import Configurable, IOBackend
from .io import ConsoleIO
from .item import Fixture, Item
from .lantern import Lantern
from .parser import Parser, parse
from .player import Player
from .room import DarkRoom, OpenSpace, Room
from .text import trim_margin
from .toggle import Toggle
from .verbs import global_vocabulary
from .world_model import ExitSpec, ItemKind, ItemSpec, RoomKind, RoomSpec, WorldSpec

# Attributes holding declared objects that are not registered under their own name.
_UNREGISTERED = frozenset({"start"})


class ConfigurationContext:
    """Tracks the objects configured so far, so each is configured exactly once."""

    def __init__(self) -> None:
        # rooms and items hash by identity
        self._configured: set[Configurable] = set()

    def configure(self, obj: Configurable) -> None:
        if obj in self._configured:
            return
        self._configured.add(obj)
        obj.configure(self)

    def __contains__(self, obj: object) -> bool:
        return obj in self._configured


class World:
    """Base class of a game world.

    A subclass declares its rooms and items as instance attributes in
    :meth:`declare`, either directly or through :meth:`load_declarations`.
    Declaring only creates the objects. Behavior that refers to other objects
    goes into configurators: callables passed at creation or ``setup_<name>``
    methods of the subclass, run by :meth:`run_object_setup` once every
    object exists.
    """

    intro = ""

    def __init__(self, io_backend: IOBackend | None = None, debug: bool = False, seed: int | None = None) -> None:
        self.io = io_backend or ConsoleIO()
        self._debug_enabled = debug
        self.random = random.Random(seed)
        self.known_words: set[str] = set()
        self.vocabulary: dict[str, Action] = global_vocabulary()
        self.register_words(self.vocabulary)
        self.rooms: dict[str, Room] = {}
        self.items: dict[str, Item] = {}
        self.player = Player(self)
        self.parser = Parser(self)
        self.start: Room | None = None
        self.declare()
        self.run_object_setup()
        if self.start is None:
            raise ConfigurationError(f"{type(self).__name__} has no start room")

    def debug(self, message: str) -> None:
        if self._debug_enabled:
            frame = inspect.stack()[1]
            filename = os.path.basename(frame.filename)
            lineno = frame.lineno
            print(f"{filename}:{lineno} -- {message}", file=sys.stderr)

    # --- declaration ---

    def declare(self) -> None:
        """Create the rooms and items of the world as instance attributes."""

    def room(self, short_description: str, description: str, configure: Callable[[Room], None] | None = None) -> Room:
        return Room(short_description, description, configure)

    def dark_room(self, short_description: str, description: str, configure: Callable[[Room], None] | None = None) -> DarkRoom:
        return DarkRoom(short_description, description, configure)

    def outdoors(
        self,
        short_description: str,
        description: str,
        default_exit: Callable[[], Room],
        configure: Callable[[Room], None] | None = None,
    ) -> OpenSpace:
        return OpenSpace(short_description, description, default_exit, configure)

    def item(self, *names: str, owned=None, dropped=None, configure: Callable[[Item], None] | None = None) -> Item:
        return Item(*names, owned=owned, dropped=dropped, configure=configure)

    def fixture(self, *names: str, message=None, configure: Callable[[Item], None] | None = None) -> Fixture:
        return Fixture(*names, message=message, configure=configure)

    def toggle(self, state: bool, turned_on: str, turned_off: str, already_on: str, already_off: str) -> Toggle:
        return Toggle(state, turned_on, turned_off, already_on, already_off, say=self.say)

    def load_declarations(self, path: str | Path) -> WorldSpec:
        """Declare the rooms and items described by a YAML file.

        Exits, item placement and details are installed by a configurator of
        each room, so they run in the setup pass like any other behavior.
        Raises FileNotFoundError, yaml.YAMLError, pydantic.ValidationError or
        ConfigurationError for a missing or broken file.
        """

        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        spec = WorldSpec.model_validate(data)
        errors = validate_world_spec(spec, reserved=dir(self))
        if errors:
            raise ConfigurationError("; ".join(errors))
        for item_id, item_spec in spec.items.items():
            setattr(self, item_id, self._declare_item(item_id, item_spec))
        for room_id, room_spec in spec.rooms.items():
            setattr(self, room_id, self._declare_room(room_spec))
        self.start = getattr(self, spec.start)
        if spec.intro and not self.intro:
            self.intro = spec.intro
        self.debug(f"declared {len(spec.rooms)} rooms and {len(spec.items)} items from {path}")
        return spec

    def _declare_item(self, item_id: str, spec: ItemSpec) -> Item:
        names = spec.names or [item_id]
        if spec.kind is ItemKind.LANTERN:
            item: Item = Lantern(*names)
        elif spec.kind is ItemKind.FIXTURE:
            item = Fixture(*names, message=spec.message)
        else:
            item = Item(*names, owned=spec.owned, dropped=spec.dropped)
        item.is_plural = spec.plural
        item.is_hidden = spec.hidden
        return item

    def _declare_room(self, spec: RoomSpec) -> Room:
        if spec.kind is RoomKind.DARK:
            room: Room = DarkRoom(spec.short, spec.description)
        elif spec.kind is RoomKind.OUTDOORS:
            default_id = spec.default_exit
            room = OpenSpace(spec.short, spec.description, lambda: getattr(self, default_id))
        else:
            room = Room(spec.short, spec.description)
        room.add_configurator(lambda r: self._wire_room(r, spec))
        return room

    def _wire_room(self, room: Room, spec: RoomSpec) -> None:
        for item_id in spec.items:
            room.add_item(getattr(self, item_id))
        for item_id in spec.also_visible:
            room.show_item(getattr(self, item_id))
        for exit_spec in spec.exits:
            self._wire_exit(room, exit_spec)
        for detail in spec.details:
            room.detail(*detail.names, description=detail.description, extra_verbs=detail.verbs, cant_take_message=detail.cant_take)

    def _wire_exit(self, room: Room, spec: ExitSpec) -> None:
        if spec.no_entry is not None:
            room.no_entry(spec.no_entry, *spec.directions)
            return
        target = getattr(self, spec.to)
        if spec.named is not None:
            room.custom_exit(spec.named, target)
        elif spec.two_way:
            room.two_way(target, *spec.directions)
        else:
            room.one_way(target, *spec.directions)

    # --- setup ---

    def run_object_setup(self) -> None:
        """Bind, register and configure every room and item declared on this world."""
        declared: list[Room | Item] = []
        for name, value in list(vars(self).items()):
            if name.startswith("_") or name in _UNREGISTERED or not isinstance(value, (Room, Item)):
                continue
            registry = self.rooms if isinstance(value, Room) else self.items
            key = name.casefold()
            if key in self.rooms or key in self.items:
                raise ConfigurationError(f"Identifier '{name}' is declared twice")
            registry[key] = value
            value.bind(self)
            setup = getattr(self, f"setup_{name}", None)
            if setup is not None:
                value.add_configurator(setup)
            declared.append(value)
        context = ConfigurationContext()
        for obj in declared:
            self.debug(f"configuring {obj!r}")
            context.configure(obj)

    # --- vocabulary ---

    def register_words(self, words) -> None:
        self.known_words.update(words)

    def add_action(self, action: Action) -> Action:
        """Make ``action`` global, replacing standard actions with the same words."""
        for word in action.words:
            self.vocabulary[word] = action
        self.register_words(action.words)
        return action

    def action(self, *words: str, effect: Effect | None = None):
        """Declare a global action from an effect; usable as a decorator."""

        def attach(fn: Effect) -> LocalAction:
            return self.add_action(LocalAction(words, fn))

        return attach if effect is None else attach(effect)

    def find_action(self, word: str) -> Action | None:
        return self.vocabulary.get(word)

    # --- look-ups ---

    def find_room(self, name: str) -> Room | None:
        return self.rooms.get(name.casefold())

    def find_item(self, name: str) -> Item | None:
        return self.items.get(name.casefold())

    # --- play ---

    def say(self, message: str) -> None:
        self.io.output(trim_margin(message))

    def chance(self, probability: float) -> bool:
        return self.random.random() < probability

    def begin(self) -> None:
        """Print the intro and move the player into the start room."""
        if self.intro:
            self.say(self.intro)
        assert self.start is not None
        self.player.move_to(self.start)

    def process(self, line: str) -> None:
        """Run one command, then let the player's surroundings react to the turn end."""
        if parse(line) is None:
            return
        self.parser.process(line)
        self.end_turn()

    def end_turn(self) -> None:
        room = self.player.room
        polled: list[Room | Item] = []
        for obj in [room, *room.visible_items, *self.player.items]:
            if any(obj is seen for seen in polled):
                continue
            polled.append(obj)
            obj.notice_turn_end()
        self.debug(f"turn end polled {len(polled)} objects")


__all__ = ["World", "ConfigurationContext"]
