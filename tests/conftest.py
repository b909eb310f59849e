import sys
from pathlib import Path

import pytest
import yaml

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from advent.interfaces import IOBackend  # noqa: E402
from advent.item import Fixture, Item  # noqa: E402
from advent.room import Room  # noqa: E402
from advent.world import World  # noqa: E402
from cave.colossal_cave import ColossalCave  # noqa: E402


class DummyIO(IOBackend):
    def __init__(self, inputs: list[str] | None = None) -> None:
        self.inputs = inputs or []
        self.outputs: list[str] = []

    def get_input(self, prompt: str = "> ") -> str:  # noqa: ARG002 - test stub
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def output(self, text: str) -> None:
        self.outputs.append(text)


def world_from_file(path, **kwargs) -> World:
    """Build a world declared entirely by the YAML file at ``path``."""

    class FileWorld(World):
        def declare(self) -> None:
            self.load_declarations(path)

    return FileWorld(**kwargs)


class TinyWorld(World):
    """Two rooms joined east/west, a ball and a rock."""

    def declare(self) -> None:
        self.here = Room("You're here.", "You are here.")
        self.there = Room("You're there.", "You are there.")
        self.ball = Item("ball", owned="A ball", dropped="There is a ball here.")
        self.rock = Fixture("rock", message="There is a rock here.")
        self.start = self.here

    def setup_here(self, room: Room) -> None:
        room.add_item(self.ball)
        room.add_item(self.rock)
        room.two_way(self.there, "east")


SMALL_WORLD = {
    "start": "hall",
    "rooms": {
        "hall": {
            "short": "You're in the hall.",
            "description": "You are in a long hall.",
            "items": ["lamp", "apple"],
            "exits": [
                {"to": "cellar", "directions": ["down"], "two_way": True},
                {"to": "garden", "directions": ["north"], "two_way": True},
                {"to": "garden", "named": "outside"},
            ],
        },
        "cellar": {
            "kind": "dark",
            "short": "You're in the cellar.",
            "description": "You are in a damp cellar.",
            "items": ["coin"],
        },
        "garden": {
            "kind": "outdoors",
            "default_exit": "garden",
            "short": "You're in the garden.",
            "description": "You are in a walled garden.",
            "items": ["statue"],
            "exits": [{"no_entry": "The wall is too high.", "directions": ["up"]}],
            "details": [{"names": ["flowers", "roses"], "description": "Roses, mostly.", "verbs": ["smell"]}],
        },
    },
    "items": {
        "lamp": {"kind": "lantern", "names": ["lamp", "lantern"]},
        "apple": {"owned": "A red apple", "dropped": "There is an apple here."},
        "coin": {"names": ["coin", "gold"], "owned": "A gold coin", "dropped": "There is a coin here."},
        "statue": {"kind": "fixture", "message": "A marble statue stands here."},
    },
}


@pytest.fixture
def io_backend() -> DummyIO:
    return DummyIO()


@pytest.fixture
def data_dir(tmp_path):
    with open(tmp_path / "world.yaml", "w", encoding="utf-8") as fh:
        yaml.safe_dump(SMALL_WORLD, fh)
    return tmp_path


@pytest.fixture
def small_world(data_dir, io_backend) -> World:
    w = world_from_file(data_dir / "world.yaml", io_backend=io_backend)
    w.begin()
    io_backend.outputs.clear()
    return w


@pytest.fixture
def cave(io_backend) -> ColossalCave:
    c = ColossalCave(io_backend=io_backend, seed=0)
    c.begin()
    io_backend.outputs.clear()
    return c


@pytest.fixture
def tiny(io_backend) -> TinyWorld:
    w = TinyWorld(io_backend=io_backend)
    w.begin()
    io_backend.outputs.clear()
    return w
