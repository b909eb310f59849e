from functools import partial

import pytest

from advent import game
from cave.colossal_cave import ColossalCave
from conftest import DummyIO, world_from_file


def test_game_runs_until_quit(data_dir):
    io = DummyIO(["take apple", "quit", "look"])
    game.Game(partial(world_from_file, data_dir / "world.yaml"), io_backend=io).run()
    assert io.outputs[0] == "You are in a long hall."
    assert io.outputs[-2:] == ["You are now carrying the apple.", "Leaving."]
    assert io.inputs == ["look"]


def test_game_leaves_at_end_of_input(data_dir):
    io = DummyIO(["north"])
    game.run(partial(world_from_file, data_dir / "world.yaml"), io_backend=io)
    assert io.outputs[-1] == "Leaving."
    assert "You are in a walled garden." in io.outputs


def test_game_leaves_on_interrupt(data_dir):
    class InterruptedIO(DummyIO):
        def get_input(self, prompt: str = "> ") -> str:
            raise KeyboardInterrupt

    io = InterruptedIO()
    game.run(partial(world_from_file, data_dir / "world.yaml"), io_backend=io)
    assert io.outputs[-1] == "Leaving."


def test_game_init_missing_world(data_dir, io_backend):
    with pytest.raises(SystemExit):
        game.Game(partial(world_from_file, data_dir / "missing.yaml"), io_backend=io_backend)
    assert any("Missing world file" in o for o in io_backend.outputs)


def test_game_init_corrupted_world(data_dir, io_backend):
    with open(data_dir / "world.yaml", "w", encoding="utf-8") as fh:
        fh.write("- : - invalid yaml")
    with pytest.raises(SystemExit):
        game.Game(partial(world_from_file, data_dir / "world.yaml"), io_backend=io_backend)
    assert any("Invalid world file" in o for o in io_backend.outputs)


def test_game_init_invalid_schema(data_dir, io_backend):
    with open(data_dir / "world.yaml", "w", encoding="utf-8") as fh:
        fh.write("start: hall\nrooms:\n  hall:\n    short: Hall.\n")
    with pytest.raises(SystemExit):
        game.Game(partial(world_from_file, data_dir / "world.yaml"), io_backend=io_backend)
    assert any(o.startswith("ERROR: rooms.hall.description") for o in io_backend.outputs)


def test_game_init_broken_references(data_dir, io_backend):
    with open(data_dir / "world.yaml", "w", encoding="utf-8") as fh:
        fh.write("start: lobby\nrooms:\n  hall:\n    short: Hall.\n    description: A hall.\n")
    with pytest.raises(SystemExit):
        game.Game(partial(world_from_file, data_dir / "world.yaml"), io_backend=io_backend)
    assert io_backend.outputs == ["ERROR: Start room 'lobby' does not exist"]


def test_game_passes_seed_to_world(io_backend):
    first = game.Game(ColossalCave, io_backend=io_backend, seed=7).world
    second = game.Game(ColossalCave, io_backend=io_backend, seed=7).world
    assert first.magic_word == second.magic_word
