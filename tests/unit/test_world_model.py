import copy

import pytest
import yaml
from pydantic import ValidationError

from advent.errors import ConfigurationError
from advent.integrity import validate_world_spec
from advent.room import DarkRoom, OpenSpace
from advent.world_model import ExitSpec, ItemKind, RoomKind, WorldSpec
from conftest import SMALL_WORLD, world_from_file


def spec_with(**changes) -> WorldSpec:
    data = copy.deepcopy(SMALL_WORLD)
    data.update(changes)
    return WorldSpec.model_validate(data)


def test_small_world_spec_is_valid():
    spec = WorldSpec.model_validate(SMALL_WORLD)
    assert spec.rooms["cellar"].kind is RoomKind.DARK
    assert spec.items["lamp"].kind is ItemKind.LANTERN
    assert validate_world_spec(spec) == []


def test_exit_spec_shapes():
    assert ExitSpec(to="hall", directions=["n"]).two_way is False
    assert ExitSpec(to="hall", named="dome").named == "dome"
    assert ExitSpec(no_entry="No.", directions=["up"]).no_entry == "No."
    with pytest.raises(ValidationError):
        ExitSpec(directions=["n"])
    with pytest.raises(ValidationError):
        ExitSpec(to="hall")
    with pytest.raises(ValidationError):
        ExitSpec(to="hall", directions=["sideways"])
    with pytest.raises(ValidationError):
        ExitSpec(to="hall", named="dome", directions=["up"])
    with pytest.raises(ValidationError):
        ExitSpec(no_entry="No.", to="hall", directions=["up"])


def test_unknown_fields_are_rejected():
    data = copy.deepcopy(SMALL_WORLD)
    data["rooms"]["hall"]["smell"] = "musty"
    with pytest.raises(ValidationError):
        WorldSpec.model_validate(data)


def test_integrity_reports_broken_references():
    rooms = copy.deepcopy(SMALL_WORLD["rooms"])
    rooms["hall"]["exits"].append({"to": "attic", "directions": ["up"]})
    rooms["cellar"]["items"].append("apple")
    rooms["cellar"]["also_visible"] = ["ghost"]
    rooms["garden"]["default_exit"] = None
    spec = spec_with(start="lobby", rooms=rooms)

    errors = validate_world_spec(spec)
    assert "Start room 'lobby' does not exist" in errors
    assert "Room 'hall' has exit to missing room 'attic'" in errors
    assert "Item 'apple' is placed in both 'hall' and 'cellar'" in errors
    assert "Room 'cellar' contains missing item 'ghost'" in errors
    assert "Outdoor room 'garden' has no default exit" in errors


def test_integrity_reports_identifier_problems():
    items = copy.deepcopy(SMALL_WORLD["items"])
    items["hall"] = {}
    items["two words"] = {}
    items["player"] = {}
    items["statue"]["owned"] = "A statue"
    spec = spec_with(items=items)

    errors = validate_world_spec(spec, reserved={"player"})
    assert "Identifier 'hall' is declared both as a room and as an item" in errors
    assert "Identifier 'two words' is not a valid Python identifier" in errors
    assert "Identifier 'player' clashes with a world attribute" in errors
    assert "Fixture 'statue' takes a 'message' instead of 'owned'/'dropped'" in errors


def test_loaded_world_has_declared_kinds(small_world):
    assert isinstance(small_world.cellar, DarkRoom)
    assert isinstance(small_world.garden, OpenSpace)
    assert small_world.start is small_world.hall
    assert small_world.coin.names == ("coin", "gold")
    assert small_world.lamp.names == ("lamp", "lantern")


def test_loading_a_broken_file_raises_configuration_error(data_dir, io_backend):
    data = copy.deepcopy(SMALL_WORLD)
    data["start"] = "lobby"
    with open(data_dir / "world.yaml", "w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh)

    with pytest.raises(ConfigurationError, match="lobby"):
        world_from_file(data_dir / "world.yaml", io_backend=io_backend)


def test_lantern_without_names_is_named_by_identifier(data_dir, io_backend):
    data = copy.deepcopy(SMALL_WORLD)
    data["items"]["torch"] = {"kind": "lantern"}
    data["rooms"]["hall"]["items"].append("torch")
    with open(data_dir / "world.yaml", "w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh)

    world = world_from_file(data_dir / "world.yaml", io_backend=io_backend)
    assert world.torch.names == ("torch",)
    assert world.lamp.names == ("lamp", "lantern")
