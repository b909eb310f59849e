import pytest

from advent.direction import CustomDirection, Direction
from advent.errors import ConfigurationError
from advent.room import DARK_MESSAGE, Room, UnenterableRoom


def test_two_way_exit_is_symmetric():
    a = Room("A.", "Room A.")
    b = Room("B.", "Room B.")
    a.two_way(b, "north", Direction.UP)

    assert a.exit_to(Direction.NORTH) is b
    assert b.exit_to(Direction.SOUTH) is a
    assert a.exit_to("u") is b
    assert b.exit_to("down") is a


def test_two_way_conflict_installs_nothing():
    a, b, c = Room("A.", "A."), Room("B.", "B."), Room("C.", "C.")
    b.one_way(c, "south")

    with pytest.raises(ConfigurationError):
        a.two_way(b, "east", "north")
    assert a.exits == {}
    assert b.exits == {Direction.SOUTH: c}


def test_one_way_rejects_occupied_slot():
    a, b = Room("A.", "A."), Room("B.", "B.")
    a.one_way(b, "west")
    with pytest.raises(ConfigurationError):
        a.one_way(b, "w")


def test_two_way_requires_an_inverse():
    a, b = Room("A.", "A."), Room("B.", "B.")
    with pytest.raises(ConfigurationError):
        a.two_way(b, CustomDirection("dome"))


def test_custom_exit_is_a_room_command(small_world, io_backend):
    small_world.process("outside")
    assert small_world.player.room is small_world.garden
    assert small_world.hall.exit_to("OUTSIDE") is small_world.garden


def test_dark_room_needs_light(small_world, io_backend):
    small_world.process("down")
    assert io_backend.outputs == [DARK_MESSAGE]

    small_world.process("up")
    small_world.process("take lamp")
    small_world.process("turn lamp on")
    io_backend.outputs.clear()
    small_world.process("down")
    assert io_backend.outputs == ["You're in the cellar.", "", "There is a coin here."]


def test_light_left_in_dark_room_counts(small_world, io_backend):
    lamp = small_world.lamp
    lamp.light.turn_on()
    lamp.primitive_move_to(small_world.cellar)
    io_backend.outputs.clear()

    small_world.process("down")
    assert io_backend.outputs[0] == "You are in a damp cellar."


def test_outdoors_leads_anywhere_to_default_room(small_world, io_backend):
    small_world.process("north")
    io_backend.outputs.clear()

    small_world.process("west")
    assert small_world.player.room is small_world.garden
    assert io_backend.outputs[0] == "You're in the garden."
    assert small_world.garden.exit_to(Direction.UP) is not small_world.garden


def test_no_entry_refuses_with_message(small_world, io_backend):
    small_world.process("north")
    io_backend.outputs.clear()

    small_world.process("up")
    assert io_backend.outputs == ["The wall is too high."]
    assert small_world.player.room is small_world.garden
    assert isinstance(small_world.garden.exit_to(Direction.UP), UnenterableRoom)


def test_details_are_hidden_but_answer_their_verbs(small_world, io_backend):
    small_world.process("north")
    assert io_backend.outputs == ["You are in a walled garden.", "", "A marble statue stands here."]
    io_backend.outputs.clear()

    small_world.process("smell roses")
    small_world.process("look at the flowers")
    small_world.process("take flowers")
    assert io_backend.outputs == ["Roses, mostly.", "Roses, mostly.", "The flowers is fixed in place."]


def test_guard_exit_blocks_only_guarded_directions(tiny, io_backend):
    blocked = {"value": True}
    tiny.here.guard_exit("east", unless=lambda: blocked["value"], message="A troll blocks the way.")

    tiny.process("east")
    assert io_backend.outputs == ["A troll blocks the way."]
    assert tiny.player.room is tiny.here

    blocked["value"] = False
    tiny.process("e")
    assert tiny.player.room is tiny.there


def test_deferred_output_follows_description(tiny, io_backend):
    tiny.there.on_player_entry(lambda old_room: tiny.there.say_later("Something stirs."))
    tiny.process("east")
    assert io_backend.outputs == ["You are there.", "Something stirs."]


def test_item_visible_from_two_rooms_keeps_one_owner(tiny, io_backend):
    tiny.there.show_item(tiny.rock)
    assert tiny.rock.owner is tiny.here
    assert not tiny.there.has(tiny.rock)
    assert tiny.there.find_item("rock") is tiny.rock

    tiny.process("east")
    assert io_backend.outputs == ["You are there.", "", "There is a rock here."]
