from advent.direction import COMPASS_DIRECTIONS, CustomDirection, Direction
from advent.text import indefinite_article, trim_margin


def test_trim_margin_strips_indentation_and_pipes():
    text = """
        First line
        |    indented on purpose
        last line
    """
    assert trim_margin(text) == "First line\n    indented on purpose\nlast line"


def test_trim_margin_keeps_single_line():
    assert trim_margin("  Hello.  ") == "Hello."
    assert trim_margin("") == ""


def test_indefinite_article():
    assert indefinite_article("axe") == "an"
    assert indefinite_article("lamp") == "a"
    assert indefinite_article("keys", plural=True) == ""


def test_direction_lookup_by_name_or_shortcut():
    assert Direction.named("north") is Direction.NORTH
    assert Direction.named("NE") is Direction.NORTHEAST
    assert Direction.named("in") is Direction.IN
    assert Direction.named("downstream") is None


def test_direction_opposites():
    pairs = [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.NORTHWEST, Direction.SOUTHEAST),
        (Direction.WEST, Direction.EAST),
        (Direction.SOUTHWEST, Direction.NORTHEAST),
        (Direction.UP, Direction.DOWN),
        (Direction.IN, Direction.OUT),
    ]
    for a, b in pairs:
        assert a.opposite() is b
        assert b.opposite() is a


def test_compass_directions_and_words():
    assert len(COMPASS_DIRECTIONS) == 8
    assert Direction.UP not in COMPASS_DIRECTIONS
    assert {"north", "n", "out"} <= set(Direction.words())
    assert str(Direction.SOUTHWEST) == "southwest"


def test_custom_direction_equality_and_no_opposite():
    assert CustomDirection("dome") == CustomDirection("dome")
    assert CustomDirection("dome") != CustomDirection("pit")
    assert CustomDirection("dome").opposite() is None
