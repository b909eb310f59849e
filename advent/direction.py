"""Movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A standard movement direction. The value is the one-word shortcut."""

    NORTH = "n"
    NORTHEAST = "ne"
    EAST = "e"
    SOUTHEAST = "se"
    SOUTH = "s"
    SOUTHWEST = "sw"
    WEST = "w"
    NORTHWEST = "nw"
    UP = "u"
    DOWN = "d"
    IN = "in"
    OUT = "out"

    @property
    def shortcut(self) -> str:
        return self.value

    @property
    def word(self) -> str:
        return self.name.lower()

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def __str__(self) -> str:
        return self.word

    @classmethod
    def named(cls, word: str) -> Direction | None:
        """Return the direction with ``word`` as its name or shortcut."""
        return _BY_WORD.get(word.casefold())

    @classmethod
    def words(cls) -> list[str]:
        return list(_BY_WORD)


@dataclass(frozen=True)
class CustomDirection:
    """A named exit such as "downstream". Has no opposite."""

    name: str

    @property
    def shortcut(self) -> str:
        return self.name

    @property
    def word(self) -> str:
        return self.name

    def opposite(self) -> None:
        return None

    def __str__(self) -> str:
        return self.name


_OPPOSITES: dict[Direction, Direction] = {}
for _a, _b in (
    (Direction.NORTH, Direction.SOUTH),
    (Direction.NORTHWEST, Direction.SOUTHEAST),
    (Direction.WEST, Direction.EAST),
    (Direction.SOUTHWEST, Direction.NORTHEAST),
    (Direction.UP, Direction.DOWN),
    (Direction.IN, Direction.OUT),
):
    _OPPOSITES[_a] = _b
    _OPPOSITES[_b] = _a

_BY_WORD: dict[str, Direction] = {}
for _d in Direction:
    _BY_WORD[_d.word] = _d
    _BY_WORD[_d.shortcut] = _d

COMPASS_DIRECTIONS = frozenset(
    {
        Direction.NORTH,
        Direction.NORTHEAST,
        Direction.EAST,
        Direction.SOUTHEAST,
        Direction.SOUTH,
        Direction.SOUTHWEST,
        Direction.WEST,
        Direction.NORTHWEST,
    }
)


__all__ = ["Direction", "CustomDirection", "COMPASS_DIRECTIONS"]
