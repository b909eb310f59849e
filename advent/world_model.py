"""Data models for declaration files."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .direction import Direction


class RoomKind(Enum):
    ROOM = "room"
    DARK = "dark"
    OUTDOORS = "outdoors"


class ItemKind(Enum):
    ITEM = "item"
    FIXTURE = "fixture"
    LANTERN = "lantern"


class ExitSpec(BaseModel):
    """One exit declaration.

    Either ``to`` plus ``directions`` (optionally ``two_way``), ``to`` plus a
    custom exit ``named``, or ``no_entry`` plus ``directions``.
    """

    to: str | None = None
    directions: list[str] = Field(default_factory=list)  # noqa
    two_way: bool = False
    named: str | None = None
    no_entry: str | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_shape(self) -> ExitSpec:
        if self.no_entry is not None:
            if self.to is not None or self.named is not None or self.two_way:
                raise ValueError("a no_entry exit takes only directions")
            if not self.directions:
                raise ValueError("a no_entry exit needs directions")
        elif self.to is None:
            raise ValueError("exit needs a target ('to') or a 'no_entry' message")
        elif self.named is not None:
            if self.directions or self.two_way:
                raise ValueError(f"custom exit '{self.named}' takes no directions")
        elif not self.directions:
            raise ValueError(f"exit to '{self.to}' needs directions")
        for word in self.directions:
            if Direction.named(word) is None:
                raise ValueError(f"unknown direction '{word}'")
        return self


class DetailSpec(BaseModel):
    names: list[str] = Field(min_length=1)
    description: str
    verbs: list[str] = Field(default_factory=list)  # noqa
    cant_take: str | None = None

    model_config = ConfigDict(extra="forbid")


class RoomSpec(BaseModel):
    kind: RoomKind = RoomKind.ROOM
    short: str
    description: str
    default_exit: str | None = None
    items: list[str] = Field(default_factory=list)  # noqa
    also_visible: list[str] = Field(default_factory=list)  # noqa
    exits: list[ExitSpec] = Field(default_factory=list)  # noqa
    details: list[DetailSpec] = Field(default_factory=list)  # noqa

    model_config = ConfigDict(extra="forbid")


class ItemSpec(BaseModel):
    kind: ItemKind = ItemKind.ITEM
    names: list[str] = Field(default_factory=list)  # noqa
    owned: str | None = None
    dropped: str | None = None
    message: str | None = None
    plural: bool = False
    hidden: bool = False

    model_config = ConfigDict(extra="forbid")


class WorldSpec(BaseModel):
    start: str
    intro: str = ""
    rooms: dict[str, RoomSpec]
    items: dict[str, ItemSpec] = Field(default_factory=dict)  # noqa

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "RoomKind",
    "ItemKind",
    "ExitSpec",
    "DetailSpec",
    "RoomSpec",
    "ItemSpec",
    "WorldSpec",
]
