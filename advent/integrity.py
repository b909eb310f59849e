"""Integrity checks for world declaration files."""

from __future__ import annotations

from collections.abc import Iterable

from .world_model import ItemKind, RoomKind, WorldSpec


def validate_world_spec(spec: WorldSpec, reserved: Iterable[str] = ()) -> list[str]:
    """Validate cross references inside a declaration file and return error messages.

    ``reserved`` names attributes of the world an identifier must not shadow."""

    errors: list[str] = []
    reserved = set(reserved)

    for object_id in [*spec.rooms, *spec.items]:
        if not object_id.isidentifier():
            errors.append(f"Identifier '{object_id}' is not a valid Python identifier")
        elif object_id in reserved:
            errors.append(f"Identifier '{object_id}' clashes with a world attribute")
    for object_id in set(spec.rooms) & set(spec.items):
        errors.append(f"Identifier '{object_id}' is declared both as a room and as an item")

    if spec.start not in spec.rooms:
        errors.append(f"Start room '{spec.start}' does not exist")

    placed: dict[str, str] = {}
    for room_id, room in spec.rooms.items():
        for exit_spec in room.exits:
            if exit_spec.to is not None and exit_spec.to not in spec.rooms:
                errors.append(f"Room '{room_id}' has exit to missing room '{exit_spec.to}'")
        if room.kind is RoomKind.OUTDOORS:
            if room.default_exit is None:
                errors.append(f"Outdoor room '{room_id}' has no default exit")
            elif room.default_exit not in spec.rooms:
                errors.append(f"Room '{room_id}' has default exit to missing room '{room.default_exit}'")
        elif room.default_exit is not None:
            errors.append(f"Room '{room_id}' is not outdoors but has a default exit")
        for item_id in [*room.items, *room.also_visible]:
            if item_id not in spec.items:
                errors.append(f"Room '{room_id}' contains missing item '{item_id}'")
        for item_id in room.items:
            if item_id in placed:
                errors.append(f"Item '{item_id}' is placed in both '{placed[item_id]}' and '{room_id}'")
            else:
                placed[item_id] = room_id

    for item_id, item in spec.items.items():
        if item.kind is ItemKind.FIXTURE and (item.owned is not None or item.dropped is not None):
            errors.append(f"Fixture '{item_id}' takes a 'message' instead of 'owned'/'dropped'")
        if item.kind is not ItemKind.FIXTURE and item.message is not None:
            errors.append(f"Item '{item_id}' is not a fixture but has a 'message'")

    return errors


__all__ = ["validate_world_spec"]
