"""The player: the item owner that walks between rooms."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .owner import ItemOwner
from .room import NOWHERE, Room

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .item import Item
    from .world import World


class Player(ItemOwner):
    """Holds the inventory and the current room.

    The player starts in :data:`NOWHERE` and only changes rooms through
    :meth:`move_to`, which lets the player itself and both rooms veto the move.
    """

    def __init__(self, world: World) -> None:
        super().__init__()
        self.world = world
        self.room: Room = NOWHERE
        self._move_approvers: list[Callable[[Room], bool]] = []
        self._move_reactors: list[Callable[[Room, Room], None]] = []

    def say(self, message: str) -> None:
        self.world.say(message)

    def allow_move(self, approver: Callable[[Room], bool]) -> None:
        self._move_approvers.append(approver)

    def on_move(self, reactor: Callable[[Room, Room], None]) -> None:
        self._move_reactors.append(reactor)

    def approve_move_to(self, new_room: Room) -> bool:
        return all(approver(new_room) for approver in self._move_approvers)

    def notice_move(self, new_room: Room, old_room: Room) -> None:
        for reactor in self._move_reactors:
            reactor(new_room, old_room)

    def move_to(self, new_room: Room) -> bool:
        """Relocate the player if the player, the current room and ``new_room`` approve.

        After the move the player, the room left and the room entered are
        notified in that order. Entering a room prints its description.
        """

        old_room = self.room
        if not (
            self.approve_move_to(new_room)
            and old_room.approve_player_move_out(new_room)
            and new_room.approve_player_move_in(old_room)
        ):
            self.world.debug(f"move to {new_room!r} vetoed")
            return False
        self.room = new_room
        self.world.debug(f"location {new_room!r}")
        self.notice_move(new_room, old_room)
        old_room.notice_player_move_to(new_room)
        new_room.notice_player_move_from(old_room)
        return True

    def internal_move_to(self, new_room: Room) -> None:
        """Put the player in ``new_room`` without asking anyone. Still prints the room."""
        old_room = self.room
        self.room = new_room
        self.world.debug(f"location {new_room!r} (internal)")
        new_room.notice_player_move_from(old_room)

    def notice_item_move_from(self, old_owner: ItemOwner, item: Item) -> None:
        if isinstance(old_owner, Room):
            self.say(f"You are now carrying the {item}.")

    def notice_item_move_to(self, new_owner: ItemOwner, item: Item) -> None:
        if isinstance(new_owner, Room):
            self.say(f"You dropped the {item}.")

    def __repr__(self) -> str:
        return "Player"


__all__ = ["Player"]
