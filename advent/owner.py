"""Objects that can hold items."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .item import Item


class ItemOwner:
    """Something that holds items: a room, the player, or limbo.

    The approve hooks may print a refusal and return False to veto a move.
    They must not change any state; only the notice hooks, which run after a
    move has been committed, may do that.
    """

    def __init__(self) -> None:
        self.items: list[Item] = []

    def has(self, item: Item) -> bool:
        return item in self.items

    def find_item(self, words: str | Iterable[str]) -> Item | None:
        """Return the first item with a name among ``words``."""
        wanted = {words} if isinstance(words, str) else set(words)
        for item in self.items:
            if any(name in wanted for name in item.names):
                return item
        return None

    def approve_item_move_to(self, new_owner: ItemOwner, item: Item) -> bool:
        """Approve ``item`` leaving this owner for ``new_owner``."""
        return True

    def approve_item_move_from(self, old_owner: ItemOwner, item: Item) -> bool:
        """Approve ``item`` arriving here from ``old_owner``."""
        return True

    def notice_item_move_to(self, new_owner: ItemOwner, item: Item) -> None:
        """``item`` has left this owner for ``new_owner``."""

    def notice_item_move_from(self, old_owner: ItemOwner, item: Item) -> None:
        """``item`` has arrived here from ``old_owner``."""

    def primitive_add_item(self, item: Item) -> None:
        self.items.append(item)

    def primitive_remove_item(self, item: Item) -> None:
        self.items.remove(item)


class Limbo(ItemOwner):
    """The owner of every item that is nowhere in the game."""

    def __repr__(self) -> str:
        return "LIMBO"


LIMBO = Limbo()


__all__ = ["ItemOwner", "Limbo", "LIMBO"]
