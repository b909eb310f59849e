"""Two-state properties with transition messages."""

from __future__ import annotations

from collections.abc import Callable


class Toggle:
    """A boolean property changed by the player's actions.

    Each of the four combinations of old and new state has its own message:
    turned on, turned off, already on and already off. The state can only be
    changed through :meth:`turn_on`, :meth:`turn_off` or :meth:`set`, which
    always print the matching message.
    """

    def __init__(
        self,
        state: bool,
        turned_on: str,
        turned_off: str,
        already_on: str,
        already_off: str,
        say: Callable[[str], None] = print,
    ) -> None:
        self._state = state
        self.turned_on = turned_on
        self.turned_off = turned_off
        self.already_on = already_on
        self.already_off = already_off
        self._say = say

    @property
    def is_on(self) -> bool:
        return self._state

    def turn_on(self) -> None:
        self.set(True)

    def turn_off(self) -> None:
        self.set(False)

    def set(self, value: bool) -> None:
        if value == self._state:
            self._say(self.already_on if self._state else self.already_off)
        else:
            self._say(self.turned_on if value else self.turned_off)
            self._state = value

    def __repr__(self) -> str:
        return f"Toggle({'on' if self._state else 'off'})"


__all__ = ["Toggle"]
