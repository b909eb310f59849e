"""The light source that decides whether the player can see in dark rooms."""

from __future__ import annotations

from .actions import LocalAction
from .item import Item
from .room import DarkRoom
from .toggle import Toggle

PITCH_BLACK = "It is pitch black. You are likely to be eaten by... ummm, nevermind, wrong game."


class Lantern(Item):
    """A brass lamp. Held, it answers "turn lamp on" and "switch lantern off".

    Its descriptions follow the state of the light.
    """

    def __init__(self, *names: str) -> None:
        super().__init__(
            *(names or ("lamp", "lantern")),
            owned=lambda: "A lit brass lantern" if self.is_on else "A brass lantern",
            dropped=lambda: "There is a brass lamp shining nearby." if self.is_on else "There is a brass lamp nearby.",
        )
        self.light = Toggle(
            False,
            turned_on="Your lamp is now turned on.",
            turned_off="Your lamp is now turned off.",
            already_on="Your lamp is already turned on.",
            already_off="Your lamp is already turned off.",
            say=self.say,
        )
        self.action("turn", "switch", effect=self._switch)

    @property
    def is_on(self) -> bool:
        return self.light.is_on

    @property
    def gives_light(self) -> bool:
        return self.light.is_on

    def _switch(self, action: LocalAction):
        if "on" in action.subjects:
            was_on = self.is_on
            self.light.turn_on()
            if not was_on:
                action.room.print_full_description()
        elif "off" in action.subjects:
            self.light.turn_off()
            if isinstance(action.room, DarkRoom):
                action.say(PITCH_BLACK)
        else:
            action.say("Do you want the lamp on or off?")


__all__ = ["Lantern", "PITCH_BLACK"]
