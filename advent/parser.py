"""Selection and dispatch of the actions applicable to a line of input."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actions import HANDLED, Action

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .world import World

IGNORED_WORDS = frozenset({"a", "the", "at", "to", "in"})


def parse(line: str) -> tuple[str, list[str]] | None:
    """Split ``line`` into a command word and its subject words.

    Everything is lowercased and filler words are dropped from the subjects.
    Returns None for a blank line.
    """

    tokens = line.lower().split()
    if not tokens:
        return None
    return tokens[0], [token for token in tokens[1:] if token not in IGNORED_WORDS]


class Parser:
    """Runs the most specific action that accepts the input.

    Candidates are collected in order of decreasing specificity: actions of
    held items, vicinity actions of items in the player's room, the room's
    action and finally the global action. Each candidate either handles the
    input or passes it on to the next one.
    """

    def __init__(self, world: World) -> None:
        self.world = world

    def applicable_actions(self, command: str) -> list[Action]:
        player = self.world.player
        room = player.room
        candidates: list[Action | None] = [item.find_action(command) for item in player.items]
        candidates += [item.find_vicinity_action(command) for item in room.visible_items]
        candidates.append(room.find_action(command))
        candidates.append(self.world.find_action(command))
        return [action for action in candidates if action is not None]

    def process(self, line: str) -> None:
        parsed = parse(line)
        if parsed is None:
            return
        command, subjects = parsed
        self.world.debug(f"command {command} subjects {subjects}")
        actions = self.applicable_actions(command)
        if not actions:
            if command in self.world.known_words:
                self.world.say(f"There is nothing here to {command}.")
            else:
                self.world.say(f'I don\'t understand "{line.strip()}".')
            return
        for action in actions:
            if action.act(self.world, subjects) is HANDLED:
                return
            self.world.debug(f"candidate {action!r} passed")
        if subjects:
            self.world.say(f"You can't {command} that.")
        else:
            self.world.say(f"What are you trying to {command}?")


__all__ = ["IGNORED_WORDS", "parse", "Parser"]
