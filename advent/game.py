"""Core game loop orchestrator."""

from __future__ import annotations

from collections.abc import Callable

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError, QuitGame
from .interfaces import IOBackend
from .io import ConsoleIO
from .world import World

WorldFactory = Callable[..., World]


class Game:
    """Builds a world and feeds it the player's input until the game ends."""

    def __init__(
        self,
        world_factory: WorldFactory,
        io_backend: IOBackend | None = None,
        debug: bool = False,
        seed: int | None = None,
    ) -> None:
        self.io = io_backend or ConsoleIO()
        self.debug = debug
        try:
            self.world = world_factory(io_backend=self.io, debug=debug, seed=seed)
        except FileNotFoundError as exc:
            self.io.output(f"ERROR: Missing world file: {exc}")
            raise SystemExit from exc
        except yaml.YAMLError as exc:
            self.io.output(f"ERROR: Invalid world file: {exc}")
            raise SystemExit from exc
        except ValidationError as exc:
            for error in exc.errors():
                location = ".".join(str(part) for part in error["loc"])
                self.io.output(f"ERROR: {location}: {error['msg']}")
            raise SystemExit("World validation failed") from exc
        except ConfigurationError as exc:
            self.io.output(f"ERROR: {exc}")
            raise SystemExit("World setup failed") from exc

    def run(self) -> None:
        try:
            self.world.begin()
            while True:
                user_input = self.io.get_input()
                if self.debug:
                    self.world.debug(f"input={user_input}")
                self.world.process(user_input)
        except (QuitGame, EOFError, KeyboardInterrupt):
            self.io.output("Leaving.")


def run(
    world_factory: WorldFactory,
    io_backend: IOBackend | None = None,
    debug: bool = False,
    seed: int | None = None,
) -> None:
    Game(world_factory, io_backend=io_backend, debug=debug, seed=seed).run()


__all__ = ["Game", "run"]
