"""Protocol interfaces for engine collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .world import ConfigurationContext


@runtime_checkable
class IOBackend(Protocol):
    """Interface for input and output backends."""

    def get_input(self, prompt: str = "> ") -> str:  # pragma: no cover - interface
        """Return one line of user input for the given prompt."""
        ...

    def output(self, text: str) -> None:  # pragma: no cover - interface
        """Display ``text`` to the user."""
        ...


@runtime_checkable
class Configurable(Protocol):
    """A declared world object wired up during the world's setup pass."""

    def configure(self, context: ConfigurationContext) -> None:  # pragma: no cover - interface
        """Resolve references to other declared objects and attach behavior."""
        ...


__all__ = ["IOBackend", "Configurable"]
