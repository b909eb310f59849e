"""Exceptions raised by the engine."""

from __future__ import annotations


class ConfigurationError(Exception):
    """The declared world is inconsistent and cannot be built."""


class QuitGame(Exception):
    """Unwind out of the read loop. Raised by the quit verb and by game-over events."""


__all__ = ["ConfigurationError", "QuitGame"]
