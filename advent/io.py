"""Input and output backend using the console."""

from __future__ import annotations

from .interfaces import IOBackend


class ConsoleIO(IOBackend):
    """Read from stdin and write to stdout.

    With ``editing`` enabled the ``readline`` module is loaded, which gives
    ``input()`` line editing and history on platforms that ship it.
    """

    def __init__(self, editing: bool = False) -> None:
        self.editing = editing
        if editing:
            import readline  # noqa: F401 - imported for its side effect on input()

    def get_input(self, prompt: str = "> ") -> str:
        return input(prompt)

    def output(self, text: str) -> None:
        print(text)


__all__ = ["ConsoleIO"]
