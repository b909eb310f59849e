"""Text helpers shared by everything that prints."""

from __future__ import annotations

VOWELS = frozenset("aeiou")


def trim_margin(text: str) -> str:
    """Left-trim every line of ``text``.

    A ``|`` left at the start of a line after trimming is removed too, so
    authors can keep indentation that is meant to be printed. Blank first and
    last lines are dropped.
    """

    lines = text.split("\n")
    if len(lines) > 1 and not lines[0].strip():
        lines = lines[1:]
    if len(lines) > 1 and not lines[-1].strip():
        lines = lines[:-1]
    trimmed: list[str] = []
    for line in lines:
        line = line.lstrip()
        if line.startswith("|"):
            line = line[1:]
        trimmed.append(line.rstrip())
    return "\n".join(trimmed)


def indefinite_article(name: str, plural: bool = False) -> str:
    if plural:
        return ""
    return "an" if name[:1].lower() in VOWELS else "a"


__all__ = ["trim_margin", "indefinite_article"]
