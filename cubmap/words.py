"""Small text helpers: splitting on blanks and searching outside quotes."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only.

    Other whitespace, such as newlines, stays part of the word it touches.
    """
    return [word for word in _BLANKS.split(text) if word]


def find(text: str, pattern: str) -> int:
    """Return the position of the first ``pattern`` in ``text``, or -1."""
    return text.find(pattern)


def find_unquoted(text: str, pattern: str) -> int:
    """Return the first position of ``pattern`` outside double quotes, or -1.

    Each double quote toggles the quoted state; a match may start on the
    closing quote of a quoted section but never on an opening one.
    """
    if not pattern:
        return 0
    inside = False
    for pos, char in enumerate(text[: len(text) - len(pattern) + 1]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(pattern, pos):
            return pos
    return -1