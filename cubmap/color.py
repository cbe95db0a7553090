"""Parsing of ``R,G,B`` colour settings."""

from __future__ import annotations

import re

_COMPONENT = re.compile(r"\d+")


def _component(text: str, pos: int) -> tuple[int, int]:
    match = _COMPONENT.match(text, pos)
    if match is None:
        return -1, pos
    return int(match.group()), match.end()


def parse_color(text: str) -> int:
    """Turn ``"R,G,B"`` into a 0xRRGGBB value.

    Leading and trailing spaces are allowed; each component must be a
    decimal number from 0 to 255. Raises ValueError otherwise.
    """
    pos = len(text) - len(text.lstrip(" "))
    values = []
    for index in range(3):
        value, pos = _component(text, pos)
        values.append(value)
        if index < 2:
            if text[pos : pos + 1] != ",":
                raise ValueError(f"invalid colour: {text!r}")
            pos += 1
    if text[pos:].strip(" "):
        raise ValueError(f"invalid colour: {text!r}")
    if any(not 0 <= value <= 255 for value in values):
        raise ValueError(f"colour component out of range: {text!r}")
    red, green, blue = values
    return (red << 16) | (green << 8) | blue