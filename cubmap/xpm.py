"""Reading XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

from cubmap.colornames import lookup_color
from cubmap.words import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour "none"."""

_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_INT = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The result has the same length as ``text``.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2 :], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2 :], "\n")
        text = _blank(text, begin, end + 3)
    return text


def text_to_rgb(name: str, end: Optional[str] = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#`` introduces a hexadecimal value; otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours. Unknown
    names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        digits = match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        if match.group(1) == "-":
            value = -value
        return _int32(value)
    full = name if end is None else f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(full)
    except KeyError:
        return 0


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise ValueError(f"XPM colour line without colour: {line!r}") from None
    if index >= len(words):
        raise ValueError(f"XPM colour line without colour: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its quoted strings, in order."""
    rows: Iterator[str] = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise ValueError("XPM data ended early") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise ValueError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError(f"invalid XPM header: {' '.join(header)!r}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _color_entry(next_line(), cpp)
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    pixels = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise ValueError(f"XPM pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            value = colors.get(line[start : start + cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    cleaned = strip_comments(text)
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(cleaned))


def read_xpm(path: Union[str, "PathLike[str]"]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_xpm_text(data.decode("latin-1"))