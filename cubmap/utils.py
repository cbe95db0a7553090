"""Line classification and file reading for scene descriptions."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Union

from cubmap.errors import ParseError

_MAP_START = frozenset("10NSEW")


def is_empty_line(line: Optional[str]) -> bool:
    """True when ``line`` is missing or holds only spaces and tabs."""
    return not line or all(char in " \t" for char in line)


def is_map_line(line: str) -> bool:
    """True when the first character after leading spaces starts a map row."""
    stripped = line.lstrip(" ")
    return bool(stripped) and stripped[0] in _MAP_START


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines, dropping the empty pieces."""
    return [line for line in text.split("\n") if line]


def read_file(path: Union[str, "PathLike[str]"]) -> str:
    """Return the whole content of ``path``.

    Raises ParseError when the file cannot be read or is empty.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        raise ParseError("File read error") from None
    if not data:
        raise ParseError("File read error")
    return data.decode("utf-8", errors="surrogateescape")