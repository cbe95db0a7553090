"""Reading a whole scene description: textures, colours and map."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Optional, Sequence, Union

from cubmap.color import parse_color
from cubmap.errors import ParseError
from cubmap.gamemap import GameMap, Player, parse_map, validate_map
from cubmap.utils import is_empty_line, is_map_line, read_file, split_lines

_TEXTURE_KEYS = (("NO", "north"), ("SO", "south"), ("WE", "west"), ("EA", "east"))
_COLOR_KEYS = (("F", "floor_color"), ("C", "ceiling_color"))


@dataclass(frozen=True)
class Textures:
    """Paths of the wall textures; None where a texture was not given."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None


@dataclass(frozen=True)
class Config:
    """Everything a scene file describes."""

    textures: Textures
    floor_color: int
    ceiling_color: int
    game_map: GameMap
    player: Player


def parse_texture(text: str) -> str:
    """Return the path of a texture setting.

    Whatever sticks to the key is skipped, then the spaces after it; the
    rest of the line is the path.
    """
    rest = text.lstrip(" ")
    if rest is text:
        space = text.find(" ")
        rest = "" if space == -1 else text[space:].lstrip(" ")
    return rest


def _apply_setting(line: str, settings: dict) -> bool:
    for prefix, field in _TEXTURE_KEYS:
        if line.startswith(prefix):
            if field in settings:
                return False
            settings[field] = parse_texture(line[len(prefix):])
            return True
    for prefix, field in _COLOR_KEYS:
        if line.startswith(prefix):
            try:
                settings[field] = parse_color(line[len(prefix):])
            except ValueError:
                return False
            return True
    return False


def parse_lines(lines: Sequence[str]) -> Config:
    """Build a Config from the non-empty lines of a scene file."""
    settings: dict = {}
    for index, line in enumerate(lines):
        if is_empty_line(line) or _apply_setting(line, settings):
            continue
        if is_map_line(line):
            break
        raise ParseError("Invalid line")
    else:
        raise ParseError("No map")
    game_map, player = parse_map(lines, index)
    validate_map(game_map, player)
    textures = Textures(**{field: settings.get(field) for _, field in _TEXTURE_KEYS})
    return Config(
        textures=textures,
        floor_color=settings.get("floor_color", 0),
        ceiling_color=settings.get("ceiling_color", 0),
        game_map=game_map,
        player=player,
    )


def parse_text(text: str) -> Config:
    """Build a Config from the text of a scene file."""
    return parse_lines(split_lines(text))


def parse_file(path: Union[str, "PathLike[str]"]) -> Config:
    """Read and check a scene file."""
    return parse_text(read_file(path))