"""The map grid of a scene: building it and checking that it is closed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from cubmap.errors import ParseError
from cubmap.utils import is_empty_line

_DIRECTIONS = "NSEW"
_TO_FLOOR = str.maketrans({direction: "0" for direction in _DIRECTIONS})


@dataclass(frozen=True)
class Player:
    """Start position of the player and the direction it faces."""

    x: int
    y: int
    direction: str


@dataclass(frozen=True)
class GameMap:
    """Rows of equal width; the player's start cell holds ``'0'``."""

    grid: tuple[str, ...]
    width: int
    height: int

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return self.grid[y][x]


def parse_map(lines: Sequence[str], start: int) -> tuple[GameMap, Optional[Player]]:
    """Build the map from ``lines[start:]``.

    The height is the number of non-blank lines and the width the longest of
    them; rows are padded with spaces. Returns the map and the player found
    on it, or None when there is none.
    """
    rows = list(lines[start:])
    filled = [line for line in rows if not is_empty_line(line)]
    if not filled:
        raise ParseError("Map error")
    width = max(len(line) for line in filled)
    height = len(filled)
    player: Optional[Player] = None
    grid = []
    for y, line in enumerate(rows[:height]):
        row = line[:width].ljust(width)
        for x, char in enumerate(row):
            if char in _DIRECTIONS:
                if player is not None:
                    raise ParseError("Multiple player")
                player = Player(x, y, char)
        grid.append(row.translate(_TO_FLOOR))
    return GameMap(tuple(grid), width, height), player


def _is_closed(game_map: GameMap, x: int, y: int) -> bool:
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if not (0 <= nx < game_map.width and 0 <= ny < game_map.height):
            return False
        if game_map.grid[ny][nx] == " ":
            return False
    return True


def validate_map(game_map: GameMap, player: Optional[Player]) -> None:
    """Raise ParseError unless there is a player and every floor cell is enclosed."""
    if player is None:
        raise ParseError("Player missing")
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if char == "0" and not _is_closed(game_map, x, y):
                raise ParseError("Map not closed")