"""Command that loads a scene file and reports its map size."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubmap.config import parse_file
from cubmap.errors import ParseError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named by the first argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error\nNo file")
        return 1
    try:
        config = parse_file(args[0])
    except ParseError as error:
        print(f"Error\n{error.message}")
        return 1
    print(f"Loaded map {config.game_map.width}x{config.game_map.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())