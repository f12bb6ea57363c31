"""Command-line entry point: validate a .ber map and set up the game state."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .grid import TILE_SIZE, Point, count_char, locate
from .mapfile import MapError, load_map
from .printf import printf
from .reachability import COLLECTIBLE, EXIT, verify_map

MAP_EXTENSION = ".ber"


@dataclass
class GameState:
    """The playing state built from a validated map."""

    rows: List[str]
    total_star: int
    exit_position: Point
    count_move: int = 0
    count_star: int = 0

    @classmethod
    def from_map(cls, rows: Sequence[str]) -> "GameState":
        """Build a fresh state for the given map rows."""
        rows = list(rows)
        return cls(
            rows=rows,
            total_star=count_char(rows, COLLECTIBLE),
            exit_position=locate(rows, EXIT),
        )

    @property
    def window_size(self) -> Tuple[int, int]:
        """Width and height in pixels of a window showing the whole map."""
        return len(self.rows[0]) * TILE_SIZE, len(self.rows) * TILE_SIZE


def check_extension(path: str) -> bool:
    """Return True when path ends with the map file extension."""
    return path.endswith(MAP_EXTENSION)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named on the command line and prepare the game."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_extension(args[0]):
        printf("Error\nthe arg is not valid\n")
        return 0
    path = args[0]
    try:
        verify_map(path)
    except MapError as exc:
        printf("Error\n%s\n", str(exc))
        return 0
    try:
        rows = load_map(path)
    except MapError:
        printf("Error\nInvalid map\n")
        return 0
    GameState.from_map(rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())