"""Checks that every collectible and the exit can be reached from the player."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from .grid import Point, count_char, locate
from .mapfile import MapError, load_map

WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
_TARGETS = frozenset((COLLECTIBLE, EXIT))


def flood_fill(rows: Sequence[str], start: Point) -> bool:
    """Fill every open cell reachable from start.

    Returns True when no collectible or exit is left unreached. Cells
    outside the grid count as walls. The given rows are not modified.
    """
    grid = [list(row) for row in rows]
    pending = [(start.x, start.y)]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < len(grid) and 0 <= y < len(grid[x])):
            continue
        if grid[x][y] == WALL:
            continue
        grid[x][y] = WALL
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return not any(cell in _TARGETS for row in grid for cell in row)


def check_count_char(rows: Sequence[str]) -> None:
    """Raise MapError unless the map has at least one collectible, exactly
    one exit and exactly one player start."""
    if (
        count_char(rows, COLLECTIBLE) == 0
        or count_char(rows, EXIT) != 1
        or count_char(rows, PLAYER) != 1
    ):
        raise MapError("Too much or not enough of one char")


def verify_map(path: Union[str, Path]) -> List[str]:
    """Load the map at path and check it fully; return its rows.

    Raises MapError on the first problem found.
    """
    rows = load_map(path)
    check_count_char(rows)
    start = locate(rows, PLAYER)
    if not flood_fill(rows, start):
        raise MapError("You can't go through the wall")
    return rows