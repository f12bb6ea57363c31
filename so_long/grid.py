"""Grid positions and lookups over map rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

TILE_SIZE = 32


@dataclass(frozen=True)
class Point:
    """A grid position: x is the row index, y the column index."""

    x: int
    y: int


NOT_FOUND = Point(-1, -1)


def locate(rows: Sequence[str], char: str) -> Point:
    """Return the first position of char, scanning rows top to bottom.

    The scan stops at the first empty row. Returns Point(-1, -1) when char
    is not found.
    """
    for x, row in enumerate(rows):
        if not row:
            break
        y = row.find(char)
        if y >= 0:
            return Point(x, y)
    return NOT_FOUND


def count_char(rows: Sequence[str], char: str) -> int:
    """Return how many times char appears across all rows."""
    return sum(row.count(char) for row in rows)