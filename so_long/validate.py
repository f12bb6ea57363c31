"""Structural checks on the rows of a map."""

from __future__ import annotations

from typing import List, Sequence

from .mapfile import MapError

WALL = "1"
ALLOWED = frozenset("10CEP")
MAX_WIDTH = 60
MAX_ROWS = 30


def check_line(line: str) -> None:
    """Raise MapError unless line is walled at both ends and holds only
    allowed characters."""
    if not line or line[0] != WALL or line[-1] != WALL:
        raise MapError("First or last character is invalid")
    if not set(line) <= ALLOWED:
        raise MapError("Invalid characters in map")


def check_len(rows: Sequence[str]) -> bool:
    """Return True when every row has the length of the first."""
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def check_start_last(rows: Sequence[str]) -> bool:
    """Return True when the first and the last rows are made only of walls."""
    return all(ch == WALL for ch in rows[0]) and all(ch == WALL for ch in rows[-1])


def check_shape(rows: Sequence[str]) -> None:
    """Raise MapError when the map is not rectangular, is too large, or its
    top or bottom row is not a wall."""
    if not check_len(rows):
        raise MapError("Inconsistent line length")
    if len(rows[0]) + 1 > MAX_WIDTH or len(rows) > MAX_ROWS:
        raise MapError("Map size exceeds limit")
    if not check_start_last(rows):
        raise MapError("First or last line is invalid")


def check_map(rows: Sequence[str]) -> List[str]:
    """Validate the rows of a map and return them as a list."""
    rows = list(rows)
    if not rows:
        raise MapError("File is empty")
    check_shape(rows)
    for row in rows[1:]:
        check_line(row)
    return rows