"""Reading a map file into rows of text."""

from __future__ import annotations

from typing import Iterator, List

from .linereader import LineReader


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


def _raw_lines(path) -> Iterator[str]:
    """Yield the lines of the file at path, newline characters kept."""
    try:
        stream = open(path, "r", encoding="latin-1", newline="")
    except OSError as exc:
        raise MapError(f"Cannot open map file: {path}") from exc
    with stream:
        yield from LineReader(stream)


def read_lines(path) -> List[str]:
    """Return the lines of the file at path without their newline."""
    return [line.rstrip("\n") for line in _raw_lines(path)]


def count_lines(path) -> int:
    """Return the number of lines in the file at path.

    Raises MapError when the file is empty.
    """
    count = sum(1 for _ in _raw_lines(path))
    if count == 0:
        raise MapError("File is empty")
    return count


def check_trailing_newline(path) -> None:
    """Raise MapError when the map ends with an empty line.

    That is the case when the file holds as many newlines as lines, so the
    last line is terminated by a newline too.
    """
    newlines = sum(line.count("\n") for line in _raw_lines(path))
    if newlines == count_lines(path):
        raise MapError("Map ends with an empty line")


def load_map(path) -> List[str]:
    """Read and validate the map at path and return its rows."""
    from .validate import check_map

    check_trailing_newline(path)
    return check_map(read_lines(path))