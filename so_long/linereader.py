"""Read a stream line by line through a fixed-size read buffer."""

import os

DEFAULT_BUFFER_SIZE = 42
MAX_FD = 1024


def _newline_for(chunk):
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


def _fill(stash, read, buffer_size):
    """Read chunks into stash until one holds a newline or the input ends."""
    while True:
        chunk = read(buffer_size)
        if not chunk:
            return stash
        stash = chunk if stash is None else stash + chunk
        if _newline_for(chunk) in chunk:
            return stash


def _take_line(stash):
    """Split stash into the first line (newline kept) and what follows."""
    newline = _newline_for(stash)
    index = stash.find(newline)
    if index < 0:
        return stash, None
    rest = stash[index + 1:]
    return stash[:index + 1], (rest if rest else None)


def _next(stash, read, buffer_size):
    """Return (line or None, new stash). A read error discards the stash."""
    stash = _fill(stash, read, buffer_size)
    if not stash:
        return None, None
    line, stash = _take_line(stash)
    return (line if line else None), stash


def _check_buffer_size(buffer_size):
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")


class LineReader:
    """Return successive lines of one stream, newline included.

    The stream is a file descriptor or an object with a read(size) method;
    lines are bytes or str to match what the stream gives.
    """

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        _check_buffer_size(buffer_size)
        if isinstance(stream, int):
            self._read = lambda size: os.read(stream, size)
        else:
            self._read = stream.read
        self.buffer_size = buffer_size
        self._stash = None

    def next_line(self):
        """Return the next line, or None when the stream is exhausted."""
        stash, self._stash = self._stash, None
        line, self._stash = _next(stash, self._read, self.buffer_size)
        return line

    def __iter__(self):
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


class MultiLineReader:
    """Read lines from several file descriptors, each with its own stash."""

    def __init__(self, buffer_size=DEFAULT_BUFFER_SIZE):
        _check_buffer_size(buffer_size)
        self.buffer_size = buffer_size
        self._stashes = {}

    def next_line(self, fd):
        """Return the next line read from fd, or None at its end."""
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor must be in 0..{MAX_FD - 1}")
        stash = self._stashes.pop(fd, None)
        line, stash = _next(stash, lambda size: os.read(fd, size), self.buffer_size)
        if stash is not None:
            self._stashes[fd] = stash
        return line