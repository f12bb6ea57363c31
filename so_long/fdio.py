"""Write characters, strings and numbers to a stream or file descriptor."""

import os


def _write(stream, text):
    if isinstance(stream, int):
        os.write(stream, text.encode())
    else:
        stream.write(text)


def putchar_fd(c, stream):
    """Write one character; an int is taken as a character code."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    _write(stream, c)


def putstr_fd(s, stream):
    """Write s; None writes nothing."""
    if s is None:
        return
    _write(stream, s)


def putendl_fd(s, stream):
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    _write(stream, s + "\n")


def putnbr_fd(n, stream):
    """Write the decimal representation of an integer."""
    _write(stream, str(int(n)))