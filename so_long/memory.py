"""Byte-buffer helpers working on bytes and bytearray objects."""

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _require(buf, n, what="buffer"):
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, {n} requested")


def bzero(buf, n):
    """Set the first n bytes of a mutable buffer to zero."""
    _require(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb, size):
    """Return a zero-filled bytearray of nmemb elements of size bytes each.

    Raises OverflowError when the total size cannot be represented.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(nmemb * size)


def memchr(buf, c, n):
    """Return the index of the first byte equal to c in buf[:n], or None."""
    _require(buf, n)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a, b, n):
    """Compare the first n bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _require(a, n, "first buffer")
    _require(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest, src, n):
    """Copy n bytes from src to the start of dest and return dest."""
    _require(dest, n, "destination")
    _require(src, n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(buf, dest, src, n):
    """Move n bytes inside buf from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _require(buf, dest + n, "destination range")
    _require(buf, src + n, "source range")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf, c, n):
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _require(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf