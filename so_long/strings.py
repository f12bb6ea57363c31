"""String helpers with C-library semantics over Python strings.

Positions are returned as indexes rather than pointers. A missing match is
``None``. The terminating NUL of a C string is modelled as the position just
past the end of the text.
"""

NUL = "\0"


def _char(c):
    """Normalise a one-character string or an integer code to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(int(c) & 0xFF)


def _code_at(s, index):
    """Return the code of s[index], or 0 past the end (the terminator)."""
    return ord(s[index]) if index < len(s) else 0


def strchr(s, c):
    """Return the index of the first occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s, c):
    """Return the index of the last occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1, s2, n):
    """Compare at most n characters; return the code difference at the first
    mismatch, or 0 when the compared prefixes are equal."""
    if n <= 0:
        return 0
    limit = min(n - 1, max(len(s1), len(s2)))
    i = 0
    while i < limit and _code_at(s1, i) and _code_at(s1, i) == _code_at(s2, i):
        i += 1
    return _code_at(s1, i) - _code_at(s2, i)


def strnstr(big, little, length):
    """Return the index of the first occurrence of little that lies wholly
    within the first length characters of big, or None.

    An empty needle matches at index 0.
    """
    if not little:
        return 0
    end = min(length, len(big))
    index = big.find(little, 0, end)
    return None if index < 0 else index


def strlcpy(src, size):
    """Copy src into a buffer of size characters, terminator included.

    Returns ``(copied, len(src))``: the text that fits, and the length the
    caller would have needed, so truncation shows as ``len(copied) < total``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst, src, size):
    """Append src to dst within a buffer of size characters.

    Returns ``(result, wanted)`` where result is the new contents of the
    buffer and wanted is the length the full concatenation would need. When
    size does not exceed len(dst), dst is unchanged and wanted is
    ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    len_dst = len(dst)
    len_src = len(src)
    if size <= len_dst:
        return dst, len_src + size
    if not src:
        return dst, len_dst
    room = size - 1 - len_dst
    return dst + src[:room], len_dst + len_src


def substr(s, start, length):
    """Return at most length characters of s from start on.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1, s2):
    """Return the concatenation of s1 and s2."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strtrim(s, charset):
    """Remove every leading and trailing character that appears in charset."""
    if s is None or charset is None:
        raise TypeError("both the string and the character set are required")
    if not charset:
        return s
    return s.strip(charset)


def split(s, sep):
    """Split s on the single character sep, dropping empty pieces."""
    if s is None:
        raise TypeError("a string is required")
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s, func):
    """Build a new string from func(index, char) applied to each character."""
    if s is None or func is None:
        raise TypeError("both the string and the function are required")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s, func):
    """Call func(index, s) for each position of the mutable sequence s.

    The callback may change ``s[index]`` in place. The length of s is taken
    once, before the first call.
    """
    if s is None or func is None:
        return
    for index in range(len(s)):
        func(index, s)