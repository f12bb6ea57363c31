"""Character classification and integer/text conversion helpers."""

import re

ALNUM = 8
ALPHA = 1024
ASCII = 8
DIGIT = 2048
PRINT = 8

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _code(c):
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def atoi(text):
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first character that is not a digit; text without
    digits gives 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def isalnum(c):
    """Return ALNUM for an ASCII letter or digit, else 0."""
    code = _code(c)
    if 48 <= code <= 57 or 65 <= code <= 90 or 97 <= code <= 122:
        return ALNUM
    return 0


def isalpha(c):
    """Return ALPHA for an ASCII letter, else 0."""
    code = _code(c)
    if 65 <= code <= 90 or 97 <= code <= 122:
        return ALPHA
    return 0


def isascii(c):
    """Return ASCII for a code in 0..127, else 0."""
    return ASCII if 0 <= _code(c) <= 127 else 0


def isdigit(c):
    """Return DIGIT for an ASCII decimal digit, else 0."""
    return DIGIT if 48 <= _code(c) <= 57 else 0


def isprint(c):
    """Return PRINT for a printable ASCII code (32..126), else 0."""
    return PRINT if 32 <= _code(c) <= 126 else 0


def _shift_case(c, low, high, delta):
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c):
    """Map an ASCII upper-case letter to lower case; other values pass through.

    A string argument gives a string back, an int gives an int.
    """
    return _shift_case(c, 65, 90, 32)


def toupper(c):
    """Map an ASCII lower-case letter to upper case; other values pass through.

    A string argument gives a string back, an int gives an int.
    """
    return _shift_case(c, 97, 122, -32)


def itoa(n):
    """Return the decimal representation of an integer."""
    n = int(n)
    if n == 0:
        return "0"
    magnitude = -n if n < 0 else n
    digits = []
    while magnitude > 0:
        magnitude, rest = divmod(magnitude, 10)
        digits.append(chr(48 + rest))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))