"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

import sys

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_signed32(value):
    value = int(value) & 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_unsigned32(value):
    return int(value) & 0xFFFFFFFF


def _in_base(n, digits):
    """Write an integer in the base given by the digit alphabet."""
    if n == 0:
        return digits[0]
    base = len(digits)
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while n:
        n, rest = divmod(n, base)
        out.append(digits[rest])
    return sign + "".join(reversed(out))


def _convert_char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return chr(ord(value) & 0xFF)
    return chr(int(value) & 0xFF)


def _convert_string(value):
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError("%s expects a string or None")
    return value


def _convert_pointer(value):
    if not value:
        return _NULL_POINTER
    return "0x" + _in_base(int(value) & 0xFFFFFFFFFFFFFFFF, _HEX_LOWER)


_CONVERSIONS = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": lambda v: _in_base(_to_signed32(v), _DECIMAL),
    "i": lambda v: _in_base(_to_signed32(v), _DECIMAL),
    "u": lambda v: _in_base(_to_unsigned32(v), _DECIMAL),
    "x": lambda v: _in_base(_to_unsigned32(v), _HEX_LOWER),
    "X": lambda v: _in_base(_to_unsigned32(v), _HEX_UPPER),
}


def format_string(fmt, *args):
    """Expand fmt with args and return the resulting text.

    An unknown conversion character is consumed and produces nothing; a lone
    '%' at the end of fmt produces nothing. Missing arguments raise TypeError;
    extra arguments are ignored.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt, *args):
    """Write the expansion of fmt to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)