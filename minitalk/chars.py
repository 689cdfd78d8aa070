"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    while pos < length and _is_ascii_digit(text[pos]):
        value = _wrap_int(10 * value + (ord(text[pos]) - ord("0")))
        pos += 1
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)