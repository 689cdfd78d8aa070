"""Rendering of single printf values, and the width they occupy."""

from __future__ import annotations

from .printf_spec import Conversion, FormatSpec

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_POINTER_MOD = 1 << 64


def _as_int(value: object, conversion: Conversion) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion.value} expects an int, got {type(value).__name__}"
        )
    return value


def _signed(value: object, conversion: Conversion) -> int:
    number = _as_int(value, conversion) % _UINT_MOD
    return number - _UINT_MOD if number > _INT_MAX else number


def _unsigned(value: object, conversion: Conversion) -> int:
    return _as_int(value, conversion) % _UINT_MOD


def _pointer(value: object) -> int | None:
    """Return the address as an unsigned 64-bit int, or None for a null pointer."""
    if value is None:
        return None
    address = _as_int(value, Conversion.POINTER) % _POINTER_MOD
    return address or None


def _string(value: object) -> str | None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, Conversion.CHAR) % 256)


def _suppressed(spec: FormatSpec, number: int) -> bool:
    """A zero printed with precision 0 produces no digits at all."""
    return number == 0 and spec.precision == 0


def _digits(spec: FormatSpec, value: object) -> str:
    """Digits of a numeric conversion, without sign or prefix."""
    conversion = spec.conversion
    if conversion in (Conversion.DECIMAL, Conversion.INTEGER):
        number = abs(_signed(value, conversion))
        return "" if _suppressed(spec, number) else str(number)
    number = _unsigned(value, conversion)
    if _suppressed(spec, number):
        return ""
    if conversion is Conversion.UNSIGNED:
        return str(number)
    if conversion is Conversion.HEX_LOWER:
        return format(number, "x")
    return format(number, "X")


_NUMERIC = frozenset(
    {
        Conversion.DECIMAL,
        Conversion.INTEGER,
        Conversion.UNSIGNED,
        Conversion.HEX_LOWER,
        Conversion.HEX_UPPER,
    }
)


def value_width(spec: FormatSpec, value: object) -> int:
    """Number of characters the bare value takes, before any padding.

    A missing string counts as the six characters of its placeholder, a
    null pointer as five; the sign of a negative number is not counted.
    """
    conversion = spec.conversion
    if conversion in (Conversion.CHAR, Conversion.PERCENT):
        if conversion is Conversion.CHAR:
            _char(value)
        return 1
    if conversion is Conversion.STRING:
        text = _string(value)
        return len(NULL_STRING) if text is None else len(text)
    if conversion is Conversion.POINTER:
        address = _pointer(value)
        return len(NULL_POINTER) if address is None else len(format(address, "x"))
    return len(_digits(spec, value))


def render_value(spec: FormatSpec, value: object) -> str:
    """Render the bare value for ``spec``: no padding, sign or 0x prefix."""
    conversion = spec.conversion
    if conversion is Conversion.CHAR:
        return _char(value)
    if conversion is Conversion.PERCENT:
        return "%"
    if conversion is Conversion.STRING:
        text = _string(value)
        return NULL_STRING if text is None else text
    if conversion is Conversion.POINTER:
        address = _pointer(value)
        return NULL_POINTER if address is None else format(address, "x")
    if conversion in _NUMERIC:
        return _digits(spec, value)
    raise ValueError(f"unsupported conversion {conversion!r}")


def truncate_string(value: str | None, limit: int) -> str:
    """Render a string cut to at most ``limit`` characters.

    A missing string shows its placeholder only when the whole placeholder
    fits within the limit; otherwise nothing is shown.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an int, got {type(limit).__name__}")
    text = _string(value)
    if text is None:
        return NULL_STRING if limit >= len(NULL_STRING) else ""
    if limit <= 0:
        return ""
    return text[:limit]