"""A small printf: format strings with c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from .printf_render import render_value, truncate_string, value_width
from .printf_spec import Conversion, FormatSpec, parse_spec

_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_POINTER_MOD = 1 << 64

_SIGNED = frozenset({Conversion.DECIMAL, Conversion.INTEGER})
_UNSIGNED = frozenset(
    {Conversion.UNSIGNED, Conversion.HEX_LOWER, Conversion.HEX_UPPER}
)
_NUMERIC = _SIGNED | _UNSIGNED


def _signed_int(value: int) -> int:
    number = value % _UINT_MOD
    return number - _UINT_MOD if number > _INT_MAX else number


def _is_null_pointer(value: object) -> bool:
    return value is None or (isinstance(value, int) and value % _POINTER_MOD == 0)


def _next_argument(spec: FormatSpec, values: Iterator[object]) -> object:
    if spec.conversion is Conversion.PERCENT:
        return None
    try:
        return next(values)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for %{spec.conversion.value}"
        ) from None


def _render(spec: FormatSpec, value: object) -> str:
    """Render one conversion with its padding, sign, prefix and zeros."""
    conversion = spec.conversion
    precision = spec.precision
    size = value_width(spec, value)

    pad_before = spec.width - size
    zeros = 0
    if precision is not None:
        zeros = precision - size
        if conversion is Conversion.STRING and precision < size:
            pad_before += size - precision
            if value is None:
                pad_before += precision
        if conversion in _NUMERIC and precision > size:
            pad_before -= zeros

    signed = _signed_int(value) if conversion in _SIGNED else 0
    unsigned = value % _UINT_MOD if conversion in _UNSIGNED else 0

    prefix = ""
    if spec.alternate:
        if conversion is Conversion.POINTER:
            if not _is_null_pointer(value):
                prefix = "0x"
        elif unsigned != 0:
            prefix = "0X" if conversion is Conversion.HEX_UPPER else "0x"
        if prefix:
            pad_before -= 2

    sign = ""
    if spec.sign and signed >= 0:
        sign = spec.sign
        pad_before -= 1
    if conversion in _SIGNED and signed < 0:
        sign = "-"
        pad_before -= 1

    pad_after = 0
    if spec.left_align:
        pad_after, pad_before = pad_before, 0
    if spec.zero_pad and precision is None:
        zeros += pad_before
        pad_before = 0

    if conversion is Conversion.STRING:
        zeros = 0
        body = (
            truncate_string(value, precision)
            if precision is not None
            else render_value(spec, value)
        )
    else:
        body = render_value(spec, value)

    return "".join(
        (" " * pad_before, sign, prefix, "0" * zeros, body, " " * pad_after)
    )


def format_printf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    The format ends at its first NUL character. A '%' that is not followed
    by any conversion character is written out as it stands. Raises
    ``TypeError`` when ``fmt`` is None or arguments are missing or of the
    wrong type; surplus arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a str, not None")
    text = fmt.partition("\0")[0]
    values = iter(args)
    out: list[str] = []
    pos = 0
    while pos < len(text):
        percent = text.find("%", pos)
        if percent < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:percent])
        try:
            spec = parse_spec(text[percent + 1 :])
        except ValueError:
            out.append("%")
            pos = percent + 1
            continue
        out.append(_render(spec, _next_argument(spec, values)))
        pos = percent + 1 + spec.consumed
    return "".join(out)


def printf(fmt: str | None, *args: object) -> int:
    """Write the formatted text to standard output.

    Returns the number of characters written, or -1 when ``fmt`` is None.
    """
    if fmt is None:
        return -1
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)