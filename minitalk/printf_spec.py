"""Parsing of printf conversion specifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Conversion(Enum):
    """The conversions the formatter understands."""

    CHAR = "c"
    STRING = "s"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    POINTER = "p"
    PERCENT = "%"


_CONVERSION_CHARS = frozenset(c.value for c in Conversion)

_PRECISION_PARSED = frozenset(Conversion) - {Conversion.PERCENT}
_PRECISION_KEPT = _PRECISION_PARSED - {Conversion.CHAR}
_ZERO_PAD = frozenset(
    {
        Conversion.DECIMAL,
        Conversion.INTEGER,
        Conversion.UNSIGNED,
        Conversion.HEX_LOWER,
        Conversion.HEX_UPPER,
        Conversion.POINTER,
    }
)
_ALTERNATE = frozenset({Conversion.HEX_LOWER, Conversion.HEX_UPPER})
_SIGNED = frozenset({Conversion.DECIMAL, Conversion.INTEGER, Conversion.POINTER})


@dataclass
class FormatSpec:
    """One conversion specification, as read after a '%'.

    ``precision`` is ``None`` when no precision was given. ``sign`` is
    ``""``, ``" "`` or ``"+"``. ``consumed`` is the number of characters
    the specification occupies, conversion character included.
    """

    conversion: Conversion
    width: int = 0
    precision: int | None = None
    zero_pad: bool = False
    left_align: bool = False
    sign: str = ""
    alternate: bool = False
    consumed: int = 0


def _read_number(text: str, pos: int) -> tuple[int, int]:
    """Read ASCII digits from ``pos``; return the value and the next position."""
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return (int(text[pos:end]) if end > pos else 0), end


def parse_spec(text: str) -> FormatSpec:
    """Parse the specification that follows a '%' at the start of ``text``.

    Everything up to the first conversion character is read as flags;
    characters that are not flags are skipped. Raises ``ValueError`` when
    ``text`` holds no conversion character.
    """
    end = next((i for i, ch in enumerate(text) if ch in _CONVERSION_CHARS), None)
    if end is None:
        raise ValueError(f"no conversion character in {text!r}")
    conversion = Conversion(text[end])
    spec = FormatSpec(
        conversion=conversion,
        alternate=conversion is Conversion.POINTER,
        consumed=end + 1,
    )
    flags = text[:end]
    pos = 0
    while pos < len(flags):
        ch = flags[pos]
        if conversion is not Conversion.PERCENT and ch == "-":
            spec.zero_pad = False
            spec.left_align = True
        elif conversion is not Conversion.PERCENT and "1" <= ch <= "9":
            spec.width, pos = _read_number(flags, pos)
            continue
        elif ch == "." and conversion in _PRECISION_PARSED:
            precision, pos = _read_number(flags, pos + 1)
            spec.precision = precision if conversion in _PRECISION_KEPT else None
            continue
        elif ch == "0" and not spec.left_align and conversion in _ZERO_PAD:
            spec.zero_pad = True
        elif ch == "#" and conversion in _ALTERNATE:
            spec.alternate = True
        elif conversion in _SIGNED:
            if ch == " " and spec.sign != "+":
                spec.sign = " "
            elif ch == "+":
                spec.sign = "+"
        pos += 1
    return spec