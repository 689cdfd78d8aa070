"""String and byte-buffer helpers with C library semantics.

Search functions return an index into the text, or ``None`` when nothing
is found. Searching for the NUL character finds the end of the text, just
as it finds the terminator of a C string.
"""

from __future__ import annotations

from itertools import chain, islice

_NUL = "\0"


def _single_char(ch: str, name: str) -> str:
    if not isinstance(ch, str):
        raise TypeError(f"{name} must be a str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"{name} must be a single character, got {ch!r}")
    return ch


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _terminated(text: str) -> str:
    """Return the part of ``text`` before any embedded NUL character."""
    return text.partition(_NUL)[0]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that occurs in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = _terminated(haystack).find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings by their UTF-8 bytes.

    Returns the difference of the first differing unsigned bytes, with the
    end of a string counting as a zero byte, or 0 if they match.
    """
    _non_negative(n, "n")
    left = chain(_terminated(s1).encode("utf-8"), (0,))
    right = chain(_terminated(s2).encode("utf-8"), (0,))
    for a, b in islice(zip(left, right), n):
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 if they match.
    """
    _non_negative(n, "n")
    first = memoryview(b1).cast("B")
    second = memoryview(b2).cast("B")
    if n > len(first) or n > len(second):
        raise ValueError(f"cannot compare {n} bytes of buffers of sizes {len(first)} and {len(second)}")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``; NUL gives the end of the text."""
    _single_char(ch, "ch")
    visible = _terminated(text)
    if ch == _NUL:
        return len(visible)
    index = visible.find(ch)
    return index if index >= 0 else None


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``; NUL gives the end of the text."""
    _single_char(ch, "ch")
    visible = _terminated(text)
    if ch == _NUL:
        return len(visible)
    index = visible.rfind(ch)
    return index if index >= 0 else None