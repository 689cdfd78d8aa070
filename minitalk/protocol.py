"""Wire format for messages carried one bit per signal.

Each byte of the message travels as eight bits, most significant bit
first, and the message ends with a zero byte. A zero bit is sent as
SIGUSR1 and a one bit as SIGUSR2. The receiver acknowledges every bit
with SIGUSR1 and announces the end of a message with SIGUSR2.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
DONE_SIGNAL = signal.SIGUSR2

_BITS_PER_BYTE = 8


def _as_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8", "surrogateescape")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError(f"message must be str or bytes, got {type(message).__name__}")


def _bits(data: bytes) -> Iterator[int]:
    for byte in data:
        for shift in range(_BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of its zero terminator.

    Text is encoded as UTF-8. The message ends at its first NUL byte.
    """
    data = _as_bytes(message).partition(b"\0")[0]
    return _bits(data + b"\0")


class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> int | None:
        """Take one bit; return the byte it completes, or None.

        A returned 0 marks the end of a message.
        """
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < _BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte