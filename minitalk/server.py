"""Server that receives messages sent bit by bit as signals."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from collections.abc import Callable, Iterator
from typing import BinaryIO

from .printf import printf
from .protocol import ACK_SIGNAL, DONE_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, BitDecoder

_SIGNALS = frozenset({ZERO_SIGNAL, ONE_SIGNAL})


@contextlib.contextmanager
def _signals_blocked(signals: frozenset[signal.Signals]) -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield
    finally:
        while pending := signals & signal.sigpending():
            signal.sigwait(pending)
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


class Server:
    """Decodes incoming bits, writes each byte out and acknowledges the sender."""

    def __init__(
        self,
        output: BinaryIO | None = None,
        notify: Callable[[int, int], None] = os.kill,
    ) -> None:
        self._output = output
        self._notify = notify
        self._decoder = BitDecoder()

    def _write(self, data: bytes) -> None:
        stream = self._output if self._output is not None else sys.stdout.buffer
        stream.write(data)
        stream.flush()

    def _send(self, pid: int, signum: int) -> None:
        with contextlib.suppress(OSError):
            self._notify(pid, signum)

    def handle(self, signum: int, sender: int) -> None:
        """Process one received signal from process ``sender``."""
        bit = 1 if signum == ONE_SIGNAL else 0
        byte = self._decoder.feed(bit)
        if byte == 0:
            self._write(b"\n")
            self._send(sender, DONE_SIGNAL)
        elif byte is not None:
            self._write(bytes([byte]))
        self._send(sender, ACK_SIGNAL)

    def serve_forever(self) -> None:
        """Wait for signals and handle them until interrupted."""
        with _signals_blocked(_SIGNALS):
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Print the server's process id and serve until interrupted."""
    server = Server()
    printf("Server PID:%8d\n", os.getpid())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())