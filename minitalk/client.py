"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from collections.abc import Callable, Iterator

from .chars import atoi
from .printf import printf
from .protocol import ACK_SIGNAL, DONE_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, encode_bits

_SIGNALS = frozenset({ACK_SIGNAL, DONE_SIGNAL})


@contextlib.contextmanager
def _signals_blocked(signals: frozenset[signal.Signals]) -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield
    finally:
        while pending := signals & signal.sigpending():
            signal.sigwait(pending)
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


class Client:
    """Sends one message to the process ``server_pid``."""

    def __init__(
        self,
        server_pid: int,
        message: str | bytes,
        send: Callable[[int, int], None] = os.kill,
    ) -> None:
        self.server_pid = server_pid
        self.message = message
        self.finished = False
        self._bits = encode_bits(message)
        self._send = send

    def on_signal(self, signum: int) -> bool:
        """React to a signal from the server; return True once the message is delivered.

        An acknowledgement sends the next bit; errors from sending propagate.
        """
        if signum == DONE_SIGNAL:
            self.finished = True
            return True
        bit = next(self._bits, None)
        if bit is not None:
            self._send(self.server_pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        return False

    def run(self) -> None:
        """Send the whole message, waiting for each acknowledgement."""
        with _signals_blocked(_SIGNALS):
            done = self.on_signal(ACK_SIGNAL)
            while not done:
                done = self.on_signal(signal.sigwait(_SIGNALS))


def main(argv: list[str] | None = None) -> int:
    """Send ``<string>`` to the server ``<server_pid>`` given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        if len(args) < 2:
            printf("\033[37;31mERROR: not enough arguments\n")
        else:
            printf("\033[37;31mERROR: too many arguments\n")
        printf("\033[0mUSAGE: client <server_pid> <string>\n")
        return 1
    message = os.fsencode(args[1])
    client = Client(atoi(args[0]), message)
    try:
        client.run()
    except OSError:
        printf("\033[37;31mkill returned -1\n \033[0m*probably server pid is wrong*\n")
        return 0
    printf("\033[32m[INFO]\033[0m all of the message succsessfuly sent\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())