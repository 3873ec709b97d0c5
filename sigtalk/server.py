"""Receive messages sent one bit per signal and print them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Hashable, Sequence
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder

GREEN = "\033[0;32m"
RED = "\033[0;31m"
RESET = "\033[0m"

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}
_ACK_FLAGS = ("-a", "--ack")


class Server:
    """Turns incoming SIGUSR1/SIGUSR2 signals into bytes on ``output``.

    The end of each message is written as a newline. With ``acknowledge``
    set, the sender is signalled with SIGUSR1 once its message is complete.
    """

    def __init__(
        self,
        output: BinaryIO | None = None,
        acknowledge: bool = False,
        kill: Callable[[int, int], None] | None = None,
    ) -> None:
        self._output = sys.stdout.buffer if output is None else output
        self.acknowledge = acknowledge
        self._kill = os.kill if kill is None else kill
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender: Hashable) -> int | None:
        """Take one signal from ``sender``; return the byte it completed, if any."""
        byte = self._decoder.feed(sender, signum == signal.SIGUSR1)
        if byte is None:
            return None
        if byte == 0:
            self._output.write(b"\n")
            self._output.flush()
            if self.acknowledge:
                self._kill(sender, signal.SIGUSR1)
        else:
            self._output.write(bytes((byte,)))
            self._output.flush()
        return byte

    def serve_forever(self) -> None:
        """Wait for signals and handle them until interrupted."""
        if not hasattr(signal, "sigwaitinfo"):
            raise RuntimeError("receiving signals with sender ids is not supported here")
        signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        while True:
            info = signal.sigwaitinfo(_SIGNALS)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server: print its PID, then print every message received."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = bool(args) and args[0] in _ACK_FLAGS
    if acknowledge:
        args = args[1:]
    if args:
        printf("%sUsage: sigtalk-server [--ack]%s\n", RED, RESET)
        return 1
    server = Server(acknowledge=acknowledge)
    signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    printf("%s%d%s\n", GREEN, os.getpid(), RESET)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())