"""Send a text message to a receiving process, one signal per bit.

SIGUSR1 carries a 1 bit and SIGUSR2 a 0 bit.
"""

from __future__ import annotations

import os
import signal
import sys
import threading
import time
from collections.abc import Callable, Sequence

from sigtalk.chars import atoi
from sigtalk.printf import printf
from sigtalk.protocol import encode

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
RESET = "\033[0m"

DEFAULT_DELAY = 50e-6
ACK_DELAY = 80e-6

_ACK_FLAGS = ("-a", "--ack")


def parse_pid(text: str) -> int:
    """Parse a process id the way ``atoi`` does; -1 is rejected."""
    pid = atoi(text)
    if pid == -1:
        raise ValueError(f"invalid PID: {text!r}")
    return pid


def send_message(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    kill: Callable[[int, int], None] | None = None,
) -> int:
    """Signal every bit of ``message`` and its end marker to ``pid``.

    Waits ``delay`` seconds after each signal. Returns the number of signals sent.
    """
    send = os.kill if kill is None else kill
    count = 0
    for bit in encode(message):
        send(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        count += 1
        if delay > 0:
            time.sleep(delay)
    return count


def _send_and_wait(pid: int, message: str) -> None:
    received = threading.Event()

    def on_ack(signum, frame):
        received.set()

    previous = signal.signal(signal.SIGUSR1, on_ack)
    try:
        send_message(pid, message, ACK_DELAY)
        while not received.wait(0.05):
            pass
    finally:
        signal.signal(signal.SIGUSR1, signal.SIG_DFL if previous is None else previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client: ``[--ack] <PID> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = bool(args) and args[0] in _ACK_FLAGS
    if acknowledge:
        args = args[1:]
    if len(args) != 2:
        colour = YELLOW if acknowledge else RED
        printf("%sUsage: sigtalk-client [--ack] <PID> <message>%s\n", colour, RESET)
        return 1
    pid_text, message = args
    try:
        pid = parse_pid(pid_text)
        os.kill(pid, 0)
    except (ValueError, OSError):
        printf("%sInvalid PID%s\n", RED, RESET)
        return 1
    if not acknowledge:
        send_message(pid, message)
        return 0
    _send_and_wait(pid, message)
    printf("%sMessage sent successfully%s\n", GREEN, RESET)
    return 0


if __name__ == "__main__":
    sys.exit(main())