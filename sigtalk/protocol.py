"""Bit-level wire format: each byte travels most significant bit first,
and a message ends with a zero byte."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator

_BITS_PER_BYTE = 8


def _as_bytes(message: str | bytes) -> bytes:
    return message.encode("utf-8") if isinstance(message, str) else bytes(message)


def encode(message: str | bytes) -> Iterator[int]:
    """Yield the bits (0 or 1) that carry ``message`` and its terminating zero byte.

    Text is sent as UTF-8.
    """
    for byte in _as_bytes(message) + b"\x00":
        for shift in range(_BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class BitDecoder:
    """Reassembles bytes from bits, starting over whenever the sender changes."""

    def __init__(self) -> None:
        self._sender: Hashable | None = None
        self._value = 0
        self._count = 0

    def reset(self) -> None:
        """Forget the partial byte and the current sender."""
        self._sender = None
        self._value = 0
        self._count = 0

    def feed(self, sender: Hashable, bit: int | bool) -> int | None:
        """Add one bit from ``sender``.

        Returns the completed byte value (0 marks the end of a message) once
        eight bits have arrived from the same sender, otherwise None.
        """
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if sender != self._sender:
            self._sender = sender
            self._value = 0
            self._count = 0
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < _BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte


def decode(bits: Iterable[int | bool]) -> bytes:
    """Return what a receiver prints for ``bits`` sent by a single sender.

    Every terminating zero byte is shown as a newline; trailing bits that do
    not complete a byte are dropped.
    """
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(0, bit)
        if byte is not None:
            out.append(byte if byte else ord("\n"))
    return bytes(out)