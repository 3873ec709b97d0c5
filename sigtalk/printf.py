"""A small printf: %c %s %d %i %u %x %X %p and %%.

Integers follow C's 32-bit ``int`` / ``unsigned int`` rules. A ``%`` at the
very end of the format is dropped. An unknown conversion letter after ``%``
is printed as itself.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_DIGITS_LOWER = "0123456789abcdef"
_DIGITS_UPPER = "0123456789ABCDEF"

_UINT_RANGE = 1 << 32
_INT_MAX = (1 << 31) - 1


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_signed32(value: int) -> int:
    value %= _UINT_RANGE
    return value - _UINT_RANGE if value > _INT_MAX else value


def _to_unsigned32(value: int) -> int:
    return value % _UINT_RANGE


def format_number(n: int, base: int = 10, upper: bool = False) -> str:
    """Write ``n`` in ``base`` (2 to 16), with a leading '-' when negative."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    digits = _DIGITS_UPPER if upper else _DIGITS_LOWER
    if n < 0:
        return "-" + format_number(-n, base, upper)
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Write an address as ``0x`` followed by lower-case hex; None is ``0x0``."""
    if address is None:
        address = 0
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    return "0x" + format_number(address, 16)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return format_pointer(value if value is None else _as_int(value, "p"))
    number = _as_int(value, spec)
    if spec in "di":
        return format_number(_to_signed32(number), 10)
    if spec == "u":
        return format_number(_to_unsigned32(number), 10)
    return format_number(_to_unsigned32(number), 16, upper=spec == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write for ``fmt`` and ``args``."""
    arg_iter = iter(args)
    out: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if ch == "%":
            if pos + 1 < length:
                out.append(_convert(fmt[pos + 1], arg_iter))
                pos += 2
                continue
        else:
            out.append(ch)
        pos += 1
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Format and write to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    target.flush()
    return len(text)