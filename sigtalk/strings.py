"""String helpers with C string semantics, expressed on Python strings.

Positions are returned as indices rather than pointers. Where C would hand
back a null pointer, these functions return None.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

_NUL = "\0"


def _single_char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken as code points."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _codes(text: str | bytes) -> Sequence[int]:
    """Return the character codes of ``text``."""
    if isinstance(text, (bytes, bytearray)):
        return text
    return [ord(ch) for ch in text]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    separator = _single_char(sep)
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text yields an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _compare(a: str | bytes, b: str | bytes, limit: int | None) -> int:
    left = _codes(a)
    right = _codes(b)
    count = max(len(left), len(right)) + 1
    if limit is not None:
        count = min(count, limit)
    for pos in range(count):
        x = left[pos] if pos < len(left) else 0
        y = right[pos] if pos < len(right) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strcmp(a: str | bytes, b: str | bytes) -> int:
    """Compare two strings character by character.

    Returns the difference of the first differing character codes, a negative
    number when ``a`` is a prefix of ``b`` and 0 when they are equal.
    """
    return _compare(a, b, None)


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _compare(a, b, n)


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``; a NUL matches at ``len(text)``."""
    char = _single_char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``; a NUL matches at ``len(text)``."""
    char = _single_char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one counts as empty, both missing gives None."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))