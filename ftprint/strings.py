"""String helpers: conversion, searching, splitting, bounded copy and compare.

Strings are ordinary Python strings. A ``"\\0"`` character is treated as the
end of the text wherever the search or compare semantics depend on it, and
positions are returned as indices (or ``None`` when nothing is found).
"""

from __future__ import annotations

import re
from collections.abc import Callable, MutableSequence
from itertools import chain, islice, repeat
from typing import Any, Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r"[ \t\n\v\r\f]*([+-]?)([0-9]*)")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first *c* in *text*.

    Searching for ``"\\0"`` finds the end of the text.
    """
    _check_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == "\0" else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last *c* in *text*.

    Searching for ``"\\0"`` finds the end of the text.
    """
    _check_char(c)
    if c == "\0":
        end = text.find("\0")
        return len(text) if end < 0 else end
    index = text.rfind(c)
    return None if index < 0 else index


def striteri(text: MutableSequence[Any], func: Callable[[int, MutableSequence[Any]], None]) -> None:
    """Call ``func(index, text)`` for every position of the mutable *text*.

    The function receives the sequence itself, so it may change the element
    at the given index in place.
    """
    for index in range(len(text)):
        func(index, text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of *first* and *second*."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation would
    have needed (``size + len(src)`` when *size* does not exceed *dest*).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dest, len(src)
    room = max(0, size - 1 - len(dest))
    result = dest + src[:room]
    if size > len(dest):
        return result, len(dest) + len(src)
    return result, size + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copied text and the length of *src*. A *size* of 0 copies
    nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def _codes(text: str):
    return chain(map(ord, text), repeat(0))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in islice(zip(_codes(first), _codes(second)), n):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of *needle* lying wholly within the first *length* characters."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    end = haystack.find("\0")
    if end >= 0:
        haystack = haystack[:end]
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to *length* characters of *text* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]