"""ASCII character classification and case conversion.

Each function accepts either an integer code or a one-character string.
The classifiers return a bool. The case converters return a value of the
same kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is an int or a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    """Return *code* in the same form as *original*."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    n = _code(c)
    return 65 <= n <= 90 or 97 <= n <= 122


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    n = _code(c)
    return 48 <= n <= 57


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code in the range 0-127."""
    n = _code(c)
    return 0 <= n < 128


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    n = _code(c)
    return 32 <= n <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    n = _code(c)
    if 65 <= n <= 90:
        return _like(c, n + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    n = _code(c)
    if 97 <= n <= 122:
        return _like(c, n - 32)
    return c