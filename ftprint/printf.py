"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO

_UINT_MOD = 2**32
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_DIGITS_LOWER = "0123456789abcdef"
_DIGITS_UPPER = "0123456789ABCDEF"


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: Any, conversion: str) -> int:
    """Reduce *value* to a 32-bit signed integer, wrapping as a C int would."""
    n = _require_int(value, conversion) % _UINT_MOD
    return n - _UINT_MOD if n > _INT_MAX else n


def _as_uint32(value: Any, conversion: str) -> int:
    """Reduce *value* to a 32-bit unsigned integer, wrapping as a C unsigned int would."""
    return _require_int(value, conversion) % _UINT_MOD


def format_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of the non-negative integer *n*, without prefix."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"cannot format a negative value as hex: {n}")
    digits = _DIGITS_UPPER if upper else _DIGITS_LOWER
    out = []
    while True:
        n, rest = divmod(n, 16)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` followed by lower-case hex; None or 0 gives ``0x0``."""
    if address is None or address == 0:
        return "0x0"
    return "0x" + format_hex(address)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": lambda v: str(_as_int32(v, "d")),
    "i": lambda v: str(_as_int32(v, "i")),
    "u": lambda v: str(_as_uint32(v, "u")),
    "x": lambda v: format_hex(_as_uint32(v, "x")),
    "X": lambda v: format_hex(_as_uint32(v, "X"), upper=True),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    chars = iter(fmt)
    values = iter(args)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions produce no output and consume no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)