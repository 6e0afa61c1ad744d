"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with the low byte of *value*; return *buf*."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    mem_set(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *c* in the first *n* bytes, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def mem_cmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare up to *n* bytes; return the difference of the first unequal pair, else 0."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    _check_count(n, len(a), len(b))
    return 0


def mem_cpy(dest: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy the first *n* bytes of *src* into *dest*; return *dest*."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buf* from offset *src* to offset *dest*, overlap allowed."""
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf