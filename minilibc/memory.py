"""Byte buffer operations on bytearray and memoryview objects."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check(buf: Buffer, n: int, role: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise ValueError(f"{n} bytes requested but the {role} holds only {len(buf)}")


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy n bytes from src to the start of dst and return dst."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = src[:n]
    return dst


def memmove(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy n bytes from src to dst, correct even when the two overlap."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c within n bytes, or None."""
    _check(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Difference of the first unequal bytes within n bytes, or 0 if all agree."""
    _check(s1, n, "first buffer")
    _check(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0