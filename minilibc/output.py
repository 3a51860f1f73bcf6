"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from minilibc.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write one character to fd."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: str | None, fd: int) -> None:
    """Write s to fd; nothing is written for None."""
    if s is None:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: str | None, fd: int) -> None:
    """Write s followed by a newline to fd."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to fd."""
    putstr_fd(itoa(n), fd)