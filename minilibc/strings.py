"""String helpers: bounded copying, searching, slicing, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy src into a destination of dstsize slots, one kept for the terminator.

    Returns the copied text and the full length of src.
    """
    _non_negative(dstsize, "dstsize")
    copied = src[: dstsize - 1] if dstsize else ""
    return copied, len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append src to dst within dstsize slots, one kept for the terminator.

    Returns the resulting text and the length it tried to create.
    """
    _non_negative(dstsize, "dstsize")
    if len(dst) >= dstsize:
        return dst, dstsize + len(src)
    room = dstsize - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; the terminator "\\0" is found at len(s)."""
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; the terminator "\\0" is found at len(s)."""
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair."""
    _non_negative(n, "n")
    first, second = s1[:n], s2[:n]
    for index in range(max(len(first), len(second))):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle found wholly within the first length characters, or None."""
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strdup(s: str) -> str:
    """A copy of s."""
    return str(s)


def substr(s: str | None, start: int, length: int) -> str:
    """Up to length characters of s from start; empty when start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if s is None or start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of s between occurrences of the character sep."""
    if s is None:
        raise TypeError("split needs a string")
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from f(index, character) for each character of s."""
    if s is None:
        raise TypeError("strmapi needs a string")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[str] | None, f: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call f(index, s) for each position of s, letting f change s[index] in place."""
    if s is None:
        return
    for index, _ in enumerate(s):
        f(index, s)