"""ASCII character classification and case conversion."""

from __future__ import annotations

import operator

CharLike = int | str

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        code += _CASE_OFFSET
    return _same_kind(c, code)


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        code -= _CASE_OFFSET
    return _same_kind(c, code)