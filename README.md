# minilibc

A small library of helpers modelled on classic C library routines:
ASCII character classification, byte-buffer operations, bounded string
functions, 32-bit integer conversion and writing to file descriptors.
It has no dependencies outside the standard library.

## Installation

```
pip install minilibc
```

To run the tests:

```
pip install "minilibc[test]"
pytest
```

## Modules

### `minilibc.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`.
Each takes either an integer character code or a one-character string
(anything longer raises `ValueError`). The `is*` functions return a `bool`
and consider ASCII only. `tolower` and `toupper` change only ASCII letters and
return the same kind they were given: an integer for an integer, a string for a
string.

### `minilibc.memory`

Operations on `bytearray`, `memoryview` and, for reading, `bytes`:

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c` and
  returns `buf`; `bzero(buf, n)` fills them with zero.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes.
- `memcpy(dst, src, n)` and `memmove(dst, src, n)` copy `n` bytes to the start
  of `dst` and return `dst`; `memmove` is safe when the two overlap.
- `memchr(data, c, n)` returns the index of the first matching byte within
  `n` bytes, or `None`.
- `memcmp(s1, s2, n)` returns the difference of the first unequal bytes, or 0.

A negative count, or a count larger than a buffer, raises `ValueError`.

### `minilibc.strings`

- `strlen(s)`, `strdup(s)`, `strjoin(s1, s2)`.
- `strlcpy(src, dstsize)` returns `(copied_text, len(src))`, keeping one slot
  of `dstsize` for the terminator.
- `strlcat(dst, src, dstsize)` returns `(result_text, attempted_length)`.
- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last
  `c`, or `None`; searching for `"\0"` gives `len(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters and returns the
  difference of the first unequal code points, or 0.
- `strnstr(haystack, needle, length)` returns the index of `needle` found
  wholly within the first `length` characters, or `None`; an empty needle
  gives 0.
- `substr(s, start, length)` returns up to `length` characters from `start`,
  or `""` when `s` is `None` or `start` is past the end.
- `strtrim(s, charset)` removes leading and trailing characters found in
  `charset`.
- `split(s, sep)` returns the non-empty pieces of `s` between occurrences of
  the single character `sep`.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, s)` for each position of a mutable
  sequence such as a list of characters, so `f` may change `s[index]` in place;
  `None` is ignored.

### `minilibc.convert`

- `atoi(text)` skips leading whitespace, reads an optional sign and the
  decimal digits that follow, and returns 0 when there are none. The result
  wraps around like a 32-bit signed integer.
- `itoa(n)` returns the decimal text of `n`, raising `OverflowError` when `n`
  does not fit in a 32-bit signed integer.

### `minilibc.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write to an open file descriptor with `os.write`, encoding
text as UTF-8. `putstr_fd` writes nothing for `None`; `putendl_fd` adds a
newline; `putnbr_fd` accepts 32-bit signed integers only.

## Example

```python
from minilibc.chars import toupper
from minilibc.convert import atoi, itoa
from minilibc.output import putendl_fd
from minilibc.strings import split, strtrim

assert toupper(ord("a")) == ord("A")
assert toupper("a") == "A"
assert atoi("  -42abc") == -42
assert itoa(-2147483648) == "-2147483648"
assert split("  hello  world ", " ") == ["hello", "world"]
assert strtrim("xxhixx", "x") == "hi"

putendl_fd("done", 1)
```