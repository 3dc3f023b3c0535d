"""String helpers: search, compare, copy, slice, trim, split and integer parsing."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = [
    "str_chr",
    "str_rchr",
    "str_ncmp",
    "str_nstr",
    "strlcpy",
    "strlcat",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "str_mapi",
    "str_iteri",
    "atoi",
]

_NUL = "\0"
_ATOI_SPACES = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _char(c: str | int) -> str:
    """Normalise a one-character string or a byte-sized code to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce value to the signed 32-bit range the way a C int overflows."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span >> 1 else value


def str_chr(text: str, c: str | int) -> int | None:
    """Index of the first occurrence of c in text.

    Searching for NUL yields len(text), the position of the terminator;
    a character that does not occur yields None.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def str_rchr(text: str, c: str | int) -> int | None:
    """Index of the last occurrence of c in text, len(text) for NUL, else None."""
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def str_ncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair.

    A string that ends early compares as if followed by NUL characters.
    """
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def str_nstr(big: str, little: str, length: int) -> int | None:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if not little:
        return 0
    index = big[: max(length, 0)].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so truncation
    happened when the length is not smaller than size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the caller tried to create.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    room = max(size - 1 - len(dst), 0)
    result = dst + src[:room]
    if size < len(dst):
        return result, len(src) + size
    return result, len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of first and second."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    return text.strip(charset)


def split(text: str, sep: str | int) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def str_mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def str_iteri(
    text: MutableSequence[Any], func: Callable[[int, Any], Any]
) -> MutableSequence[Any]:
    """Apply func(index, item) to each item of a mutable character buffer in place.

    A non-None result replaces the item. Iteration ends at the first NUL
    element, as it would in a terminated buffer. The buffer is returned.
    """
    for index, item in enumerate(text):
        if item in (_NUL, 0):
            break
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement
    return text


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C int would hold it.

    Leading blanks (space, tab, newline, vertical tab, form feed, carriage
    return) are skipped, one sign is accepted, and digits are read until the
    first non-digit. Text with no digits gives 0. Values outside the signed
    32-bit range wrap around.
    """
    pos = 0
    while pos < len(text) and text[pos] in _ATOI_SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return _wrap_int(sign * value)