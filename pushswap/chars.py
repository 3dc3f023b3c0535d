"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

import operator

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_space",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = 32


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for a space, line feed, vertical tab or form feed.

    Horizontal tab and carriage return are deliberately not counted.
    """
    code = _code(c)
    return 9 < code < 13 or code == ord(" ")


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code