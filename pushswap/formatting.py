"""Number rendering and a small printf-style formatter with stream writers."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

__all__ = [
    "int_length",
    "itoa",
    "format_number",
    "format_address",
    "sprintf",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    """Reduce value to the signed 32-bit range the way a C int does."""
    value &= _UINT_MASK
    return value - (1 << 32) if value > INT_MAX else value


def _check_int(n: int) -> int:
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return n


def int_length(n: int, base: int = 10) -> int:
    """Number of characters n takes when written in base, minus sign included."""
    n = operator.index(n)
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    length = 1
    if n < 0:
        n = -n
        length += 1
    while n >= base:
        length += 1
        n //= base
    return length


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer; OverflowError outside that range."""
    n = _check_int(n)
    return format_number(n, DECIMAL)


def format_number(num: int, digits: str = DECIMAL) -> str:
    """Write num using the characters of digits as its numerals, '-' for negatives."""
    num = operator.index(num)
    base = len(digits)
    if base < 2:
        raise ValueError("a numeral set needs at least two characters")
    sign = "-" if num < 0 else ""
    num = abs(num)
    numerals = []
    while True:
        num, rest = divmod(num, base)
        numerals.append(digits[rest])
        if not num:
            break
    return sign + "".join(reversed(numerals))


def format_address(n: int) -> str:
    """Render a pointer-sized value as 0x-prefixed hex, or "(nil)" for zero."""
    n = operator.index(n) & _ULONG_MASK
    if n == 0:
        return "(nil)"
    return "0x" + format_number(n, HEX_LOWER)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _as_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_dec(value: Any) -> str:
    return format_number(_to_int32(operator.index(value)), DECIMAL)


def _as_unsigned(value: Any) -> str:
    return format_number(operator.index(value) & _UINT_MASK, DECIMAL)


def _as_hex_lower(value: Any) -> str:
    return format_number(operator.index(value) & _UINT_MASK, HEX_LOWER)


def _as_hex_upper(value: Any) -> str:
    return format_number(operator.index(value) & _UINT_MASK, HEX_UPPER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_str,
    "d": _as_dec,
    "i": _as_dec,
    "p": format_address,
    "u": _as_unsigned,
    "x": _as_hex_lower,
    "X": _as_hex_upper,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format args into fmt.

    Supported conversions are %c %s %d %i %p %u %x %X and %%. An unknown
    conversion is copied through with its percent sign. A format ending in
    a lone '%' raises ValueError.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_arg(values, spec)))
        elif spec == "%":
            pieces.append("%")
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to file (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (file or sys.stdout).write(text)
    return len(text)


def put_char(c: str | int, file: TextIO | None = None) -> None:
    """Write one character."""
    (file or sys.stdout).write(_as_char(c))


def put_str(text: str | None, file: TextIO | None = None) -> None:
    """Write text; None writes nothing."""
    if text is None:
        return
    (file or sys.stdout).write(text)


def put_endl(text: str | None, file: TextIO | None = None) -> None:
    """Write text followed by a newline; None writes nothing."""
    if text is None:
        return
    (file or sys.stdout).write(text + "\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    (file or sys.stdout).write(itoa(n))