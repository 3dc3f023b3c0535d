"""Byte-buffer helpers: fill, copy, search, compare and allocate."""

from __future__ import annotations

__all__ = [
    "mem_set",
    "bzero",
    "mem_copy",
    "mem_move",
    "mem_chr",
    "mem_cmp",
    "calloc",
]

INT_MAX = 2**31 - 1


def _check_span(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def mem_set(buffer, value: int, n: int):
    """Fill the first n bytes of buffer with value (truncated to a byte)."""
    _check_span(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer, n: int):
    """Zero the first n bytes of buffer."""
    return mem_set(buffer, 0, n)


def mem_copy(dest, src, n: int):
    """Copy n bytes from src into dest and return dest."""
    if dest is None and src is None:
        return None
    _check_span(n, dest, src)
    dest[:n] = src[:n]
    return dest


def mem_move(dest, src, n: int):
    """Copy n bytes from src into dest, safe when the two overlap."""
    if dest is None and src is None:
        return None
    _check_span(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def mem_chr(data, value: int, n: int) -> int | None:
    """Index of the first byte equal to value within the first n, or None."""
    _check_span(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(first, second, n: int) -> int:
    """Difference of the first unequal bytes among the first n, else 0."""
    _check_span(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of count * size bytes.

    Raises OverflowError when either factor or the product is negative
    or exceeds INT_MAX.
    """
    if count == 0 or size == 0:
        return bytearray()
    if not (0 < count <= INT_MAX and 0 < size <= INT_MAX):
        raise OverflowError("allocation size out of range")
    total = count * size
    if total > INT_MAX:
        raise OverflowError("allocation size out of range")
    return bytearray(total)