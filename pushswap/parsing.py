"""Validation of command-line numbers and their conversion to ranks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .chars import is_digit, is_space
from .strings import atoi

__all__ = ["InputError", "check_str", "check_input", "parse_input"]


class InputError(ValueError):
    """Raised when the numbers given on the command line are not acceptable."""


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    return pos


def _tokens(text: str) -> Iterator[str]:
    """Yield each signed number of text; raise InputError on anything else."""
    pos = 0
    while pos < len(text):
        pos = _skip_spaces(text, pos)
        start = pos
        if pos < len(text) and text[pos] in "+-":
            pos += 1
        if pos >= len(text) or not is_digit(text[pos]):
            raise InputError(f"not a number list: {text!r}")
        pos = _skip_digits(text, pos)
        yield text[start:pos]
        pos = _skip_spaces(text, pos)


def check_str(text: str) -> int:
    """Count the numbers in a blank-separated string.

    Only space, line feed, vertical tab and form feed separate numbers.
    Raises InputError when the text holds no number or anything else.
    """
    count = sum(1 for _ in _tokens(text))
    if count == 0:
        raise InputError(f"no number in {text!r}")
    return count


def check_input(args: Sequence[str]) -> int:
    """Return how many numbers the arguments hold.

    Several arguments must each hold exactly one number; a single
    argument may hold several. Raises InputError otherwise.
    """
    if len(args) > 1:
        for arg in args:
            if check_str(arg) != 1:
                raise InputError(f"expected one number in {arg!r}")
        return len(args)
    if len(args) == 1:
        return check_str(args[0])
    raise InputError("no input given")


def parse_input(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the rank of each number, in input order.

    The smallest number gets rank 0. Numbers wrap to 32-bit signed
    integers; duplicates raise InputError.
    """
    check_input(args)
    if len(args) > 1:
        values = [atoi(arg) for arg in args]
    else:
        values = [atoi(token) for token in _tokens(args[0])]
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers")
    rank = {value: index for index, value in enumerate(sorted(values))}
    return [rank[value] for value in values]