"""Command-line entry: read numbers, print the moves that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_input
from .sorting import mixed_sort, radix_sort
from .stacks import Stacks

__all__ = ["has_debug_flag", "main"]

RADIX_THRESHOLD = 50


def has_debug_flag(args: Sequence[str]) -> bool:
    """True when the first argument is exactly "-d"."""
    return bool(args) and args[0] == "-d"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves sorting the given numbers, or "Error" for bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    debug = has_debug_flag(args)
    if debug:
        # The flag only shortens the argument list; it is still read as input.
        args = args[:-1]
    try:
        ranks = parse_input(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    stacks = Stacks(ranks)
    if len(ranks) < RADIX_THRESHOLD:
        mixed_sort(stacks, debug)
    else:
        radix_sort(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())