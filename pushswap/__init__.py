"""Sort integers with two stacks and a fixed set of moves, plus the helpers it uses."""

__version__ = "0.1.0"

__all__ = [
    "chain",
    "chars",
    "cli",
    "formatting",
    "linereader",
    "memory",
    "parsing",
    "sorting",
    "stacks",
    "strings",
]