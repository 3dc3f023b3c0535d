"""Sorting strategies that solve the puzzle with announced moves."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise

from .chain import Chain, Node
from .stacks import Stacks

__all__ = ["is_sorted", "format_debug", "mixed_sort", "radix_sort"]


def _difference(first: Node | None, second: Node | None) -> int:
    if first is None or second is None:
        return 0
    return first.content - second.content


def _contents(chain: Chain) -> list[int]:
    return [node.content for node in chain]


def _from_node(node: Node | None) -> Iterator[int]:
    while node is not None:
        yield node.content
        node = node.next


def is_sorted(values: Iterable[int], size: int) -> bool:
    """True when values are in ascending order and exactly size of them exist."""
    values = list(values)
    if not values or size != len(values):
        return False
    return all(first <= second for first, second in pairwise(values))


def format_debug(a: Iterable[int], b: Iterable[int], count: int) -> str:
    """Report both stacks and the number of steps taken so far."""
    return (
        f"| STACK A : {', '.join(map(str, a))}\n"
        f"| STACK B : {', '.join(map(str, b))}\n"
        f"| nb of operation : {count}\n"
    )


def mixed_sort(stacks: Stacks, debug: bool = False) -> None:
    """Sort stack a with swaps, rotations and parking extremes on b.

    With debug set, both stacks are reported after every step.
    """
    size = len(stacks.a)
    if size == 0:
        raise ValueError("stack a is empty")
    count = 0
    while not is_sorted(_contents(stacks.a), size):
        count += 1
        current = stacks.a.head
        largest = stacks.max_node("a")
        smallest = stacks.min_node("a")
        tail = list(_from_node(smallest))
        tail_sorted = is_sorted(tail, len(tail))
        values = _contents(stacks.a)
        a_sorted = is_sorted(values, len(values))
        if a_sorted and stacks.b.head is not None:
            stacks.push_all()
        elif _difference(current, largest) == 0 and not tail_sorted:
            stacks.push_back("b")
        elif _difference(current, smallest) == 0 and not tail_sorted:
            stacks.push("b")
        elif (
            _difference(current, current.next) > 0
            and _difference(current, largest) != 0
        ):
            stacks.swap("a")
        elif not a_sorted:
            stacks.rotate("a")
        if debug:
            stacks.emit(format_debug(_contents(stacks.a), _contents(stacks.b), count))


def radix_sort(stacks: Stacks) -> None:
    """Sort stack a of non-negative values bit by bit, least significant first."""
    largest = stacks.max_node("a")
    if largest is None:
        raise ValueError("stack a is empty")
    if largest.content < 0:
        raise ValueError("radix sort needs non-negative values")
    size = len(stacks.a)
    for bit in range(largest.content.bit_length()):
        for _ in range(size):
            if (stacks.a.head.content >> bit) & 1:
                stacks.rotate("a")
            else:
                stacks.push("b")
        while stacks.b.head is not None:
            stacks.push("a")