"""The two stacks of the puzzle and the moves allowed on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .chain import Chain, Node
from .formatting import put_str

__all__ = ["Stacks"]

_OTHER = {"a": "b", "b": "a"}


def _difference(first: Node | None, second: Node | None) -> int:
    if first is None or second is None:
        return 0
    return first.content - second.content


class Stacks:
    """Stacks a and b; every announced move is passed to emit as text."""

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], object] | None = None,
    ) -> None:
        self.a = Chain()
        self.b = Chain()
        for value in values:
            self.a.add_back(Node(value, name="a"))
        self.emit = emit if emit is not None else put_str

    def _chain(self, stack_name: str) -> Chain:
        if stack_name == "a":
            return self.a
        if stack_name == "b":
            return self.b
        raise ValueError(f"unknown stack {stack_name!r}")

    def swap(self, stack_name: str, announce: bool = True) -> None:
        """Exchange the two top elements; nothing happens with fewer than two."""
        chain = self._chain(stack_name)
        first = chain.head
        if first is None or first.next is None:
            return
        second = first.next
        first.next = second.next
        second.next = first
        chain.head = second
        if announce:
            self.emit(f"s{second.name}\n")

    def swap_both(self) -> None:
        """Swap both stacks as one move."""
        self.swap("a", announce=False)
        self.swap("b", announce=False)
        self.emit("ss")

    def push(self, target: str) -> None:
        """Move the top of the other stack onto target; nothing if that is empty."""
        destination = self._chain(target)
        source = self._chain(_OTHER[target])
        node = source.head
        if node is None:
            return
        source.head = node.next
        node.name = _OTHER.get(node.name, node.name)
        destination.add_front(node)
        self.emit(f"p{node.name}\n")

    def rotate(self, stack_name: str, announce: bool = True) -> None:
        """Move the top element to the bottom."""
        chain = self._chain(stack_name)
        node = chain.head
        if node is None or node.next is None:
            return
        chain.head = node.next
        node.next = None
        chain.add_back(node)
        if announce:
            self.emit(f"r{chain.head.name}\n")

    def rotate_both(self) -> None:
        """Rotate both stacks as one move."""
        self.rotate("a", announce=False)
        self.rotate("b", announce=False)
        self.emit("rr\n")

    def reverse_rotate(self, stack_name: str, announce: bool = True) -> None:
        """Move the bottom element to the top."""
        chain = self._chain(stack_name)
        nodes = list(chain)
        if len(nodes) < 2:
            return
        nodes[-2].next = None
        chain.add_front(nodes[-1])
        if announce:
            self.emit(f"rr{chain.head.name}\n")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks as one move."""
        self.reverse_rotate("a", announce=False)
        self.reverse_rotate("b", announce=False)
        self.emit("rrr\n")

    def push_last(self, target: str) -> None:
        """Bring the bottom of the other stack to its top, then push it onto target."""
        self.reverse_rotate(_OTHER[target])
        self.push(target)

    def push_back(self, target: str) -> None:
        """Push onto target, then rotate target so the new element sits at its bottom."""
        self.push(target)
        self.rotate(target)

    def push_all(self) -> None:
        """Return every element of b to a.

        An element larger than the top of a goes to the bottom of a, a
        smaller one to the top. Raises ValueError when the two cannot be
        ordered (equal values or an empty stack a).
        """
        while self.b.head is not None:
            difference = _difference(self.b.head, self.a.head)
            if difference > 0:
                self.push_back("a")
            elif difference < 0:
                self.push("a")
            else:
                raise ValueError("cannot place the top of b against the top of a")

    def min_node(self, stack_name: str) -> Node | None:
        """First node holding the smallest value, or None for an empty stack."""
        smallest = None
        for node in self._chain(stack_name):
            if smallest is None or node.content < smallest.content:
                smallest = node
        return smallest

    def max_node(self, stack_name: str) -> Node | None:
        """First node holding the largest value, or None for an empty stack."""
        largest = None
        for node in self._chain(stack_name):
            if largest is None or node.content > largest.content:
                largest = node
        return largest

    def format(self, stack_name: str) -> str:
        """The values of a stack, top first, separated by ", "."""
        return ", ".join(str(node.content) for node in self._chain(stack_name))