"""A singly linked chain of named nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Node", "Chain"]


@dataclass(eq=False)
class Node:
    """One link: a payload, the following node and an optional stack name."""

    content: Any
    next: Node | None = field(default=None, repr=False)
    name: str | None = None


def _require_node(node: Any) -> Node:
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    return node


class Chain:
    """A singly linked list whose nodes can be moved between chains."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.add_back(Node(value))

    def add_front(self, node: Node) -> None:
        """Make node the new head; its previous successor is replaced."""
        node = _require_node(node)
        node.next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Link node after the current last node (node keeps its own successor)."""
        node = _require_node(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def last(self) -> Node | None:
        """The final node, or None for an empty chain."""
        tail = None
        for tail in self:
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, handing each payload to delete first when given."""
        if delete is not None:
            for node in self:
                delete(node.content)
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on every payload, front to back."""
        for node in self:
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> Chain:
        """Return a new chain of func(payload) for every payload.

        If func raises, payloads built so far are handed to delete and the
        error propagates.
        """
        result = Chain()
        try:
            for node in self:
                result.add_back(Node(func(node.content), name=node.name))
        except Exception:
            result.clear(delete)
            raise
        return result