"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with front and back insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the back and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each value to ``delete`` if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.value)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every value in order."""
        if func is None:
            return
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to each value.

        If ``func`` raises, the values produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"