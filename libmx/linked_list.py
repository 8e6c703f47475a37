"""A singly linked list with front/back operations and comparison-driven sorting."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of the list: a payload and the following node."""

    data: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list of arbitrary payloads."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first node."""
        self.head = Node(data, self.head)

    def push_back(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        node = Node(data)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def pop_front(self) -> Any:
        """Remove the first node and return its data; an empty list gives None."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        return node.data

    def pop_back(self) -> Any:
        """Remove the last node and return its data; an empty list gives None."""
        if self.head is None:
            return None
        prev: Node | None = None
        tail = self.head
        while tail.next is not None:
            prev, tail = tail, tail.next
        if prev is None:
            self.head = None
        else:
            prev.next = None
        return tail.data

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def sort(self, cmp: Callable[[Any, Any], bool]) -> None:
        """Sort in place by insertion; ``cmp(a, b)`` is true when ``a`` belongs after ``b``.

        Items that compare equal end up in reverse of their original order.
        """
        if cmp is None:
            raise TypeError("a comparison function is required")
        result: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            if result is None or not cmp(current.data, result.data):
                current.next = result
                result = current
            else:
                spot = result
                while spot.next is not None and cmp(current.data, spot.next.data):
                    spot = spot.next
                current.next = spot.next
                spot.next = current
            current = following
        self.head = result