"""A singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of an IntList."""

    content: int
    next: Optional["Node"] = None


class IntList:
    """Singly linked list holding integer contents."""

    def __init__(self, items: Optional[Iterable[int]] = None):
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in items or ():
            self.push_back(value)

    def push_front(self, value: int) -> Node:
        """Insert value at the front and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: int) -> Node:
        """Append value at the end and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"

    def clear(self) -> None:
        """Remove every node."""
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Optional[Callable[[int], object]]) -> None:
        """Call func on each content in order; a missing func does nothing."""
        if func is None:
            return
        for value in self:
            func(value)

    def map(self, func: Callable[[int], int]) -> "IntList":
        """Return a new list of func applied to each content.

        A zero result cannot be stored: the partial result is discarded and
        ValueError is raised.
        """
        if func is None:
            raise TypeError("a mapping function is required")
        result = IntList()
        for value in self:
            mapped = func(value)
            if not mapped:
                result.clear()
                raise ValueError(f"mapping {value!r} gave a zero result")
            result.push_back(mapped)
        return result