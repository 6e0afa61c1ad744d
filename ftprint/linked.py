"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every value, first to last, to *delete*, then empty the list."""
        if not callable(delete):
            raise TypeError("delete must be callable")
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on every value, first to last."""
        if not callable(func):
            raise TypeError("func must be callable")
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func(value)`` for every value, in order."""
        if not callable(func):
            raise TypeError("func must be callable")
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"