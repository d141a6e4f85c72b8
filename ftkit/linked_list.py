"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that hands its contents out in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front; return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end; return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, deleter: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each content to *deleter* first, in order."""
        node = self.head
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        If *func* raises, the results made so far are passed to *deleter*
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(deleter)
            raise
        return result