"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list with append, prepend, iteration and mapping."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> LinkedList:
        """A new list of ``func(content)`` for every content.

        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` (when given) and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result