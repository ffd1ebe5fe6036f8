"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps its first node in ``head``."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list holding ``func(content)`` for every node.

        If ``func`` raises, ``delete`` is called on every value mapped so
        far, in order, and the exception propagates.
        """
        if not callable(func):
            raise TypeError("func must be callable")
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every node, calling ``delete`` on each content first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self.head = following
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"