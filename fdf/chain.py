"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One link of a list: a value and the node that follows it."""

    value: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list with operations at both ends."""

    def __init__(self, values: Optional[Any] = None) -> None:
        self.head: Optional[Node[T]] = None
        for value in values or ():
            self.push_back(value)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: T) -> Node[T]:
        """Insert ``value`` at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: T) -> Node[T]:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
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

    def pop_front(self, delete: Optional[Callable[[T], object]] = None) -> T:
        """Remove the first node, pass its value to ``delete`` if given, and return the value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.value)
        return node.value

    def clear(self, delete: Optional[Callable[[T], object]] = None) -> None:
        """Remove every node in order, passing each value to ``delete`` if given."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], object]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, the values built so far are passed to ``delete``
        and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        tail: Optional[Node[U]] = None
        try:
            for value in self:
                node = Node(func(value))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value