"""A singly linked list that tracks its head, tail and length."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list created with one initial value."""

    def __init__(self, value: Any) -> None:
        node = Node(value)
        self.head: Optional[Node] = node
        self.tail: Optional[Node] = node
        self._length = 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def describe(self) -> str:
        """Return the head value, tail value and length as three lines."""
        head = "None" if self.head is None else self.head.value
        tail = "None" if self.tail is None else self.tail.value
        return f"Head: {head}\nTail: {tail}\nLength: {self._length}"

    def append(self, value: Any) -> None:
        """Add ``value`` after the tail."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the head."""
        node = Node(value, self.head)
        if self.head is None:
            self.tail = node
        self.head = node
        self._length += 1

    def delete_last(self) -> Optional[Node]:
        """Remove and return the tail node, or return None when empty."""
        if self.head is None:
            return None
        removed = self.tail
        if self._length == 1:
            self.head = self.tail = None
        else:
            previous = self.head
            while previous.next is not removed:
                previous = previous.next
            previous.next = None
            self.tail = previous
        self._length -= 1
        return removed

    def delete_first(self) -> Optional[Node]:
        """Remove and return the head node, or return None when empty."""
        removed = self.head
        if removed is None:
            return None
        self.head = removed.next
        if self.head is None:
            self.tail = None
        removed.next = None
        self._length -= 1
        return removed

    def get(self, index: int) -> Node:
        """Return the node at ``index``; raise IndexError when out of range."""
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``; raise IndexError when out of range."""
        self.get(index).value = value

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``index``.

        ``index`` may equal the length, which appends.
        """
        if not 0 <= index <= self._length:
            raise IndexError(f"index {index} out of range for insert into length {self._length}")
        if index == 0:
            self.prepend(value)
        elif index == self._length:
            self.append(value)
        else:
            before = self.get(index - 1)
            before.next = Node(value, before.next)
            self._length += 1

    def delete_node(self, index: int) -> Optional[Node]:
        """Remove and return the node at ``index``; return None when out of range."""
        if not 0 <= index < self._length:
            return None
        if index == 0:
            return self.delete_first()
        if index == self._length - 1:
            return self.delete_last()
        before = self.get(index - 1)
        removed = before.next
        before.next = removed.next
        removed.next = None
        self._length -= 1
        return removed

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        before: Optional[Node] = None
        current = self.head
        self.head, self.tail = self.tail, self.head
        while current is not None:
            after = current.next
            current.next = before
            before = current
            current = after