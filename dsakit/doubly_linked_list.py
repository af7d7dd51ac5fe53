"""A doubly linked list that tracks its head, tail and length."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked list."""

    value: Any
    next: Optional[DoublyNode] = None
    prev: Optional[DoublyNode] = None


class DoublyLinkedList:
    """Doubly linked list created with one initial value."""

    def __init__(self, value: Any) -> None:
        node = DoublyNode(value)
        self.head: Optional[DoublyNode] = node
        self.tail: Optional[DoublyNode] = node
        self._length = 1

    def _forward(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _backward(self) -> Iterator[DoublyNode]:
        node = self.tail
        while node is not None:
            yield node
            node = node.prev

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._forward())

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self._backward())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def describe(self) -> str:
        """Return the head value, tail value and length as three lines."""
        head = "None" if self.head is None else self.head.value
        tail = "None" if self.tail is None else self.tail.value
        return f"Head: {head}\nTail: {tail}\nLength: {self._length}"

    def append(self, value: Any) -> None:
        """Add ``value`` after the tail."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the head."""
        node = DoublyNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._length += 1

    def delete_last(self) -> Optional[DoublyNode]:
        """Remove and return the tail node, or return None when empty."""
        removed = self.tail
        if removed is None:
            return None
        self.tail = removed.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        removed.prev = None
        self._length -= 1
        return removed

    def delete_first(self) -> Optional[DoublyNode]:
        """Remove and return the head node, or return None when empty."""
        removed = self.head
        if removed is None:
            return None
        self.head = removed.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        removed.next = None
        self._length -= 1
        return removed

    def get(self, index: int) -> DoublyNode:
        """Return the node at ``index``, walking from the nearer end.

        Raises IndexError when ``index`` is out of range.
        """
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")
        if index < self._length // 2:
            nodes, steps = self._forward(), index
        else:
            nodes, steps = self._backward(), self._length - 1 - index
        for position, node in enumerate(nodes):
            if position == steps:
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
            after = before.next
            node = DoublyNode(value, next=after, prev=before)
            before.next = node
            after.prev = node
            self._length += 1

    def delete_node(self, index: int) -> Optional[DoublyNode]:
        """Remove and return the node at ``index``; return None when out of range."""
        if not 0 <= index < self._length:
            return None
        if index == 0:
            return self.delete_first()
        if index == self._length - 1:
            return self.delete_last()
        removed = self.get(index)
        removed.prev.next = removed.next
        removed.next.prev = removed.prev
        removed.next = removed.prev = None
        self._length -= 1
        return removed