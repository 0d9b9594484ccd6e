"""Doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    value: int
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A doubly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, position: int, value: int) -> None:
        """Insert a value after the node at a 0-based position.

        An empty list accepts position 0 and gets the value as its only node.
        """
        if self._head is None:
            if position != 0:
                raise IndexError("position out of range")
            self.append(value)
            return
        if not 0 <= position < self._size:
            raise IndexError("position out of range")
        node = self._head
        for _ in range(position):
            node = node.next  # type: ignore[assignment]
        new = _Node(value, prev=node, next=node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def concatenate(self, other: "DoublyLinkedList") -> None:
        """Move all nodes of other to the end of this list, emptying other."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.prev = self._tail
        self._tail = other._tail
        self._size += other._size
        other._head = other._tail = None
        other._size = 0

    def remove(self, value: int) -> bool:
        """Delete the first node holding value; tell whether one was found."""
        for node in self._nodes():
            if node.value == value:
                if node.prev is None:
                    self._head = node.next
                else:
                    node.prev.next = node.next
                if node.next is None:
                    self._tail = node.prev
                else:
                    node.next.prev = node.prev
                self._size -= 1
                return True
        return False

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"