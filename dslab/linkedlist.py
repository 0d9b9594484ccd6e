"""Singly linked list of integers and the classic operations on it."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of integers."""

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

    def _relink(self, head: Optional[_Node]) -> None:
        """Adopt a new chain of nodes, recomputing tail and size."""
        self._head = head
        self._tail = None
        self._size = 0
        for node in self._nodes():
            self._tail = node
            self._size += 1

    def append(self, value: int) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> "LinkedList":
        """Return an independent list holding the same values."""
        return LinkedList(self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def remove_duplicates(self) -> None:
        """Drop consecutive repeated values, leaving each run once."""
        node = self._head
        while node is not None and node.next is not None:
            if node.value == node.next.value:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next
        self._tail = node

    def partition(self, pivot: int) -> None:
        """Move values below pivot ahead of the rest, keeping relative order."""
        before: list[_Node] = []
        after: list[_Node] = []
        for node in list(self._nodes()):
            (before if node.value < pivot else after).append(node)
        chain = before + after
        for node, following in zip_longest(chain, chain[1:]):
            node.next = following
        self._relink(chain[0] if chain else None)

    def rotate(self, k: int) -> None:
        """Rotate the list right by k places."""
        if self._head is None or k == 0:
            return
        assert self._tail is not None
        self._tail.next = self._head
        node = self._tail
        for _ in range(self._size - k % self._size):
            node = node.next  # type: ignore[assignment]
        self._head = node.next
        node.next = None
        self._tail = node

    def swap_pairs(self) -> None:
        """Swap every two adjacent nodes in place."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None and node.next is not None:
            second = node.next
            node.next = second.next
            second.next = node
            if previous is None:
                self._head = second
            else:
                previous.next = second
            previous = node
            node = node.next
        self._relink(self._head)

    def is_palindrome(self) -> bool:
        """Tell whether the list reads the same in both directions."""
        values = list(self)
        return values == values[::-1]

    def merge(self, other: "LinkedList") -> "LinkedList":
        """Merge two ascending lists into a new ascending list."""
        result = LinkedList()
        left, right = self._head, other._head
        while left is not None and right is not None:
            if left.value < right.value:
                result.append(left.value)
                left = left.next
            else:
                result.append(right.value)
                right = right.next
        rest = left if left is not None else right
        while rest is not None:
            result.append(rest.value)
            rest = rest.next
        return result


def add_numbers(a: Iterable[int], b: Iterable[int]) -> LinkedList:
    """Add two numbers given as digits, most significant first."""
    digits: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(list(a)), reversed(list(b)), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return LinkedList(reversed(digits))