"""A linked stack and two stacks sharing one array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class _Node:
    value: int
    below: Optional["_Node"] = None


class LinkedStack:
    """A stack of integers kept as a chain of nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class TwinStack:
    """Two stacks sharing one fixed-size array, growing toward each other.

    Stack 1 grows from the left end, stack 2 from the right end.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Optional[int]] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    @staticmethod
    def _check(which: int) -> None:
        if which not in (1, 2):
            raise ValueError("stack must be 1 or 2")

    def push(self, which: int, value: int) -> None:
        """Push a value onto stack 1 or stack 2."""
        self._check(which)
        if self._top1 + 1 >= self._top2:
            raise OverflowError(f"stack {which} is full")
        if which == 1:
            self._top1 += 1
            self._slots[self._top1] = value
        else:
            self._top2 -= 1
            self._slots[self._top2] = value

    def pop(self, which: int) -> int:
        """Pop and return the top value of stack 1 or stack 2."""
        self._check(which)
        if which == 1:
            if self._top1 < 0:
                raise IndexError("stack 1 is empty")
            value = self._slots[self._top1]
            self._top1 -= 1
        else:
            if self._top2 >= len(self._slots):
                raise IndexError("stack 2 is empty")
            value = self._slots[self._top2]
            self._top2 += 1
        assert value is not None
        return value