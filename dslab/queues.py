"""A linked queue, a circular array queue and k queues sharing one array."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional


class LinkedQueue:
    """An unbounded first-in first-out queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def front(self) -> int:
        """Return the value at the front."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def rear(self) -> int:
        """Return the value at the rear."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class CircularQueue:
    """A bounded queue stored in a fixed-size circular array."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = -1
        self._rear = -1

    @property
    def _capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return self._front == -1

    def is_full(self) -> bool:
        """Tell whether every slot is taken."""
        return self._front == (self._rear + 1) % self._capacity

    def enqueue(self, value: int) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise OverflowError("queue is full")
        if self.is_empty():
            self._front = 0
        self._rear = (self._rear + 1) % self._capacity
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self._capacity
        assert value is not None
        return value

    def front(self) -> int:
        """Return the value at the front."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        assert value is not None
        return value

    def rear(self) -> int:
        """Return the value at the rear."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._rear]
        assert value is not None
        return value

    def __iter__(self) -> Iterator[int]:
        for offset in range(len(self)):
            value = self._slots[(self._front + offset) % self._capacity]
            assert value is not None
            yield value

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self._capacity + 1


class KQueues:
    """k queues stored together in one array, with a shared free list."""

    def __init__(self, k: int = 5, capacity: int = 100) -> None:
        if k < 1:
            raise ValueError("k must be positive")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._values: list[int] = [0] * capacity
        self._next: list[Optional[int]] = [*range(1, capacity), None][:capacity]
        self._free: Optional[int] = 0 if capacity else None
        self._front: list[Optional[int]] = [None] * k
        self._rear: list[Optional[int]] = [None] * k

    def _check(self, qn: int) -> None:
        if not 0 <= qn < len(self._front):
            raise IndexError(f"no queue number {qn}")

    def is_full(self) -> bool:
        """Tell whether the shared array has no free slot."""
        return self._free is None

    def is_empty(self, qn: int) -> bool:
        """Tell whether queue qn holds nothing."""
        self._check(qn)
        return self._front[qn] is None

    def enqueue(self, value: int, qn: int) -> None:
        """Add a value at the rear of queue qn."""
        self._check(qn)
        slot = self._free
        if slot is None:
            raise OverflowError("no free slot left")
        self._free = self._next[slot]
        self._values[slot] = value
        self._next[slot] = None
        rear = self._rear[qn]
        if rear is None:
            self._front[qn] = slot
        else:
            self._next[rear] = slot
        self._rear[qn] = slot

    def dequeue(self, qn: int) -> int:
        """Remove and return the value at the front of queue qn."""
        self._check(qn)
        slot = self._front[qn]
        if slot is None:
            raise IndexError(f"queue {qn} is empty")
        self._front[qn] = self._next[slot]
        if self._front[qn] is None:
            self._rear[qn] = None
        self._next[slot] = self._free
        self._free = slot
        return self._values[slot]

    def queue(self, qn: int) -> list[int]:
        """Return the values of queue qn from front to rear."""
        self._check(qn)
        values = []
        slot = self._front[qn]
        while slot is not None:
            values.append(self._values[slot])
            slot = self._next[slot]
        return values

    def all_queues(self) -> list[list[int]]:
        """Return the contents of every queue, in queue number order."""
        return [self.queue(qn) for qn in range(len(self._front))]