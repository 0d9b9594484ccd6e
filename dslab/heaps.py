"""Binary min and max heaps with heapsort."""

from __future__ import annotations

import operator
from typing import Callable, Iterable

_Outranks = Callable[[int, int], bool]


def _sift_up(items: list[int], outranks: _Outranks) -> None:
    index = len(items) - 1
    while index > 0:
        parent = (index - 1) // 2
        if not outranks(items[index], items[parent]):
            break
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list[int], index: int, outranks: _Outranks) -> None:
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < len(items) and outranks(items[child], items[best]):
                best = child
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _pop_root(items: list[int], outranks: _Outranks) -> int:
    if not items:
        raise IndexError("extract from empty heap")
    root = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0, outranks)
    return root


class MinHeap:
    """A heap whose root is its smallest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value and restore the heap order."""
        self._items.append(value)
        _sift_up(self._items, operator.lt)

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        return _pop_root(self._items, operator.lt)

    def heapsort(self) -> list[int]:
        """Empty the heap, returning its values in ascending order."""
        return [self.extract_min() for _ in range(len(self._items))]

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap:
    """A heap whose root is its largest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value and restore the heap order."""
        self._items.append(value)
        _sift_up(self._items, operator.gt)

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        return _pop_root(self._items, operator.gt)

    def heapsort(self) -> list[int]:
        """Empty the heap, returning its values in descending order."""
        return [self.extract_max() for _ in range(len(self._items))]

    def __len__(self) -> int:
        return len(self._items)