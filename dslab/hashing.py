"""Open-addressing hash tables of integer keys."""

from __future__ import annotations

from typing import Iterator, Optional


class TableFullError(Exception):
    """Raised when no probe position is free for a new key."""


class _ProbingTable:
    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._slots: list[Optional[int]] = [None] * size

    def _step(self, attempt: int) -> int:
        raise NotImplementedError

    def _probe(self, key: int) -> Iterator[int]:
        size = len(self._slots)
        home = key % size
        for attempt in range(size):
            yield (home + self._step(attempt)) % size

    def insert(self, key: int) -> int:
        """Store a key and return the slot it went to."""
        for position in self._probe(key):
            if self._slots[position] is None:
                self._slots[position] = key
                return position
        raise TableFullError(f"no free slot for key {key}")

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding key, or None if it is absent."""
        for position in self._probe(key):
            slot = self._slots[position]
            if slot is None:
                return None
            if slot == key:
                return position
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None


class LinearProbingTable(_ProbingTable):
    """Hash table resolving collisions by probing consecutive slots."""

    def __init__(self, size: int = 10) -> None:
        super().__init__(size)

    def _step(self, attempt: int) -> int:
        return attempt

    def insert(self, key: int) -> int:
        """Store a key and return the slot it went to."""
        return super().insert(key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding key, or None if it is absent."""
        return super().search(key)

    def __contains__(self, key: object) -> bool:
        return super().__contains__(key)


class QuadraticProbingTable(_ProbingTable):
    """Hash table resolving collisions by probing at square offsets."""

    def __init__(self, size: int = 10) -> None:
        super().__init__(size)

    def _step(self, attempt: int) -> int:
        return attempt * attempt

    def insert(self, key: int) -> int:
        """Store a key and return the slot it went to."""
        return super().insert(key)

    def search(self, key: int) -> Optional[int]:
        """Return the slot holding key, or None if it is absent."""
        return super().search(key)

    def __contains__(self, key: object) -> bool:
        return super().__contains__(key)