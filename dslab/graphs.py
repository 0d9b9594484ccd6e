"""Breadth-first and depth-first search over matrix and list graphs."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Sequence


def _bfs(neighbours: Callable[[int], Iterable[int]], start: int) -> list[int]:
    visited = {start}
    order = []
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for other in neighbours(vertex):
            if other not in visited:
                visited.add(other)
                pending.append(other)
    return order


def _dfs(neighbours: Callable[[int], Iterable[int]], start: int) -> list[int]:
    visited = {start}
    order = [start]
    stack = [iter(neighbours(start))]
    while stack:
        for other in stack[-1]:
            if other not in visited:
                visited.add(other)
                order.append(other)
                stack.append(iter(neighbours(other)))
                break
        else:
            stack.pop()
    return order


def _square(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"no vertex {vertex}")


def _matrix_neighbours(rows: list[list[int]]) -> Callable[[int], Iterable[int]]:
    return lambda vertex: (i for i, edge in enumerate(rows[vertex]) if edge)


def bfs_matrix(matrix: Iterable[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visiting order of an adjacency-matrix graph."""
    rows = _square(matrix)
    _check_vertex(start, len(rows))
    return _bfs(_matrix_neighbours(rows), start)


def dfs_matrix(matrix: Iterable[Sequence[int]], start: int) -> list[int]:
    """Depth-first visiting order of an adjacency-matrix graph."""
    rows = _square(matrix)
    _check_vertex(start, len(rows))
    return _dfs(_matrix_neighbours(rows), start)


class AdjacencyListGraph:
    """A directed graph stored as adjacency lists.

    Each new edge is placed at the front of its source vertex's list.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from u to v."""
        _check_vertex(u, len(self._adjacency))
        _check_vertex(v, len(self._adjacency))
        self._adjacency[u].appendleft(v)

    def neighbours(self, u: int) -> list[int]:
        """Vertices reachable from u by one edge, most recent edge first."""
        _check_vertex(u, len(self._adjacency))
        return list(self._adjacency[u])

    def bfs(self, start: int) -> list[int]:
        """Breadth-first visiting order from start."""
        _check_vertex(start, len(self._adjacency))
        return _bfs(lambda vertex: self._adjacency[vertex], start)

    def dfs(self, start: int) -> list[int]:
        """Depth-first visiting order from start."""
        _check_vertex(start, len(self._adjacency))
        return _dfs(lambda vertex: self._adjacency[vertex], start)