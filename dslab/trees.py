"""Binary trees and binary search trees with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node; trees compare equal when shape and values match."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def bst_insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert a value into a binary search tree and return its root.

    Values equal to a node go to its right subtree.
    """
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a binary search tree by inserting values in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = bst_insert(root, value)
    return root


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _descending(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _descending(node.right)
        yield node.value
        yield from _descending(node.left)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def descending(root: Optional[TreeNode]) -> list[int]:
    """Values in right, root, left order; descending for a search tree."""
    return list(_descending(root))


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Values level by level, left to right."""
    if root is None:
        return []
    values = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        values.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return values


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def mirror(root: Optional[TreeNode]) -> None:
    """Swap the children of every node in place."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        node.left, node.right = node.right, node.left
        pending.extend(child for child in (node.left, node.right) if child)


def count_total(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_total(root.left) + count_total(root.right)


def count_leaves(root: Optional[TreeNode]) -> int:
    """Number of terminal nodes, those without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def count_internal(root: Optional[TreeNode]) -> int:
    """Number of non-terminal nodes, those with at least one child."""
    return count_total(root) - count_leaves(root)


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using an explicit stack."""
    values = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using an explicit stack."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Postorder traversal using two explicit stacks."""
    pending = [root] if root is not None else []
    collected: list[TreeNode] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(collected)]


def build_from_traversals(
    preorder_values: Iterable[int], inorder_values: Iterable[int]
) -> Optional[TreeNode]:
    """Rebuild a binary tree from its preorder and inorder traversals."""
    pre = list(preorder_values)
    ino = list(inorder_values)
    if len(pre) != len(ino):
        raise ValueError("traversals differ in length")
    remaining = iter(pre)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start >= end:
            return None
        value = next(remaining)
        try:
            split = ino.index(value, start, end)
        except ValueError:
            raise ValueError(
                f"value {value} does not fit the inorder traversal"
            ) from None
        node = TreeNode(value)
        node.left = build(start, split)
        node.right = build(split + 1, end)
        return node

    return build(0, len(ino))