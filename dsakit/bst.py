"""A binary search tree of distinct values with breadth- and depth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary search tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinarySearchTree:
    """Binary search tree that starts empty and rejects duplicate values.

    Smaller values go to the left of a node, larger values to the right.
    """

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.dfs_in_order()!r})"

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it is already in the tree."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return True
        current = self.root
        while True:
            if value == current.value:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return True
                current = current.right

    def contains(self, value: Any) -> bool:
        """Report whether ``value`` is in the tree."""
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def bfs(self) -> list[Any]:
        """Return the values level by level, left to right."""
        if self.root is None:
            return []
        values: list[Any] = []
        queue: deque[TreeNode] = deque([self.root])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return values

    def dfs_pre_order(self) -> list[Any]:
        """Return the values with each node before its left then right subtree."""
        values: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            values.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return values

    def dfs_post_order(self) -> list[Any]:
        """Return the values with each node after its left then right subtree."""
        reversed_values: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reversed_values.reverse()
        return reversed_values

    def dfs_in_order(self) -> list[Any]:
        """Return the values in ascending order: left subtree, node, right subtree."""
        values: list[Any] = []
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            values.append(current.value)
            current = current.right
        return values