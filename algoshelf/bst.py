"""Binary search trees: insertion, search, deletion, traversals and validation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BstNode:
    """A tree node with a value and optional left and right children."""

    data: Any
    left: BstNode | None = None
    right: BstNode | None = None


def _values(root: BstNode | None) -> Iterator[Any]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def is_bst(root: BstNode | None) -> bool:
    """Whether the tree under ``root`` is a binary search tree.

    Each left subtree may hold values equal to its parent; each right subtree
    holds only strictly greater values. Checked in a single pass with bounds.
    """
    stack: list[tuple[BstNode | None, Any, Any]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if low is not None and not node.data > low:
            return False
        if high is not None and not node.data <= high:
            return False
        stack.append((node.left, low, node.data))
        stack.append((node.right, node.data, high))
    return True


def is_bst_naive(root: BstNode | None) -> bool:
    """Whether the tree under ``root`` is a binary search tree.

    Every node is compared with every value in both its subtrees, which is
    quadratic in the worst case.
    """
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if not all(value <= node.data for value in _values(node.left)):
            return False
        if not all(value > node.data for value in _values(node.right)):
            return False
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return True


class BinarySearchTree:
    """A binary search tree; equal values are placed in the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: BstNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = BstNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, value: Any) -> bool:
        """Whether ``value`` is stored in the tree."""
        current = self.root
        while current is not None:
            if current.data == value:
                return True
            current = current.left if value <= current.data else current.right
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return whether one was found.

        A node with two children takes the smallest value of its right
        subtree, and that value is then removed from the right subtree.
        """
        parent: BstNode | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return False

        while node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            target = successor.data
            parent, current = node, node.right
            while current.data != target:
                parent = current
                current = current.left if target < current.data else current.right
            node = current

        replacement = node.right if node.left is None else node.left
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return True

    def find_min(self) -> Any:
        """The smallest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.data

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
        if self.root is None:
            return -1
        levels = -1
        level = [self.root]
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def inorder(self) -> list[Any]:
        """Values in left, root, right order, which is ascending."""
        result: list[Any] = []
        stack: list[BstNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            result.append(node.data)
            current = node.right
        return result

    def preorder(self) -> list[Any]:
        """Values in root, left, right order."""
        return list(_values(self.root))

    def postorder(self) -> list[Any]:
        """Values in left, right, root order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list[Any]:
        """Values level by level from the root, left to right within a level."""
        if self.root is None:
            return []
        result: list[Any] = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def is_valid(self) -> bool:
        """Whether the tree satisfies the binary search tree ordering."""
        return is_bst(self.root)