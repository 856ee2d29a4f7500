"""Binary search tree with insertion and traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise
from typing import Any

from dsalab.binary_tree import TreeNode, inorder, postorder, preorder


class BinarySearchTree:
    """Unbalanced binary search tree that keeps each value once."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right
            else:
                return False

    def preorder(self) -> Iterator[Any]:
        return preorder(self.root)

    def inorder(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        return inorder(self.root)

    def postorder(self) -> Iterator[Any]:
        return postorder(self.root)


def is_bst(root: TreeNode | None) -> bool:
    """True when the in-order values of ``root`` strictly increase."""
    return all(a < b for a, b in pairwise(inorder(root)))