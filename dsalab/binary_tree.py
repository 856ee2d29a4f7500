"""Binary tree nodes and the four classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A value with optional left and right subtrees."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values node first, then left subtree, then right subtree."""
    if root is not None:
        yield root.value
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then right subtree."""
    if root is not None:
        yield from inorder(root.left)
        yield root.value
        yield from inorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of both subtrees before the node itself."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.value


def level(root: TreeNode | None, depth: int) -> Iterator[Any]:
    """Yield the values found at ``depth``, counting the root as depth 1."""
    if root is None or depth < 1:
        return
    if depth == 1:
        yield root.value
        return
    yield from level(root.left, depth - 1)
    yield from level(root.right, depth - 1)


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values breadth first, left to right within each level."""
    if root is None:
        return
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        yield node.value
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)