"""Bare singly linked nodes and two ways to reverse them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A value with a link to the following node."""

    value: Any
    next: Node | None = None


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a chain of nodes in the order given; None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Collect the values of the chain starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def reverse_iterative(head: Node | None) -> Node | None:
    """Reverse the chain in place by relinking; return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_recursive(head: Node | None) -> Node | None:
    """Reverse the chain in place recursively; return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head