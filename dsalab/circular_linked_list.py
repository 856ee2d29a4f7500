"""A singly linked circular list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .singly_linked_list import _LinkedBase


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularLinkedList(_LinkedBase):
    """Circular list whose last node links back to the first.

    Only the last node is stored; its successor is the head.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        super().__init__(values)

    def _pairs(self) -> Iterator[tuple[_Node, _Node]]:
        """Yield (previous, node) once around the circle, from the head."""
        if self._tail is None:
            return
        previous = self._tail
        for _ in range(self._size):
            node = previous.next
            yield previous, node
            previous = node

    def _detach(self, pair: tuple[_Node, _Node]) -> Any:
        previous, node = pair
        if node is previous:
            self._tail = None
        else:
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1
        return node.value

    def _link_after_tail(self, value: Any) -> _Node:
        new = _Node(value)
        if self._tail is None:
            self._tail = new
        else:
            new.next = self._tail.next
            self._tail.next = new
        self._size += 1
        return new

    def push_front(self, value: Any) -> None:
        """Make ``value`` the new head."""
        self._link_after_tail(value)

    def push_back(self, value: Any) -> None:
        """Make ``value`` the new last node."""
        self._tail = self._link_after_tail(value)

    _push_last = push_back

    def insert_after(self, value: Any, key: Any) -> bool:
        """Insert ``value`` after the first ``key``; False if ``key`` is absent."""
        found = self._locate(key)
        if found is None:
            return False
        _, node = found
        new = _Node(value)
        new.next = node.next
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1
        return True

    def pop_front(self) -> Any:
        """Take the head off the circle and return its value."""
        return self._pop_end(last=False)

    def pop_back(self) -> Any:
        """Take the last node off the circle and return its value."""
        return self._pop_end(last=True)

    def remove(self, key: Any) -> bool:
        """Unlink the first node holding ``key``; False if there is none."""
        return self._remove_first(key)

    def __iter__(self) -> Iterator[Any]:
        """Iterate once around the circle, starting at the head."""
        return self._values()

    def __len__(self) -> int:
        return self._size