"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .singly_linked_list import _LinkedBase


class _Node:
    __slots__ = ("prev", "value", "next")

    def __init__(self, value: Any) -> None:
        self.prev: _Node | None = None
        self.value = value
        self.next: _Node | None = None


class DoublyLinkedList(_LinkedBase):
    """Linked list with links in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        super().__init__(values)

    def _pairs(self) -> Iterator[tuple[_Node | None, _Node]]:
        node = self._head
        while node is not None:
            yield node.prev, node
            node = node.next

    def _last_pair(self) -> tuple[_Node | None, _Node]:
        return self._tail.prev, self._tail

    def _detach(self, pair: tuple[_Node | None, _Node]) -> Any:
        _, node = pair
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        new = _Node(value)
        if self._head is None:
            self._head = self._tail = new
        else:
            new.next = self._head
            self._head.prev = new
            self._head = new
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        new = _Node(value)
        if self._tail is None:
            self._head = self._tail = new
        else:
            new.prev = self._tail
            self._tail.next = new
            self._tail = new
        self._size += 1

    _push_last = push_back

    def insert_after(self, value: Any, key: Any) -> bool:
        """Insert ``value`` after the first ``key``.

        An empty list simply receives ``value``. Returns False when the list
        is not empty and ``key`` is absent.
        """
        if not self._size:
            self.push_front(value)
            return True
        found = self._locate(key)
        if found is None:
            return False
        _, node = found
        if node is self._tail:
            self.push_back(value)
            return True
        new = _Node(value)
        new.prev = node
        new.next = node.next
        node.next.prev = new
        node.next = new
        self._size += 1
        return True

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        return self._pop_end(last=False)

    def pop_back(self) -> Any:
        """Remove and return the tail value without walking the list."""
        return self._pop_end(last=True)

    def remove(self, key: Any) -> bool:
        """Unlink the first node holding ``key``; False if there is none."""
        return self._remove_first(key)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size