"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _LinkedBase:
    """Construction, lookup and removal shared by the linked lists.

    Subclasses provide ``_pairs`` (yielding ``(previous, node)`` from the
    first node on), ``_detach`` and ``_push_last``.
    """

    def __init__(self, values: Iterable[Any]) -> None:
        self._size = 0
        for value in values:
            self._push_last(value)

    def _last_pair(self) -> tuple[Any, Any]:
        *_, pair = self._pairs()
        return pair

    def _locate(self, key: Any) -> tuple[Any, Any] | None:
        return next((pair for pair in self._pairs() if pair[1].value == key), None)

    def _pop_end(self, last: bool) -> Any:
        if not self._size:
            raise IndexError("pop from empty list")
        pair = self._last_pair() if last else next(self._pairs())
        return self._detach(pair)

    def _remove_first(self, key: Any) -> bool:
        found = self._locate(key)
        if found is None:
            return False
        self._detach(found)
        return True

    def _values(self) -> Iterator[Any]:
        return (node.value for _, node in self._pairs())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class SinglyLinkedList(_LinkedBase):
    """Linked list with one forward link per node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        super().__init__(values)

    def _pairs(self) -> Iterator[tuple[_Node | None, _Node]]:
        previous = None
        node = self._head
        while node is not None:
            yield previous, node
            previous, node = node, node.next

    def _detach(self, pair: tuple[_Node | None, _Node]) -> Any:
        previous, node = pair
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1
        return node.value

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            _, last = self._last_pair()
            last.next = new
        self._size += 1

    _push_last = append

    def prepend(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_before(self, value: Any, key: Any) -> bool:
        """Insert ``value`` before the first ``key``; False if ``key`` is absent."""
        found = self._locate(key)
        if found is None:
            return False
        previous, node = found
        new = _Node(value, node)
        if previous is None:
            self._head = new
        else:
            previous.next = new
        self._size += 1
        return True

    def pop_front(self) -> Any:
        """Detach the head node and return its value."""
        return self._pop_end(last=False)

    def pop_back(self) -> Any:
        """Walk to the last node, detach it and return its value."""
        return self._pop_end(last=True)

    def remove(self, value: Any) -> bool:
        """Unlink the first node holding ``value``; False if there is none."""
        return self._remove_first(value)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size