"""Fixed-size linear and circular array queues."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueOverflow(OverflowError):
    """Raised when enqueueing onto a full queue."""


class QueueUnderflow(IndexError):
    """Raised when dequeueing from an empty queue."""


class _ArrayQueue:
    """Slot storage and front/rear bookkeeping shared by both queues."""

    _wraps = False

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _advance(self, index: int) -> int:
        following = index + 1
        return following % self.capacity if self._wraps else following

    def _put(self, value: Any) -> None:
        if self.is_full():
            raise QueueOverflow("queue overflow")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = self._advance(self._rear)
        self._slots[self._rear] = value

    def _take(self) -> Any:
        if self.is_empty():
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = self._advance(self._front)
        return value

    def _walk(self) -> Iterator[Any]:
        if self.is_empty():
            return
        index = self._front
        while True:
            yield self._slots[index]
            if index == self._rear:
                break
            index = self._advance(index)


class LinearQueue(_ArrayQueue):
    """Array queue whose rear never wraps.

    Space freed at the front is only reclaimed once the queue empties.
    """

    def is_empty(self) -> bool:
        return self._front == -1

    def is_full(self) -> bool:
        return self._rear == self.capacity - 1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise QueueOverflow at the last slot."""
        self._put(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise QueueUnderflow if empty."""
        return self._take()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return self._walk()


class CircularQueue(_ArrayQueue):
    """Array queue whose indices wrap around the buffer."""

    _wraps = True

    def is_empty(self) -> bool:
        return self._rear == -1

    def is_full(self) -> bool:
        return (self._front == 0 and self._rear == self.capacity - 1) or (
            self._rear == self._front - 1
        )

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear, wrapping into freed slots."""
        self._put(value)

    def dequeue(self) -> Any:
        """Take the front value off, wrapping the front index if needed."""
        return self._take()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear across the wrap point."""
        return self._walk()