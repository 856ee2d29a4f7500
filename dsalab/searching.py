"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if key == values[mid]:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of the last occurrence of ``key``, or None."""
    found = None
    for index, value in enumerate(values):
        if value == key:
            found = index
    return found