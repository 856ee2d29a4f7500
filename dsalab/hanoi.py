"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator


def hanoi_moves(
    n: int,
    source: str = "A",
    auxiliary: str = "B",
    target: str = "C",
) -> Iterator[tuple[str, str]]:
    """Yield (from, to) moves that carry ``n`` disks from source to target."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return
    if n == 1:
        yield source, target
        return
    yield from hanoi_moves(n - 1, source, target, auxiliary)
    yield source, target
    yield from hanoi_moves(n - 1, auxiliary, source, target)