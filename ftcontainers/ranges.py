"""An inclusive integer range and an in-place sequence reversal."""

from __future__ import annotations

from typing import Iterator, MutableSequence, TypeVar

T = TypeVar("T")


class Range:
    """Integers from ``start`` to ``stop``, both included.

    Counts upward when ``stop >= start`` and downward otherwise.
    """

    def __init__(self, start: int, stop: int) -> None:
        self.start = start
        self.stop = stop

    def __iter__(self) -> Iterator[int]:
        if self.stop >= self.start:
            return iter(range(self.start, self.stop + 1))
        return iter(range(self.start, self.stop - 1, -1))

    def __repr__(self) -> str:
        return f"Range({self.start}, {self.stop})"


def reverse_in_place(seq: MutableSequence[T]) -> None:
    """Reverse ``seq`` by swapping elements from both ends inward."""
    size = len(seq)
    for i, j in zip(range(size // 2), range(size - 1, -1, -1)):
        seq[i], seq[j] = seq[j], seq[i]