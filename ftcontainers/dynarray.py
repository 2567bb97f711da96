"""A growable array that tracks its reserved capacity."""

from __future__ import annotations

import operator
from functools import total_ordering
from typing import Any, Iterable, Iterator


@total_ordering
class DynamicArray:
    """A sequence with amortised growth and an explicit capacity.

    When an insertion does not fit, the capacity grows to
    ``len(self) + max(len(self), added)``, so repeated appends double it.
    Clearing or popping never shrinks the capacity.
    """

    def __init__(self, count: int = 0, value: Any = None) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._items = [value] * count
        self._capacity = count

    # -- helpers -----------------------------------------------------------

    def _make_room(self, extra: int) -> None:
        size = len(self._items)
        if size + extra > self._capacity:
            self._capacity = size + max(size, extra)

    def _check_position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        return index

    # -- capacity ----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Return True when the array holds no elements."""
        return not self._items

    def capacity(self) -> int:
        """Return how many elements fit before the storage must grow."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Make room for at least ``n`` elements without changing the contents."""
        if n < 0:
            raise ValueError("reserve size must not be negative")
        if n > self._capacity:
            self._capacity = n

    # -- modifiers ---------------------------------------------------------

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._make_room(1)
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop_back on an empty array")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the contents with ``values``."""
        items = list(values)
        self._items = items
        self._capacity = max(self._capacity, len(items))

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.assign([value] * count)

    def insert(self, index: int, value: Any, count: int = 1) -> int:
        """Insert ``count`` copies of ``value`` before ``index``.

        Returns the index of the first inserted element.
        """
        index = self._check_position(index)
        if count < 0:
            raise ValueError("count must not be negative")
        self._make_room(count)
        self._items[index:index] = [value] * count
        return index

    def insert_range(self, index: int, values: Iterable[Any]) -> int:
        """Insert ``values`` before ``index``; return the index of the first one."""
        index = self._check_position(index)
        items = list(values)
        self._make_room(len(items))
        self._items[index:index] = items
        return index

    # -- element access ----------------------------------------------------

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty array")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def __getitem__(self, index: int) -> Any:
        return self._items[operator.index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[operator.index(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    # -- copying and comparison --------------------------------------------

    def __copy__(self) -> "DynamicArray":
        clone = DynamicArray()
        clone.assign(self._items)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "DynamicArray") -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._items < other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"