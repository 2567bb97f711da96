"""A last-in, first-out adaptor over a sequence container."""

from __future__ import annotations

import copy
from functools import total_ordering
from typing import Any, Optional

from .dynarray import DynamicArray


@total_ordering
class Stack:
    """A stack backed by a container offering push_back, pop_back and back.

    The container passed in is copied; by default an empty
    :class:`DynamicArray` is used.  Stacks compare by their containers.
    """

    def __init__(self, container: Optional[Any] = None) -> None:
        self._c = DynamicArray() if container is None else copy.copy(container)

    def empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return self._c.empty()

    def __len__(self) -> int:
        return len(self._c)

    def top(self) -> Any:
        """Return the most recently pushed element."""
        return self._c.back()

    def push(self, value: Any) -> None:
        """Push ``value`` onto the stack."""
        self._c.push_back(value)

    def pop(self) -> None:
        """Remove the top element."""
        self._c.pop_back()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c == other._c

    def __lt__(self, other: "Stack") -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._c < other._c

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stack({list(self._c)!r})"