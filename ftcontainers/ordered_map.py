"""A sorted key/value mapping with unique keys, kept in a red-black tree."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .rb_tree import RBTree, TreeIterator


@dataclass(order=True)
class Entry:
    """One key/value pair stored in an :class:`OrderedMap`.

    The key must not be changed while the entry is in a map; the value may be.
    """

    key: Any
    value: Any


def _entry_key(entry: Entry) -> Any:
    return entry.key


def _pair_key(pair: Any) -> Any:
    return pair.key if isinstance(pair, Entry) else pair[0]


@total_ordering
class OrderedMap:
    """A mapping that keeps its keys ordered by a comparison function.

    ``compare(a, b)`` must return True when ``a`` orders before ``b``; it
    defaults to ``<``.  When ``default_factory`` is given, reading a missing
    key with ``m[key]`` inserts ``default_factory()`` under that key.
    Positions are :class:`TreeIterator` objects whose ``value()`` is the
    stored :class:`Entry`.
    """

    def __init__(
        self,
        items: Any = None,
        compare: Optional[Callable[[Any, Any], bool]] = None,
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._tree = RBTree(_entry_key, compare)
        self.default_factory = default_factory
        if items is not None:
            if hasattr(items, "items"):
                items = items.items()
            self.insert_range(items)

    # -- helpers -----------------------------------------------------------

    def _is_missing(self, position: TreeIterator, key: Any) -> bool:
        return position == self._tree.end() or self._tree.key_comp()(key, position.value().key)

    # -- element access ----------------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        position = self._tree.lower_bound(key)
        if self._is_missing(position, key):
            if self.default_factory is None:
                raise KeyError(key)
            position = self._tree.insert_hint(position, Entry(key, self.default_factory()))
        return position.value().value

    def __setitem__(self, key: Any, value: Any) -> None:
        position = self._tree.lower_bound(key)
        if self._is_missing(position, key):
            self._tree.insert_hint(position, Entry(key, value))
        else:
            position.value().value = value

    def __contains__(self, key: Any) -> bool:
        return self._tree.find(key) != self._tree.end()

    def at(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError when absent."""
        position = self._tree.lower_bound(key)
        if self._is_missing(position, key):
            raise KeyError(key)
        return position.value().value

    # -- modifiers ---------------------------------------------------------

    def insert(self, pair: Any) -> Tuple[TreeIterator, bool]:
        """Insert a ``(key, value)`` pair unless the key is present.

        Returns the position of the element with that key and whether the
        pair was inserted.
        """
        key, value = pair
        return self._tree.insert_unique(Entry(key, value))

    def insert_hint(self, position: TreeIterator, pair: Any) -> TreeIterator:
        """Insert a pair using ``position`` as a hint; return its key's position."""
        key, value = pair
        return self._tree.insert_hint(position, Entry(key, value))

    def insert_range(self, pairs: Iterable[Any]) -> None:
        """Insert every pair whose key is not yet present."""
        self._tree.insert_range(Entry(key, value) for key, value in pairs)

    def erase(self, position: TreeIterator) -> None:
        """Remove the element at ``position``."""
        self._tree.erase(position)

    def erase_key(self, key: Any) -> int:
        """Remove the element with ``key``; return the number removed."""
        return self._tree.erase_key(key)

    def erase_range(self, first: TreeIterator, last: TreeIterator) -> None:
        """Remove the elements in ``[first, last)``."""
        self._tree.erase_range(first, last)

    def swap(self, other: "OrderedMap") -> None:
        """Exchange contents, ordering and default factory with ``other``."""
        self._tree.swap(other._tree)
        self.default_factory, other.default_factory = other.default_factory, self.default_factory

    def clear(self) -> None:
        """Remove every element."""
        self._tree.clear()

    # -- observers ---------------------------------------------------------

    def key_comp(self) -> Callable[[Any, Any], bool]:
        """Return the key ordering function."""
        return self._tree.key_comp()

    def value_comp(self) -> Callable[[Any, Any], bool]:
        """Return a function ordering pairs (or entries) by their keys."""
        compare = self._tree.key_comp()

        def value_compare(x: Any, y: Any) -> bool:
            return compare(_pair_key(x), _pair_key(y))

        return value_compare

    # -- lookup ------------------------------------------------------------

    def find(self, key: Any) -> TreeIterator:
        """Return the position of ``key``, or :meth:`end` when absent."""
        return self._tree.find(key)

    def count(self, key: Any) -> int:
        """Return 1 if ``key`` is present, otherwise 0."""
        return 0 if self._tree.find(key) == self._tree.end() else 1

    def lower_bound(self, key: Any) -> TreeIterator:
        """Return the first position whose key is not less than ``key``."""
        return self._tree.lower_bound(key)

    def upper_bound(self, key: Any) -> TreeIterator:
        """Return the first position whose key is greater than ``key``."""
        return self._tree.upper_bound(key)

    def equal_range(self, key: Any) -> Tuple[TreeIterator, TreeIterator]:
        """Return the lower and upper bound of ``key``."""
        return self._tree.equal_range(key)

    # -- iteration and capacity --------------------------------------------

    def begin(self) -> TreeIterator:
        """Return the position of the element with the smallest key."""
        return self._tree.begin()

    def end(self) -> TreeIterator:
        """Return the position one past the element with the largest key."""
        return self._tree.end()

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self._tree)

    def __reversed__(self) -> Iterator[Any]:
        return (entry.key for entry in reversed(self._tree))

    def __len__(self) -> int:
        return len(self._tree)

    def empty(self) -> bool:
        """Return True when the map holds no elements."""
        return self._tree.empty()

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((entry.key, entry.value) for entry in self._tree)

    def copy(self) -> "OrderedMap":
        """Return a copy whose entries are independent of this map's."""
        clone = OrderedMap(compare=self.key_comp(), default_factory=self.default_factory)
        clone._tree = self._tree.copy()
        return clone

    # -- comparison --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._tree == other._tree

    def __lt__(self, other: "OrderedMap") -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._tree < other._tree

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"OrderedMap({{{body}}})"