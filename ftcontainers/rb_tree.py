"""An ordered container of unique keys built on a red-black tree.

:class:`RBTree` stores arbitrary values ordered by a key extracted from each
value.  Positions inside the tree are expressed with :class:`TreeIterator`
objects, which stay valid across insertions and across the removal of other
elements.
"""

from __future__ import annotations

import copy as _copy_module
import operator
from functools import total_ordering
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .rb_node import (
    Color,
    Node,
    black_count,
    make_header,
    tree_decrement,
    tree_increment,
    tree_maximum,
    tree_minimum,
)
from .rb_rebalance import insert_and_rebalance, rebalance_for_erase


def _identity(value: Any) -> Any:
    return value


def _is_header(node: Node) -> bool:
    if node.parent is None:
        return node.left is node
    return node.color is Color.RED and node.parent.parent is node


def _header_of(node: Node) -> Node:
    while not _is_header(node):
        node = node.parent
    return node


class TreeIterator:
    """A position in an :class:`RBTree`: either an element or the end."""

    __slots__ = ("node",)

    def __init__(self, node: Node) -> None:
        self.node = node

    def value(self) -> Any:
        """Return the value stored at this position."""
        if _is_header(self.node):
            raise IndexError("the end position holds no value")
        return self.node.value

    def increment(self) -> "TreeIterator":
        """Return the position that follows this one."""
        if _is_header(self.node):
            raise IndexError("cannot advance past the end")
        return TreeIterator(tree_increment(self.node))

    def decrement(self) -> "TreeIterator":
        """Return the position that precedes this one."""
        node = self.node
        if _is_header(node):
            if node.left is node:
                raise IndexError("cannot step back in an empty tree")
        elif node.left is None and _header_of(node).left is node:
            raise IndexError("cannot step back from the first element")
        return TreeIterator(tree_decrement(node))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return hash(id(self.node))

    def __repr__(self) -> str:
        if _is_header(self.node):
            return "TreeIterator(<end>)"
        return f"TreeIterator({self.node.value!r})"


@total_ordering
class RBTree:
    """A balanced search tree holding values with unique keys."""

    def __init__(
        self,
        key_of_value: Optional[Callable[[Any], Any]] = None,
        compare: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._key_of_value = key_of_value if key_of_value is not None else _identity
        self._compare = compare if compare is not None else operator.lt
        self._header = make_header()
        self._count = 0

    # -- helpers -----------------------------------------------------------

    def _key(self, node: Node) -> Any:
        return self._key_of_value(node.value)

    def _insert(self, x: Optional[Node], parent: Node, value: Any) -> TreeIterator:
        insert_left = (
            x is not None
            or parent is self._header
            or self._compare(self._key_of_value(value), self._key(parent))
        )
        node = Node(value)
        insert_and_rebalance(insert_left, node, parent, self._header)
        self._count += 1
        return TreeIterator(node)

    @staticmethod
    def _clone(node: Node) -> Node:
        return Node(_copy_module.copy(node.value), node.color)

    def _copy_subtree(self, x: Node, parent: Node) -> Node:
        top = self._clone(x)
        top.parent = parent
        if x.right is not None:
            top.right = self._copy_subtree(x.right, top)
        p = top
        src = x.left
        while src is not None:
            y = self._clone(src)
            p.left = y
            y.parent = p
            if src.right is not None:
                y.right = self._copy_subtree(src.right, y)
            p = y
            src = src.left
        return top

    # -- iteration and capacity --------------------------------------------

    def begin(self) -> TreeIterator:
        """Return the position of the smallest element."""
        return TreeIterator(self._header.left)

    def end(self) -> TreeIterator:
        """Return the position one past the largest element."""
        return TreeIterator(self._header)

    def __iter__(self) -> Iterator[Any]:
        node = self._header.left
        while node is not self._header:
            yield node.value
            node = tree_increment(node)

    def __reversed__(self) -> Iterator[Any]:
        if self._count == 0:
            return
        node = self._header.right
        while True:
            yield node.value
            if node is self._header.left:
                break
            node = tree_decrement(node)

    def __len__(self) -> int:
        return self._count

    def empty(self) -> bool:
        """Return True when the tree holds no elements."""
        return self._count == 0

    def key_comp(self) -> Callable[[Any, Any], bool]:
        """Return the key ordering function."""
        return self._compare

    # -- insertion ---------------------------------------------------------

    def insert_unique(self, value: Any) -> Tuple[TreeIterator, bool]:
        """Insert ``value`` unless its key is present.

        Returns the position of the element with that key and whether the
        insertion took place.
        """
        key = self._key_of_value(value)
        x = self._header.parent
        y = self._header
        comp = True
        while x is not None:
            y = x
            comp = self._compare(key, self._key(x))
            x = x.left if comp else x.right
        j = TreeIterator(y)
        if comp:
            if j == self.begin():
                return self._insert(x, y, value), True
            j = j.decrement()
        if self._compare(self._key(j.node), key):
            return self._insert(x, y, value), True
        return j, False

    def insert_hint(self, position: TreeIterator, value: Any) -> TreeIterator:
        """Insert ``value`` using ``position`` as a hint; return its position."""
        header = self._header
        key = self._key_of_value(value)
        node = position.node
        if node is header:
            if self._count > 0 and self._compare(self._key(header.right), key):
                return self._insert(None, header.right, value)
            return self.insert_unique(value)[0]
        if self._compare(key, self._key(node)):
            if node is header.left:
                return self._insert(header.left, header.left, value)
            before = position.decrement()
            if self._compare(self._key(before.node), key):
                if before.node.right is None:
                    return self._insert(None, before.node, value)
                return self._insert(node, node, value)
            return self.insert_unique(value)[0]
        if self._compare(self._key(node), key):
            if node is header.right:
                return self._insert(None, header.right, value)
            after = position.increment()
            if self._compare(key, self._key(after.node)):
                if node.right is None:
                    return self._insert(None, node, value)
                return self._insert(after.node, after.node, value)
            return self.insert_unique(value)[0]
        return position

    def insert_range(self, values: Iterable[Any]) -> None:
        """Insert every value whose key is not yet present."""
        for value in values:
            self.insert_hint(self.end(), value)

    # -- removal -----------------------------------------------------------

    def erase(self, position: TreeIterator) -> None:
        """Remove the element at ``position``."""
        if _is_header(position.node):
            raise IndexError("cannot erase the end position")
        removed = rebalance_for_erase(position.node, self._header)
        removed.parent = removed.left = removed.right = None
        self._count -= 1

    def erase_key(self, key: Any) -> int:
        """Remove the element with ``key``; return how many were removed."""
        first, last = self.equal_range(key)
        old_size = self._count
        self.erase_range(first, last)
        return old_size - self._count

    def erase_range(self, first: TreeIterator, last: TreeIterator) -> None:
        """Remove the elements in ``[first, last)``."""
        if first == self.begin() and last == self.end():
            self.clear()
            return
        while first != last:
            following = first.increment()
            self.erase(first)
            first = following

    def clear(self) -> None:
        """Remove every element."""
        self._header.parent = None
        self._header.left = self._header
        self._header.right = self._header
        self._count = 0

    # -- lookup ------------------------------------------------------------

    def lower_bound(self, key: Any) -> TreeIterator:
        """Return the first position whose key is not less than ``key``."""
        x = self._header.parent
        y = self._header
        while x is not None:
            if not self._compare(self._key(x), key):
                y, x = x, x.left
            else:
                x = x.right
        return TreeIterator(y)

    def upper_bound(self, key: Any) -> TreeIterator:
        """Return the first position whose key is greater than ``key``."""
        x = self._header.parent
        y = self._header
        while x is not None:
            if self._compare(key, self._key(x)):
                y, x = x, x.left
            else:
                x = x.right
        return TreeIterator(y)

    def equal_range(self, key: Any) -> Tuple[TreeIterator, TreeIterator]:
        """Return the lower and upper bound of ``key``."""
        return self.lower_bound(key), self.upper_bound(key)

    def find(self, key: Any) -> TreeIterator:
        """Return the position of ``key``, or the end when absent."""
        j = self.lower_bound(key)
        if j.node is self._header or self._compare(key, self._key(j.node)):
            return self.end()
        return j

    def count(self, key: Any) -> int:
        """Return the number of elements with ``key`` (0 or 1)."""
        first, last = self.equal_range(key)
        total = 0
        while first != last:
            total += 1
            first = first.increment()
        return total

    # -- whole-tree operations ---------------------------------------------

    def swap(self, other: "RBTree") -> None:
        """Exchange contents with ``other``; element positions stay valid."""
        mine, theirs = self._header, other._header
        if mine.parent is None:
            if theirs.parent is not None:
                mine.parent, mine.left, mine.right = theirs.parent, theirs.left, theirs.right
                mine.parent.parent = mine
                theirs.parent = None
                theirs.left = theirs.right = theirs
        elif theirs.parent is None:
            theirs.parent, theirs.left, theirs.right = mine.parent, mine.left, mine.right
            theirs.parent.parent = theirs
            mine.parent = None
            mine.left = mine.right = mine
        else:
            mine.parent, theirs.parent = theirs.parent, mine.parent
            mine.left, theirs.left = theirs.left, mine.left
            mine.right, theirs.right = theirs.right, mine.right
            mine.parent.parent = mine
            theirs.parent.parent = theirs
        self._count, other._count = other._count, self._count
        self._compare, other._compare = other._compare, self._compare
        self._key_of_value, other._key_of_value = other._key_of_value, self._key_of_value

    def copy(self) -> "RBTree":
        """Return a structural copy with copied values."""
        clone = RBTree(self._key_of_value, self._compare)
        root = self._header.parent
        if root is not None:
            new_root = self._copy_subtree(root, clone._header)
            clone._header.parent = new_root
            clone._header.left = tree_minimum(new_root)
            clone._header.right = tree_maximum(new_root)
            clone._count = self._count
        return clone

    def validate(self) -> bool:
        """Check every red-black and bookkeeping invariant.

        Returns True, or raises ValueError naming the broken invariant.
        """
        header = self._header
        root = header.parent
        if root is None:
            if header.left is not header or header.right is not header or self._count:
                raise ValueError("empty tree has inconsistent header")
            return True
        if root.parent is not header:
            raise ValueError("root is not linked to the header")
        if root.color is not Color.BLACK:
            raise ValueError("root is not black")
        if header.left is not tree_minimum(root) or header.right is not tree_maximum(root):
            raise ValueError("header does not point at the extreme nodes")
        heights = set()
        seen = 0
        pending = [root]
        while pending:
            node = pending.pop()
            seen += 1
            for child in (node.left, node.right):
                if child is None:
                    continue
                if child.parent is not node:
                    raise ValueError("broken parent link")
                if node.color is Color.RED and child.color is Color.RED:
                    raise ValueError("red node has a red child")
                pending.append(child)
            if node.left is None or node.right is None:
                heights.add(black_count(node, root))
        if len(heights) > 1:
            raise ValueError("paths have different black heights")
        if seen != self._count:
            raise ValueError("node count does not match size")
        keys = [self._key_of_value(v) for v in self]
        for previous, current in zip(keys, keys[1:]):
            if not self._compare(previous, current):
                raise ValueError("keys are out of order")
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RBTree):
            return NotImplemented
        return self._count == other._count and all(a == b for a, b in zip(self, other))

    def __lt__(self, other: "RBTree") -> bool:
        if not isinstance(other, RBTree):
            return NotImplemented
        return list(self) < list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RBTree({list(self)!r})"