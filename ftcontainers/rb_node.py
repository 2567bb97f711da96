"""Red-black tree nodes and the pointer-level operations on them.

A tree is anchored by a *header* node.  The header's ``parent`` is the
root (or ``None`` when the tree is empty), its ``left`` is the leftmost
node and its ``right`` is the rightmost node.  An empty tree's header
points ``left`` and ``right`` at itself.  The header is always red, which
is how it can be told apart from the root while stepping backwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = False
    BLACK = True


class Node:
    """A tree node holding one value and links to its neighbours."""

    __slots__ = ("value", "color", "parent", "left", "right")

    def __init__(self, value: Any = None, color: Color = Color.RED) -> None:
        self.value = value
        self.color = color
        self.parent: Optional[Node] = None
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r}, {self.color.name})"


def make_header() -> Node:
    """Return the header node of a new, empty tree."""
    header = Node(None, Color.RED)
    header.parent = None
    header.left = header
    header.right = header
    return header


def _is_empty_header(x: Node) -> bool:
    return x.parent is None and x.left is x


def tree_minimum(x: Node) -> Node:
    """Return the leftmost node of the subtree rooted at ``x``."""
    while x.left is not None:
        x = x.left
    return x


def tree_maximum(x: Node) -> Node:
    """Return the rightmost node of the subtree rooted at ``x``."""
    while x.right is not None:
        x = x.right
    return x


def tree_increment(x: Node) -> Node:
    """Return the in-order successor of ``x``; the header follows the last node."""
    if _is_empty_header(x):
        raise ValueError("cannot step forward in an empty tree")
    if x.right is not None:
        return tree_minimum(x.right)
    y = x.parent
    while x is y.right:
        x = y
        y = y.parent
    # When the tree holds a single node, the header is both the root's
    # parent and its right neighbour; stay on the header in that case.
    if x.right is not y:
        x = y
    return x


def tree_decrement(x: Node) -> Node:
    """Return the in-order predecessor of ``x``; from the header, the last node."""
    if _is_empty_header(x):
        raise ValueError("cannot step backward in an empty tree")
    if x.color is Color.RED and x.parent is not None and x.parent.parent is x:
        return x.right
    if x.left is not None:
        return tree_maximum(x.left)
    y = x.parent
    while x is y.left:
        x = y
        y = y.parent
    return y


def rotate_left(x: Node, header: Node) -> None:
    """Rotate the subtree at ``x`` to the left, updating the root if needed."""
    y = x.right
    if y is None:
        raise ValueError("rotate_left needs a node with a right child")
    x.right = y.left
    if y.left is not None:
        y.left.parent = x
    y.parent = x.parent
    if x is header.parent:
        header.parent = y
    elif x is x.parent.left:
        x.parent.left = y
    else:
        x.parent.right = y
    y.left = x
    x.parent = y


def rotate_right(x: Node, header: Node) -> None:
    """Rotate the subtree at ``x`` to the right, updating the root if needed."""
    y = x.left
    if y is None:
        raise ValueError("rotate_right needs a node with a left child")
    x.left = y.right
    if y.right is not None:
        y.right.parent = x
    y.parent = x.parent
    if x is header.parent:
        header.parent = y
    elif x is x.parent.right:
        x.parent.right = y
    else:
        x.parent.left = y
    y.right = x
    x.parent = y


def black_count(node: Optional[Node], root: Node) -> int:
    """Count the black nodes on the path from ``node`` up to ``root``, inclusive."""
    if node is None:
        return 0
    total = 0
    while True:
        if node.color is Color.BLACK:
            total += 1
        if node is root:
            break
        node = node.parent
    return total