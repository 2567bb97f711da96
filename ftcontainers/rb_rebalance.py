"""Insertion and removal of nodes with red-black rebalancing.

Both functions work on a tree anchored by a header node as built by
:func:`ftcontainers.rb_node.make_header`.  They keep the header's root,
leftmost and rightmost links up to date.
"""

from __future__ import annotations

from typing import Optional

from .rb_node import Color, Node, rotate_left, rotate_right, tree_maximum, tree_minimum


def insert_and_rebalance(insert_left: bool, node: Node, parent: Node, header: Node) -> None:
    """Link ``node`` below ``parent`` and restore the red-black properties.

    ``insert_left`` chooses which child slot of ``parent`` receives the node.
    The first node of a tree is always inserted to the left of the header.
    """
    node.parent = parent
    node.left = None
    node.right = None
    node.color = Color.RED

    if insert_left:
        parent.left = node
        if parent is header:
            header.parent = node
            header.right = node
        elif parent is header.left:
            header.left = node
    else:
        parent.right = node
        if parent is header.right:
            header.right = node

    while node is not header.parent and node.parent.color is Color.RED:
        grandparent = node.parent.parent
        if node.parent is grandparent.left:
            uncle = grandparent.right
            if uncle is not None and uncle.color is Color.RED:
                node.parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
            else:
                if node is node.parent.right:
                    node = node.parent
                    rotate_left(node, header)
                node.parent.color = Color.BLACK
                grandparent.color = Color.RED
                rotate_right(grandparent, header)
        else:
            uncle = grandparent.left
            if uncle is not None and uncle.color is Color.RED:
                node.parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
            else:
                if node is node.parent.left:
                    node = node.parent
                    rotate_right(node, header)
                node.parent.color = Color.BLACK
                grandparent.color = Color.RED
                rotate_left(grandparent, header)
    header.parent.color = Color.BLACK


def _is_black(node: Optional[Node]) -> bool:
    return node is None or node.color is Color.BLACK


def rebalance_for_erase(z: Node, header: Node) -> Node:
    """Unlink ``z`` from the tree, rebalance, and return the unlinked node.

    When ``z`` has two children its in-order successor is moved into its
    place, so the structure changes but ``z`` itself is what leaves the tree.
    """
    y = z
    x: Optional[Node]
    x_parent: Optional[Node]

    if y.left is None:
        x = y.right
    elif y.right is None:
        x = y.left
    else:
        y = tree_minimum(y.right)
        x = y.right

    if y is not z:
        # Relink the successor y in place of z.
        z.left.parent = y
        y.left = z.left
        if y is not z.right:
            x_parent = y.parent
            if x is not None:
                x.parent = y.parent
            y.parent.left = x
            y.right = z.right
            z.right.parent = y
        else:
            x_parent = y
        if header.parent is z:
            header.parent = y
        elif z.parent.left is z:
            z.parent.left = y
        else:
            z.parent.right = y
        y.parent = z.parent
        y.color, z.color = z.color, y.color
        y = z
    else:
        x_parent = y.parent
        if x is not None:
            x.parent = y.parent
        if header.parent is z:
            header.parent = x
        elif z.parent.left is z:
            z.parent.left = x
        else:
            z.parent.right = x
        if header.left is z:
            header.left = z.parent if z.right is None else tree_minimum(x)
        if header.right is z:
            header.right = z.parent if z.left is None else tree_maximum(x)

    if y.color is not Color.RED:
        while x is not header.parent and _is_black(x):
            if x is x_parent.left:
                w = x_parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x_parent.color = Color.RED
                    rotate_left(x_parent, header)
                    w = x_parent.right
                if _is_black(w.left) and _is_black(w.right):
                    w.color = Color.RED
                    x = x_parent
                    x_parent = x_parent.parent
                else:
                    if _is_black(w.right):
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        rotate_right(w, header)
                        w = x_parent.right
                    w.color = x_parent.color
                    x_parent.color = Color.BLACK
                    if w.right is not None:
                        w.right.color = Color.BLACK
                    rotate_left(x_parent, header)
                    break
            else:
                w = x_parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x_parent.color = Color.RED
                    rotate_right(x_parent, header)
                    w = x_parent.left
                if _is_black(w.right) and _is_black(w.left):
                    w.color = Color.RED
                    x = x_parent
                    x_parent = x_parent.parent
                else:
                    if _is_black(w.left):
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        rotate_left(w, header)
                        w = x_parent.left
                    w.color = x_parent.color
                    x_parent.color = Color.BLACK
                    if w.left is not None:
                        w.left.color = Color.BLACK
                    rotate_right(x_parent, header)
                    break
        if x is not None:
            x.color = Color.BLACK
    return y