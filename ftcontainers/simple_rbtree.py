"""A stand-alone red-black tree of keys that allows duplicates.

Leaves are represented by one shared sentinel node whose ``is_nil`` flag is
set.  The root's ``parent`` is ``None``.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .rb_node import Color


class _TreeNode:
    """A node of a :class:`SimpleRBTree`."""

    __slots__ = ("key", "color", "parent", "left", "right", "is_nil")

    def __init__(self, key: Any, color: Color, is_nil: bool = False) -> None:
        self.key = key
        self.color = color
        self.parent: Optional[_TreeNode] = None
        self.left: Optional[_TreeNode] = None
        self.right: Optional[_TreeNode] = None
        self.is_nil = is_nil

    def __repr__(self) -> str:
        if self.is_nil:
            return "_TreeNode(<nil>)"
        return f"_TreeNode({self.key!r}, {self.color.name})"


class SimpleRBTree:
    """A red-black tree of comparable keys; equal keys may repeat."""

    def __init__(self) -> None:
        self._nil = _TreeNode(None, Color.BLACK, is_nil=True)
        self._root = self._nil
        self._size = 0

    # -- helpers -----------------------------------------------------------

    def _resolve(self, node: Optional[_TreeNode]) -> _TreeNode:
        if node is None:
            if self._root is self._nil:
                raise ValueError("the tree is empty")
            return self._root
        if node.is_nil:
            raise ValueError("a leaf sentinel has no keys below it")
        return node

    def _min(self, node: _TreeNode) -> _TreeNode:
        while node.left is not self._nil:
            node = node.left
        return node

    def _max(self, node: _TreeNode) -> _TreeNode:
        while node.right is not self._nil:
            node = node.right
        return node

    def _rotate_left(self, x: _TreeNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _TreeNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _transplant(self, u: _TreeNode, v: _TreeNode) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _fix_insert(self, k: _TreeNode) -> None:
        while k.parent.color is Color.RED:
            grandparent = k.parent.parent
            if k.parent is grandparent.right:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    uncle.color = Color.BLACK
                    k.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    k = grandparent
                else:
                    if k is k.parent.left:
                        k = k.parent
                        self._rotate_right(k)
                    k.parent.color = Color.BLACK
                    k.parent.parent.color = Color.RED
                    self._rotate_left(k.parent.parent)
            else:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    uncle.color = Color.BLACK
                    k.parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    k = grandparent
                else:
                    if k is k.parent.right:
                        k = k.parent
                        self._rotate_left(k)
                    k.parent.color = Color.BLACK
                    k.parent.parent.color = Color.RED
                    self._rotate_right(k.parent.parent)
            if k is self._root:
                break
        self._root.color = Color.BLACK

    def _fix_delete(self, x: _TreeNode) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                s = x.parent.right
                if s.color is Color.RED:
                    s.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    s = x.parent.right
                if s.left.color is Color.BLACK and s.right.color is Color.BLACK:
                    s.color = Color.RED
                    x = x.parent
                else:
                    if s.right.color is Color.BLACK:
                        s.left.color = Color.BLACK
                        s.color = Color.RED
                        self._rotate_right(s)
                        s = x.parent.right
                    s.color = x.parent.color
                    x.parent.color = Color.BLACK
                    s.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                s = x.parent.left
                if s.color is Color.RED:
                    s.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    s = x.parent.left
                if s.right.color is Color.BLACK and s.left.color is Color.BLACK:
                    s.color = Color.RED
                    x = x.parent
                else:
                    if s.left.color is Color.BLACK:
                        s.right.color = Color.BLACK
                        s.color = Color.RED
                        self._rotate_left(s)
                        s = x.parent.left
                    s.color = x.parent.color
                    x.parent.color = Color.BLACK
                    s.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    # -- modification ------------------------------------------------------

    def insert(self, key: Any) -> None:
        """Insert ``key``; an equal key already present goes to its left."""
        node = _TreeNode(key, Color.RED)
        node.left = self._nil
        node.right = self._nil

        parent: Optional[_TreeNode] = None
        x = self._root
        while x is not self._nil:
            parent = x
            x = x.left if key < x.key else x.right

        node.parent = parent
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

        if node.parent is None:
            node.color = Color.BLACK
            return
        if node.parent.parent is None:
            return
        self._fix_insert(node)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError when it is absent."""
        z = self._nil
        node = self._root
        while node is not self._nil:
            if node.key == key:
                z = node
            node = node.right if node.key <= key else node.left
        if z is self._nil:
            raise KeyError(key)

        y = z
        original_color = y.color
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._min(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        z.parent = z.left = z.right = None
        self._size -= 1
        if original_color is Color.BLACK:
            self._fix_delete(x)
        self._nil.parent = None

    # -- lookup ------------------------------------------------------------

    def search(self, key: Any) -> Optional[_TreeNode]:
        """Return a node holding ``key``, or None when there is none."""
        node = self._root
        while node is not self._nil and key != node.key:
            node = node.left if key < node.key else node.right
        return None if node is self._nil else node

    def minimum(self, node: Optional[_TreeNode] = None) -> _TreeNode:
        """Return the node with the smallest key below ``node`` (default: root)."""
        return self._min(self._resolve(node))

    def maximum(self, node: Optional[_TreeNode] = None) -> _TreeNode:
        """Return the node with the largest key below ``node`` (default: root)."""
        return self._max(self._resolve(node))

    def successor(self, node: _TreeNode) -> Optional[_TreeNode]:
        """Return the in-order successor of ``node``, or None for the last one."""
        node = self._resolve(node)
        if node.right is not self._nil:
            return self._min(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def predecessor(self, node: _TreeNode) -> Optional[_TreeNode]:
        """Return the in-order predecessor of ``node``, or None for the first one."""
        node = self._resolve(node)
        if node.left is not self._nil:
            return self._max(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        return parent

    def root(self) -> Optional[_TreeNode]:
        """Return the root node, or None when the tree is empty."""
        return None if self._root is self._nil else self._root

    # -- traversal ---------------------------------------------------------

    def preorder(self) -> List[Any]:
        """Return the keys in node, left, right order."""
        out: List[Any] = []

        def walk(node: _TreeNode) -> None:
            if node is not self._nil:
                out.append(node.key)
                walk(node.left)
                walk(node.right)

        walk(self._root)
        return out

    def inorder(self) -> List[Any]:
        """Return the keys in ascending order."""
        out: List[Any] = []

        def walk(node: _TreeNode) -> None:
            if node is not self._nil:
                walk(node.left)
                out.append(node.key)
                walk(node.right)

        walk(self._root)
        return out

    def postorder(self) -> List[Any]:
        """Return the keys in left, right, node order."""
        out: List[Any] = []

        def walk(node: _TreeNode) -> None:
            if node is not self._nil:
                walk(node.left)
                walk(node.right)
                out.append(node.key)

        walk(self._root)
        return out

    def pretty(self) -> str:
        """Return a drawing of the tree, one node per line."""
        lines: List[str] = []

        def walk(node: _TreeNode, indent: str, last: bool) -> None:
            if node is self._nil:
                return
            marker = "R----" if last else "L----"
            lines.append(f"{indent}{marker}{node.key}({node.color.name})")
            child_indent = indent + ("     " if last else "|    ")
            walk(node.left, child_indent, False)
            walk(node.right, child_indent, True)

        walk(self._root, "", True)
        return "".join(line + "\n" for line in lines)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"SimpleRBTree({self.inorder()!r})"