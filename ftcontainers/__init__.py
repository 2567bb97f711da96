"""Red-black tree, ordered map, stack, dynamic array and range helpers."""

__version__ = "0.1.0"

__all__ = [
    "rb_node",
    "rb_rebalance",
    "rb_tree",
    "ordered_map",
    "dynarray",
    "stack",
    "ranges",
    "simple_rbtree",
]