import pytest
from hypothesis import given, strategies as st

from ftcontainers.rb_node import (
    Color,
    Node,
    black_count,
    make_header,
    rotate_left,
    rotate_right,
    tree_decrement,
    tree_increment,
    tree_maximum,
    tree_minimum,
)


def _link(parent, child, side):
    setattr(parent, side, child)
    child.parent = parent


def _anchor(header, root):
    header.parent = root
    root.parent = header
    header.left = tree_minimum(root)
    header.right = tree_maximum(root)


def _sample_tree():
    """Balanced tree of 1..7 rooted at 4; 2 and 6 red, the rest black."""
    nodes = {v: Node(v, Color.BLACK) for v in range(1, 8)}
    nodes[2].color = Color.RED
    nodes[6].color = Color.RED
    _link(nodes[4], nodes[2], "left")
    _link(nodes[4], nodes[6], "right")
    _link(nodes[2], nodes[1], "left")
    _link(nodes[2], nodes[3], "right")
    _link(nodes[6], nodes[5], "left")
    _link(nodes[6], nodes[7], "right")
    header = make_header()
    _anchor(header, nodes[4])
    return header, nodes


def _bst(values):
    header = make_header()
    root = None
    nodes = []
    for v in values:
        node = Node(v, Color.BLACK)
        nodes.append(node)
        if root is None:
            root = node
            continue
        cur = root
        while True:
            side = "left" if v < cur.value else "right"
            nxt = getattr(cur, side)
            if nxt is None:
                _link(cur, node, side)
                break
            cur = nxt
    _anchor(header, root)
    return header, nodes


def _forward(header):
    out = []
    x = header.left
    while x is not header:
        out.append(x.value)
        x = tree_increment(x)
    return out


def _backward(header):
    out = []
    x = tree_decrement(header)
    while True:
        out.append(x.value)
        if x is header.left:
            break
        x = tree_decrement(x)
    return out


def test_make_header_points_to_itself():
    header = make_header()
    assert header.parent is None
    assert header.left is header
    assert header.right is header
    assert header.color is Color.RED


def test_node_defaults_to_red_without_links():
    node = Node(5)
    assert node.value == 5
    assert node.color is Color.RED
    assert (node.parent, node.left, node.right) == (None, None, None)


def test_minimum_and_maximum():
    header, nodes = _sample_tree()
    assert tree_minimum(nodes[4]) is nodes[1]
    assert tree_maximum(nodes[4]) is nodes[7]
    assert tree_minimum(nodes[6]) is nodes[5]
    assert tree_maximum(nodes[2]) is nodes[3]


def test_increment_walks_in_order_and_ends_at_header():
    header, nodes = _sample_tree()
    assert _forward(header) == [1, 2, 3, 4, 5, 6, 7]
    assert tree_increment(nodes[7]) is header


def test_decrement_from_header_gives_rightmost():
    header, nodes = _sample_tree()
    assert tree_decrement(header) is nodes[7]
    assert _backward(header) == [7, 6, 5, 4, 3, 2, 1]


def test_single_node_tree_steps():
    header = make_header()
    node = Node(10, Color.BLACK)
    _anchor(header, node)
    assert tree_increment(node) is header
    assert tree_decrement(header) is node


def test_empty_header_steps_raise():
    header = make_header()
    with pytest.raises(ValueError):
        tree_increment(header)
    with pytest.raises(ValueError):
        tree_decrement(header)


def test_rotate_left_at_root_updates_header():
    header, nodes = _sample_tree()
    rotate_left(nodes[4], header)
    assert header.parent is nodes[6]
    assert nodes[6].parent is header
    assert nodes[6].left is nodes[4]
    assert nodes[4].right is nodes[5]
    assert nodes[5].parent is nodes[4]
    assert _forward(header) == [1, 2, 3, 4, 5, 6, 7]


def test_rotate_right_below_root():
    header, nodes = _sample_tree()
    rotate_right(nodes[2], header)
    assert header.parent is nodes[4]
    assert nodes[4].left is nodes[1]
    assert nodes[1].parent is nodes[4]
    assert nodes[1].right is nodes[2]
    assert nodes[2].left is None
    assert _forward(header) == [1, 2, 3, 4, 5, 6, 7]


def test_rotate_then_inverse_restores_shape():
    header, nodes = _sample_tree()
    rotate_right(nodes[4], header)
    rotate_left(nodes[2], header)
    assert header.parent is nodes[4]
    assert nodes[4].left is nodes[2]
    assert nodes[4].right is nodes[6]
    assert nodes[2].right is nodes[3]


def test_rotate_without_child_raises():
    header, nodes = _sample_tree()
    with pytest.raises(ValueError):
        rotate_left(nodes[7], header)
    with pytest.raises(ValueError):
        rotate_right(nodes[1], header)


def test_black_count_along_path():
    header, nodes = _sample_tree()
    assert black_count(nodes[1], nodes[4]) == 2
    assert black_count(nodes[4], nodes[4]) == 1
    assert black_count(nodes[6], nodes[4]) == 1


def test_black_count_of_none_is_zero():
    header, nodes = _sample_tree()
    assert black_count(None, nodes[4]) == 0


def test_black_count_equal_on_all_leaves_of_valid_tree():
    header, nodes = _sample_tree()
    counts = {black_count(nodes[v], nodes[4]) for v in (1, 3, 5, 7)}
    assert len(counts) == 1


@given(
    st.lists(st.integers(-1000, 1000), min_size=1, max_size=30, unique=True),
    st.lists(st.tuples(st.integers(0, 29), st.booleans()), max_size=20),
)
def test_rotations_preserve_order(values, ops):
    header, nodes = _bst(values)
    for index, leftwards in ops:
        node = nodes[index % len(nodes)]
        if leftwards and node.right is not None:
            rotate_left(node, header)
        elif not leftwards and node.left is not None:
            rotate_right(node, header)
    assert header.parent.parent is header
    assert _forward(header) == sorted(values)