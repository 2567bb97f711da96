import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftcontainers.dynarray import DynamicArray
from ftcontainers.stack import Stack


def test_push_top_pop():
    s = Stack()
    assert s.empty()
    s.push(1)
    s.push(2)
    assert s.top() == 2
    assert len(s) == 2
    s.pop()
    assert s.top() == 1
    s.pop()
    assert s.empty()


def test_empty_stack_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.top()
    with pytest.raises(IndexError):
        s.pop()


def test_initial_container_is_copied():
    base = DynamicArray()
    base.assign([1, 2, 3])
    s = Stack(base)
    assert s.top() == 3
    s.push(4)
    assert list(base) == [1, 2, 3]
    assert len(s) == 4


def test_equality_and_ordering():
    a = Stack()
    b = Stack()
    for v in (1, 2):
        a.push(v)
        b.push(v)
    assert a == b
    assert a <= b
    b.push(3)
    assert a != b
    assert a < b
    assert b > a
    assert b >= a


def test_ordering_is_lexicographic():
    a = Stack()
    b = Stack()
    a.push(5)
    b.push(1)
    b.push(9)
    assert b < a


@given(st.lists(st.integers(), min_size=1))
def test_pops_come_back_reversed(values):
    s = Stack()
    for v in values:
        s.push(v)
    popped = []
    while not s.empty():
        popped.append(s.top())
        s.pop()
    assert popped == values[::-1]