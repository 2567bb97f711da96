import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftcontainers.ordered_map import Entry, OrderedMap


def _pairs_between(first, last):
    result = []
    while first != last:
        entry = first.value()
        result.append((entry.key, entry.value))
        first = first.increment()
    return result


def test_insert_ignores_duplicate_and_range_insert_between_positions():
    mymap = OrderedMap()
    mymap.insert(("a", 100))
    mymap.insert(("c", 200))
    mymap.insert(("z", 300))
    mymap.insert(("b", 400))
    position, inserted = mymap.insert(("c", 500))
    assert inserted is False
    assert position.value() == Entry("c", 200)

    another = OrderedMap()
    another.insert_range(_pairs_between(mymap.begin(), mymap.find("z")))
    assert list(another.items()) == [("a", 100), ("b", 400), ("c", 200)]


def test_erase_between_lower_and_upper_bound():
    mymap = OrderedMap()
    mymap["a"] = 20
    mymap["b"] = 40
    mymap["c"] = 60
    mymap["d"] = 80
    mymap["e"] = 100
    mymap.erase_range(mymap.lower_bound("c"), mymap.upper_bound("d"))
    assert list(mymap.items()) == [("a", 20), ("b", 40), ("e", 100)]


def test_getitem_with_default_factory_inserts():
    m = OrderedMap(default_factory=int)
    assert m["x"] == 0
    assert "x" in m
    assert len(m) == 1


def test_getitem_without_factory_raises():
    m = OrderedMap({1: "one"})
    assert m[1] == "one"
    with pytest.raises(KeyError):
        m[2]
    assert len(m) == 1


def test_at_raises_for_missing_key():
    m = OrderedMap([(3, "c")])
    assert m.at(3) == "c"
    with pytest.raises(KeyError):
        m.at(4)


def test_setitem_overwrites():
    m = OrderedMap()
    m["k"] = 1
    m["k"] = 2
    assert m.at("k") == 2
    assert len(m) == 1


def test_count_contains_and_find():
    m = OrderedMap({5: "five", 1: "one"})
    assert m.count(5) == 1
    assert m.count(7) == 0
    assert 1 in m and 7 not in m
    assert m.find(7) == m.end()
    assert m.find(5).value().value == "five"


def test_value_mutation_through_position():
    m = OrderedMap({"k": 1})
    m.find("k").value().value = 9
    assert m["k"] == 9


def test_erase_key_returns_removed_count():
    m = OrderedMap({1: "a", 2: "b"})
    assert m.erase_key(1) == 1
    assert m.erase_key(1) == 0
    assert list(m) == [2]


def test_erase_position_and_end_error():
    m = OrderedMap({1: "a", 2: "b", 3: "c"})
    m.erase(m.find(2))
    assert list(m) == [1, 3]
    with pytest.raises(IndexError):
        m.erase(m.end())


def test_insert_hint_returns_existing_position():
    m = OrderedMap({1: "a", 3: "c"})
    pos = m.find(3)
    assert m.insert_hint(pos, (3, "z")) == pos
    new_pos = m.insert_hint(pos, (2, "b"))
    assert new_pos.value() == Entry(2, "b")
    assert list(m.items()) == [(1, "a"), (2, "b"), (3, "c")]


def test_equal_range_brackets_key():
    m = OrderedMap({1: "a", 2: "b", 3: "c"})
    first, last = m.equal_range(2)
    assert _pairs_between(first, last) == [(2, "b")]
    first, last = m.equal_range(10)
    assert first == last == m.end()


def test_custom_compare_orders_descending():
    m = OrderedMap({1: "a", 3: "c", 2: "b"}, compare=operator.gt)
    assert list(m) == [3, 2, 1]
    assert list(reversed(m)) == [1, 2, 3]
    assert m.key_comp() is operator.gt


def test_value_comp_compares_keys_only():
    m = OrderedMap()
    vc = m.value_comp()
    assert vc((1, "z"), (2, "a")) is True
    assert vc((2, "a"), (1, "z")) is False
    assert vc(Entry(1, "x"), (1, "y")) is False


def test_swap_exchanges_contents():
    a = OrderedMap({1: "a"}, default_factory=str)
    b = OrderedMap({2: "b", 3: "c"})
    a.swap(b)
    assert list(a.items()) == [(2, "b"), (3, "c")]
    assert list(b.items()) == [(1, "a")]
    assert a.default_factory is None and b.default_factory is str


def test_copy_is_independent():
    a = OrderedMap({1: "a", 2: "b"})
    b = a.copy()
    assert a == b
    b[1] = "changed"
    b[3] = "c"
    assert a.at(1) == "a"
    assert list(a) == [1, 2]


def test_comparisons():
    a = OrderedMap({1: "a", 2: "b"})
    b = OrderedMap({1: "a", 3: "b"})
    assert a < b
    assert b > a
    assert a <= a.copy()
    assert a != b


def test_clear_and_empty():
    m = OrderedMap({1: "a"})
    assert not m.empty()
    m.clear()
    assert m.empty()
    assert m.begin() == m.end()


@given(st.lists(st.tuples(st.integers(-50, 50), st.integers()), max_size=60),
       st.lists(st.integers(-50, 50), max_size=30))
def test_behaves_like_sorted_dict(pairs, removals):
    m = OrderedMap()
    model = {}
    for key, value in pairs:
        m[key] = value
        model[key] = value
    for key in removals:
        assert m.erase_key(key) == (1 if key in model else 0)
        model.pop(key, None)
    assert list(m.items()) == sorted(model.items())
    assert len(m) == len(model)
    assert list(reversed(m)) == sorted(model, reverse=True)