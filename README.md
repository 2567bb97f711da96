# ftcontainers

Ordered containers for Python built on a red-black tree that is anchored by
a sentinel header node, together with a stack, a growable array and a few
range helpers. The package has no dependencies outside the standard library.

## Modules

- `ftcontainers.rb_node`: the `Color` enum, the `Node` class and the
  pointer-level operations on a tree: `make_header`, `tree_minimum`,
  `tree_maximum`, `tree_increment`, `tree_decrement`, `rotate_left`,
  `rotate_right` and `black_count`.
- `ftcontainers.rb_rebalance`: `insert_and_rebalance` and
  `rebalance_for_erase`, which link or unlink a node and restore the
  red-black properties while keeping the header's root, leftmost and
  rightmost links current.
- `ftcontainers.rb_tree`: `RBTree`, a tree of values with unique keys
  (a key function and a `compare(a, b)` "orders before" function, defaulting
  to identity and `<`), and `TreeIterator`, a position in the tree with
  `value()`, `increment()` and `decrement()`. The tree offers
  `insert_unique`, `insert_hint`, `insert_range`, `erase`, `erase_key`,
  `erase_range`, `clear`, `find`, `count`, `lower_bound`, `upper_bound`,
  `equal_range`, `swap`, `copy`, forward and reverse iteration, equality and
  lexicographic ordering, and `validate()`, which returns True or raises
  `ValueError` naming the broken invariant.
- `ftcontainers.ordered_map`: `OrderedMap`, a mapping kept sorted by key, and
  `Entry`, the key/value pair it stores. `m[key]` raises `KeyError` for a
  missing key unless a `default_factory` was given, in which case it inserts
  `default_factory()`. `at(key)` always raises `KeyError` when the key is
  absent. Iterating a map yields its keys; `items()` yields `(key, value)`
  pairs. Positions returned by `find`, `lower_bound`, `begin` and the like
  are `TreeIterator` objects whose `value()` is the `Entry`.
- `ftcontainers.dynarray`: `DynamicArray`, a sequence with an explicit
  capacity. When an insertion does not fit, the capacity grows to
  `len + max(len, added)`, so repeated `push_back` doubles it; `reserve`
  raises it, and `clear` and `pop_back` never lower it. It also has
  `assign`, `assign_fill`, `insert`, `insert_range`, `front` and `back`.
- `ftcontainers.stack`: `Stack`, a last-in, first-out adaptor over a copy of
  a container that offers `push_back`, `pop_back`, `back` and `empty`
  (a `DynamicArray` by default). Stacks compare by their containers.
- `ftcontainers.ranges`: `Range(start, stop)`, the integers from `start` to
  `stop` inclusive, counting down when `stop < start`, and
  `reverse_in_place`, which reverses a mutable sequence by swapping from
  both ends.
- `ftcontainers.simple_rbtree`: `SimpleRBTree`, a compact red-black tree of
  comparable keys that allows duplicates, with `insert`, `delete` (raises
  `KeyError` when the key is absent), `search`, `minimum`, `maximum`,
  `successor`, `predecessor`, `root`, the `preorder`, `inorder` and
  `postorder` traversals as lists, and `pretty()`, a text drawing with one
  node per line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftcontainers.ordered_map import OrderedMap

m = OrderedMap()
for key, value in zip("abcde", (20, 40, 60, 80, 100)):
    m[key] = value

m.erase_range(m.lower_bound("c"), m.upper_bound("d"))
print(list(m.items()))  # [('a', 20), ('b', 40), ('e', 100)]

m.at("z")  # raises KeyError
```

```python
from ftcontainers.stack import Stack

s = Stack()
s.push(1)
s.push(2)
print(s.top())  # 2
s.pop()
print(len(s))   # 1
```

```python
from ftcontainers.ranges import Range, reverse_in_place

print(list(Range(3, 5)))  # [3, 4, 5]
print(list(Range(5, 3)))  # [5, 4, 3]
values = [1, 2, 3, 4, 5]
reverse_in_place(values)
print(values)             # [5, 4, 3, 2, 1]
```

```python
from ftcontainers.simple_rbtree import SimpleRBTree

t = SimpleRBTree()
for key in (8, 18, 5, 15, 17, 25, 40, 80):
    t.insert(key)
t.delete(25)
print(t.inorder())  # [5, 8, 15, 17, 18, 40, 80]
print(t.pretty())
```

## What it does not do

The package is a library only: it installs no command, and the containers
live in memory with no way to save or load them.