# onekit

A small collection of plain data structures and random helpers for
puzzle-solving and hobby programs, with no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `onekit.rand` | `Randomizer` drawing from a repeatable or non-repeatable `Generator`: integer ranges, dice, in-place shuffling and random characters from a `CharPool` |
| `onekit.pqueue` | `PriorityQueue` ordered by integer priority |
| `onekit.alist` | `AList`, an accumulator list with lisp-style `cons`/`car`/`cdr`, and `DynArray`, a self-expanding array |
| `onekit.tree` | `ScapegoatTree`, a self-balancing binary search tree mapping keys to values |
| `onekit.keyval` | `KeyValueStore` over the scapegoat tree, with integral, string or custom keys (`KeyType`) |

## Examples

### Random helpers

```python
from onekit.rand import Randomizer, Generator, CharPool

rng = Randomizer(Generator.DEFAULT, 42)   # repeatable, seeded
rng.between(1, 10)                        # inclusive range
rng.dice(3, 6)                            # total of 3d6
cards = list(range(52))
rng.shuffle(cards)                        # Fisher-Yates, in place
rng.character_from(CharPool.LOWER | CharPool.DIGIT)
```

`Generator.RANDOM` uses the system generator; `seed()` then returns `False`.
`character_from` raises `ValueError` when the pool selects no character set,
and `between` raises `ValueError` for an empty range.

### Priority queue

```python
from onekit.pqueue import PriorityQueue

pq = PriorityQueue()
pq.insert(5, "five")
pq.insert(1, "one")
pq.peek_lowest()            # (1, 'one')
pq.get_highest()            # (5, 'five')
len(pq)                     # 1
```

Among equal priorities, the lowest end yields the newest item and the highest
end yields the oldest. `get_*` and `peek_*` raise `IndexError` on an empty
queue; `max_priority()` and `min_priority()` return 0 when it is empty.
`add_with_max` and `add_with_min` add at the current highest or lowest
priority, and `reset()` empties the queue and returns how many items it held.

### Accumulator lists and dynamic arrays

```python
from onekit.alist import AList, DynArray

xs = AList([1, 2, 3]).cons(4)
xs.car()                    # 1
list(xs.cdr())              # [2, 3, 4]
list(xs.slice(1, 3))        # [2, 3]
xs.nth(3)                   # 4

arr = DynArray()
arr.put_at(5, "x")
arr.high_index()            # 5
arr.get_from(2)             # None, never written
```

`slice` and `cdr` build new lists and leave the original unchanged. Indexes
outside the list, or a negative index for `DynArray.put_at`, raise
`IndexError`.

### Key:value store

```python
from onekit.keyval import KeyValueStore, KeyType

kv = KeyValueStore(KeyType.STRING, None)
kv.insert("beta", 2)
kv.insert("alpha", 1)
kv.insert("alpha", 9)       # False, key already present
list(kv.keys())             # ['alpha', 'beta']
kv.get("beta")              # 2
kv.update("beta", 20)       # True
list(kv.in_order())         # [('alpha', 1), ('beta', 20)]
kv.delete("alpha")          # True
```

`KeyType.CUSTOM` requires a comparator returning a negative number, zero or a
positive number; without one the constructor raises `ValueError`. A comparator
given with integral or string keys is ignored with a warning. `get` returns
`None` for a missing key, and `delete` raises `KeyError` for a key that was
never stored.

`ScapegoatTree` can be used directly with any comparator. It rebuilds the
subtree under a scapegoat ancestor when an insertion lands too deep, marks
inner nodes as deleted rather than unlinking them, and rebuilds the whole tree
once enough deletes or inserts have accumulated; `rebalance()` forces a full
rebuild.

## What it does not include

The package has no string builder, no character or number helpers, and no
singly or doubly linked lists, stacks, plain queues or deques. For those,
Python's own `str`, `list`, `io.StringIO` and `collections.deque` serve.
There is no command-line program and nothing is saved to disk: every
structure lives in memory only.