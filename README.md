# succinctree

Static data structures for two kinds of query:

* **Range minimum queries**: find the index of the smallest element in any
  inclusive range of a fixed list of integers.
* **Balanced parentheses excess queries**: store a parenthesis expression as
  bits and find matching, enclosing and other positions by their excess.
  A min-max tree over blocks of the expression speeds up these searches.

The package has no runtime dependencies.

## Installation

```
pip install succinctree
```

## Range minimum queries

Two structures answer the same question with different trade-offs.
`BinaryRmq` precomputes minima over all power-of-two intervals. `FastRmq`
splits the data into blocks of 128 and keeps much less extra state.

```python
from succinctree.rmq.binary_rmq import BinaryRmq
from succinctree.rmq.fast_rmq import FastRmq

rmq = BinaryRmq([4, 10, 3, 11, 2, 12])
rmq.range_min(0, 1)   # 0
rmq.range_min(0, 2)   # 2
rmq.range_min(0, 3)   # 2

fast = FastRmq([5, 4, 3, 2, 1])
fast.range_min_with_range(range(0, 3))  # 2
fast[4]                                  # 1
list(fast)                               # [5, 4, 3, 2, 1]
```

Both bounds of `range_min` are inclusive. A query with its start after its
end raises `ValueError`. A position out of bounds raises `IndexError`.

`range_min_with_range` takes a `range` or `slice` with step 1. As usual in
Python, the range is half-open. The bounds are clamped to the data, so only
an empty structure makes it raise.

`heap_size()` reports an estimate of the bytes the structure uses.

## Parenthesis expressions

`succinctree.trees.parens.ParenthesesVector` holds a sequence of bits. A `1`
is an opening parenthesis and a `0` is a closing one. The second argument is
the block size of the min-max tree, and defaults to 512. Smaller blocks mean
more support data and shorter scans.

```python
from succinctree.trees.parens import ParenthesesVector

parens = ParenthesesVector([1, 1, 1, 0, 0, 1, 0, 0], 4)   # "((())())"
parens.close(0)          # 7
parens.close(1)          # 4
parens.open(4)           # 1
parens.enclose(5)        # 0
parens.excess(3)         # 2
parens.fwd_search(0, -1) # 7
parens.rank1(3)          # 3
parens.select0(0)        # 3
list(parens.iter1())     # [0, 1, 2, 5]
```

The vector offers the following queries:

* `rank0`, `rank1`, `select0`, `select1`, `iter0` and `iter1` for rank and select.
* `get` returns `None` past the end.
* `fwd_search(index, relative_excess)` and `bwd_search(index, relative_excess)`
  find the nearest position after or before `index` whose excess relative to
  `index` is the given value. They return `None` if there is none.
* `close`, `open` and `enclose` are built on those two searches.

Unbalanced expressions are accepted. Searches then simply return `None` where
no answer exists.

### Lower-level pieces

`succinctree.trees.mmt.MinMaxTree.excess_tree(bits, block_size)` builds the
min-max tree on its own. The tree is complete and stored in an array. Each
`ExcessNode` holds the total, minimum and maximum relative excess of its
range. Navigation helpers work on node indices: `parent`, `left_child`,
`right_child`, the siblings, `first_leaf` and `is_leaf`.

`succinctree.trees.mmt_search` offers `fwd_search(tree, begin, excess)` and
`bwd_search(tree, begin, excess)`. These locate the block that holds a
requested excess.

```python
from succinctree.trees.mmt import MinMaxTree
from succinctree.trees.mmt_search import fwd_search

tree = MinMaxTree.excess_tree([1] * 12 + [0] * 12, 8)
len(tree)                    # 6
fwd_search(tree, 0, -1)[0]   # 2
```

`succinctree.trees.lookup` has tables over 8-bit blocks. Bit 0 comes first.
It provides `block_total_excess`, `block_min_excess`, `block_max_excess`,
`process_block_fwd` and `process_block_bwd`.

```python
from succinctree.trees.lookup import block_total_excess, process_block_fwd

block_total_excess(0b11111111)     # 8
process_block_fwd(0b00001111, 2)   # (1, 0)
```

## What the package does not do

There is no tree class with node navigation operations. Such a class would
offer parent, children, siblings, depth, level order, subtree sizes and
traversal iterators. There is also no builder that assembles an expression
from a depth-first walk.

`ParenthesesVector` supplies the excess primitives such navigation rests on.
You combine them yourself. For example, `enclose(node)` gives a node's
parent, and `close(node)` gives the end of its subtree.

The package has no command-line interface and no serialisation format.

## Running the tests

```
pip install -e .[test]
pytest
```