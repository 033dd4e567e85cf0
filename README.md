# bddkit

A compact manager for reduced ordered binary decision diagrams (ROBDDs).
Nodes live in a unique table and are referred to by integer IDs. Every
Boolean operation is built on an if-then-else operator backed by a
computed table, and structurally equal nodes are looked up in the unique
table instead of being created twice.

## Installation

```
pip install .
```

## Using the manager

```python
from bddkit.manager import Manager

m = Manager()
a = m.create_var("a")
b = m.create_var("b")
c = m.create_var("c")
d = m.create_var("d")

f = m.and2(m.or2(a, b), m.and2(c, d))

print(m.get_top_var_name(f))        # "a"
print(sorted(m.find_vars(f)))       # IDs of a, b, c and d
print(m.co_factor_true(f, a))       # f with a set to 1
m.visualize_bdd("robdd.dot", f)     # Graphviz output
```

IDs 0 and 1 are the constants `m.false()` and `m.true()`; variables get
IDs in the order they are created, and that order is also the variable
order of every diagram.

Methods of `Manager`:

- `create_var(label)`, `true()`, `false()`, `is_constant(f)`,
  `is_variable(x)`, `top_var(f)`
- `ite(i, t, e)`, `neg`, `and2`, `or2`, `xor2`, `nand2`, `nor2`, `xnor2`
- `co_factor_true(f, x=None)` and `co_factor_false(f, x=None)`; without
  `x` the cofactor is taken with respect to the top variable of `f`
- `high_successor(a)`, `low_successor(a)`, `get_label(f)`,
  `get_top_var_name(root)`, `unique_table_size()`
- `find_nodes(root)` returns the set of node IDs reachable from `root`,
  terminals included; `find_vars(root)` returns the set of their top
  variables, terminals excluded
- `create_node`, `find_or_add` and the static `key_gen` give direct
  access to the unique table; its rows are `UniqueTableEntry` dataclasses
  in `m.unique_table`

### Graphviz output

`visualize_bdd(filepath, root)` writes a `strict digraph` with square
nodes `0` and `1`. For each variable it draws two edges, a dashed one
labelled `0` to the low successor and a solid one labelled `1` to the high
successor, taken from the table node with that top variable whose high
successor has the largest ID. Edges are named after top variable labels.
The drawing is made from the whole unique table; `root` does not limit
what is written.

## Command line

```
bddkit
```

builds the example function `(a or b) and (c and d)` and writes its
diagram to `robdd.dot` in the current directory. Use `-o PATH` /
`--output PATH` to write elsewhere:

```
bddkit -o example.dot
```

Render the result with Graphviz, for example
`dot -Tpng robdd.dot -o robdd.png`.

## What it does not do

bddkit has no reader for circuit or netlist files, no reachability or
state-machine analysis, no dynamic variable reordering and no garbage
collection of unused nodes: the unique table only grows.

## Running the tests

```
pip install .[test]
pytest
```