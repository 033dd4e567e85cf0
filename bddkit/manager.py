"""Reduced ordered binary decision diagrams built around a shared unique table."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Dict, List, Optional, Set, Union

BddId = int

_KEY_MASK = (1 << 64) - 1


@dataclass
class UniqueTableEntry:
    """One row of the unique table: a node with its successors and top variable."""

    label: str
    id: BddId
    high: BddId
    low: BddId
    top_var: BddId


class Manager:
    """Creates and combines BDD nodes, sharing structurally equal nodes."""

    def __init__(self) -> None:
        self.unique_table: List[UniqueTableEntry] = []
        self._unique_index: Dict[int, BddId] = {}
        self._computed: Dict[int, BddId] = {}
        self.false_id = self.create_node(0, 0, 0, "False")
        self.true_id = self.create_node(1, 1, 1, "True")

    # ----------------------------------------------------------------- basics

    def create_var(self, label: str) -> BddId:
        """Create a new variable node labelled ``label`` and return its ID."""
        return self.create_node(self.false(), self.true(), self.unique_table_size(), label)

    def true(self) -> BddId:
        """ID of the True terminal."""
        return self.true_id

    def false(self) -> BddId:
        """ID of the False terminal."""
        return self.false_id

    def is_constant(self, f: BddId) -> bool:
        """Whether ``f`` is one of the two terminal nodes."""
        return f in (self.true(), self.false())

    def is_variable(self, x: BddId) -> bool:
        """Whether ``x`` is a variable node."""
        return self.top_var(x) == x and not self.is_constant(x)

    def top_var(self, f: BddId) -> BddId:
        """Top variable of node ``f``."""
        return self.unique_table[f].top_var

    def unique_table_size(self) -> int:
        """Number of nodes in the unique table."""
        return len(self.unique_table)

    def high_successor(self, a: BddId) -> BddId:
        return self.unique_table[a].high

    def low_successor(self, a: BddId) -> BddId:
        return self.unique_table[a].low

    def get_label(self, f: BddId) -> str:
        return self.unique_table[f].label

    def get_top_var_name(self, root: BddId) -> str:
        """Label of the top variable of ``root``."""
        return self.unique_table[self.top_var(root)].label

    # -------------------------------------------------------------- internals

    @staticmethod
    def key_gen(a: BddId, b: BddId, c: BddId) -> int:
        """Pack three IDs into one 64-bit table key."""
        return ((((a << 21) + b) << 21) + c) & _KEY_MASK

    def create_node(self, low: BddId, high: BddId, top_var: BddId, label: str) -> BddId:
        """Append a node to the unique table and return its ID."""
        node_id = self.unique_table_size()
        self.unique_table.append(UniqueTableEntry(label, node_id, high, low, top_var))
        self._unique_index[self.key_gen(top_var, low, high)] = node_id
        return node_id

    def find_or_add(self, top_var: BddId, low: BddId, high: BddId) -> BddId:
        """Return the node (top_var, low, high), creating it if absent."""
        existing = self._unique_index.get(self.key_gen(top_var, low, high))
        if existing is not None:
            return existing
        return self.create_node(low, high, top_var, "")

    # ------------------------------------------------------------- algorithms

    def ite(self, i: BddId, t: BddId, e: BddId) -> BddId:
        """If-then-else: the node for ``(i and t) or (not i and e)``."""
        if self.is_constant(i):
            return t if i == self.true() else e
        if t == e:
            return t
        if t == self.true() and e == self.false():
            return i

        key = self.key_gen(i, t, e)
        cached = self._computed.get(key)
        if cached is not None:
            return cached

        x = self.top_var(i)
        if not self.is_constant(t) and self.top_var(t) < x:
            x = self.top_var(t)
        if not self.is_constant(e) and self.top_var(e) < x:
            x = self.top_var(e)

        r_high = self.ite(
            self.co_factor_true(i, x), self.co_factor_true(t, x), self.co_factor_true(e, x)
        )
        r_low = self.ite(
            self.co_factor_false(i, x), self.co_factor_false(t, x), self.co_factor_false(e, x)
        )
        if r_high == r_low:
            return r_high

        result = self.find_or_add(x, r_low, r_high)
        self._computed[key] = result
        return result

    def co_factor_true(self, f: BddId, x: Optional[BddId] = None) -> BddId:
        """Positive cofactor of ``f`` w.r.t. ``x`` (default: top variable of ``f``)."""
        if x is None:
            x = self.top_var(f)
        if self.is_constant(f) or self.is_constant(x) or self.top_var(f) > x:
            return f
        if self.top_var(f) == x:
            return self.unique_table[f].high
        high = self.co_factor_true(self.unique_table[f].high, x)
        low = self.co_factor_true(self.unique_table[f].low, x)
        return self.ite(self.top_var(f), high, low)

    def co_factor_false(self, f: BddId, x: Optional[BddId] = None) -> BddId:
        """Negative cofactor of ``f`` w.r.t. ``x`` (default: top variable of ``f``)."""
        if x is None:
            x = self.top_var(f)
        if self.is_constant(f) or self.is_constant(x) or self.top_var(f) > x:
            return f
        if self.top_var(f) == x:
            return self.unique_table[f].low
        high = self.co_factor_false(self.unique_table[f].high, x)
        low = self.co_factor_false(self.unique_table[f].low, x)
        return self.ite(self.top_var(f), high, low)

    # -------------------------------------------------------------- operators

    def neg(self, a: BddId) -> BddId:
        return self.ite(a, self.false(), self.true())

    def and2(self, a: BddId, b: BddId) -> BddId:
        return self.ite(a, b, self.false())

    def or2(self, a: BddId, b: BddId) -> BddId:
        return self.ite(a, self.true(), b)

    def xor2(self, a: BddId, b: BddId) -> BddId:
        return self.ite(a, self.neg(b), b)

    def nand2(self, a: BddId, b: BddId) -> BddId:
        return self.neg(self.and2(a, b))

    def nor2(self, a: BddId, b: BddId) -> BddId:
        return self.neg(self.or2(a, b))

    def xnor2(self, a: BddId, b: BddId) -> BddId:
        return self.neg(self.xor2(a, b))

    # -------------------------------------------------------------- traversal

    def find_nodes(self, root: BddId) -> Set[BddId]:
        """All nodes reachable from ``root``, including ``root`` and terminals."""
        nodes: Set[BddId] = set()
        pending = [root]
        while pending:
            node = pending.pop()
            if node in nodes:
                continue
            nodes.add(node)
            entry = self.unique_table[node]
            pending.extend(succ for succ in (entry.high, entry.low) if succ not in nodes)
        return nodes

    def find_vars(self, root: BddId) -> Set[BddId]:
        """Top variables of all non-terminal nodes reachable from ``root``."""
        return {
            self.top_var(node) for node in self.find_nodes(root) if not self.is_constant(node)
        }

    # ---------------------------------------------------------------- output

    def visualize_bdd(self, filepath: Union[str, PathLike], root: BddId) -> None:
        """Write a Graphviz description of the table's variable ordering to ``filepath``."""
        highest: Dict[BddId, UniqueTableEntry] = {}
        for node in self.unique_table:
            current = highest.get(node.top_var)
            if current is None or node.high >= current.high:
                highest[node.top_var] = node

        def target(node_id: BddId) -> str:
            return str(node_id) if self.is_constant(node_id) else self.get_top_var_name(node_id)

        lines = ["strict digraph ROBDD {\n", "  0 [shape = square];\n", "  1 [shape = square];\n"]
        for node in highest.values():
            if self.is_constant(node.id):
                continue
            name = self.get_top_var_name(node.id)
            lines.append(f'  {name} -> {target(node.low)} [label="0"] [style = "dashed"]\n')
            lines.append(f'  {name} -> {target(node.high)} [label="1"]\n')
        lines.append("}\n")

        with open(filepath, "w", encoding="utf-8") as out:
            out.writelines(lines)