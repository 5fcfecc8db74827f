"""Incidence forest of cells, used to order and indent listings.

A cell of minimal period d sits on the boundary of a cell of minimal period
e > d (with d | e) when its primitive root occurs as a factor of the other
cell's cyclic root. Each cell is attached once, under its deepest compatible
parent; periods strictly decrease along edges, so the result is a branching.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Optional

import networkx as nx

from markedcycles.cells.enumerate import Cell, enumerate_cells
from markedcycles.cells.families import get_family
from markedcycles.utils.arithmetic import divisors
from markedcycles.words.necklace import is_cyclic_factor


class NestedCell(NamedTuple):
    cell: Cell
    depth: int


def is_boundary_of(child: Cell, parent: Cell) -> bool:
    """Whether *child* degenerates from (is a boundary facet of) *parent*."""
    d, e = child.min_period, parent.min_period
    if d >= e or e % d:
        return False
    return is_cyclic_factor(child.root, parent.root)


def _processing_key(c: Cell) -> tuple:
    return (-c.min_period, c.identifier, c.period)


def build_incidence_forest(cells: Iterable[Cell]) -> nx.DiGraph:
    """Directed forest parent -> child; every node carries a 'depth' attribute."""
    ordered = sorted(set(cells), key=_processing_key)

    forest = nx.DiGraph()
    depth: Dict[Cell, int] = {}
    parent_of: Dict[Cell, Optional[Cell]] = {}

    for c in ordered:
        best: Optional[Cell] = None
        for p in depth:
            if not is_boundary_of(c, p):
                continue
            if best is None or (-depth[p], p.identifier, p.period) < (
                -depth[best], best.identifier, best.period
            ):
                best = p
        parent_of[c] = best
        depth[c] = 0 if best is None else depth[best] + 1

    # Insert nodes and edges in identifier order so traversal is deterministic.
    for c in sorted(ordered, key=lambda c: (c.identifier, c.period)):
        forest.add_node(c, depth=depth[c])
    for c in sorted(ordered, key=lambda c: (c.identifier, c.period)):
        p = parent_of[c]
        if p is not None:
            forest.add_edge(p, c)

    return forest


def forest_roots(forest: nx.DiGraph) -> List[Cell]:
    roots = [v for v in forest.nodes if forest.in_degree(v) == 0]
    roots.sort(key=lambda c: (c.identifier, c.period))
    return roots


def nested_listing(forest: nx.DiGraph) -> List[NestedCell]:
    """Depth-first pre-order over the forest, roots in identifier order."""
    out: List[NestedCell] = []
    for root in forest_roots(forest):
        for v in nx.dfs_preorder_nodes(forest, root):
            out.append(NestedCell(v, forest.nodes[v]["depth"]))
    return out


def collect_cells(
    n: int,
    crit_period: int,
    marked_period: int = 0,
    dynatomic: bool = False,
) -> List[Cell]:
    """Cells entering the nesting for a request.

    Dynatomic: the length-n enumeration, which already holds cells inherited
    from divisors. Marked cycles: exact-period cells for every divisor of
    marked_period.
    """
    get_family(crit_period)
    if dynatomic:
        return enumerate_cells(n, crit_period, marked_period, dynatomic=True)
    if marked_period <= 0 or marked_period > n:
        return []
    cells: List[Cell] = []
    for d in divisors(marked_period):
        cells.extend(enumerate_cells(d, crit_period, d, dynatomic=False))
    return cells


def nested_cells(
    n: int,
    crit_period: int,
    marked_period: int = 0,
    dynatomic: bool = False,
) -> List[NestedCell]:
    """Cells of a request, ordered and annotated with their nesting depth."""
    cells = collect_cells(n, crit_period, marked_period, dynatomic)
    return nested_listing(build_incidence_forest(cells))
