"""Tests for the incidence forest and nested listings."""
import networkx as nx
import pytest

from markedcycles.cells.enumerate import Cell, enumerate_cells
from markedcycles.cells.incidence import (
    build_incidence_forest,
    collect_cells,
    forest_roots,
    is_boundary_of,
    nested_cells,
)
from markedcycles.cells.labels import format_cell, format_nested
from markedcycles.words import minimal_period, word_to_id


def _cell(word, period=None):
    return Cell(
        period=period or len(word),
        identifier=word_to_id(word),
        word=tuple(word),
        min_period=minimal_period(word),
    )


def test_is_boundary_of():
    parent = _cell((0, 0, 0, 1))
    assert is_boundary_of(_cell((0, 1, 0, 1)), parent)
    assert is_boundary_of(_cell((0, 0, 0, 0)), parent)
    assert not is_boundary_of(parent, _cell((0, 1, 0, 1)))
    # period 3 does not divide period 4
    assert not is_boundary_of(_cell((0, 0, 1)), parent)
    # same period never nests
    assert not is_boundary_of(_cell((0, 0, 1, 1)), parent)


def test_forest_is_a_branching():
    cells = enumerate_cells(6, 1, dynatomic=True)
    forest = build_incidence_forest(cells)
    assert nx.is_branching(forest)
    assert set(forest.nodes) == set(cells)
    for parent, child in forest.edges:
        assert child.min_period < parent.min_period
        assert parent.min_period % child.min_period == 0
        assert forest.nodes[child]["depth"] == forest.nodes[parent]["depth"] + 1


def test_dynatomic_listing_period_four():
    nested = nested_cells(4, 1, 0, dynatomic=True)
    assert [(c.identifier, d) for c, d in nested] == [(1, 0), (5, 1), (0, 2), (3, 0), (7, 0)]


def test_marked_listing_collects_divisor_periods():
    cells = collect_cells(4, 1, 4)
    assert sorted((c.period, c.identifier) for c in cells) == [(1, 0), (2, 1), (4, 1), (4, 3), (4, 7)]

    nested = nested_cells(4, 1, 4)
    assert [(c.period, c.identifier, d) for c, d in nested] == [
        (4, 1, 0),
        (2, 1, 1),
        (1, 0, 2),
        (4, 3, 0),
        (4, 7, 0),
    ]


def test_roots_in_identifier_order():
    forest = build_incidence_forest(enumerate_cells(5, 1, dynatomic=True))
    roots = forest_roots(forest)
    assert [c.identifier for c in roots] == sorted(c.identifier for c in roots)
    assert all(c.min_period == 5 for c in roots)


def test_listing_is_deterministic():
    a = nested_cells(6, 2, 0, dynatomic=True)
    b = nested_cells(6, 2, 0, dynatomic=True)
    assert a == b
    assert len(a) == len(enumerate_cells(6, 2, dynatomic=True))


def test_degenerate_nesting_is_empty():
    assert nested_cells(3, 1, 4) == []
    assert nested_cells(3, 1, 0) == []
    assert nested_cells(0, 1, 0, dynatomic=True) == []


def test_format_nested_indentation():
    nested = nested_cells(4, 1, 4)
    lines = format_nested(nested, indent=4)
    assert lines[0] == "    1  period=4 min_period=4"
    assert lines[1] == "        1  period=2 min_period=2"
    assert lines[2] == "            0  period=1 min_period=1"

    binary = format_nested(nested, indent=2, binary=True)
    assert binary[0] == "  0001  period=4 min_period=4"
    assert binary[1] == "    01  period=2 min_period=2"


def test_format_cell_and_bad_indent():
    c = _cell((0, 1, 1))
    assert format_cell(c) == "3  period=3 min_period=3"
    with pytest.raises(ValueError):
        format_nested([], indent=-1)
