"""Tests for the quadratic minor lamination."""
from fractions import Fraction as F

import pytest

from markedcycles.lamination import Lamination
from markedcycles.utils.counts import MarkedCycleCounts


def test_low_period_leaves():
    lam = Lamination(1, 3)
    assert lam.arcs_of_period(1) == [(F(0), F(0))]
    assert lam.arcs_of_period(2) == [(F(1, 3), F(2, 3))]
    assert lam.arcs_of_period(3) == [
        (F(1, 7), F(2, 7)),
        (F(3, 7), F(4, 7)),
        (F(5, 7), F(6, 7)),
    ]


def test_period_four_leaves():
    assert Lamination(1).arcs_of_period(4) == [
        (F(1, 15), F(2, 15)),
        (F(3, 15), F(4, 15)),
        (F(6, 15), F(9, 15)),
        (F(7, 15), F(8, 15)),
        (F(11, 15), F(12, 15)),
        (F(13, 15), F(14, 15)),
    ]


@pytest.mark.parametrize("crit,n", [(1, 2), (1, 3), (1, 4), (1, 5), (1, 6), (2, 3), (2, 4)])
def test_leaf_count_is_hyperbolic_components(crit, n):
    lam = Lamination(crit)
    assert len(lam.arcs_of_period(n)) == MarkedCycleCounts(crit).hyperbolic_components(n)


def test_period_two_family_skips_basilica_wake():
    for a, b in Lamination(2, 4).arcs_of_period(4):
        assert not (F(1, 3) < a < F(2, 3))
        assert not (F(1, 3) < b < F(2, 3))


def test_leaves_are_disjoint():
    lam = Lamination(1, 6)
    seen = set()
    for n in range(2, 7):
        for a, b in lam.arcs_of_period(n):
            assert 0 < a < b < 1
            assert a not in seen and b not in seen
            seen.update((a, b))


def test_lazy_extension():
    lam = Lamination(1)
    assert lam.max_period == 1
    lam.arcs_of_period(3)
    assert lam.max_period == 3
    assert len(lam) == 1 + 1 + 3
    with pytest.raises(ValueError):
        lam.arcs_of_period(0)
