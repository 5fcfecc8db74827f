"""Closed-form cell counts of marked cycle and dynatomic curves.

Counts are in terms of periodic points of z -> z^(+/-2) and of mateable
hyperbolic components, assembled by Moebius inversion and Dirichlet
convolution. They give an independent check of the enumerated cells.
"""
from __future__ import annotations

from markedcycles.cells.families import Family, get_family
from markedcycles.utils.arithmetic import (
    dirichlet_convolution,
    euler_totient,
    filtered_dirichlet_convolution,
    moebius,
    moebius_inversion,
    trunc_div,
)


class _CurveCounts:
    def __init__(self, crit_period: int):
        self.family: Family = get_family(crit_period)
        self.crit_period = crit_period

    def points_of_period_dividing_n(self, n: int) -> int:
        return self.family.points_of_period_dividing(n)

    def periodic_points(self, n: int) -> int:
        """Points of exact period n."""
        return moebius_inversion(self.points_of_period_dividing_n, n)

    def cycles(self, n: int) -> int:
        return trunc_div(self.periodic_points(n), n)

    def hyp_components_dividing_n(self, n: int) -> int:
        return self.family.hyp_components_dividing(n)

    def hyperbolic_components(self, n: int) -> int:
        """Mateable hyperbolic components of exact period n."""
        return moebius_inversion(self.hyp_components_dividing_n, n)

    def _totient_weighted_components(self, n: int) -> int:
        return dirichlet_convolution(euler_totient, self.hyperbolic_components, n)

    def satellite_components(self, n: int) -> int:
        return self._totient_weighted_components(n) - self.hyperbolic_components(n)

    def primitive_components(self, n: int) -> int:
        return 2 * self.hyperbolic_components(n) - self._totient_weighted_components(n)

    def self_conjugate_faces(self, n: int) -> int:
        """Faces fixed by the order-(crit_period + 1) symmetry."""
        sym = self.family.symmetry_order
        if n % sym:
            return 0
        k = n // sym
        u = 1 - self.crit_period
        degree = self.family.degree
        total = filtered_dirichlet_convolution(
            moebius,
            lambda d: degree ** d - u ** d,
            k,
            lambda d: d % sym > 0,
        )
        return trunc_div(self.crit_period * total, n)

    def euler_characteristic(self, n: int) -> int:
        return self.vertices(n) - self.edges(n) + self.faces(n)

    def vertices(self, n: int) -> int:
        raise NotImplementedError

    def edges(self, n: int) -> int:
        raise NotImplementedError

    def faces(self, n: int) -> int:
        raise NotImplementedError

    def genus(self, n: int) -> int:
        raise NotImplementedError


class MarkedCycleCounts(_CurveCounts):
    """Counts for the curve of maps with a marked n-cycle."""

    def vertices(self, n: int) -> int:
        return self.cycles(n)

    def edges(self, n: int) -> int:
        return self.primitive_components(n)

    def faces(self, n: int) -> int:
        cper = self.crit_period
        return trunc_div(self.cycles(n) + cper * self.self_conjugate_faces(n), cper + 1)

    def genus(self, n: int) -> int:
        return self.family.marked_cycle_genus(
            self.primitive_components(n),
            self.cycles(n),
            self.self_conjugate_faces(n),
        )


class DynatomicCounts(_CurveCounts):
    """Counts for the dynatomic curve (marked point of period n)."""

    def primitive_faces(self, n: int) -> int:
        return trunc_div(self.periodic_points(n), self.crit_period + 1)

    def satellite_faces(self, n: int) -> int:
        return (
            dirichlet_convolution(lambda d: d * self.hyperbolic_components(d), euler_totient, n)
            - n * self.hyperbolic_components(n)
        )

    def vertices(self, n: int) -> int:
        return self.periodic_points(n)

    def edges(self, n: int) -> int:
        return n * self.hyperbolic_components(n)

    def faces(self, n: int) -> int:
        return self.primitive_faces(n) + self.satellite_faces(n)

    def genus(self, n: int) -> int:
        return self.family.dynatomic_genus(
            n,
            self.hyperbolic_components(n),
            self.periodic_points(n),
            self.satellite_faces(n),
        )


def curve_counts(crit_period: int, dynatomic: bool = False) -> _CurveCounts:
    return DynatomicCounts(crit_period) if dynatomic else MarkedCycleCounts(crit_period)
