"""Dynamical families selected by the period of the critical cycle.

Each family is one descriptor carrying its alphabet, its admissibility rule
and the closed-form counts of its curves. Adding a family means adding one
subclass and registering it in FAMILIES.

  crit_period 1: Per_1(0), the unicritical family, modelled on z -> z^2.
  crit_period 2: Per_2(0), two critical points exchanged, modelled on z -> z^-2.

Itineraries are binary words read as angles k/(2^n - 1) under doubling.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from markedcycles.utils.arithmetic import trunc_div


class UnsupportedCriticalPeriod(ValueError):
    """Raised for a critical period that has no registered family."""

    def __init__(self, crit_period: int):
        self.crit_period = crit_period
        supported = ", ".join(str(p) for p in sorted(FAMILIES))
        super().__init__(
            f"Unsupported critical period {crit_period!r} (must be one of {supported})."
        )


@dataclass(frozen=True)
class Family:
    """Descriptor of a family of degree-`degree` maps z -> z^(sign*degree)."""

    crit_period: int
    degree: int
    sign: int
    name: str

    @property
    def alphabet(self) -> range:
        return range(self.degree)

    def forbids(self, word: Sequence[int], dynatomic: bool) -> bool:
        """True iff *word* cannot be the itinerary of a marked orbit."""
        return self._forbidden(tuple(word), dynatomic)

    def _forbidden(self, word: tuple, dynatomic: bool) -> bool:
        raise NotImplementedError

    # -- closed-form counts ------------------------------------------------

    def points_of_period_dividing(self, n: int) -> int:
        """Points of period dividing n under z -> z^(sign*degree)."""
        return self.degree ** n - self.sign ** n

    def hyp_components_dividing(self, n: int) -> int:
        """Mateable hyperbolic components of period dividing n."""
        raise NotImplementedError

    @property
    def symmetry_order(self) -> int:
        return self.crit_period + 1

    def marked_cycle_genus(self, prim: int, cyc: int, selfconj: int) -> int:
        raise NotImplementedError

    def dynatomic_genus(self, n: int, hyp: int, per: int, satf: int) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class UnicriticalFamily(Family):
    crit_period: int = 1
    degree: int = 2
    sign: int = 1
    name: str = "Per_1(0)"

    def _forbidden(self, word: tuple, dynatomic: bool) -> bool:
        n = len(word)
        top = self.degree - 1
        if all(s == top for s in word):
            # (2^n-1)/(2^n-1) is angle 0, already 0^n; at n=1 the word (1)
            # is kept in dynatomic mode as the alpha fixed point.
            return not (dynatomic and n == 1)
        return False

    def hyp_components_dividing(self, n: int) -> int:
        return self.degree ** n // 2

    def marked_cycle_genus(self, prim: int, cyc: int, selfconj: int) -> int:
        return 1 + trunc_div(2 * prim - 3 * cyc - selfconj, 4)

    def dynatomic_genus(self, n: int, hyp: int, per: int, satf: int) -> int:
        return 1 + trunc_div(n * hyp - trunc_div(3 * per, 2) - satf, 2)


@dataclass(frozen=True)
class PeriodTwoFamily(UnicriticalFamily):
    crit_period: int = 2
    degree: int = 2
    sign: int = -1
    name: str = "Per_2(0)"

    def _forbidden(self, word: tuple, dynatomic: bool) -> bool:
        if super()._forbidden(word, dynatomic):
            return True
        n = len(word)
        if n % 2:
            return False
        # The two critical points are exchanged along the 2-cycle 1/3 <-> 2/3;
        # an orbit shadowing it at every step is the critical cycle itself.
        return word in ((0, 1) * (n // 2), (1, 0) * (n // 2))

    def hyp_components_dividing(self, n: int) -> int:
        return (self.degree ** n - self.sign ** n) // 3

    def marked_cycle_genus(self, prim: int, cyc: int, selfconj: int) -> int:
        return 1 + trunc_div(3 * prim - 4 * cyc - 2 * selfconj, 6)

    def dynatomic_genus(self, n: int, hyp: int, per: int, satf: int) -> int:
        return 1 - trunc_div(2 * per, 3) + trunc_div(n * hyp - satf, 2)


FAMILIES: Dict[int, Family] = {
    1: UnicriticalFamily(),
    2: PeriodTwoFamily(),
}


def get_family(crit_period: int) -> Family:
    """Family for a critical period; raises UnsupportedCriticalPeriod otherwise."""
    try:
        return FAMILIES[crit_period]
    except (KeyError, TypeError):
        raise UnsupportedCriticalPeriod(crit_period) from None
