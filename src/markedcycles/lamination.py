"""Quadratic minor lamination, built one period at a time.

Leaves are pairs of angles (a, b) with exact Fraction endpoints. At period p
the candidate endpoints are k/(2^p - 1). Each existing leaf toggles one bit of
a counter on the angles it separates, and two angles pair up into a new leaf
when they first share a counter value. For the period-two family the angles
strictly inside the basilica wake (1/3, 2/3) are never endpoints.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Dict, List, Set, Tuple

from markedcycles.cells.families import get_family

Leaf = Tuple[Fraction, Fraction]

_EXCLUDED = -1


class Lamination:
    def __init__(self, crit_period: int = 1, period: int = 1):
        self.family = get_family(crit_period)
        self.crit_period = crit_period
        self.degree = self.family.degree
        self.max_period = 1
        zero = Fraction(0)
        # (id, a, b); the period-1 leaf is the degenerate root of the cardioid.
        self.arcs: List[Tuple[int, Fraction, Fraction]] = [(0, zero, zero)]
        self.endpoints: Set[Fraction] = {zero}
        self.period_cutoffs: List[int] = [0, 1]
        self.extend_to_period(period)

    def __len__(self) -> int:
        return len(self.arcs)

    def _extend(self) -> None:
        self.max_period += 1
        n = self.degree ** self.max_period - 1
        counters = [0] * n

        for k in range(n):
            if Fraction(k, n) in self.endpoints:
                counters[k] = _EXCLUDED
        if self.crit_period == 2:
            lo = n // 3 + 1
            hi = 2 * n // 3 if n % 3 == 0 else 2 * n // 3 + 1
            for k in range(lo, hi):
                counters[k] = _EXCLUDED

        for arc_id, a, b in self.arcs:
            lo = math.ceil(n * a)
            hi = math.ceil(n * b)
            bit = 1 << arc_id
            for k in range(lo, hi):
                if counters[k] != _EXCLUDED:
                    counters[k] ^= bit

        pending: Dict[int, Fraction] = {}
        for k in range(1, n):
            counter = counters[k]
            if counter == _EXCLUDED:
                continue
            angle = Fraction(k, n)
            if counter in pending:
                start = pending.pop(counter)
                self.arcs.append((len(self.arcs), start, angle))
                self.endpoints.add(start)
                self.endpoints.add(angle)
            else:
                pending[counter] = angle

        self.period_cutoffs.append(len(self.arcs))

    def extend_to_period(self, period: int) -> None:
        while self.max_period < period:
            self._extend()

    def arcs_of_period(self, period: int, sort: bool = True) -> List[Leaf]:
        """Leaves of exact period *period*, extending the lamination if needed."""
        if period < 1:
            raise ValueError("period must be >= 1.")
        self.extend_to_period(period)
        i = self.period_cutoffs[period - 1]
        j = self.period_cutoffs[period]
        out = [(a, b) for _, a, b in self.arcs[i:j]]
        if sort:
            out.sort()
        return out
