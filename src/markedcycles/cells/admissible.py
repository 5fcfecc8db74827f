"""Admissibility of candidate itineraries."""
from __future__ import annotations

from typing import Sequence

from markedcycles.cells.families import Family, get_family
from markedcycles.words.necklace import minimal_period


def is_admissible_for(
    word: Sequence[int],
    family: Family,
    marked_period: int,
    dynatomic: bool,
) -> bool:
    """Admissibility against an already-resolved family descriptor."""
    if len(word) == 0:
        return False
    if any(s not in family.alphabet for s in word):
        return False
    if family.forbids(word, dynatomic):
        return False
    if not dynatomic and minimal_period(word) != marked_period:
        return False
    return True


def is_admissible(
    word: Sequence[int],
    crit_period: int,
    marked_period: int,
    dynatomic: bool,
) -> bool:
    """Whether *word* is the itinerary of a cell.

    Dynatomic mode accepts every word the family allows, whatever its minimal
    period; *marked_period* is ignored. Marked-cycle mode additionally
    requires the orbit to have exact period *marked_period*.

    Raises UnsupportedCriticalPeriod for crit_period outside {1, 2}.
    """
    return is_admissible_for(word, get_family(crit_period), marked_period, dynatomic)
