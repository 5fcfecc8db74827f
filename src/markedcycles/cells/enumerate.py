"""Enumeration of cells: admissible necklaces of a given length."""
from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Iterator, List

from markedcycles.cells.admissible import is_admissible_for
from markedcycles.cells.families import get_family
from markedcycles.words.encoding import format_id, word_to_id
from markedcycles.words.necklace import Word, is_canonical, minimal_period


@dataclass(frozen=True, order=True)
class Cell:
    """An admissible necklace.

    word:       canonical (least) rotation
    period:     word length n
    min_period: least d | n such that the word is d-periodic
    identifier: word read as a base-`base` integer
    """

    period: int
    identifier: int
    word: Word
    min_period: int
    base: int = 2

    @property
    def root(self) -> Word:
        return self.word[: self.min_period]

    @property
    def is_exact(self) -> bool:
        return self.min_period == self.period

    def format(self, binary: bool = False) -> str:
        return format_id(self.identifier, self.period, binary=binary)


def necklaces(n: int, k: int) -> Iterator[Word]:
    """Canonical representatives of k-ary necklaces of length n, in lex order.

    Duval's generation of Lyndon words; those whose length divides n are
    repeated up to length n (Fredricksen-Kessler-Maiorana).
    """
    if n <= 0 or k <= 0:
        return
    w = [-1]
    while w:
        w[-1] += 1
        m = len(w)
        if n % m == 0:
            yield tuple(w) * (n // m)
        while len(w) < n:
            w.append(w[-m])
        while w and w[-1] == k - 1:
            w.pop()


def _bruteforce_canonical_words(n: int, k: int) -> Iterator[Word]:
    """All k^n words, keeping only canonical ones. Small n only."""
    for w in product(range(k), repeat=n):
        if is_canonical(w):
            yield w


def enumerate_cells(
    n: int,
    crit_period: int,
    marked_period: int = 0,
    dynatomic: bool = False,
    *,
    method: str = "fkm",
) -> List[Cell]:
    """Cells of length n for the family with the given critical period.

    Parameters
    ----------
    n : int
        Word length (period of the curve's cells). 0 gives no cells.
    crit_period : int
        1 or 2; anything else raises UnsupportedCriticalPeriod.
    marked_period : int
        Exact period required in marked-cycle mode; ignored when dynatomic.
    dynatomic : bool
        Enumerate cells of the dynatomic curve instead of the marked cycle curve.
    method : str
        "fkm" generates canonical words directly; "bruteforce" filters all
        k^n words and is kept as a reference for small n.

    Returns
    -------
    list[Cell]
        Sorted by identifier.
    """
    family = get_family(crit_period)
    if n < 0:
        raise ValueError("n must be >= 0.")
    if marked_period < 0:
        raise ValueError("marked_period must be >= 0.")
    if method == "fkm":
        source = necklaces
    elif method == "bruteforce":
        source = _bruteforce_canonical_words
    else:
        raise ValueError(f"Unknown enumeration method {method!r}.")

    if n == 0:
        return []
    if not dynatomic and (marked_period > n or marked_period == 0):
        return []

    k = family.degree
    cells: List[Cell] = []
    for w in source(n, k):
        if not is_admissible_for(w, family, marked_period, dynatomic):
            continue
        cells.append(Cell(
            period=n,
            identifier=word_to_id(w, k),
            word=w,
            min_period=minimal_period(w),
            base=k,
        ))

    cells.sort(key=lambda c: c.identifier)
    return cells


def count_cells(
    n: int,
    crit_period: int,
    marked_period: int = 0,
    dynatomic: bool = False,
) -> tuple[int, int, int]:
    """(total, exact, inherited) cell counts for one enumeration."""
    cells = enumerate_cells(n, crit_period, marked_period, dynatomic)
    exact = sum(1 for c in cells if c.is_exact)
    return len(cells), exact, len(cells) - exact
