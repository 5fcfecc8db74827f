"""Cyclic words: rotation, canonical (necklace) form and minimal period.

A word is a tuple of small non-negative ints. Two words lie in the same
necklace iff one is a rotation of the other; the canonical representative is
the lexicographically least rotation.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

Word = Tuple[int, ...]


def rotate(word: Sequence[int], k: int) -> Word:
    """Cyclic left shift by *k* positions (any integer k)."""
    n = len(word)
    if n == 0:
        return ()
    k %= n
    return tuple(word[k:]) + tuple(word[:k])


def rotations(word: Sequence[int]) -> List[Word]:
    """Distinct rotations of *word*, in shift order starting from *word*."""
    n = len(word)
    d = minimal_period(word)
    return [rotate(word, i) for i in range(d)] if n else [()]


def canonical_form(word: Sequence[int]) -> Word:
    """Lexicographically least rotation (the necklace representative)."""
    n = len(word)
    if n == 0:
        return ()
    best = tuple(word)
    for i in range(1, n):
        r = rotate(word, i)
        if r < best:
            best = r
    return best


def is_canonical(word: Sequence[int]) -> bool:
    return tuple(word) == canonical_form(word)


def minimal_period(word: Sequence[int]) -> int:
    """Smallest divisor d of len(word) with rotate(word, d) == word.

    Returns 0 for the empty word.
    """
    n = len(word)
    w = tuple(word)
    for d in range(1, n + 1):
        if n % d == 0 and rotate(w, d) == w:
            return d
    return 0


def primitive_root(word: Sequence[int]) -> Word:
    """First minimal_period(word) symbols; repeating it rebuilds the word."""
    return tuple(word[: minimal_period(word)])


def is_cyclic_factor(short: Sequence[int], long: Sequence[int]) -> bool:
    """True iff *short* occurs as a contiguous factor of the cyclic word *long*."""
    m, n = len(short), len(long)
    if m == 0:
        return True
    if n == 0:
        return False
    s = tuple(short)
    # Unroll long enough that every cyclic factor of length m is a plain slice.
    reps = (m + n - 1) // n + 1
    ext = tuple(long) * reps
    return any(ext[i:i + m] == s for i in range(n))
