"""Word <-> integer identifiers and their text form."""
from __future__ import annotations

from typing import Sequence

from markedcycles.words.necklace import Word


def word_to_id(word: Sequence[int], base: int = 2) -> int:
    """Read *word* as a base-*base* number, most significant symbol first."""
    value = 0
    for s in word:
        value = value * base + s
    return value


def id_to_word(value: int, length: int, base: int = 2) -> Word:
    """Inverse of word_to_id for a fixed word length."""
    if value < 0:
        raise ValueError("value must be non-negative.")
    if value >= base ** length and length > 0:
        raise ValueError(f"value {value} does not fit in {length} base-{base} digits.")
    out = [0] * length
    for i in range(length - 1, -1, -1):
        value, out[i] = divmod(value, base)
    return tuple(out)


def format_id(value: int, length: int, binary: bool = False) -> str:
    """Decimal id, or binary zero-padded to the word length."""
    if binary:
        return format(value, f"0{max(length, 1)}b")
    return str(value)
