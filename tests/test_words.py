"""Tests for markedcycles.words."""
import pytest

from markedcycles.words.necklace import (
    rotate,
    rotations,
    canonical_form,
    is_canonical,
    minimal_period,
    primitive_root,
    is_cyclic_factor,
)
from markedcycles.words.encoding import word_to_id, id_to_word, format_id


def test_rotate_any_shift():
    w = (0, 0, 1, 1)
    assert rotate(w, 1) == (0, 1, 1, 0)
    assert rotate(w, 4) == w
    assert rotate(w, -1) == (1, 0, 0, 1)
    assert rotate(w, 9) == rotate(w, 1)
    assert rotate((), 3) == ()


def test_rotations_are_distinct():
    assert rotations((0, 1, 0, 1)) == [(0, 1, 0, 1), (1, 0, 1, 0)]
    assert len(rotations((0, 0, 1))) == 3
    assert rotations((1, 1, 1)) == [(1, 1, 1)]


def test_canonical_form_is_least_rotation():
    assert canonical_form((1, 0, 0)) == (0, 0, 1)
    assert canonical_form((1, 1, 0, 1)) == (0, 1, 1, 1)
    assert canonical_form(()) == ()


@pytest.mark.parametrize("w", [(1, 0, 0, 1, 0), (0, 1, 1, 0, 1, 1), (1, 1, 0)])
def test_canonical_form_same_on_rotations(w):
    c = canonical_form(w)
    for k in range(len(w)):
        assert canonical_form(rotate(w, k)) == c
    assert is_canonical(c)


def test_minimal_period():
    assert minimal_period((0, 1, 0, 1)) == 2
    assert minimal_period((0, 0, 0)) == 1
    assert minimal_period((0, 0, 1)) == 3
    assert minimal_period((0, 1, 1, 0, 1, 1)) == 3
    assert minimal_period(()) == 0


def test_primitive_root():
    assert primitive_root((0, 1, 1, 0, 1, 1)) == (0, 1, 1)
    assert primitive_root((0, 0, 1)) == (0, 0, 1)


def test_is_cyclic_factor_wraps_around():
    assert is_cyclic_factor((1, 0), (0, 0, 1))
    assert is_cyclic_factor((0, 1), (0, 1, 1, 1))
    assert not is_cyclic_factor((1, 1), (0, 0, 1))
    # factors longer than the word wrap more than once
    assert is_cyclic_factor((0, 1, 0, 1, 0), (0, 1))
    assert is_cyclic_factor((), (0, 1))
    assert not is_cyclic_factor((0,), ())


def test_word_to_id():
    assert word_to_id((0, 1, 1)) == 3
    assert word_to_id((1, 0, 0, 0)) == 8
    assert word_to_id(()) == 0


def test_id_to_word():
    assert id_to_word(3, 3) == (0, 1, 1)
    assert id_to_word(0, 2) == (0, 0)
    with pytest.raises(ValueError):
        id_to_word(8, 3)
    with pytest.raises(ValueError):
        id_to_word(-1, 3)


def test_format_id():
    assert format_id(3, 4) == "3"
    assert format_id(3, 4, binary=True) == "0011"
    assert format_id(0, 1, binary=True) == "0"
    assert format_id(0, 0, binary=True) == "0"
