"""Tests for markedcycles.cover."""
from fractions import Fraction as F

import pytest

from markedcycles.cover import CurveCover, angle_to_word
from markedcycles.utils.counts import curve_counts


def test_angle_to_word():
    assert angle_to_word(F(3, 7), 3) == (0, 1, 1)
    assert angle_to_word(F(2, 3), 4) == (1, 0, 1, 0)
    with pytest.raises(ValueError):
        angle_to_word(F(1, 5), 3)


def test_period_three_marked_cover():
    cover = CurveCover(3, 1)
    assert [c.identifier for c in cover.cells] == [1, 3]
    assert len(cover.leaves) == 3
    assert len(cover.satellite_leaves) == 2
    assert [(a.identifier, b.identifier) for a, b in cover.edges] == [(3, 1)]
    assert cover.genus() == 0


@pytest.mark.parametrize("crit,n", [(1, 3), (1, 4), (2, 3), (2, 4)])
def test_marked_cover_matches_counts(crit, n):
    cover = CurveCover(n, crit)
    counts = curve_counts(crit)
    assert cover.num_vertices() == counts.vertices(n)
    assert cover.num_edges() == counts.edges(n)
    assert cover.genus() == counts.genus(n)


def test_dynatomic_cover_period_three():
    cover = CurveCover(3, 1, dynatomic=True)
    assert cover.num_vertices() == 6
    assert cover.num_edges() == 9
    assert cover.num_faces() == 5
    assert cover.euler_characteristic() == 2
    assert cover.genus() == 0


def test_bad_period():
    with pytest.raises(ValueError):
        CurveCover(0, 1)


@pytest.mark.parametrize("crit,n,dynatomic", [
    (1, 3, False), (1, 4, False), (1, 5, False), (2, 3, False), (2, 4, False),
    (1, 3, True), (1, 4, True), (2, 3, True),
])
def test_traced_faces_match_counts(crit, n, dynatomic):
    cover = CurveCover(n, crit, dynatomic=dynatomic)
    counts = curve_counts(crit, dynatomic)
    assert len(cover.faces) == counts.faces(n)
    assert cover.num_faces() == counts.faces(n)
    assert cover.genus() == counts.genus(n)
    assert cover.face_sizes() == [len(f) for f in cover.faces]


def test_marked_faces_period_four():
    cover = CurveCover(4, 1)
    faces = [(f.label, tuple(c.identifier for c in f.vertices), f.degree) for f in cover.faces]
    assert faces == [(1, (1, 1, 3, 3, 7, 7), 2), (3, (3, 1, 7), 1)]
    assert cover.face_sizes() == [6, 3]
    assert cover.format_face(cover.faces[0]) == "<1> = (1, 1, 3, 3, 7, 7); deg = 2"


def test_marked_face_period_three_has_degree_two():
    cover = CurveCover(3, 1)
    [face] = cover.faces
    assert face.degree == 2
    assert tuple(c.identifier for c in face.vertices) == (1, 1, 3, 3)


def test_dynatomic_faces_period_three():
    cover = CurveCover(3, 1, dynatomic=True)
    primitive = [tuple(p.identifier for p in f.vertices) for f in cover.primitive_faces]
    assert primitive == [(1, 2, 5, 6), (2, 4, 3, 5), (3, 4, 1, 6)]
    assert all(f.degree == 2 for f in cover.primitive_faces)
    assert len(cover.satellite_faces) == 2
    assert all(f.satellite for f in cover.satellite_faces)


def test_dynatomic_faces_period_four():
    cover = CurveCover(4, 1, dynatomic=True)
    assert cover.num_vertices() == 12
    assert cover.num_edges() == 24
    assert len(cover.primitive_faces) == 6
    assert all(len(f) == 6 and f.degree == 2 for f in cover.primitive_faces)
    assert sorted(len(f) for f in cover.satellite_faces) == [2, 2, 4, 4]
    assert sum(cover.face_sizes()) == 2 * cover.num_edges()
    assert cover.genus() == 2


def test_summary_lines_marked_period_four():
    lines = "\n".join(CurveCover(4, 1).summary_lines(indent=2)).splitlines()
    assert "3 vertices:" in lines
    assert "  3 -- 1   wake = 3 <-> 4" in lines
    assert "  <3> = (3, 1, 7); deg = 1" in lines
    assert "  [6, 3]" in lines
    assert "Genus is 0" in lines


def test_summary_lines_respect_item_limit():
    lines = "\n".join(CurveCover(4, 1, dynatomic=True).summary_lines(max_items=5)).splitlines()
    assert "12 vertices" in lines
    assert "24 edges" in lines
    assert "4 satellite faces:" in lines
    assert "Face sizes:" not in lines
    assert "Largest face: 6" in lines
