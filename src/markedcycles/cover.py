"""Cell complex of a marked cycle / dynatomic curve.

Vertices are exact-period cells: one per necklace for the marked cycle
curve, one per rotation (periodic point) for the dynatomic curve. Edges come
from the lamination leaves of the same period. A leaf whose two endpoints
lie on the same cycle is a satellite leaf; it is not an edge of the marked
cycle curve.

Faces are traced from the leaves. On the marked cycle curve a face is the
orbit of a vertex under one sweep through all leaves in angle order, and a
face and its complex-conjugate face (the bit-flipped cycle) are traced once.
On the dynatomic curve a primitive face follows, from each periodic point,
the leaf with the next larger angle; every satellite leaf also bounds
gcd(shift, period) satellite faces.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from markedcycles.cells.enumerate import Cell, enumerate_cells
from markedcycles.lamination import Lamination
from markedcycles.utils.arithmetic import trunc_div
from markedcycles.utils.counts import curve_counts
from markedcycles.words.encoding import format_id, id_to_word, word_to_id
from markedcycles.words.necklace import Word, canonical_form, rotate


class ShiftedCell(NamedTuple):
    """Periodic point: the cell's canonical word shifted `shift` times."""

    cell: Cell
    shift: int

    @property
    def word(self) -> Word:
        return rotate(self.cell.word, self.shift)

    @property
    def identifier(self) -> int:
        return word_to_id(self.word, self.cell.base)

    def rotate(self, k: int) -> "ShiftedCell":
        return ShiftedCell(self.cell, (self.shift + k) % self.cell.period)

    def format(self, binary: bool = False) -> str:
        return format_id(self.identifier, self.cell.period, binary=binary)


@dataclass(frozen=True)
class CoverLeaf:
    """A leaf with its endpoint itineraries and the cells they belong to."""

    angles: Tuple[Fraction, Fraction]
    words: Tuple[Word, Word]
    cells: Tuple[Cell, Cell]
    points: Tuple[ShiftedCell, ShiftedCell]

    @property
    def is_satellite(self) -> bool:
        return self.cells[0] == self.cells[1]

    @property
    def wake(self) -> Tuple[int, int]:
        """Endpoint angles as integers k of k/(2^n - 1)."""
        base = self.cells[0].base
        return word_to_id(self.words[0], base), word_to_id(self.words[1], base)


@dataclass(frozen=True)
class CoverFace:
    """
    label:     id of the face's conjugacy class (marked cycles, primitive
               dynatomic faces) or of its base point (satellite faces)
    vertices:  boundary vertices in traversal order, repeats included
    degree:    number of times the boundary winds around the parameter circle
    """

    label: int
    vertices: Tuple
    degree: int = 1
    satellite: bool = False

    def __len__(self) -> int:
        return len(self.vertices)


def angle_to_word(angle: Fraction, period: int, degree: int = 2) -> Word:
    """Itinerary of a periodic angle k/(degree^period - 1)."""
    k = angle * (degree ** period - 1)
    if k.denominator != 1:
        raise ValueError(f"{angle} is not periodic with period dividing {period}.")
    return id_to_word(int(k), period, degree)


class CurveCover:
    def __init__(
        self,
        period: int,
        crit_period: int,
        dynatomic: bool = False,
        lamination: Optional[Lamination] = None,
    ):
        if period < 1:
            raise ValueError("period must be >= 1.")
        self.period = period
        self.crit_period = crit_period
        self.dynatomic = dynatomic
        self.counts = curve_counts(crit_period, dynatomic)
        self.degree = self.counts.family.degree
        self.max_angle = self.degree ** period - 1

        self.cells: List[Cell] = enumerate_cells(period, crit_period, period, dynatomic=False)
        self._by_word: Dict[Word, Cell] = {c.word: c for c in self.cells}

        if lamination is None:
            lamination = Lamination(crit_period, period)
        self.leaves: List[CoverLeaf] = self._compute_leaves(lamination)

        if dynatomic:
            self.primitive_faces = self._trace_dynatomic_faces()
            self.satellite_faces = self._dynatomic_satellite_faces()
        else:
            self.primitive_faces = self._trace_marked_faces()
            self.satellite_faces = []
        self.faces: List[CoverFace] = self.primitive_faces + self.satellite_faces

    def _point(self, word: Word) -> Optional[ShiftedCell]:
        cell = self._by_word.get(canonical_form(word))
        if cell is None:
            return None
        for i in range(self.period):
            if rotate(cell.word, i) == word:
                return ShiftedCell(cell, i)
        return None

    def _compute_leaves(self, lamination: Lamination) -> List[CoverLeaf]:
        out: List[CoverLeaf] = []
        for a, b in lamination.arcs_of_period(self.period):
            wa = angle_to_word(a, self.period, self.degree)
            wb = angle_to_word(b, self.period, self.degree)
            pa, pb = self._point(wa), self._point(wb)
            # Leaves landing on a forbidden cycle (the critical 2-cycle) carry no edge.
            if pa is None or pb is None:
                continue
            out.append(CoverLeaf(
                angles=(a, b),
                words=(wa, wb),
                cells=(pa.cell, pb.cell),
                points=(pa, pb),
            ))
        return out

    # -- marked cycle faces ------------------------------------------------

    def conjugacy_class(self, cell: Cell) -> int:
        """Smaller id of the cycle and of its bit-flipped (conjugate) cycle."""
        top = self.degree - 1
        dual = canonical_form(tuple(top - s for s in cell.word))
        return min(cell.identifier, word_to_id(dual, self.degree))

    def _trace_marked_faces(self) -> List[CoverFace]:
        wakes = [leaf.cells for leaf in self.leaves]
        visited: Set[int] = set()
        faces: List[CoverFace] = []

        for start in self.cells:
            if self.conjugacy_class(start) in visited:
                continue
            node = start
            nodes = [start]
            face_degree = 1
            while True:
                for a, b in wakes:
                    if node == a:
                        node = b
                        nodes.append(node)
                    elif node == b:
                        node = a
                        nodes.append(node)
                if node == start:
                    if len(nodes) > 1:
                        nodes.pop()
                    break
                visited.add(self.conjugacy_class(node))
                face_degree += 1
                if face_degree > len(self.cells):
                    raise RuntimeError(f"Face of {start.identifier} did not close.")
            faces.append(CoverFace(self.conjugacy_class(start), tuple(nodes), face_degree))
        return faces

    # -- dynatomic faces ---------------------------------------------------

    def _adjacency(self) -> Dict[Cell, List[Tuple[ShiftedCell, int, int]]]:
        adjacency: Dict[Cell, List[Tuple[ShiftedCell, int, int]]] = {}
        for leaf in self.leaves:
            p0, p1 = leaf.points
            tag = max(leaf.wake)
            adjacency.setdefault(p0.cell, []).append((p1, p0.shift, tag))
            adjacency.setdefault(p1.cell, []).append((p0, p1.shift, tag))
        return adjacency

    def _trace_dynatomic_faces(self) -> List[CoverFace]:
        adjacency = self._adjacency()
        m = self.max_angle

        def next_point(node: ShiftedCell, angle: int):
            options = adjacency.get(node.cell)
            if not options:
                return None
            beta, shift, tag = min(options, key=lambda o: (o[2] - angle - 1) % m)
            return beta.rotate(node.shift - shift), tag

        vertices = self.vertices
        max_steps = len(vertices) * (len(self.leaves) + 1)
        visited: Set[ShiftedCell] = set()
        faces: List[CoverFace] = []

        for start in vertices:
            if start in visited:
                continue
            node = start
            angle = 0
            nodes: List[ShiftedCell] = []
            face_degree = 1
            steps = 0
            while True:
                step = next_point(node, angle)
                if step is None:
                    break
                nxt, next_angle = step
                # crossing the real axis
                if angle >= next_angle:
                    if node == start:
                        break
                    visited.add(node)
                    face_degree += 1
                nodes.append(node)
                node = nxt
                angle = next_angle
                steps += 1
                if steps > max_steps:
                    raise RuntimeError(f"Face of {start.identifier} did not close.")
            if not nodes:
                nodes.append(node)
            label = min(start.identifier, m - start.identifier)
            faces.append(CoverFace(label, tuple(nodes), face_degree))
        return faces

    def _dynatomic_satellite_faces(self) -> List[CoverFace]:
        n = self.period
        faces: List[CoverFace] = []
        for leaf in self.satellite_leaves:
            p0, p1 = leaf.points
            shift = (p1.shift - p0.shift) % n
            count = math.gcd(shift, n)
            for i in range(count):
                base = ShiftedCell(p0.cell, i)
                faces.append(CoverFace(
                    label=base.identifier,
                    vertices=tuple(base.rotate(j * shift) for j in range(n // count)),
                    degree=1,
                    satellite=True,
                ))
        return faces

    # -- cells ---------------------------------------------------------------

    @property
    def vertices(self) -> List:
        if self.dynatomic:
            points = [ShiftedCell(c, i) for c in self.cells for i in range(self.period)]
            points.sort(key=lambda p: p.identifier)
            return points
        return list(self.cells)

    @property
    def satellite_leaves(self) -> List[CoverLeaf]:
        return [leaf for leaf in self.leaves if leaf.is_satellite]

    @property
    def edges(self) -> List[Tuple]:
        if self.dynatomic:
            return [
                (leaf.points[0].rotate(i), leaf.points[1].rotate(i))
                for leaf in self.leaves
                for i in range(self.period)
            ]
        return [leaf.cells for leaf in self.leaves if not leaf.is_satellite]

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        return len(self.edges)

    def num_faces(self) -> int:
        return len(self.faces)

    def face_sizes(self) -> List[int]:
        return [len(f) for f in self.faces]

    def euler_characteristic(self) -> int:
        return self.num_vertices() - self.num_edges() + self.num_faces()

    def genus(self) -> int:
        return 1 - trunc_div(self.euler_characteristic(), 2)

    # -- text ----------------------------------------------------------------

    def _edge_lines(self, binary: bool) -> List[str]:
        n = self.period
        out = []
        for leaf in self.leaves:
            w0, w1 = (format_id(k, n, binary) for k in leaf.wake)
            if self.dynatomic:
                for i in range(n):
                    a, b = leaf.points[0].rotate(i), leaf.points[1].rotate(i)
                    out.append(f"{a.format(binary)} -- {b.format(binary)}   wake = {w0} <-> {w1}")
            elif not leaf.is_satellite:
                a, b = leaf.cells
                out.append(f"{a.format(binary)} -- {b.format(binary)}   wake = {w0} <-> {w1}")
        return out

    def format_face(self, face: CoverFace, binary: bool = False) -> str:
        n = self.period
        verts = ", ".join(v.format(binary) for v in face.vertices)
        label = format_id(face.label, n, binary)
        if face.satellite:
            return f"[{label}] = ({verts})"
        return f"<{label}> = ({verts}); deg = {face.degree}"

    def summary_lines(
        self,
        indent: int = 4,
        binary: bool = False,
        max_items: Optional[int] = None,
    ) -> List[str]:
        """Vertices, edges, faces, face sizes and genus, one item per line.

        Sections longer than max_items print only their count.
        """
        pad = " " * indent
        lines: List[str] = []

        def section(title: str, items: List[str]) -> None:
            if max_items is not None and len(items) > max_items:
                lines.append(f"\n{len(items)} {title}")
                return
            lines.append(f"\n{len(items)} {title}:")
            lines.extend(pad + item for item in items)

        section("vertices", [v.format(binary) for v in self.vertices])
        section("edges", self._edge_lines(binary))
        if self.dynatomic:
            section("primitive faces", [self.format_face(f, binary) for f in self.primitive_faces])
            section("satellite faces", [self.format_face(f, binary) for f in self.satellite_faces])
        else:
            section("faces", [self.format_face(f, binary) for f in self.faces])

        sizes = self.face_sizes()
        if max_items is None or len(sizes) <= max_items:
            lines.append("\nFace sizes:")
            lines.append(f"{pad}{sizes}")
        lines.append(f"\nSmallest face: {min(sizes, default=0)}")
        lines.append(f"\nLargest face: {max(sizes, default=0)}")
        lines.append(f"\nGenus is {self.genus()}")
        return lines
