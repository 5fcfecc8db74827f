"""
markedcycles: combinatorial cell structures of marked cycle and dynatomic curves
for Per_1(0) and Per_2(0): necklace enumeration, incidence nesting, closed-form
counts, the quadratic minor lamination and period tables.
"""

# Words
from .words.necklace import (
    Word,
    rotate,
    canonical_form,
    minimal_period,
    primitive_root,
    is_cyclic_factor,
)
from .words.encoding import word_to_id, id_to_word, format_id

# Cells
from .cells.families import (
    Family,
    UnicriticalFamily,
    PeriodTwoFamily,
    UnsupportedCriticalPeriod,
    get_family,
)
from .cells.admissible import is_admissible
from .cells.enumerate import Cell, necklaces, enumerate_cells, count_cells
from .cells.incidence import NestedCell, build_incidence_forest, nested_cells
from .cells.labels import format_cell, format_nested

# Tables and curves
from .table.aggregate import TableRow, period_row, period_table
from .utils.counts import MarkedCycleCounts, DynatomicCounts, curve_counts
from .lamination import Lamination
from .cover import CurveCover

# Viz
from .viz.draw import draw_incidence_forest

__all__ = [
    # Words
    "Word",
    "rotate",
    "canonical_form",
    "minimal_period",
    "primitive_root",
    "is_cyclic_factor",
    "word_to_id",
    "id_to_word",
    "format_id",
    # Cells
    "Family",
    "UnicriticalFamily",
    "PeriodTwoFamily",
    "UnsupportedCriticalPeriod",
    "get_family",
    "is_admissible",
    "Cell",
    "necklaces",
    "enumerate_cells",
    "count_cells",
    "NestedCell",
    "build_incidence_forest",
    "nested_cells",
    "format_cell",
    "format_nested",
    # Tables and curves
    "TableRow",
    "period_row",
    "period_table",
    "MarkedCycleCounts",
    "DynatomicCounts",
    "curve_counts",
    "Lamination",
    "CurveCover",
    # Viz
    "draw_incidence_forest",
]
