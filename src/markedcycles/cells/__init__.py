from .families import (
    Family,
    UnicriticalFamily,
    PeriodTwoFamily,
    FAMILIES,
    UnsupportedCriticalPeriod,
    get_family,
)
from .admissible import is_admissible, is_admissible_for
from .enumerate import Cell, necklaces, enumerate_cells, count_cells
from .incidence import (
    NestedCell,
    is_boundary_of,
    build_incidence_forest,
    forest_roots,
    nested_listing,
    collect_cells,
    nested_cells,
)
from .labels import MAX_DISPLAY_ITEMS, read_max_display, format_cell, format_nested

__all__ = [
    "Family",
    "UnicriticalFamily",
    "PeriodTwoFamily",
    "FAMILIES",
    "UnsupportedCriticalPeriod",
    "get_family",
    "is_admissible",
    "is_admissible_for",
    "Cell",
    "necklaces",
    "enumerate_cells",
    "count_cells",
    "NestedCell",
    "is_boundary_of",
    "build_incidence_forest",
    "forest_roots",
    "nested_listing",
    "collect_cells",
    "nested_cells",
    "MAX_DISPLAY_ITEMS",
    "read_max_display",
    "format_cell",
    "format_nested",
]
