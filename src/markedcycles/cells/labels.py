"""Text rendering of cells and nested listings."""
from __future__ import annotations

import os
from typing import Iterable, List

from markedcycles.cells.enumerate import Cell
from markedcycles.cells.incidence import NestedCell

DEFAULT_MAX_DISPLAY_ITEMS = 100


def read_max_display(environ=None) -> int:
    """Listing limit from MARKEDCYCLES_MAX_DISPLAY (non-negative integer)."""
    if environ is None:
        environ = os.environ
    raw = environ.get("MARKEDCYCLES_MAX_DISPLAY", str(DEFAULT_MAX_DISPLAY_ITEMS))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            f"MARKEDCYCLES_MAX_DISPLAY must be a non-negative integer, got {raw!r}."
        ) from None
    if value < 0:
        raise ValueError(
            f"MARKEDCYCLES_MAX_DISPLAY must be a non-negative integer, got {raw!r}."
        )
    return value


MAX_DISPLAY_ITEMS = read_max_display()


def format_cell(cell: Cell, binary: bool = False) -> str:
    """One-line description: id, then period data."""
    return f"{cell.format(binary)}  period={cell.period} min_period={cell.min_period}"


def format_nested(
    nested: Iterable[NestedCell],
    indent: int = 4,
    binary: bool = False,
) -> List[str]:
    """Lines of a nested listing; depth t is indented indent*(t+1) spaces."""
    if indent < 0:
        raise ValueError("indent must be >= 0.")
    return [" " * (indent * (depth + 1)) + format_cell(cell, binary) for cell, depth in nested]
