from .aggregate import TableRow, period_row, period_table

__all__ = [
    "TableRow",
    "period_row",
    "period_table",
]
