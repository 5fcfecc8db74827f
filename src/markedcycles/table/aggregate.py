from __future__ import annotations

import sys
from dataclasses import dataclass
from multiprocessing import Pool
from typing import List, Tuple

from markedcycles.cells.enumerate import count_cells
from markedcycles.cells.families import get_family
from markedcycles.utils.counts import curve_counts


@dataclass(frozen=True)
class TableRow:
    """
    One period of the data table.

    total / exact / inherited: dynatomic-style cell counts from enumeration;
        inherited cells have minimal period properly dividing `period`.
    vertices / edges / faces / genus: closed-form counts of the curve
        (marked cycle or dynatomic, as requested).
    """

    period: int
    total: int
    exact: int
    inherited: int
    vertices: int
    edges: int
    faces: int
    genus: int


def period_row(n: int, crit_period: int, dynatomic: bool = False) -> TableRow:
    """Compute the table row for a single period n >= 1."""
    total, exact, inherited = count_cells(n, crit_period, dynatomic=True)
    counts = curve_counts(crit_period, dynatomic)
    return TableRow(
        period=n,
        total=total,
        exact=exact,
        inherited=inherited,
        vertices=counts.vertices(n),
        edges=counts.edges(n),
        faces=counts.faces(n),
        genus=counts.genus(n),
    )


def _worker(job: Tuple[int, int, bool]) -> TableRow:
    n, crit_period, dynatomic = job
    return period_row(n, crit_period, dynatomic)


def period_table(
    max_period: int,
    crit_period: int,
    dynatomic: bool = False,
    *,
    processes: int = 1,
    verbose: bool = False,
) -> List[TableRow]:
    """
    Rows for periods 2..max_period inclusive, sorted by period.

    Rows are independent; with processes > 1 they are computed in a worker
    pool and re-sorted, so the result never depends on completion order.
    """
    get_family(crit_period)
    if processes < 1:
        raise ValueError("processes must be >= 1.")
    if max_period < 2:
        return []

    jobs = [(n, crit_period, dynatomic) for n in range(2, max_period + 1)]
    rows: List[TableRow] = []

    if processes == 1:
        for job in jobs:
            if verbose:
                print(f"[n={job[0]}] enumerating cells...", file=sys.stderr)
            rows.append(_worker(job))
    else:
        if verbose:
            print(f"[n=2..{max_period}] enumerating cells on {processes} processes...",
                  file=sys.stderr)
        with Pool(processes=processes) as pool:
            for row in pool.imap_unordered(_worker, jobs, chunksize=1):
                if verbose:
                    print(f"[n={row.period}] done.", file=sys.stderr)
                rows.append(row)

    rows.sort(key=lambda r: r.period)
    return rows
