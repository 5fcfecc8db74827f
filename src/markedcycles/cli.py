"""
Command line front end.

Usage:
  markedcycles -m 4                 # nested cells of the period-4 marked cycle curve
  markedcycles -m 4 -d -b           # dynatomic curve, ids in binary
  markedcycles -c 2 -t 12 -p 4      # Per_2(0) data table for periods 2..12
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from markedcycles.cells import labels
from markedcycles.cells.families import get_family
from markedcycles.cells.incidence import nested_cells
from markedcycles.cover import CurveCover
from markedcycles.table.aggregate import TableRow, period_table

ROW_FORMAT = "{:>8} | {:>8} {:>8} {:>9} | {:>8} {:>8} {:>8} {:>8}"
TABLE_HEADER = ("period", "cells", "exact", "inherited", "vertices", "edges", "faces", "genus")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markedcycles",
        description="Cells of marked cycle and dynatomic curves over Per_1(0) and Per_2(0).",
    )
    parser.add_argument("-m", "--marked-period", type=int, default=0,
                        help="Period of the marked cycle (0 to skip)")
    parser.add_argument("-c", "--crit-period", type=int, default=1,
                        help="Period of the critical cycle (1 or 2)")
    parser.add_argument("-t", "--table-max-period", type=int, default=0,
                        help="Max period of the data table (0 to skip)")
    parser.add_argument("-d", "--dynatomic", action="store_true",
                        help="Dynatomic curve instead of marked cycle curve")
    parser.add_argument("-b", "--binary", action="store_true",
                        help="Display cell ids in binary")
    parser.add_argument("--indent", type=int, default=4,
                        help="How far to indent each nesting level (default: 4)")
    parser.add_argument("-p", "--processes", type=int, default=1,
                        help="Worker processes for the data table (default: 1)")
    parser.add_argument("--draw", metavar="PATH", default=None,
                        help="Save a drawing of the incidence forest as PNG")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Progress messages on stderr")
    return parser


def print_cells(args: argparse.Namespace) -> None:
    family = get_family(args.crit_period)
    curve = "dynatomic curve" if args.dynatomic else "marked cycle curve"
    print(f"Computing cells of the {curve} of {family.name} "
          f"for marked period {args.marked_period}, critical period {args.crit_period}")

    m = args.marked_period
    if args.verbose:
        print(f"[n={m}] enumerating cells...", file=sys.stderr)
    nested = nested_cells(m, args.crit_period, m, args.dynatomic)

    print(f"\n{len(nested)} cells:")
    if len(nested) > labels.MAX_DISPLAY_ITEMS:
        print(f"{' ' * args.indent}(listing suppressed, more than {labels.MAX_DISPLAY_ITEMS} cells)")
    else:
        for line in labels.format_nested(nested, args.indent, args.binary):
            print(line)

    exact = sum(1 for c, _ in nested if c.min_period == m)
    print(f"\n{exact} exact, {len(nested) - exact} inherited")

    if args.verbose:
        print(f"[n={m}] tracing faces of the cover...", file=sys.stderr)
    cover = CurveCover(m, args.crit_period, args.dynatomic)
    for line in cover.summary_lines(args.indent, args.binary, labels.MAX_DISPLAY_ITEMS):
        print(line)

    if args.draw:
        from markedcycles.viz.draw import draw_incidence_forest

        draw_incidence_forest(nested, binary=args.binary, save_path=args.draw)
        if args.verbose:
            print(f"[n={m}] saved drawing to {args.draw}", file=sys.stderr)


def format_row(row: TableRow) -> str:
    return ROW_FORMAT.format(
        row.period, row.total, row.exact, row.inherited,
        row.vertices, row.edges, row.faces, row.genus,
    )


def print_table(args: argparse.Namespace) -> None:
    rows = period_table(
        args.table_max_period,
        args.crit_period,
        args.dynatomic,
        processes=args.processes,
        verbose=args.verbose,
    )
    print()
    print(ROW_FORMAT.format(*TABLE_HEADER))
    for row in rows:
        print(format_row(row))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        get_family(args.crit_period)
        if args.marked_period < 0 or args.table_max_period < 0:
            raise ValueError("periods must be >= 0.")
        if args.indent < 0:
            raise ValueError("indent must be >= 0.")
        if args.processes < 1:
            raise ValueError("processes must be >= 1.")
    except ValueError as e:
        parser.error(str(e))

    if args.marked_period > 0:
        print_cells(args)
    if args.table_max_period > 0:
        print_table(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
