"""
Compare enumerated cells and lamination leaves with the closed-form counts.

For each period, the number of exact marked cells must equal the number of
cycles, and the number of lamination leaves the number of hyperbolic
components. The cover built from the leaves should reproduce the genus.

Usage:
  python3 compare_counts.py                    # Per_1(0), periods 3..8
  python3 compare_counts.py --crit 2 --max-n 7
"""
import argparse
import time

from markedcycles.cells.enumerate import enumerate_cells
from markedcycles.cover import CurveCover
from markedcycles.lamination import Lamination
from markedcycles.utils.counts import MarkedCycleCounts


def run(crit, max_n):
    counts = MarkedCycleCounts(crit)
    lam = Lamination(crit)

    print(f"{'='*64}")
    print(f"  {counts.family.name}: enumeration vs closed form, periods 3..{max_n}")
    print(f"{'='*64}")
    print(f"  {'n':>3s} {'cells':>7s} {'cycles':>7s} {'leaves':>7s} {'hyp':>7s} "
          f"{'genus':>6s} {'cover':>6s} {'time':>7s}")

    for n in range(3, max_n + 1):
        t0 = time.time()
        cells = enumerate_cells(n, crit, n)
        leaves = lam.arcs_of_period(n)
        cover = CurveCover(n, crit, lamination=lam)
        dt = time.time() - t0

        ok = (
            len(cells) == counts.cycles(n)
            and len(leaves) == counts.hyperbolic_components(n)
            and cover.genus() == counts.genus(n)
        )
        print(f"  {n:>3d} {len(cells):>7d} {counts.cycles(n):>7d} {len(leaves):>7d} "
              f"{counts.hyperbolic_components(n):>7d} {counts.genus(n):>6d} "
              f"{cover.genus():>6d} {dt:>6.2f}s{'' if ok else '  MISMATCH'}")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--crit', type=int, default=1, help='Critical period (1 or 2)')
    parser.add_argument('--max-n', type=int, default=8, help='Largest period (default: 8)')
    args = parser.parse_args()
    run(args.crit, args.max_n)


if __name__ == '__main__':
    main()
