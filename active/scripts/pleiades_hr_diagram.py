#!/usr/bin/env python3
"""
Hertzsprung-Russell diagram of the Pleiades and the distance to the cluster.

Usage:
  python active/scripts/pleiades_hr_diagram.py --out_dir results/

Outputs (in --out_dir):
- calculated.dat  (B-V per star, 3 decimals)
- diagram1.pdf    (main sequence, giants, outliers; stars numbered)
- diagram2.pdf    (cubic fits to observed and standard main sequences, their difference)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2]))
from pipeline.reduction.errors import ReductionError
from pipeline.reduction.pleiades import default_stars, reduce_pleiades, render_pleiades, write_pleiades


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Pleiades HR diagram and cluster distance")
    ap.add_argument("--out_dir", type=str, default=".", help="Directory for calculated.dat and the diagrams")
    args = ap.parse_args(argv)
    out_dir = Path(args.out_dir)

    try:
        result = reduce_pleiades(default_stars())
        dat = write_pleiades(result, out_dir)
        figs = render_pleiades(result, out_dir)
    except (OSError, ReductionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Main sequence: {len(result.main_sequence)} stars; giants: "
          f"{[s.number for s in result.giants]}; outliers: {[s.number for s in result.outliers]}")
    print("\nThe difference between the apparent and absolute magnitudes:\n")
    print(f"{result.modulus} mag")
    print("\nThe distance to the cluster:\n")
    print(f"{result.distance_pc} pc\n")
    print(f"Wrote {dat}")
    for p in figs:
        print(f"Wrote {p}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
