#!/usr/bin/env python3
"""
Hubble diagram from Ca II redshifts and apparent magnitudes of six galaxies.

Usage:
  python active/scripts/hubble_diagram.py --out_dir results/

Outputs (in --out_dir):
- calculated.dat  (line 1: distances [Mpc]; line 2: velocities [km/s]; line 3: velocity errors)
- result.pdf      (measured and fitted velocities against distance)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2]))
from pipeline.reduction.constants import GALAXY_ABS_MAG
from pipeline.reduction.errors import ReductionError
from pipeline.reduction.hubble import HUBBLE_GALAXIES, reduce_hubble, render_hubble, write_hubble


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Hubble diagram and slope from Ca II redshifts")
    ap.add_argument("--out_dir", type=str, default=".", help="Directory for calculated.dat and result.pdf")
    ap.add_argument("--abs_mag", type=float, default=GALAXY_ABS_MAG, help="Assumed absolute magnitude of every galaxy")
    args = ap.parse_args(argv)
    out_dir = Path(args.out_dir)

    try:
        result = reduce_hubble(HUBBLE_GALAXIES, args.abs_mag)
        dat = write_hubble(result, out_dir)
        fig = render_hubble(result, out_dir)
    except (OSError, ReductionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for name, d, v in zip(result.names, result.distances_mpc, result.velocities):
        print(f"  {name:<26s} D = {d:10.4f} Mpc   v = {v} km/s")
    print(f"\nThe slope coefficient is {result.slope} km/s/Mpc.\n")
    print(f"Wrote {dat}")
    print(f"Wrote {fig}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
