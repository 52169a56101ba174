#!/usr/bin/env python3
"""
Light curves, R-I colour and polarization of the blazar BL Lacertae.

Usage:
  python active/scripts/bllac_variability.py --materials materials/ --out_dir results/

Inputs (in --materials, whitespace-delimited, no header):
- bllacr.dat, bllaci.dat  (JD, mag, _, std1, err1, std2, err2)
- bllacPPPx               (JD, _, P[%])
- bllacPxall              (as bllacPPPx; rows cycle object, standard 1, standard 2)

Outputs (in --out_dir):
- calculated.dat  (R-I per epoch, 4 decimals)
- R.pdf, I.pdf, R-I.pdf, P.pdf
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2]))
from pipeline.reduction.bllac import mean_standard_errors, reduce_bllac, render_bllac, write_bllac
from pipeline.reduction.errors import ReductionError
from pipeline.reduction.loaders import (
    file_sha256,
    load_photometry,
    load_polarization,
    load_standard_polarization,
)

R_FILE = "bllacr.dat"
I_FILE = "bllaci.dat"
P_OBJECT_FILE = "bllacPPPx"
P_ALL_FILE = "bllacPxall"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="BL Lac light curves, colour index and polarization")
    ap.add_argument("--materials", type=str, default=str(Path(__file__).resolve().parents[2] / "materials"),
                    help="Directory with bllacr.dat, bllaci.dat, bllacPPPx, bllacPxall")
    ap.add_argument("--out_dir", type=str, default=".", help="Directory for calculated.dat and the plots")
    args = ap.parse_args(argv)
    materials = Path(args.materials)
    out_dir = Path(args.out_dir)

    try:
        for fname in (R_FILE, I_FILE, P_OBJECT_FILE, P_ALL_FILE):
            path = materials / fname
            if not path.exists():
                raise FileNotFoundError(f"input table not found: {path}")
            print(f"INPUT {path} sha256={file_sha256(path)}")
        r_epochs = load_photometry(materials / R_FILE)
        i_epochs = load_photometry(materials / I_FILE)
        p_obj = load_polarization(materials / P_OBJECT_FILE)
        p_std = (load_standard_polarization(materials / P_ALL_FILE, 1),
                 load_standard_polarization(materials / P_ALL_FILE, 2))
        result = reduce_bllac(r_epochs, i_epochs, p_obj, p_std)
        dat = write_bllac(result, out_dir)
        figs = render_bllac(result, out_dir)
    except (OSError, ReductionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    errs = mean_standard_errors(r_epochs, i_epochs)
    print(f"Mean standard errors: 1 -> {errs[0]:.4f}, 2 -> {errs[1]:.4f}")
    print(f"\nThe index of the standard to be used in the plots: {result.standard}\n")
    print(f"Wrote {dat}")
    for p in figs:
        print(f"Wrote {p}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
