"""
Pleiades HR diagram and cluster distance.

The cubic fit to the observed main sequence (V against B-V) minus the cubic
fit to the standard main sequence (M against B-V) gives the distance modulus
V - M along the sequence. Its median over the observed colour range, with the
IQR as error, is converted to a distance in parsecs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from pipeline.reduction.constants import DIFFERENCE_GRID_POINTS, PLEIADES_DIGITS
from pipeline.reduction.distances import distance_from_modulus
from pipeline.reduction.fitting import FittedPolynomial, fit_polynomial
from pipeline.reduction.measurement import Measurement
from pipeline.reduction.output import write_values
from pipeline.reduction.photometry import color_index, partition_pleiades
from pipeline.reduction.plotting import plot_hr_fits, plot_hr_groups
from pipeline.reduction.records import StarRecord, column, require_aligned, stars_from_magnitudes
from pipeline.reduction.stats import dense_grid, median_iqr

FIT_DEGREE = 3

PLEIADES_B = (
    13.311, 4.201, 8.948, 10.246, 13.060, 15.343, 8.472, 13.009,
    11.162, 6.820, 9.932, 13.750, 2.780, 8.951, 16.988, 9.956,
    8.154, 5.379, 10.586, 7.060, 12.128, 16.851, 9.340, 7.550,
)

PLEIADES_V = (
    12.530, 4.310, 8.602, 9.700, 12.049, 14.337, 8.110, 12.022,
    10.520, 6.798, 9.458, 12.631, 2.870, 7.718, 16.402, 8.801,
    6.459, 5.451, 10.022, 6.946, 11.344, 15.703, 9.171, 7.420,
)

# Standard main sequence: colour index and absolute magnitude
STANDARD_BV = (-0.35, -0.31, -0.16, 0.0, 0.13, 0.27, 0.42, 0.58, 0.70, 0.89, 1.18, 1.45, 1.63, 1.80)
STANDARD_MAG = (-5.8, -4.1, -1.1, -0.7, 2.0, 2.6, 3.4, 4.4, 5.1, 5.9, 7.3, 9.0, 11.8, 16.0)


@dataclass(frozen=True)
class PleiadesResult:
    stars: Tuple[StarRecord, ...]
    color_index: np.ndarray
    main_sequence: List[StarRecord]
    giants: List[StarRecord]
    outliers: List[StarRecord]
    observed_fit: FittedPolynomial
    standard_fit: FittedPolynomial
    grid: np.ndarray
    difference: np.ndarray
    modulus: Measurement
    distance_pc: Measurement


def reduce_pleiades(stars: Sequence[StarRecord],
                    standard_bv: Sequence[float] = STANDARD_BV,
                    standard_mag: Sequence[float] = STANDARD_MAG,
                    grid_points: int = DIFFERENCE_GRID_POINTS) -> PleiadesResult:
    require_aligned(standard_bv=standard_bv, standard_mag=standard_mag)
    stars = tuple(stars)
    bv = color_index(column(stars, "b_mag"), column(stars, "v_mag"))
    main, giants, outliers = partition_pleiades(stars)

    bv_main = column(main, "b_minus_v")
    v_main = column(main, "v_mag")
    f = fit_polynomial(bv_main, v_main, FIT_DEGREE)
    f_std = fit_polynomial(standard_bv, standard_mag, FIT_DEGREE)

    grid = dense_grid(float(np.min(bv_main)), float(np.max(bv_main)), grid_points)
    diff = (f - f_std)(grid)
    modulus = median_iqr(diff)
    return PleiadesResult(
        stars=stars,
        color_index=bv,
        main_sequence=main,
        giants=giants,
        outliers=outliers,
        observed_fit=f,
        standard_fit=f_std,
        grid=grid,
        difference=diff,
        modulus=modulus,
        distance_pc=distance_from_modulus(modulus),
    )


def default_stars() -> Tuple[StarRecord, ...]:
    return stars_from_magnitudes(PLEIADES_B, PLEIADES_V)


def write_pleiades(result: PleiadesResult, out_dir: Path, digits: int = PLEIADES_DIGITS) -> Path:
    return write_values(Path(out_dir) / "calculated.dat", result.color_index, digits)


def render_pleiades(result: PleiadesResult, out_dir: Path,
                    standard_bv: Sequence[float] = STANDARD_BV,
                    standard_mag: Sequence[float] = STANDARD_MAG) -> List[Path]:
    out_dir = Path(out_dir)
    main, giants, outliers = result.main_sequence, result.giants, result.outliers
    p1 = plot_hr_groups(
        column(main, "b_minus_v"), column(main, "v_mag"),
        column(giants, "b_minus_v"), column(giants, "v_mag"),
        column(outliers, "b_minus_v"), column(outliers, "v_mag"),
        [s.number for s in result.stars], result.color_index, column(result.stars, "v_mag"),
        out_dir / "diagram1.pdf",
    )
    p2 = plot_hr_fits(
        column(main, "b_minus_v"), column(main, "v_mag"), standard_bv, standard_mag,
        result.observed_fit, result.standard_fit, result.grid, result.difference,
        out_dir / "diagram2.pdf",
    )
    return [p1, p2]
