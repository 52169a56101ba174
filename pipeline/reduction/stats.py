"""Robust summaries of densely sampled curves."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pipeline.reduction.constants import DIFFERENCE_GRID_POINTS
from pipeline.reduction.measurement import Measurement


def quartiles(samples: Sequence[float]) -> np.ndarray:
    """(Q1, median, Q3) with linear interpolation between order statistics."""
    a = np.asarray(samples, dtype=float)
    if a.size == 0:
        raise ValueError("quartiles of an empty sample")
    return np.quantile(a, [0.25, 0.5, 0.75], method="linear")


def median_iqr(samples: Sequence[float]) -> Measurement:
    """Median with the interquartile range as its uncertainty."""
    q1, med, q3 = quartiles(samples)
    return Measurement(float(med), float(q3 - q1))


def dense_grid(lo: float, hi: float, n: int = DIFFERENCE_GRID_POINTS) -> np.ndarray:
    return np.linspace(lo, hi, n)
