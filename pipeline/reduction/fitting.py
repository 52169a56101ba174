"""
Least-squares fits: cubic polynomials for the HR diagram and a slope-only
line through the origin for the Hubble diagram.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pipeline.reduction.errors import FitError
from pipeline.reduction.measurement import Measurement, uncertainties, values
from pipeline.reduction.records import require_aligned


class FittedPolynomial:
    """Callable polynomial, coefficients highest power first (numpy.polyfit order)."""

    def __init__(self, coefficients: Sequence[float]):
        self._poly = np.poly1d(np.asarray(coefficients, dtype=float))

    @property
    def coefficients(self) -> np.ndarray:
        return self._poly.coeffs.copy()

    @property
    def degree(self) -> int:
        return int(self._poly.order)

    def __call__(self, x):
        return self._poly(np.asarray(x, dtype=float))

    def __sub__(self, other: "FittedPolynomial") -> "FittedPolynomial":
        if not isinstance(other, FittedPolynomial):
            return NotImplemented
        return FittedPolynomial((self._poly - other._poly).coeffs)

    def __repr__(self) -> str:
        return f"FittedPolynomial({self.coefficients.tolist()!r})"


def fit_polynomial(x: Sequence[float], y: Sequence[float], degree: int = 3) -> FittedPolynomial:
    require_aligned(x=x, y=y)
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    if not (np.all(np.isfinite(xa)) and np.all(np.isfinite(ya))):
        raise FitError("polynomial fit input contains non-finite values")
    n_distinct = np.unique(xa).size
    if n_distinct < degree + 1:
        raise FitError(f"degree-{degree} fit needs at least {degree + 1} distinct x values, got {n_distinct}")
    try:
        coeffs = np.polyfit(xa, ya, degree)
    except np.linalg.LinAlgError as exc:
        raise FitError(f"least-squares fit failed: {exc}") from exc
    return FittedPolynomial(coeffs)


def fit_through_origin(x: Sequence[float], y: Sequence) -> Measurement:
    """Slope k of y = k x by ordinary least squares.

    k = sum(w_i y_i) with w_i = x_i / sum(x^2), so the uncertainty of y
    propagates linearly into k.
    """
    require_aligned(x=x, y=y)
    xa = np.asarray(x, dtype=float)
    denom = float(np.dot(xa, xa))
    if denom == 0.0 or not np.isfinite(denom):
        raise FitError("slope-only fit needs at least one finite non-zero x")
    # nominal slope from lstsq, uncertainty from the linear weights
    k, *_ = np.linalg.lstsq(xa[:, None], values(y), rcond=None)
    weights = xa / denom
    sigma = float(np.sqrt(np.sum((weights * uncertainties(y)) ** 2)))
    return Measurement(float(k[0]), sigma)
