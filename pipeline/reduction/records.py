"""
Aligned records: one record per observed object or epoch, holding every
measurement of it, so correlated quantities cannot drift out of step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np

from pipeline.reduction.errors import CorrelationLengthMismatch
from pipeline.reduction.measurement import Measurement


def require_aligned(**arrays: Sequence) -> int:
    """Return the common length of index-aligned arrays.

    Raises CorrelationLengthMismatch when the lengths differ; nothing is
    truncated or padded.
    """
    lengths: Dict[str, int] = {name: len(a) for name, a in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise CorrelationLengthMismatch(lengths)
    return next(iter(lengths.values()), 0)


@dataclass(frozen=True)
class StarRecord:
    number: int  # 1-based, as annotated on the HR diagram
    b_mag: float
    v_mag: float

    @property
    def b_minus_v(self) -> float:
        return self.b_mag - self.v_mag


@dataclass(frozen=True)
class GalaxyRecord:
    name: str
    apparent_mag: float
    # K Ca II first, then H Ca II when it was seen in the spectrum
    line_wavelengths: Tuple[Measurement, ...]


@dataclass(frozen=True)
class Epoch:
    jd: float
    mag: float
    std_mags: Tuple[float, float]
    std_errs: Tuple[float, float]


@dataclass(frozen=True)
class PolarizationEpoch:
    jd: float
    p: float


def stars_from_magnitudes(b: Sequence[float], v: Sequence[float]) -> Tuple[StarRecord, ...]:
    require_aligned(B=b, V=v)
    return tuple(StarRecord(i + 1, float(bi), float(vi)) for i, (bi, vi) in enumerate(zip(b, v)))


def column(records: Sequence, attr: str) -> np.ndarray:
    return np.array([getattr(r, attr) for r in records], dtype=float)


def standard_column(epochs: Sequence[Epoch], standard: int, errors: bool = False) -> np.ndarray:
    """Magnitudes (or errors) of comparison standard 1 or 2 across epochs."""
    if standard not in (1, 2):
        raise ValueError(f"standard must be 1 or 2, got {standard}")
    attr = "std_errs" if errors else "std_mags"
    return np.array([getattr(e, attr)[standard - 1] for e in epochs], dtype=float)
