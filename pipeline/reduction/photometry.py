"""
Colour indices and the fixed subset selections used by the photometry labs.

Subsets are given as 1-based object/epoch numbers (the numbers printed next to
the points on the diagrams), never as slice arithmetic.
"""

from __future__ import annotations

from typing import AbstractSet, List, Sequence, Tuple, TypeVar

import numpy as np

from pipeline.reduction.errors import SubsetRangeError
from pipeline.reduction.measurement import Measurement
from pipeline.reduction.records import StarRecord, require_aligned

T = TypeVar("T")

# Pleiades: red giants, off the main sequence
PLEIADES_GIANTS = frozenset({14, 16, 17})
# Pleiades: photometric outlier
PLEIADES_OUTLIERS = frozenset({15})

# BL Lac: epochs rejected from the light curves and polarization series
BLLAC_REJECTED_EPOCHS = frozenset({1, 3, 15, 16, 17, 18})


def color_index(first: Sequence, second: Sequence):
    """Elementwise first - second (e.g. B-V, R-I) over index-aligned arrays.

    Plain numbers give a float array; Measurements give a list of Measurements
    with independent errors added in quadrature.
    """
    n = require_aligned(first=first, second=second)
    if any(isinstance(x, Measurement) for x in list(first) + list(second)):
        return [first[i] - second[i] for i in range(n)]
    return np.asarray(first, dtype=float) - np.asarray(second, dtype=float)


def _check_numbers(numbers: AbstractSet[int], n: int) -> None:
    bad = sorted(k for k in numbers if not 1 <= k <= n)
    if bad:
        raise SubsetRangeError(f"subset numbers {bad} outside 1..{n}")


def select(items: Sequence[T], numbers: AbstractSet[int]) -> List[T]:
    """Items whose 1-based position is in `numbers`, in original order."""
    _check_numbers(numbers, len(items))
    return [x for i, x in enumerate(items, start=1) if i in numbers]


def exclude(items: Sequence[T], numbers: AbstractSet[int]) -> List[T]:
    """Items whose 1-based position is not in `numbers`, in original order."""
    _check_numbers(numbers, len(items))
    return [x for i, x in enumerate(items, start=1) if i not in numbers]


def partition_pleiades(
    stars: Sequence[StarRecord],
    giants: AbstractSet[int] = PLEIADES_GIANTS,
    outliers: AbstractSet[int] = PLEIADES_OUTLIERS,
) -> Tuple[List[StarRecord], List[StarRecord], List[StarRecord]]:
    """Split stars into (main sequence, giants, outliers)."""
    if giants & outliers:
        raise ValueError(f"stars {sorted(giants & outliers)} are both giants and outliers")
    main = exclude(stars, giants | outliers)
    return main, select(stars, giants), select(stars, outliers)
