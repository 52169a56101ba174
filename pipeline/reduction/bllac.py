"""
BL Lacertae variability: R and I light curves, R-I colour and polarization.

Two comparison standards were measured with the blazar. The one with the
smaller mean magnitude error over both filters is drawn as the reference.
Standard 1 is photometry columns 4/5 and the second row of each epoch in
bllacPxall; standard 2 is columns 6/7 and the third row.
Epochs in BLLAC_REJECTED_EPOCHS are dropped from every plotted series; the
colour index written to calculated.dat keeps all epochs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, List, Sequence, Tuple

import numpy as np

from pipeline.reduction.constants import BLLAC_DIGITS
from pipeline.reduction.output import write_values
from pipeline.reduction.photometry import BLLAC_REJECTED_EPOCHS, color_index, exclude
from pipeline.reduction.plotting import plot_series
from pipeline.reduction.records import Epoch, PolarizationEpoch, column, require_aligned, standard_column

STANDARDS = (1, 2)


@dataclass(frozen=True)
class BlLacResult:
    color_index: np.ndarray  # all epochs
    standard: int
    jd_r: np.ndarray
    r: np.ndarray
    r_standard: np.ndarray
    jd_i: np.ndarray
    i: np.ndarray
    i_standard: np.ndarray
    r_minus_i: np.ndarray
    jd_p: np.ndarray
    p: np.ndarray
    p_standard: np.ndarray


def mean_standard_errors(r_epochs: Sequence[Epoch], i_epochs: Sequence[Epoch]) -> np.ndarray:
    """Mean magnitude error of each standard, pooled over the R and I tables."""
    out = []
    for k in STANDARDS:
        errs = np.concatenate([standard_column(r_epochs, k, errors=True),
                               standard_column(i_epochs, k, errors=True)])
        out.append(float(np.mean(errs)))
    return np.array(out)


def choose_standard(r_epochs: Sequence[Epoch], i_epochs: Sequence[Epoch]) -> int:
    """1-based number of the standard with the smallest mean error (ties pick the first)."""
    return STANDARDS[int(np.argmin(mean_standard_errors(r_epochs, i_epochs)))]


def reduce_bllac(r_epochs: Sequence[Epoch],
                 i_epochs: Sequence[Epoch],
                 polarization: Sequence[PolarizationEpoch],
                 standard_polarization: Tuple[Sequence[PolarizationEpoch], Sequence[PolarizationEpoch]],
                 rejected: AbstractSet[int] = BLLAC_REJECTED_EPOCHS) -> BlLacResult:
    require_aligned(R=r_epochs, I=i_epochs)
    require_aligned(P=polarization, P_standard_1=standard_polarization[0], P_standard_2=standard_polarization[1])

    ri_all = color_index(column(r_epochs, "mag"), column(i_epochs, "mag"))
    si = choose_standard(r_epochs, i_epochs)

    r_kept: List[Epoch] = exclude(r_epochs, rejected)
    i_kept: List[Epoch] = exclude(i_epochs, rejected)
    p_kept = exclude(polarization, rejected)
    ps_kept = exclude(standard_polarization[si - 1], rejected)

    return BlLacResult(
        color_index=ri_all,
        standard=si,
        jd_r=column(r_kept, "jd"),
        r=column(r_kept, "mag"),
        r_standard=standard_column(r_kept, si),
        jd_i=column(i_kept, "jd"),
        i=column(i_kept, "mag"),
        i_standard=standard_column(i_kept, si),
        r_minus_i=np.asarray(exclude(list(ri_all), rejected), dtype=float),
        jd_p=column(p_kept, "jd"),
        p=column(p_kept, "p"),
        p_standard=column(ps_kept, "p"),
    )


def write_bllac(result: BlLacResult, out_dir: Path, digits: int = BLLAC_DIGITS) -> Path:
    return write_values(Path(out_dir) / "calculated.dat", result.color_index, digits)


def render_bllac(result: BlLacResult, out_dir: Path) -> List[Path]:
    out_dir = Path(out_dir)
    return [
        plot_series(result.jd_r, result.r, out_dir / "R.pdf", "R", reference=result.r_standard, invert=True),
        plot_series(result.jd_i, result.i, out_dir / "I.pdf", "I", reference=result.i_standard, invert=True),
        plot_series(result.jd_r, result.r_minus_i, out_dir / "R-I.pdf", "R-I"),
        plot_series(result.jd_p, result.p, out_dir / "P.pdf", "P (%)", reference=result.p_standard),
    ]
