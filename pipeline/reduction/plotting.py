"""
Figures for the three labs. Each function draws one figure, saves it to the
given path (format from the suffix) and closes it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np

from pipeline.reduction.fitting import FittedPolynomial

# Computer Modern look, print resolution
STYLE = {
    "font.family": "serif",
    "font.serif": ["cmr10", "Computer Modern Roman", "DejaVu Serif"],
    "mathtext.fontset": "cm",
    "axes.formatter.use_mathtext": True,
    "axes.unicode_minus": False,
    "savefig.dpi": 300,
    "figure.dpi": 100,
}


def _save(fig, out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)
    return out_path


def plot_hubble(distances: Sequence[float], velocities: Sequence[float], predicted: Sequence[float], out_path: Path) -> Path:
    d = np.asarray(distances, dtype=float)
    order = np.argsort(d)
    with mpl.rc_context(STYLE):
        fig, ax = plt.subplots(figsize=(6.0, 4.0))
        ax.plot(d[order], np.asarray(velocities, dtype=float)[order], "-o", ms=4, lw=1.2, label="Measured")
        ax.plot(d[order], np.asarray(predicted, dtype=float)[order], "-o", ms=4, lw=1.2, label="Fitted")
        ax.set_xlabel("Distance (Mpc)")
        ax.set_ylabel("Velocity (km/s)")
        ax.legend(loc="lower right", fontsize=8)
        return _save(fig, out_path)


def plot_hr_groups(bv_main, v_main, bv_giants, v_giants, bv_outliers, v_outliers,
                   numbers: Sequence[int], bv_all, v_all, out_path: Path) -> Path:
    """HR diagram with main sequence, giants and outliers; every star labelled."""
    with mpl.rc_context(STYLE):
        fig, ax = plt.subplots(figsize=(6.0, 4.5))
        ax.scatter(bv_main, v_main, s=14, label="Main sequence")
        ax.scatter(bv_giants, v_giants, s=14, label="Red giants")
        ax.scatter(bv_outliers, v_outliers, s=14, label="Outliers")
        for n, x, y in zip(numbers, bv_all, v_all):
            ax.annotate(str(n), (x + 0.04, y - 0.3), fontsize=8)
        ax.set_xlabel("B-V")
        ax.set_ylabel("V")
        ax.invert_yaxis()
        ax.legend(loc="best", fontsize=8)
        return _save(fig, out_path)


def plot_hr_fits(bv_main, v_main, standard_bv, standard_mag,
                 observed_fit: FittedPolynomial, standard_fit: FittedPolynomial,
                 grid, difference, out_path: Path, n_curve: int = 200) -> Path:
    """Main sequence vs standard main sequence, their cubic fits and the difference curve."""
    x_obs = np.linspace(np.min(bv_main), np.max(bv_main), n_curve)
    x_std = np.linspace(np.min(standard_bv), np.max(standard_bv), n_curve)
    with mpl.rc_context(STYLE):
        fig, ax = plt.subplots(figsize=(6.0, 4.5))
        ax.scatter(bv_main, v_main, s=14, label="Apparent magnitudes")
        ax.scatter(standard_bv, standard_mag, s=14, label="Absolute magnitudes")
        ax.plot(x_obs, observed_fit(x_obs), lw=1.2, label="Apparent (cubic fit)")
        ax.plot(x_std, standard_fit(x_std), lw=1.2, label="Absolute (cubic fit)")
        ax.plot(grid, difference, lw=1.2, label="Difference of fits")
        ax.set_xlabel("B-V")
        ax.set_ylabel("V, M, V-M")
        ax.invert_yaxis()
        ax.legend(loc="best", fontsize=7)
        return _save(fig, out_path)


def plot_series(jd, values, out_path: Path, ylabel: str,
                reference: Optional[Sequence[float]] = None,
                invert: bool = False) -> Path:
    """Object scatter against JD, with the comparison standard as a line when given."""
    with mpl.rc_context(STYLE):
        fig, ax = plt.subplots(figsize=(7.0, 4.0))
        ax.scatter(jd, values, s=12, label="Object")
        if reference is not None:
            ax.plot(jd, reference, lw=1.0, color="#d62728", label="Standard")
            ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), fontsize=8)
        ax.set_xlabel("JD")
        ax.set_ylabel(ylabel)
        if invert:
            ax.invert_yaxis()
        return _save(fig, out_path)
