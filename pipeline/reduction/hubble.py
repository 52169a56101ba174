"""
Hubble diagram for six nearby galaxies.

Distances come from apparent magnitudes with one assumed absolute magnitude;
velocities come from the redshift of the K and H Ca II lines. A line through
the origin, v = k d, gives the slope (Hubble constant, km/s/Mpc).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

import numpy as np

from pipeline.reduction.constants import GALAXY_ABS_MAG, HUBBLE_DIGITS
from pipeline.reduction.distances import distance_mpc, galaxy_velocity
from pipeline.reduction.fitting import fit_through_origin
from pipeline.reduction.measurement import Measurement, uncertainties, values
from pipeline.reduction.output import write_blocks
from pipeline.reduction.plotting import plot_hubble
from pipeline.reduction.records import GalaxyRecord

LINE_ERR = 1.0  # Angstrom, wavelength reading error


def _lines(*wavelengths: float) -> Tuple[Measurement, ...]:
    return tuple(Measurement(w, LINE_ERR) for w in wavelengths)


# K line first; a single entry means the H line was not found in the spectrum
HUBBLE_GALAXIES: Tuple[GalaxyRecord, ...] = (
    GalaxyRecord("Ursa Major II (uma2-1)", 16.87, _lines(4484.0)),
    GalaxyRecord("Ursa Major I (uma1-3)", 14.49, _lines(4130.0, 4167.0)),
    GalaxyRecord("Coma Berenices (Coma1)", 12.30, _lines(4012.0, 4048.0)),
    GalaxyRecord("Bootes (Boot1)", 16.52, _lines(4445.0, 4485.0)),
    GalaxyRecord("Corona Borealis (CrBor1)", 15.08, _lines(4209.0, 4246.0)),
    GalaxyRecord("Sagittarius (GAS)", 10.98, _lines(3973.0, 4008.0)),
)


@dataclass(frozen=True)
class HubbleResult:
    names: Tuple[str, ...]
    distances_mpc: np.ndarray
    velocities: Tuple[Measurement, ...]
    slope: Measurement
    predicted: np.ndarray


def reduce_hubble(galaxies: Sequence[GalaxyRecord] = HUBBLE_GALAXIES,
                  absolute_mag: float = GALAXY_ABS_MAG) -> HubbleResult:
    dists = distance_mpc([g.apparent_mag for g in galaxies], absolute_mag)
    vels = tuple(galaxy_velocity(g.line_wavelengths) for g in galaxies)
    k = fit_through_origin(dists, vels)
    return HubbleResult(
        names=tuple(g.name for g in galaxies),
        distances_mpc=dists,
        velocities=vels,
        slope=k,
        predicted=dists * k.value,
    )


def write_hubble(result: HubbleResult, out_dir: Path, digits: int = HUBBLE_DIGITS) -> Path:
    """calculated.dat: distances, velocity values and velocity errors, one line each."""
    blocks = [result.distances_mpc, values(result.velocities), uncertainties(result.velocities)]
    return write_blocks(Path(out_dir) / "calculated.dat", blocks, digits)


def render_hubble(result: HubbleResult, out_dir: Path) -> Path:
    return plot_hubble(result.distances_mpc, values(result.velocities), result.predicted,
                       Path(out_dir) / "result.pdf")
