"""
Closed-form distance and velocity transforms.

  distance modulus:    d [pc]  = 10^((m - M + 5) / 5)
  galaxy distance:     d [Mpc] = 10^((m - M + 5) / 5) / 1e6
  Doppler velocity:    v       = c (lambda_obs - lambda_rest) / lambda_rest
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pipeline.reduction.constants import C_KMS, GALAXY_ABS_MAG, LAMBDA_H, LAMBDA_K, PC_PER_MPC
from pipeline.reduction.measurement import Measurement, as_measurement, exp10, mean

# rest wavelengths in the order the lines are listed per galaxy
REST_WAVELENGTHS = (LAMBDA_K, LAMBDA_H)


def distance_from_modulus(delta_m) -> Measurement:
    """Distance in parsecs for m - M = delta_m; the error goes through the derivative."""
    return exp10((as_measurement(delta_m) + 5.0) / 5.0)


def distance_mpc(apparent_mag, absolute_mag: float = GALAXY_ABS_MAG):
    """Distance in Mpc; works elementwise on arrays of magnitudes."""
    m = np.asarray(apparent_mag, dtype=float)
    return np.power(10.0, (m - absolute_mag + 5.0) / 5.0) / PC_PER_MPC


def line_velocity(observed, rest: float, c: float = C_KMS) -> Measurement:
    return c * (as_measurement(observed) - rest) / rest


def galaxy_velocity(wavelengths: Sequence, rest: Sequence[float] = REST_WAVELENGTHS, c: float = C_KMS) -> Measurement:
    """Recession velocity from one (K) or two (K, H) Ca II lines.

    With two lines the velocity is the mean of the per-line velocities.
    """
    if not 1 <= len(wavelengths) <= len(rest):
        raise ValueError(f"expected 1 to {len(rest)} line wavelengths, got {len(wavelengths)}")
    per_line = [line_velocity(lam, lam0, c) for lam, lam0 in zip(wavelengths, rest)]
    if len(per_line) == 1:
        return per_line[0]
    return mean(per_line)
