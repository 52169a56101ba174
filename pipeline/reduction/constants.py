"""Physical constants and fixed lab parameters."""

import astropy.units as u
from astropy import constants as const

# Speed of light (km/s)
C_KMS = float(const.c.to_value(u.km / u.s))

# Ca II rest wavelengths (Angstrom)
LAMBDA_K = 3933.67
LAMBDA_H = 3968.847

# Assumed absolute magnitude, shared by every galaxy in the Hubble sample
GALAXY_ABS_MAG = -22.0

PC_PER_MPC = 1e6

# Number of points the polynomial difference curve is sampled at
DIFFERENCE_GRID_POINTS = 1000

# Decimal places in calculated.dat
PLEIADES_DIGITS = 3
BLLAC_DIGITS = 4
HUBBLE_DIGITS = 4
