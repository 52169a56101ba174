"""
Numbers with uncertainty.

Measurement carries a nominal value and a standard uncertainty and propagates
the uncertainty through arithmetic to first order. Operands are treated as
independent, so variances add:

  sigma(a +- b)^2 = sigma_a^2 + sigma_b^2
  sigma(a * b)^2  = (b sigma_a)^2 + (a sigma_b)^2
  sigma(a / b)^2  = (sigma_a / b)^2 + (a sigma_b / b^2)^2
  sigma(a ** n)   = |n a^(n-1)| sigma_a
  sigma(b ** m)   = |b^m ln b| sigma_m
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class Measurement:
    value: float
    uncertainty: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "uncertainty", float(self.uncertainty))
        if self.uncertainty < 0.0 or math.isnan(self.uncertainty):
            raise ValueError(f"uncertainty must be non-negative, got {self.uncertainty}")

    def __str__(self) -> str:
        return f"{self.value:g} ± {self.uncertainty:g}"

    def __float__(self) -> float:
        return self.value

    def __neg__(self) -> "Measurement":
        return Measurement(-self.value, self.uncertainty)

    def __pos__(self) -> "Measurement":
        return self

    def __add__(self, other) -> "Measurement":
        o = as_measurement(other)
        return Measurement(self.value + o.value, math.hypot(self.uncertainty, o.uncertainty))

    __radd__ = __add__

    def __sub__(self, other) -> "Measurement":
        o = as_measurement(other)
        return Measurement(self.value - o.value, math.hypot(self.uncertainty, o.uncertainty))

    def __rsub__(self, other) -> "Measurement":
        return as_measurement(other) - self

    def __mul__(self, other) -> "Measurement":
        o = as_measurement(other)
        sigma = math.hypot(o.value * self.uncertainty, self.value * o.uncertainty)
        return Measurement(self.value * o.value, sigma)

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Measurement":
        o = as_measurement(other)
        if o.value == 0.0:
            raise ZeroDivisionError("division by a measurement with zero nominal value")
        q = self.value / o.value
        sigma = math.hypot(self.uncertainty / o.value, q * o.uncertainty / o.value)
        return Measurement(q, sigma)

    def __rtruediv__(self, other) -> "Measurement":
        return as_measurement(other) / self

    def __pow__(self, exponent) -> "Measurement":
        if isinstance(exponent, Measurement):
            if exponent.uncertainty == 0.0:
                exponent = exponent.value
            else:
                # a ** m with both uncertain: d/da = m a^(m-1), d/dm = a^m ln a
                f = self.value ** exponent.value
                da = exponent.value * self.value ** (exponent.value - 1.0) * self.uncertainty
                dm = f * math.log(self.value) * exponent.uncertainty
                return Measurement(f, math.hypot(da, dm))
        n = float(exponent)
        f = self.value ** n
        if self.uncertainty == 0.0:
            return Measurement(f, 0.0)
        return Measurement(f, abs(n * self.value ** (n - 1.0)) * self.uncertainty)

    def __rpow__(self, base) -> "Measurement":
        b = float(base)
        f = b ** self.value
        return Measurement(f, abs(f * math.log(b)) * self.uncertainty)


def as_measurement(x) -> Measurement:
    if isinstance(x, Measurement):
        return x
    return Measurement(float(x), 0.0)


def exp10(m) -> Measurement:
    return 10.0 ** as_measurement(m)


def mean(measurements: Iterable) -> Measurement:
    items = [as_measurement(m) for m in measurements]
    if not items:
        raise ValueError("mean of an empty sequence")
    total = items[0]
    for m in items[1:]:
        total = total + m
    return total / len(items)


def values(seq: Sequence) -> np.ndarray:
    """Nominal values of a sequence of measurements (plain numbers pass through)."""
    return np.array([as_measurement(m).value for m in seq], dtype=float)


def uncertainties(seq: Sequence) -> np.ndarray:
    return np.array([as_measurement(m).uncertainty for m in seq], dtype=float)
