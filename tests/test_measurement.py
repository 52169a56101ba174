"""Tests for uncertainty propagation in pipeline.reduction.measurement."""

import math

import numpy as np
import pytest

from pipeline.reduction.measurement import Measurement, exp10, mean, uncertainties, values


class TestArithmetic:
    """First-order propagation for independent operands."""

    def test_sum_adds_variances(self):
        """Errors of a sum add in quadrature."""
        m = Measurement(1.0, 0.3) + Measurement(2.0, 0.4)
        assert m.value == pytest.approx(3.0)
        assert m.uncertainty == pytest.approx(0.5)

    def test_difference_adds_variances(self):
        """Errors of a difference add in quadrature too."""
        m = Measurement(5.0, 0.3) - Measurement(2.0, 0.4)
        assert m.value == pytest.approx(3.0)
        assert m.uncertainty == pytest.approx(0.5)

    def test_plain_numbers_carry_no_error(self):
        """Plain numbers act as exact values."""
        m = 2.0 - Measurement(5.0, 0.1)
        assert m.value == pytest.approx(-3.0)
        assert m.uncertainty == pytest.approx(0.1)
        assert (Measurement(5.0, 0.1) + 1).uncertainty == pytest.approx(0.1)

    def test_product(self):
        """Product error uses both partial derivatives."""
        m = Measurement(2.0, 0.1) * Measurement(3.0, 0.2)
        assert m.value == pytest.approx(6.0)
        # (3 * 0.1)^2 + (2 * 0.2)^2 = 0.25
        assert m.uncertainty == pytest.approx(0.5)

    def test_scaling_by_constant(self):
        """A constant factor scales the error."""
        m = 3.0 * Measurement(2.0, 0.1)
        assert m.value == pytest.approx(6.0)
        assert m.uncertainty == pytest.approx(0.3)

    def test_quotient(self):
        """Quotient error uses both partial derivatives."""
        m = Measurement(6.0, 0.3) / Measurement(3.0, 0.0)
        assert m.value == pytest.approx(2.0)
        assert m.uncertainty == pytest.approx(0.1)

    def test_division_by_zero_value(self):
        """Dividing by a zero nominal value raises."""
        with pytest.raises(ZeroDivisionError):
            Measurement(1.0, 0.1) / Measurement(0.0, 0.1)

    def test_power_with_constant_exponent(self):
        """a ** n scales the error by n a^(n-1)."""
        m = Measurement(3.0, 0.1) ** 2
        assert m.value == pytest.approx(9.0)
        assert m.uncertainty == pytest.approx(0.6)

    def test_exponential_base_ten(self):
        """10 ** m scales the error by 10^m ln 10."""
        m = 10.0 ** Measurement(1.0, 0.1)
        assert m.value == pytest.approx(10.0)
        assert m.uncertainty == pytest.approx(10.0 * math.log(10.0) * 0.1)
        assert exp10(Measurement(1.0, 0.1)) == m

    def test_negation_keeps_error(self):
        """Negation flips the value only."""
        m = -Measurement(2.0, 0.2)
        assert m.value == -2.0
        assert m.uncertainty == 0.2


class TestConstruction:
    """Validation and helpers."""

    def test_negative_uncertainty_rejected(self):
        """Negative uncertainty is a ValueError."""
        with pytest.raises(ValueError):
            Measurement(1.0, -0.1)

    def test_immutable(self):
        """Measurements are frozen."""
        m = Measurement(1.0, 0.1)
        with pytest.raises(AttributeError):
            m.value = 2.0

    def test_str(self):
        """str() renders value ± uncertainty."""
        assert str(Measurement(4.5, 3.5)) == "4.5 ± 3.5"

    def test_mean_of_two(self):
        """The mean propagates errors of its terms."""
        m = mean([Measurement(1.0, 0.2), Measurement(3.0, 0.2)])
        assert m.value == pytest.approx(2.0)
        assert m.uncertainty == pytest.approx(math.hypot(0.2, 0.2) / 2.0)

    def test_mean_of_nothing(self):
        """An empty mean is a ValueError."""
        with pytest.raises(ValueError):
            mean([])

    def test_values_and_uncertainties(self):
        """Nominal parts and errors come back as arrays."""
        seq = [Measurement(1.0, 0.1), Measurement(2.0, 0.2), 3.0]
        np.testing.assert_allclose(values(seq), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(uncertainties(seq), [0.1, 0.2, 0.0])
