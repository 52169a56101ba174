"""Tests for colour indices and the fixed subset selections."""

import numpy as np
import pytest

from pipeline.reduction.errors import CorrelationLengthMismatch, ReductionError, SubsetRangeError
from pipeline.reduction.measurement import Measurement
from pipeline.reduction.photometry import (
    BLLAC_REJECTED_EPOCHS,
    PLEIADES_GIANTS,
    PLEIADES_OUTLIERS,
    color_index,
    exclude,
    partition_pleiades,
    select,
)
from pipeline.reduction.pleiades import PLEIADES_B, PLEIADES_V, default_stars


class TestColorIndex:
    """B-V and R-I as elementwise differences."""

    def test_elementwise_difference(self):
        """Each index is first[i] - second[i], same length as the inputs."""
        bv = color_index(PLEIADES_B, PLEIADES_V)
        assert len(bv) == len(PLEIADES_B)
        for i in range(len(bv)):
            assert bv[i] == pytest.approx(PLEIADES_B[i] - PLEIADES_V[i])

    def test_length_mismatch(self):
        """Arrays of different length are refused."""
        with pytest.raises(CorrelationLengthMismatch):
            color_index([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_measurements_add_variances(self):
        """Measurement inputs combine errors in quadrature."""
        ri = color_index([Measurement(12.0, 0.03)], [Measurement(11.5, 0.04)])
        assert ri[0].value == pytest.approx(0.5)
        assert ri[0].uncertainty == pytest.approx(0.05)


class TestSubsets:
    """1-based select/exclude and the Pleiades groups."""

    def test_exclude_keeps_order_and_count(self):
        """Rejected epochs drop out; the rest keep their order."""
        items = list(range(1, 21))
        kept = exclude(items, BLLAC_REJECTED_EPOCHS)
        assert len(kept) == len(items) - len(BLLAC_REJECTED_EPOCHS)
        assert kept == [2] + list(range(4, 15)) + [19, 20]
        assert not set(kept) & BLLAC_REJECTED_EPOCHS

    def test_select(self):
        """Selection picks the numbered items in order."""
        assert select("abcdef", {2, 5}) == ["b", "e"]

    def test_out_of_range_number(self):
        """Numbers past either end raise a pipeline error that is also an IndexError."""
        with pytest.raises(SubsetRangeError, match=r"\[4\] outside 1..3"):
            exclude([1, 2, 3], {4})
        with pytest.raises(IndexError):
            select([1, 2, 3], {0})
        with pytest.raises(ReductionError):
            exclude(list(range(12)), BLLAC_REJECTED_EPOCHS)

    def test_pleiades_partition(self):
        """Giants and the outlier are split off; every other star is main sequence."""
        stars = default_stars()
        main, giants, outliers = partition_pleiades(stars)
        assert [s.number for s in giants] == sorted(PLEIADES_GIANTS)
        assert [s.number for s in outliers] == sorted(PLEIADES_OUTLIERS)
        assert len(main) == len(stars) - len(PLEIADES_GIANTS) - len(PLEIADES_OUTLIERS)
        numbers = {s.number for s in main}
        assert not numbers & (PLEIADES_GIANTS | PLEIADES_OUTLIERS)
        assert numbers == set(range(1, 14)) | set(range(18, 25))

    def test_overlapping_groups_rejected(self):
        """A star cannot be both a giant and an outlier."""
        with pytest.raises(ValueError):
            partition_pleiades(default_stars(), giants={14, 15}, outliers={15})

    def test_main_sequence_colours_match_raw_arrays(self):
        """Main-sequence colours come from the same-numbered B and V entries."""
        main, _, _ = partition_pleiades(default_stars())
        expected = [PLEIADES_B[s.number - 1] - PLEIADES_V[s.number - 1] for s in main]
        np.testing.assert_allclose([s.b_minus_v for s in main], expected)
