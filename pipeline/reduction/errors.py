"""Errors raised by the reduction pipeline. Every one of them is fatal to a run."""

from __future__ import annotations

from typing import Dict


class ReductionError(Exception):
    pass


class CorrelationLengthMismatch(ReductionError):
    """Index-aligned arrays (same object at the same position) differ in length."""

    def __init__(self, lengths: Dict[str, int]):
        self.lengths = dict(lengths)
        listing = ", ".join(f"{name}={n}" for name, n in self.lengths.items())
        super().__init__(f"correlated arrays must have equal length, got {listing}")


class FitError(ReductionError):
    pass


class MalformedTableError(ReductionError):
    pass


class SubsetRangeError(ReductionError, IndexError):
    """A 1-based subset number points past the end of the table."""
