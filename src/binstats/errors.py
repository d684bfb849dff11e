from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a statistics or decimation call receives malformed input."""


class EmptyHistogramError(InvalidInputError):
    """Raised when order statistics are requested for a histogram with no entries."""
