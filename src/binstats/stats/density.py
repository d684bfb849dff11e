from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from binstats.errors import EmptyHistogramError, InvalidInputError
from binstats.stats.histogram import Histogram


@dataclass(slots=True, frozen=True)
class DensityPoint:
    value: float
    density: float

    def to_dict(self) -> dict[str, Any]:
        return {"v": self.value, "estimate": self.density}


def calculate_violin_from_histogram(histogram: Histogram) -> list[DensityPoint]:
    """Normalize amounts into a discrete probability mass over observed values.

    No kernel smoothing is applied; points are ordered ascending by value.
    """
    if histogram.is_empty:
        raise EmptyHistogramError("Cannot estimate density of an empty histogram.")

    total = histogram.total_amount
    if total <= 0.0:
        raise InvalidInputError("Histogram amounts must sum to a positive total.")

    return [
        DensityPoint(value=entry.value, density=entry.amount / total)
        for entry in histogram.sorted()
    ]
