from __future__ import annotations

import numpy as np
import pytest

from binstats.errors import EmptyHistogramError, InvalidInputError
from binstats.stats.density import DensityPoint, calculate_violin_from_histogram
from binstats.stats.histogram import Histogram, combine_histogram, histogram_from_values


def test_density_normalizes_amounts_by_total() -> None:
    density = calculate_violin_from_histogram(histogram_from_values([3, 1, 1, 2]))

    assert density == [
        DensityPoint(value=1.0, density=0.5),
        DensityPoint(value=2.0, density=0.25),
        DensityPoint(value=3.0, density=0.25),
    ]
    assert density[0].to_dict() == {"v": 1.0, "estimate": 0.5}


def test_density_sums_to_one_for_fractional_amounts() -> None:
    rng = np.random.default_rng(3)
    amounts = rng.random(50) * 10
    density = calculate_violin_from_histogram(combine_histogram(list(range(50)), list(amounts)))

    assert sum(point.density for point in density) == pytest.approx(1.0)


def test_density_rejects_empty_and_zero_total_histograms() -> None:
    with pytest.raises(EmptyHistogramError):
        calculate_violin_from_histogram(Histogram())
    with pytest.raises(InvalidInputError):
        calculate_violin_from_histogram(combine_histogram([1.0], [0.0]))
