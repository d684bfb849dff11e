from __future__ import annotations

import numpy as np
import pytest

from binstats.errors import InvalidInputError
from binstats.series.transforms import to_logarithmic, to_percentage


def test_to_percentage_scales_fractions() -> None:
    np.testing.assert_allclose(to_percentage([0.5, 0.25, 1.0]), np.array([50.0, 25.0, 100.0]))


def test_to_logarithmic_maps_non_positive_values_to_nan() -> None:
    result = to_logarithmic(np.array([1.0, 10.0, 100.0, 0.0, -3.0]), base=10)

    np.testing.assert_allclose(result[:3], np.array([0.0, 1.0, 2.0]))
    assert np.isnan(result[3])
    assert np.isnan(result[4])


@pytest.mark.parametrize("base", [1.0, 0.5, -2.0, float("nan")])
def test_to_logarithmic_rejects_invalid_base(base: float) -> None:
    with pytest.raises(InvalidInputError, match="base must be > 1"):
        to_logarithmic([1.0, 2.0], base=base)
