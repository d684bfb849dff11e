from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from binstats.errors import InvalidInputError


def _to_float_array(values: Iterable[float] | np.ndarray) -> np.ndarray:
    if isinstance(values, np.ndarray):
        return values.astype(float)
    return np.asarray(list(values), dtype=float)


def to_percentage(values: Iterable[float] | np.ndarray) -> np.ndarray:
    """Scale fractions (e.g. per-reference coverage) to percent."""
    return _to_float_array(values) * 100.0


def to_logarithmic(values: Iterable[float] | np.ndarray, base: float) -> np.ndarray:
    """Logarithm in ``base``; non-positive inputs become NaN."""
    if not np.isfinite(base) or base <= 1.0:
        raise InvalidInputError(f"Logarithm base must be > 1, got {base!r}.")
    array = _to_float_array(values)
    out = np.full(array.shape, np.nan, dtype=float)
    positive = array > 0.0
    out[positive] = np.log(array[positive]) / np.log(base)
    return out
