"""Frequency histograms over numeric observations.

Read lengths, quality scores and similar per-read values collapse into a
modest number of distinct values, so every distribution statistic in the
package works on ``(value, amount)`` pairs instead of raw sorted samples.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from binstats.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class HistogramEntry:
    value: float
    amount: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise InvalidInputError(f"value must be finite, got {self.value!r}.")
        if not math.isfinite(self.amount) or self.amount < 0.0:
            raise InvalidInputError(f"amount must be finite and >= 0, got {self.amount!r}.")


@dataclass(slots=True, frozen=True)
class Histogram:
    entries: tuple[HistogramEntry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def total_amount(self) -> float:
        return float(sum(entry.amount for entry in self.entries))

    def sorted(self) -> Histogram:
        """Return a copy ordered ascending by value (stable for equal values)."""
        return Histogram(tuple(sorted(self.entries, key=lambda entry: entry.value)))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "value": [entry.value for entry in self.entries],
                "amount": [entry.amount for entry in self.entries],
            }
        )


def _to_float_series(values: Iterable[float] | np.ndarray | pd.Series) -> pd.Series:
    if isinstance(values, pd.Series):
        return pd.to_numeric(values, errors="coerce").astype(float)
    if isinstance(values, np.ndarray):
        return pd.Series(values.astype(float))
    return pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce").astype(float)


def histogram_from_values(values: Iterable[float] | np.ndarray | pd.Series) -> Histogram:
    """Count distinct observations in one hash pass. Non-finite observations are dropped."""
    series = _to_float_series(values)
    series = series[np.isfinite(series.to_numpy())]
    counts = series.value_counts(sort=False, dropna=True)
    return Histogram(
        tuple(
            HistogramEntry(value=float(value), amount=float(amount))
            for value, amount in counts.items()
        )
    )


def combine_histogram(
    values: Sequence[float],
    amounts: Sequence[float],
    *,
    strict: bool = False,
) -> Histogram:
    """Pair a prebuilt value table with its counts.

    Mismatched lengths truncate to the shorter sequence unless ``strict`` is set.
    """
    if len(values) != len(amounts):
        if strict:
            raise InvalidInputError(
                f"values and amounts differ in length ({len(values)} != {len(amounts)})."
            )
        LOGGER.warning(
            "Truncating histogram to %d entries (values=%d, amounts=%d)",
            min(len(values), len(amounts)),
            len(values),
            len(amounts),
        )
    return Histogram(
        tuple(
            HistogramEntry(value=float(value), amount=float(amount))
            for value, amount in zip(values, amounts)
        )
    )


def histogram_from_frequency_map(frequencies: Mapping[float, float]) -> Histogram:
    return Histogram(
        tuple(
            HistogramEntry(value=float(value), amount=float(amount))
            for value, amount in frequencies.items()
        )
    )


def merge_histograms(*histograms: Histogram) -> Histogram:
    """Sum the amounts of equal values across histograms (e.g. one per input file)."""
    merged: dict[float, float] = {}
    for histogram in histograms:
        for entry in histogram:
            merged[entry.value] = merged.get(entry.value, 0.0) + entry.amount
    return histogram_from_frequency_map(merged)
