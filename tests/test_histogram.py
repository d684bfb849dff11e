from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from binstats.errors import InvalidInputError
from binstats.stats.histogram import (
    Histogram,
    HistogramEntry,
    combine_histogram,
    histogram_from_frequency_map,
    histogram_from_values,
    merge_histograms,
)


def _as_mapping(histogram: Histogram) -> dict[float, float]:
    return {entry.value: entry.amount for entry in histogram}


def test_histogram_from_values_accumulates_counts_and_drops_missing() -> None:
    histogram = histogram_from_values([3, 1, 1, float("nan"), 2, 1, float("inf")])

    assert _as_mapping(histogram) == {1.0: 3.0, 2.0: 1.0, 3.0: 1.0}
    assert histogram.total_amount == 5.0
    assert len(histogram) == 3


def test_histogram_from_values_accepts_numpy_and_pandas_inputs() -> None:
    from_array = histogram_from_values(np.array([5, 5, 7]))
    from_series = histogram_from_values(pd.Series(["5", "5", "7", "bad"]))

    assert _as_mapping(from_array) == {5.0: 2.0, 7.0: 1.0}
    assert _as_mapping(from_series) == {5.0: 2.0, 7.0: 1.0}


def test_histogram_from_values_handles_empty_input() -> None:
    histogram = histogram_from_values([])

    assert histogram.is_empty
    assert histogram.total_amount == 0.0


def test_combine_histogram_truncates_to_shorter_sequence(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="binstats.stats.histogram"):
        histogram = combine_histogram([10, 20, 30], [4, 5])

    assert [(entry.value, entry.amount) for entry in histogram] == [(10.0, 4.0), (20.0, 5.0)]
    assert "Truncating histogram" in caplog.text


def test_combine_histogram_strict_mode_rejects_mismatched_lengths() -> None:
    with pytest.raises(InvalidInputError, match="differ in length"):
        combine_histogram([1, 2], [1], strict=True)


def test_histogram_entry_rejects_negative_or_non_finite_amounts() -> None:
    with pytest.raises(InvalidInputError):
        HistogramEntry(value=1.0, amount=-1.0)
    with pytest.raises(InvalidInputError):
        HistogramEntry(value=float("nan"), amount=1.0)


def test_sorted_returns_ascending_copy_without_touching_original() -> None:
    histogram = combine_histogram([3, 1, 2], [1, 1, 1])
    ordered = histogram.sorted()

    assert [entry.value for entry in ordered] == [1.0, 2.0, 3.0]
    assert [entry.value for entry in histogram] == [3.0, 1.0, 2.0]


def test_merge_histograms_sums_equal_values() -> None:
    per_file = [
        histogram_from_frequency_map({1: 2, 2: 1}),
        histogram_from_frequency_map({2: 3, 5: 1}),
    ]

    merged = merge_histograms(*per_file)

    assert _as_mapping(merged) == {1.0: 2.0, 2.0: 4.0, 5.0: 1.0}


def test_to_frame_exposes_value_and_amount_columns() -> None:
    frame = histogram_from_frequency_map({4: 2, 8: 6}).to_frame()

    assert list(frame.columns) == ["value", "amount"]
    assert frame["amount"].sum() == 8.0
