"""Decimation of per-bin series for plotting.

A per-bin series can hold one value per few hundred base pairs across a
whole chromosome. The functions here reduce such a series to roughly
``expected_samples`` points, either by averaging consecutive chunks or by
keeping each chunk's extremes, and derive the genomic axis labels of the
reduced series.

Every decimation shares one guard: nothing is reduced when
``expected_samples`` is 0, when the series already fits
(``length <= expected_samples``) or when it is shorter than ``threshold``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from binstats.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SeriesPoint:
    position: int
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.position, "y": self.value}


SeriesValue = Union[SeriesPoint, float]


def bin_data_to_line_data(values: Iterable[float] | np.ndarray) -> list[SeriesPoint]:
    """Pair each bin value with its zero-based position; missing values plot as 0."""
    array = np.asarray(list(values) if not isinstance(values, np.ndarray) else values, dtype=float)
    array = np.where(np.isnan(array), 0.0, array)
    return [SeriesPoint(position=index, value=float(value)) for index, value in enumerate(array)]


def _ensure_sample_parameter(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}.")


def should_decimate(length: int, expected_samples: int, threshold: int) -> bool:
    _ensure_sample_parameter("expected_samples", expected_samples)
    _ensure_sample_parameter("threshold", threshold)
    if expected_samples == 0:
        return False
    if length <= expected_samples:
        return False
    if length < threshold:
        return False
    return True


def _point_values(series: Sequence[SeriesValue]) -> np.ndarray:
    return np.fromiter(
        (item.value if isinstance(item, SeriesPoint) else item for item in series),
        dtype=float,
        count=len(series),
    )


def _as_points(series: Sequence[SeriesValue]) -> list[SeriesPoint]:
    return [
        item if isinstance(item, SeriesPoint) else SeriesPoint(position=index, value=float(item))
        for index, item in enumerate(series)
    ]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def decimate_bin_data_mean(
    series: Sequence[SeriesValue],
    expected_samples: int,
    threshold: int,
) -> Sequence[SeriesValue]:
    """Average ``expected_samples`` equal chunks, plus one mean of any remainder."""
    length = len(series)
    if not should_decimate(length, expected_samples, threshold):
        return series

    size = length // expected_samples
    values = _point_values(series)
    covered = size * expected_samples

    chunk_means = values[:covered].reshape(expected_samples, size).mean(axis=1)
    decimated = [float(mean) for mean in chunk_means]
    tail = values[covered:]
    if tail.size:
        decimated.append(float(tail.mean()))

    LOGGER.debug(
        "Mean-decimated %d points to %d (chunk size %d, tail %d)",
        length,
        len(decimated),
        size,
        tail.size,
    )
    return decimated


def decimate_bin_data_max_min(
    series: Sequence[SeriesValue],
    expected_samples: int,
    threshold: int,
) -> Sequence[SeriesValue]:
    """Keep each chunk's maximum and minimum point in position order.

    Odd-length series reserve the last output slot for the tail, which always
    contributes its maximum only.
    """
    length = len(series)
    if not should_decimate(length, expected_samples, threshold):
        return series

    size = _round_half_up(length / expected_samples)
    last_only_max = length % 2 != 0
    if last_only_max:
        chunk_count = math.ceil((expected_samples - 1) / 2)
    else:
        chunk_count = math.ceil(expected_samples / 2)

    points = _as_points(series)
    values = _point_values(points)

    decimated: list[SeriesPoint] = []
    index = 0
    for _ in range(chunk_count):
        chunk = values[index : index + size]
        if not chunk.size:
            break
        # argmax/argmin return the first occurrence, matching a strict-inequality scan.
        max_point = points[index + int(np.argmax(chunk))]
        min_point = points[index + int(np.argmin(chunk))]
        if max_point.position == min_point.position:
            decimated.append(max_point)
        elif max_point.position > min_point.position:
            decimated.extend((min_point, max_point))
        else:
            decimated.extend((max_point, min_point))
        index += chunk.size

    tail = values[index:]
    if tail.size:
        decimated.append(points[index + int(np.argmax(tail))])

    LOGGER.debug(
        "Max/min-decimated %d points to %d (chunk size %d, %d chunks, tail %d)",
        length,
        len(decimated),
        size,
        chunk_count,
        tail.size,
    )
    return decimated


DECIMATORS: dict[str, Callable[[Sequence[SeriesValue], int, int], Sequence[SeriesValue]]] = {
    "mean": decimate_bin_data_mean,
    "max_min": decimate_bin_data_max_min,
}


def decimate(
    series: Sequence[SeriesValue],
    expected_samples: int,
    threshold: int,
    method: str = "mean",
) -> Sequence[SeriesValue]:
    try:
        decimator = DECIMATORS[method]
    except KeyError as exc:
        raise InvalidInputError(f"Unsupported decimation method: {method!r}.") from exc
    return decimator(series, expected_samples, threshold)


def calculate_decimation_size(
    series: Sequence[SeriesValue],
    expected_samples: int,
    threshold: int,
) -> int:
    """Bins represented by one mean-decimated point (1 when nothing is decimated)."""
    length = len(series)
    if not should_decimate(length, expected_samples, threshold):
        return 1
    return length // expected_samples


def generate_labels(series: Sequence[Any], bin_size: float) -> list[float]:
    """Axis labels ``0, bin_size, 2 * bin_size, ...`` for each point of ``series``."""
    if not math.isfinite(bin_size) or bin_size < 0:
        raise InvalidInputError(f"bin_size must be finite and >= 0, got {bin_size!r}.")
    return [index * bin_size for index in range(len(series))]
