"""Chart-ready payloads assembled from summaries and decimated series.

The dashboard's charting layer consumes plain dictionaries shaped like its
chart configuration (``labels`` plus ``datasets``); nothing here renders.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from binstats.config import DecimationConfig, TransformConfig
from binstats.series.decimation import (
    SeriesPoint,
    SeriesValue,
    bin_data_to_line_data,
    calculate_decimation_size,
    decimate,
    generate_labels,
)
from binstats.series.transforms import to_logarithmic, to_percentage
from binstats.stats.boxplot import BoxplotSummary
from binstats.stats.density import calculate_violin_from_histogram
from binstats.stats.histogram import Histogram

LOGGER = logging.getLogger(__name__)


def _serialize_point(item: SeriesValue) -> Any:
    if isinstance(item, SeriesPoint):
        return item.to_dict()
    return float(item)


@dataclass(slots=True, frozen=True)
class LinePayload:
    label: str
    labels: list[float]
    data: list[SeriesValue]
    decimation_size: int
    method: str
    source_length: int
    bin_size: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "labels": list(self.labels),
            "data": [_serialize_point(item) for item in self.data],
            "decimation_size": self.decimation_size,
            "method": self.method,
            "source_length": self.source_length,
            "bin_size": self.bin_size,
        }


def apply_transforms(
    values: Iterable[float] | np.ndarray,
    transforms: TransformConfig | None,
) -> np.ndarray:
    array = np.asarray(list(values) if not isinstance(values, np.ndarray) else values, dtype=float)
    if transforms is None:
        return array
    if transforms.percentage:
        array = to_percentage(array)
    if transforms.log_base is not None:
        array = to_logarithmic(array, transforms.log_base)
    return array


def build_line_payload(
    name: str,
    bin_values: Iterable[float] | np.ndarray,
    bin_size: float,
    config: DecimationConfig | None = None,
    transforms: TransformConfig | None = None,
) -> LinePayload:
    """Per-bin line dataset for one file on one reference.

    Mean-decimated points are labelled ``i * bin_size * decimation_size``.
    Max/min output keeps the original points, so each is labelled from its
    own position.
    """
    config = config or DecimationConfig()
    line_data = bin_data_to_line_data(apply_transforms(bin_values, transforms))
    decimated = decimate(
        line_data,
        expected_samples=config.expected_samples,
        threshold=config.threshold,
        method=config.method,
    )
    decimation_size = calculate_decimation_size(
        line_data,
        expected_samples=config.expected_samples,
        threshold=config.threshold,
    )

    if config.method == "max_min":
        labels = [
            item.position * bin_size if isinstance(item, SeriesPoint) else index * bin_size
            for index, item in enumerate(decimated)
        ]
    else:
        labels = generate_labels(decimated, bin_size * decimation_size)

    LOGGER.debug(
        "Line payload %s: %d bins -> %d points (%s)",
        name,
        len(line_data),
        len(decimated),
        config.method,
    )
    return LinePayload(
        label=name,
        labels=labels,
        data=list(decimated),
        decimation_size=decimation_size,
        method=config.method,
        source_length=len(line_data),
        bin_size=bin_size,
    )


def build_boxplot_payload(
    labels: Sequence[str],
    datasets: Mapping[str, Sequence[BoxplotSummary]],
) -> dict[str, Any]:
    return {
        "labels": list(labels),
        "datasets": [
            {"label": name, "data": [summary.to_dict() for summary in summaries]}
            for name, summaries in datasets.items()
        ],
    }


def build_violin_payload(histogram: Histogram) -> dict[str, Any]:
    return {"coords": [point.to_dict() for point in calculate_violin_from_histogram(histogram)]}


def _format_number(value: float) -> str:
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_boxplot_tooltip(dataset_label: str, item_label: str, summary: BoxplotSummary) -> str:
    parts = ", ".join(
        f"{name}: {_format_number(value)}" for name, value in summary.to_dict().items()
    )
    return f"{dataset_label} {item_label} ({parts})"
