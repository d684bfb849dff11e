"""Boxplot summaries computed from frequency histograms.

Quartiles use a weighted rank walk over the sorted histogram instead of a
sorting-based percentile:

    half = floor(total / 2)
    q1_rank = half / 2 + 0.5
    q2_rank = total / 2 + 0.5
    q3_rank = total - (q1_rank - 1)

q1, q2 and q3 are resolved by three sequential passes. Each pass resumes
where the previous one stopped, so the walk is threaded through an explicit
``QuartileCursor`` that records the entry index, the last value passed and
how much of the current entry's amount earlier passes already consumed.
Later ranks are reduced by the rank length the earlier passes covered.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from binstats.errors import EmptyHistogramError, InvalidInputError
from binstats.stats.histogram import Histogram, HistogramEntry

SUMMARY_FIELDS = ("min", "q1", "median", "mean", "mode", "q3", "max")


@dataclass(slots=True, frozen=True)
class BoxplotSummary:
    min: float
    q1: float
    median: float
    mean: float
    mode: float
    q3: float
    max: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "min": self.min,
            "q1": self.q1,
            "median": self.median,
            "mean": self.mean,
            "mode": self.mode,
            "q3": self.q3,
            "max": self.max,
        }


@dataclass(slots=True, frozen=True)
class QuartileCursor:
    index: int = 0
    last: float | None = None
    consumed: float = 0.0


@dataclass(slots=True, frozen=True)
class QuartileStep:
    quartile: float | None
    cursor: QuartileCursor
    covered_length: float


@dataclass(slots=True, frozen=True)
class QuartileRanks:
    q1: float
    q2: float
    q3: float


def calculate_quartile_ranks(total: float) -> QuartileRanks:
    half = math.floor(total / 2.0)
    q1 = (half / 2.0) + 0.5
    q2 = (total / 2.0) + 0.5
    q3 = total - (q1 - 1.0)
    return QuartileRanks(q1=q1, q2=q2, q3=q3)


def resolve_quartile(
    entries: Sequence[HistogramEntry],
    cursor: QuartileCursor,
    rank: float,
) -> QuartileStep:
    """Walk sorted entries from ``cursor`` until ``rank`` is reached.

    Returns the quartile (None when the walk runs past the last entry), the
    cursor to resume from and the rank length covered by this pass.
    """
    index = cursor.index
    last = cursor.last
    consumed = cursor.consumed
    covered = 0.0
    quartile: float | None = None

    while index < len(entries):
        entry = entries[index]
        remaining = entry.amount - consumed

        if rank < 1.0:
            quartile = (entry.value + last) / 2.0 if last is not None else entry.value
            break

        if remaining >= rank:
            consumed += rank
            covered += rank
            quartile = entry.value
            last = entry.value
            break

        rank -= remaining
        covered += remaining
        last = entry.value
        index += 1
        consumed = 0.0

    return QuartileStep(
        quartile=quartile,
        cursor=QuartileCursor(index=index, last=last, consumed=consumed),
        covered_length=covered,
    )


def _mode_value(entries: Sequence[HistogramEntry]) -> float:
    best = entries[0]
    for entry in entries[1:]:
        if entry.amount > best.amount:
            best = entry
    return best.value


def calculate_boxplot_from_histogram(histogram: Histogram) -> BoxplotSummary:
    if histogram.is_empty:
        raise EmptyHistogramError("Cannot summarize an empty histogram.")

    entries = histogram.sorted().entries
    minimum = entries[0].value
    maximum = entries[-1].value

    total = sum(entry.amount for entry in entries)
    if total <= 0.0:
        raise InvalidInputError("Histogram amounts must sum to a positive total.")
    mean = sum(entry.amount * entry.value for entry in entries) / total

    ranks = calculate_quartile_ranks(total)
    q2_rank = ranks.q2
    q3_rank = ranks.q3

    q1_step = resolve_quartile(entries, QuartileCursor(), ranks.q1)
    q2_rank -= q1_step.covered_length
    q3_rank -= q1_step.covered_length

    q2_step = resolve_quartile(entries, q1_step.cursor, q2_rank)
    q3_rank -= q2_step.covered_length

    q3_step = resolve_quartile(entries, q2_step.cursor, q3_rank)

    return BoxplotSummary(
        min=minimum,
        q1=maximum if q1_step.quartile is None else q1_step.quartile,
        median=maximum if q2_step.quartile is None else q2_step.quartile,
        mean=mean,
        mode=_mode_value(entries),
        q3=maximum if q3_step.quartile is None else q3_step.quartile,
        max=maximum,
    )


def boxplots_from_histograms(histograms: Iterable[Histogram]) -> list[BoxplotSummary]:
    """One summary per histogram, e.g. one per reference sequence."""
    return [calculate_boxplot_from_histogram(histogram) for histogram in histograms]


def boxplot_from_separate_arrays(
    min: Sequence[float],
    q1: Sequence[float],
    median: Sequence[float],
    mean: Sequence[float],
    mode: Sequence[float],
    q3: Sequence[float],
    max: Sequence[float],
) -> list[BoxplotSummary]:
    """Zip per-statistic sequences into summaries.

    Stops at the first index any sequence lacks; the partial result is valid
    for charting.
    """
    summaries: list[BoxplotSummary] = []
    others = (q1, median, mean, mode, q3, max)
    for index, minimum in enumerate(min):
        if any(index >= len(values) for values in others):
            break
        summaries.append(
            BoxplotSummary(
                min=minimum,
                q1=q1[index],
                median=median[index],
                mean=mean[index],
                mode=mode[index],
                q3=q3[index],
                max=max[index],
            )
        )
    return summaries


def split_boxplots(summaries: Iterable[BoxplotSummary]) -> dict[str, list[float]]:
    split: dict[str, list[float]] = {name: [] for name in SUMMARY_FIELDS}
    for summary in summaries:
        for name in SUMMARY_FIELDS:
            split[name].append(getattr(summary, name))
    return split
