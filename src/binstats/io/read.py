from __future__ import annotations

from pathlib import Path

import pandas as pd

from binstats.errors import InvalidInputError
from binstats.stats.histogram import Histogram, combine_histogram, histogram_from_values


def load_table(path: Path) -> pd.DataFrame:
    if path.suffix == ".parquet":
        return pd.read_parquet(path)
    if path.suffix == ".csv":
        # utf-8-sig strips BOM-prefixed headers commonly found in exported CSV files.
        return pd.read_csv(path, encoding="utf-8-sig")
    raise InvalidInputError(f"Unsupported table file type: {path.suffix}")


def _require_column(df: pd.DataFrame, column: str) -> pd.Series:
    if column not in df.columns:
        raise InvalidInputError(f"Table missing column: {column}")
    return pd.to_numeric(df[column], errors="coerce")


def load_series(path: Path, column: str) -> pd.Series:
    """Load one numeric column; unparseable cells become NaN."""
    return _require_column(load_table(path), column)


def load_histogram(
    path: Path,
    column: str,
    amount_column: str | None = None,
) -> Histogram:
    """Histogram from raw observations, or from a value/amount frequency table."""
    df = load_table(path)
    values = _require_column(df, column)
    if amount_column is None:
        return histogram_from_values(values)

    amounts = _require_column(df, amount_column)
    valid = values.notna() & amounts.notna()
    return combine_histogram(values[valid].tolist(), amounts[valid].tolist(), strict=True)
