from __future__ import annotations

import json
from pathlib import Path

import pytest

from binstats.errors import InvalidInputError
from binstats.io.read import load_histogram, load_series, load_table
from binstats.io.write import write_summary


def test_load_series_coerces_unparseable_cells(tmp_path: Path) -> None:
    path = tmp_path / "bins.csv"
    path.write_text("coverage\n1\nn/a\n3\n", encoding="utf-8")

    series = load_series(path, column="coverage")

    assert series.iloc[0] == 1
    assert series.isna().tolist() == [False, True, False]


def test_load_histogram_from_raw_and_frequency_tables(tmp_path: Path) -> None:
    raw_path = tmp_path / "raw.csv"
    raw_path.write_text("read_length\n100\n100\n150\n", encoding="utf-8")
    table_path = tmp_path / "table.csv"
    table_path.write_text("read_length,count\n100,2\n150,1\n200,\n", encoding="utf-8")

    raw = load_histogram(raw_path, column="read_length")
    table = load_histogram(table_path, column="read_length", amount_column="count")

    assert sorted((entry.value, entry.amount) for entry in raw) == [(100.0, 2.0), (150.0, 1.0)]
    assert sorted((entry.value, entry.amount) for entry in table) == [
        (100.0, 2.0),
        (150.0, 1.0),
    ]


def test_load_series_rejects_missing_column(tmp_path: Path) -> None:
    path = tmp_path / "bins.csv"
    path.write_text("coverage\n1\n", encoding="utf-8")

    with pytest.raises(InvalidInputError, match="missing column: depth"):
        load_series(path, column="depth")


def test_load_table_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "bins.txt"
    path.write_text("1\n", encoding="utf-8")

    with pytest.raises(InvalidInputError, match="Unsupported table file type"):
        load_table(path)


def test_write_summary_creates_parent_directories(tmp_path: Path) -> None:
    path = write_summary({"median": 1.5}, tmp_path / "nested" / "summary.json", indent=0)

    assert json.loads(path.read_text(encoding="utf-8")) == {"median": 1.5}
