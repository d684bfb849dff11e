from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import typer

from binstats.config import AppConfig, load_config
from binstats.errors import InvalidInputError
from binstats.io.read import load_histogram, load_series
from binstats.io.write import dump_summary, write_summary
from binstats.logging import configure_logging
from binstats.report.payload import build_line_payload, build_violin_payload
from binstats.stats.boxplot import calculate_boxplot_from_histogram

app = typer.Typer(no_args_is_help=True, add_completion=False)


class DecimationMethodOption(str, Enum):
    mean = "mean"
    max_min = "max_min"


def _load_app_config(config_path: Path | None) -> AppConfig:
    return load_config(config_path)


def _emit(data: Any, out: Path | None, cfg: AppConfig) -> None:
    if out is None:
        typer.echo(dump_summary(data, indent=cfg.outputs.indent))
        return
    path = write_summary(data, out, indent=cfg.outputs.indent)
    typer.echo(f"Written to: {path}")


@app.command()
def boxplot(
    input_path: Path = typer.Option(..., "--input", exists=True, readable=True, resolve_path=True),
    column: str = typer.Option(..., help="Column holding observed values."),
    amount_column: str | None = typer.Option(
        None,
        help="Optional column of per-value counts when the table is already a histogram.",
    ),
    out: Path | None = typer.Option(None, resolve_path=True),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
) -> None:
    """Summarize a value column as min, q1, median, mean, mode, q3 and max."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    try:
        histogram = load_histogram(input_path, column=column, amount_column=amount_column)
        summary = calculate_boxplot_from_histogram(histogram)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _emit(summary.to_dict(), out, cfg)


@app.command()
def violin(
    input_path: Path = typer.Option(..., "--input", exists=True, readable=True, resolve_path=True),
    column: str = typer.Option(..., help="Column holding observed values."),
    amount_column: str | None = typer.Option(
        None,
        help="Optional column of per-value counts when the table is already a histogram.",
    ),
    out: Path | None = typer.Option(None, resolve_path=True),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
) -> None:
    """Emit the normalized density of a value column for violin charts."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)
    try:
        histogram = load_histogram(input_path, column=column, amount_column=amount_column)
        payload = build_violin_payload(histogram)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _emit(payload, out, cfg)


@app.command()
def decimate(
    input_path: Path = typer.Option(..., "--input", exists=True, readable=True, resolve_path=True),
    column: str = typer.Option(..., help="Column holding one value per genomic bin."),
    bin_size: float = typer.Option(..., min=0.0, help="Width of one bin in base pairs."),
    name: str | None = typer.Option(None, help="Dataset label. Defaults to the file name."),
    method: DecimationMethodOption | None = typer.Option(
        None,
        help="Override config decimation.method.",
    ),
    expected_samples: int | None = typer.Option(
        None, min=0, help="Override config decimation.expected_samples."
    ),
    threshold: int | None = typer.Option(
        None, min=0, help="Override config decimation.threshold."
    ),
    out: Path | None = typer.Option(None, resolve_path=True),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
) -> None:
    """Reduce a per-bin series to a plottable line dataset with genomic labels."""
    cfg = _load_app_config(config)
    configure_logging(cfg.logging.level)

    decimation = cfg.decimation.model_copy()
    if method is not None:
        decimation.method = method.value
    if expected_samples is not None:
        decimation.expected_samples = expected_samples
    if threshold is not None:
        decimation.threshold = threshold

    try:
        values = load_series(input_path, column=column)
        payload = build_line_payload(
            name=name or input_path.name,
            bin_values=values.to_numpy(),
            bin_size=bin_size,
            config=decimation,
            transforms=cfg.transforms,
        )
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _emit(payload.to_dict(), out, cfg)


if __name__ == "__main__":
    app()
