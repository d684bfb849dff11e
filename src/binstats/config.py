from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

# Sample budget used by the per-bin coverage charts.
DEFAULT_EXPECTED_SAMPLES = 1000
DEFAULT_DECIMATION_THRESHOLD = 1000

LOG_LEVEL_ENV = "BINSTATS_LOG_LEVEL"

DecimationMethod = Literal["mean", "max_min"]


class DecimationConfig(BaseModel):
    expected_samples: int = Field(default=DEFAULT_EXPECTED_SAMPLES, ge=0)
    threshold: int = Field(default=DEFAULT_DECIMATION_THRESHOLD, ge=0)
    method: DecimationMethod = "mean"


class TransformConfig(BaseModel):
    percentage: bool = False
    log_base: float | None = Field(default=None, gt=1.0)


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class OutputsConfig(BaseModel):
    indent: int = Field(default=2, ge=0)


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    decimation: DecimationConfig = Field(default_factory=DecimationConfig)
    transforms: TransformConfig = Field(default_factory=TransformConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    outputs: OutputsConfig = Field(default_factory=OutputsConfig)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def load_config(path: Path | None) -> AppConfig:
    data: dict = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}

    config = AppConfig.model_validate(data)

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        config.logging = LoggingConfig(level=env_level.upper())
    return config
