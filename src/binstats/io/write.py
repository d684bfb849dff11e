from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dump_summary(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, sort_keys=True)


def write_summary(data: Any, path: Path, indent: int = 2) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_summary(data, indent=indent), encoding="utf-8")
    return path
