"""Generate JSON Schema for the check suite YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from verdict.config import SuiteConfig


def generate_json_schema() -> dict:
    return SuiteConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
