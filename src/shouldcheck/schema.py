"""Generate the JSON Schema for the shouldcheck YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from shouldcheck.config import ShouldConfig

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def generate_json_schema() -> dict:
    return {"$schema": JSON_SCHEMA_DIALECT, **ShouldConfig.model_json_schema()}


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
