from __future__ import annotations

import functools
import os
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CONFIG_ENV_VAR = "SHOULDCHECK_CONFIG"
DEFAULT_CONFIG_NAME = "shouldcheck.yaml"


class FormatConfig(BaseModel):
    """Thresholds and gutters used when rendering failure diffs."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    max_inline_elements: int = Field(5, ge=0)
    max_element_size: int = Field(5, ge=0)
    max_single_element_size: int = Field(10, ge=0)
    element_indent: int = Field(14, gt=0)
    closing_indent: int = Field(10, ge=0)

    @model_validator(mode="after")
    def closing_inside_gutter(self) -> "FormatConfig":
        if self.closing_indent >= self.element_indent:
            raise ValueError(
                f"closing_indent ({self.closing_indent}) must be smaller than "
                f"element_indent ({self.element_indent})"
            )
        return self


class ShouldConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    format: FormatConfig = FormatConfig()

    @field_validator("format", mode="before")
    @classmethod
    def none_means_defaults(cls, v: object) -> object:
        return {} if v is None else v


def load_config(path: Path) -> ShouldConfig:
    """Load and validate a shouldcheck config from a YAML file.

    ``${VAR}`` and ``${VAR:-default}`` references are expanded before parsing.
    """
    text = Path(path).read_text()
    raw = yaml.safe_load(expandvars(text))
    if raw is None:
        return ShouldConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at top level")
    return ShouldConfig(**raw)


@functools.lru_cache(maxsize=1)
def get_config() -> ShouldConfig:
    """Return the process-wide configuration.

    Reads the file named by ``SHOULDCHECK_CONFIG`` when set, defaults otherwise.
    """
    path = os.environ.get(CONFIG_ENV_VAR)
    if path:
        return load_config(Path(path))
    return ShouldConfig()


def default_config_yaml() -> str:
    return yaml.dump(ShouldConfig().model_dump(), default_flow_style=False, sort_keys=False)
