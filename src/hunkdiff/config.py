"""Application configuration: settings schema and hunkdiff.yaml loader"""

import codecs
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "hunkdiff.yaml"


class Settings(BaseModel):
    context_lines: int = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    encoding:      str = Field(default="utf-8", description="Encoding for byte streams and files")
    comparison:    str = Field(
        default="exact", pattern="^(exact|ignore_case|ignore_whitespace)$",
        description="Line equality: exact, ignore_case or ignore_whitespace",
    )
    log_level:     str = Field(
        default="WARNING", pattern="^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$",
        description="Minimum level written to stderr by the CLI",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from hunkdiff.yaml, then HUNKDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"HUNKDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
