"""Configuration loading for the floatq8 tools.

Settings live in the ``[floatq8]`` table of a TOML file. The codec itself is
not configurable; these settings only steer the file API and the CLI.

Example floatq8.toml:
    [floatq8]
    log_level = "INFO"
    encoded_suffix = ".q8"
    verify = true
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError, field_validator

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

CONFIG_ENV = "FLOATQ8_CONFIG"
CONFIG_FILENAME = "floatq8.toml"


class Settings(BaseModel):
    """Validated ``[floatq8]`` settings.

    Attributes:
        log_level: Logging level name used by the CLI
        encoded_suffix: File suffix for encoded buffers
        verify: Decode after writing and check the round-trip bound
    """

    model_config = {"extra": "forbid"}

    log_level: str = Field(default="WARNING")
    encoded_suffix: str = Field(default=".q8")
    verify: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("encoded_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"encoded_suffix must look like '.q8', got {value!r}")
        return value


def resolve_config_path(config_path: str | os.PathLike[str] | None = None) -> Path | None:
    """Resolve configuration path from env, explicit path, or defaults.

    Returns None when no configuration file is found; an explicitly named
    file (env or argument) that does not exist is an error.
    """
    env_config = os.environ.get(CONFIG_ENV)
    explicit = env_config or config_path
    if explicit:
        path = Path(explicit).expanduser()
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found at {path}. Check {CONFIG_ENV} or --config"
            )
        return path
    candidates = [
        Path(CONFIG_FILENAME),
        Path.home() / CONFIG_FILENAME,
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_settings(config_path: str | os.PathLike[str] | None = None) -> Settings:
    """Load settings, falling back to defaults when no file is present."""
    path = resolve_config_path(config_path)
    if path is None:
        return Settings()
    with open(path, "rb") as f:
        try:
            config = cast(dict[str, Any], tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e
    table = config.get("floatq8", {})
    if not isinstance(table, dict):
        raise ValueError(f"[floatq8] in {path} must be a table")
    try:
        return Settings(**table)
    except ValidationError as e:
        raise ValueError(f"Invalid settings in {path}: {e}") from e
