"""Typed configuration schema and loader for the extractor package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

MAX_INPUT_ENV = "EXTRACTOR_MAX_INPUT_CHARS"
LOG_LEVEL_ENV = "EXTRACTOR_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LimitsSettings(BaseModel):
    """Bounds applied to the text handed to the registry."""

    max_input_chars: conint(ge=1) | None = None

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Level applied to the package logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ExtractorConfig(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    limits: LimitsSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def merge_settings(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``override`` onto ``base`` section by section.

    Nested sections such as ``limits`` are merged key by key, so an override
    file may set ``limits.max_input_chars`` without restating ``logging``.
    Scalars replace the base value.  Neither input is modified.
    """

    merged = {**base}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_settings(current, value)
        merged[key] = value
    return merged


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if MAX_INPUT_ENV in environ:
        raw = environ[MAX_INPUT_ENV].strip()
        value = None if raw.lower() in {"", "none", "null"} else raw
        overrides["limits"] = {"max_input_chars": value}
    if LOG_LEVEL_ENV in environ:
        overrides["logging"] = {"level": environ[LOG_LEVEL_ENV].strip().upper()}
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ExtractorConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``EXTRACTOR_*`` environment variables.
    """

    with (
        importlib_resources.files("extractor.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = merge_settings(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = merge_settings(merged, _env_overrides(environ))

    return ExtractorConfig.model_validate(merged)


__all__ = [
    "ExtractorConfig",
    "LimitsSettings",
    "LoggingSettings",
    "MAX_INPUT_ENV",
    "LOG_LEVEL_ENV",
    "merge_settings",
    "load_config",
]
