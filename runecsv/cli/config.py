"""
CLI configuration.

Settings resolve in this order: command line flags, then the YAML config
file, then environment variables, then defaults.

YAML format:
```yaml
dialect:
  delimiter: ";"
  quote: "'"
  comment: "#"
encoding: utf-8
max_bytes: 1048576
```
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from runecsv.core.parser import Dialect, DialectError

if TYPE_CHECKING:
    from pathlib import Path

MAX_BYTES_ENV = "RUNECSV_MAX_BYTES"

# Default input size limit for CLI usage (can be overridden via flag/env)
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB


class ConfigError(Exception):
    """Invalid configuration file or value."""


class DialectConfig(BaseModel):
    """Dialect section of the config file."""

    delimiter: str | None = None
    quote: str | None = None
    comment: str | None = None


class FileConfig(BaseModel):
    """Contents of a config file."""

    dialect: DialectConfig = Field(default_factory=DialectConfig)
    encoding: str | None = None
    max_bytes: int | None = None


def load_config(path: Path) -> FileConfig:
    """
    Load a config file.

    Raises:
        ConfigError: If the file is missing, not YAML or has unknown values
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from None

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return FileConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from None


def resolve_dialect(
    config: FileConfig | None,
    *,
    delimiter: str | None = None,
    quote: str | None = None,
    comment: str | None = None,
) -> Dialect:
    """
    Build a Dialect from flags and config file.

    Raises:
        DialectError: If the resulting characters are invalid
    """
    file_dialect = config.dialect if config else DialectConfig()
    values: dict[str, Any] = {}
    flags = {
        name
        for name, value in (("quotechar", quote), ("delimiter", delimiter), ("comment", comment))
        if value is not None
    }

    chosen_quote = quote if quote is not None else file_dialect.quote
    if chosen_quote is not None:
        values["quotechar"] = chosen_quote
    chosen_delimiter = delimiter if delimiter is not None else file_dialect.delimiter
    if chosen_delimiter is not None:
        values["delimiter"] = chosen_delimiter
    values["comment"] = comment if comment is not None else file_dialect.comment

    try:
        # A collision between a flag and the config file is blamed on the flag
        return Dialect.model_validate(values, context={"check_last": flags})
    except ValidationError as e:
        # Surface the DialectError raised inside the validator
        for detail in e.errors():
            cause = detail.get("ctx", {}).get("error")
            if isinstance(cause, DialectError):
                raise cause from None
        raise ConfigError(str(e)) from None


def resolve_max_bytes(max_bytes: int | None, config: FileConfig | None = None) -> int | None:
    """
    Resolve the input size limit. Zero or negative means unlimited.

    Raises:
        ConfigError: If the environment variable is not an integer
    """
    if max_bytes is None and config is not None:
        max_bytes = config.max_bytes

    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ConfigError(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES
