"""
CLI context and exit codes.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path  # noqa: TC003

from pydantic import BaseModel, Field


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Document read to the end
    ERROR = 1  # Parse error in the document
    FATAL = 2  # Decoding or I/O failure
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


class CliContext(BaseModel):
    """Shared settings for CLI commands."""

    # Output settings
    format: str = Field(default="terminal")
    output_file: Path | None = Field(default=None)
    color: bool = Field(default=True)
    quiet: bool = Field(default=False)
    verbose: bool = Field(default=False)

    # Input settings
    encoding: str | None = Field(default=None)
    max_bytes: int | None = Field(default=None)

    model_config = {"frozen": False}


def get_exit_code(has_error: bool) -> ExitCode:
    """Exit code for a finished read."""
    return ExitCode.ERROR if has_error else ExitCode.SUCCESS
