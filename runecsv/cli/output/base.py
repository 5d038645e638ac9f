"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from runecsv.core.parser import ParseResult, ParserError


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        # Adapters only render; the stream decides whether colors are allowed
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_records(self, result: ParseResult) -> str:
        """Render the records of a parse result."""
        pass

    @abstractmethod
    def render_summary(self, result: ParseResult) -> str:
        """Render a validation summary of a parse result."""
        pass

    @staticmethod
    def error_to_dict(error: ParserError) -> dict[str, object]:
        """Convert a parse error to a dictionary."""
        return {
            "code": error.code,
            "kind": error.kind.value,
            "title": error.title,
            "message": error.message,
            "location": {
                "file": error.location.file,
                "line_no": error.location.line_no,
                "column": error.location.column,
                "record_no": error.location.record_no,
            },
            "context": error.context,
        }


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """Get an output adapter by format."""
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from runecsv.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)
    elif format == OutputFormat.JSON:
        from runecsv.cli.output.json import JsonOutput

        return JsonOutput(stream=stream, color=color)
    else:
        raise ValueError(f"Unknown output format: {format}")
