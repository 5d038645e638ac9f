"""
JSON output adapter.

Renders records and summaries as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from runecsv.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from runecsv.core.parser import ParseResult


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_records(self, result: "ParseResult") -> str:
        """Render records as JSON."""
        output: dict[str, Any] = {
            "file": str(result.file_path) if result.file_path else None,
            "encoding": result.encoding,
            "records": result.records,
            "error": self.error_to_dict(result.error) if result.error else None,
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_summary(self, result: "ParseResult") -> str:
        """Render a validation summary as JSON."""
        output: dict[str, Any] = {
            "file": str(result.file_path) if result.file_path else None,
            "encoding": result.encoding,
            "dialect": {
                "delimiter": result.dialect.delimiter,
                "quote": result.dialect.quotechar,
                "comment": result.dialect.comment,
            },
            "record_count": result.record_count,
            "max_fields": result.max_fields,
            "ok": result.ok,
            "error": self.error_to_dict(result.error) if result.error else None,
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)
