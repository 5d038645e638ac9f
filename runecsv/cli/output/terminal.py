"""
Terminal output adapter.

Renders records and summaries with ANSI colors when writing to a TTY.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from runecsv.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from runecsv.core.parser import ParserError, ParseResult


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "\u2713".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


SUCCESS_SYMBOL_UNICODE = "\u2713"
SUCCESS_SYMBOL_ASCII = "OK"
ERROR_SYMBOL_UNICODE = "\u2716"
ERROR_SYMBOL_ASCII = "X"
FIELD_SEPARATOR_UNICODE = " \u2502 "
FIELD_SEPARATOR_ASCII = " | "


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if self._use_unicode else SUCCESS_SYMBOL_ASCII
        self._error_symbol = ERROR_SYMBOL_UNICODE if self._use_unicode else ERROR_SYMBOL_ASCII
        self._separator = FIELD_SEPARATOR_UNICODE if self._use_unicode else FIELD_SEPARATOR_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_records(self, result: "ParseResult") -> str:
        """Render one line per record, fields shown as Python string literals."""
        width = len(str(result.record_count))
        lines: list[str] = []

        for record_no, record in enumerate(result.records, start=1):
            number = self._style(f"{record_no:>{width}}", "dim")
            fields = self._separator.join(repr(field) for field in record)
            lines.append(f"{number}  {fields}")

        if result.error:
            lines.append(self._format_error(result.error))

        return "\n".join(lines)

    def render_summary(self, result: "ParseResult") -> str:
        """Render a validation summary."""
        lines: list[str] = []

        if result.file_path:
            lines.append(self._style(str(result.file_path), "bold"))

        lines.append(f"  encoding: {result.encoding}")
        lines.append(f"  records:  {result.record_count}")
        lines.append(f"  fields:   {result.max_fields} (widest record)")
        lines.append("")

        if result.error:
            lines.append(self._format_error(result.error))
        else:
            lines.append(self._style(f"{self._success_symbol} No issues found.", "green"))

        return "\n".join(lines)

    def _format_error(self, error: "ParserError") -> str:
        """Format a parse error."""
        loc_parts = []
        if error.location.line_no is not None:
            loc_parts.append(f"L{error.location.line_no}")
        if error.location.column is not None:
            loc_parts.append(f"C{error.location.column}")

        location_str = ":".join(loc_parts)
        styled_symbol = self._style(self._error_symbol, "red")
        styled_code = self._style(error.code, "dim")

        if location_str:
            return f"  {styled_symbol} {location_str}: {error.message} [{styled_code}]"
        return f"  {styled_symbol} {error.message} [{styled_code}]"

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
