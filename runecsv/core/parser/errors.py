"""
Parser error models.

Two kinds of failure exist:
- Problems found in the input (bare quotes, unterminated quoted fields) are
  returned as ParserError values so callers can inspect partial data.
- Caller mistakes (invalid dialect characters, oversized input) raise.

Decoding and I/O errors from the underlying stream are never wrapped.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorKind(Enum):
    """Kinds of parse errors."""

    BARE_QUOTE = "bare_quote"  # Quote inside an unquoted field
    UNTERMINATED_QUOTE = "unterminated_quote"  # Missing or extraneous quote in a quoted field


class Location(BaseModel, frozen=True):
    """Error location in the input."""

    file: str | None = None
    line_no: int | None = None
    column: int | None = None
    record_no: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.line_no is not None:
            parts.append(f"line {self.line_no}")
        if self.column is not None:
            parts.append(f"col {self.column}")
        if self.record_no is not None:
            parts.append(f"record {self.record_no}")
        return ", ".join(parts) if parts else "<unknown>"


class ParserError(BaseModel, frozen=True):
    """
    Structured parse error.

    Error domains:
    - CSV-QUOTE-*: Quoting errors found while tokenizing
    - CSV-CFG-*: Dialect configuration errors
    - CSV-ENC-*: Decoding errors
    - CSV-IO-*: Input limits
    """

    code: str = Field(
        pattern=r"^CSV-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CSV-QUOTE-001'",
    )
    kind: ErrorKind
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (start_line, char, ...)",
    )

    @classmethod
    def bare_quote(
        cls,
        quotechar: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ParserError:
        """Create a BARE_QUOTE error."""
        return cls(
            code="CSV-QUOTE-001",
            kind=ErrorKind.BARE_QUOTE,
            title="Bare quote",
            message=f"bare {quotechar} in non-quoted field",
            location=location or Location(),
            context=context or {},
        )

    @classmethod
    def unterminated_quote(
        cls,
        quotechar: str,
        *,
        location: Location | None = None,
        context: dict[str, Any] | None = None,
    ) -> ParserError:
        """Create an UNTERMINATED_QUOTE error."""
        return cls(
            code="CSV-QUOTE-002",
            kind=ErrorKind.UNTERMINATED_QUOTE,
            title="Unterminated quote",
            message=f"extraneous or missing {quotechar} in quoted field",
            location=location or Location(),
            context=context or {},
        )

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.title} - {self.message} ({self.location})"


# =============================================================================
# Exceptions
# =============================================================================


class DialectError(ValueError):
    """Invalid quote, delimiter or comment character."""

    code = "CSV-CFG-000"

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"[{self.code}] {get_error_description(self.code)}: {value!r} ({reason})")


class InvalidQuoteError(DialectError):
    """Quote character rejected."""

    code = "CSV-CFG-001"


class InvalidDelimiterError(DialectError):
    """Delimiter character rejected."""

    code = "CSV-CFG-002"


class InvalidCommentError(DialectError):
    """Comment character rejected."""

    code = "CSV-CFG-003"


class InputTooLargeError(Exception):
    """Input exceeds the configured byte limit."""

    code = "CSV-IO-001"

    def __init__(self, size: int | None, max_bytes: int) -> None:
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(f"Input exceeds maximum size of {max_bytes} bytes")


class TokenizerError(Exception):
    """Parse error raised while iterating over a Reader."""

    def __init__(self, error: ParserError, record: list[str] | None = None) -> None:
        self.error = error
        self.record = record
        self.message = error.message
        self.line = error.location.line_no
        self.column = error.location.column
        super().__init__(f"Line {self.line}, column {self.column}: {self.message}")


# =============================================================================
# Error Codes Registry
# =============================================================================

PARSER_ERROR_CODES: dict[str, str] = {
    # Quoting errors
    "CSV-QUOTE-001": "Bare quote in non-quoted field",
    "CSV-QUOTE-002": "Extraneous or missing quote in quoted field",
    # Dialect errors
    "CSV-CFG-000": "Invalid dialect character",
    "CSV-CFG-001": "Invalid quote character",
    "CSV-CFG-002": "Invalid delimiter",
    "CSV-CFG-003": "Invalid comment character",
    # Encoding errors
    "CSV-ENC-001": "Invalid byte sequence for encoding",
    # Input errors
    "CSV-IO-001": "Input too large (exceeds maximum)",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return PARSER_ERROR_CODES.get(code)
