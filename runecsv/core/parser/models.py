"""
Parser data models.

- Dialect: the three special characters, validated on construction
- ReadResult: outcome of a single read_record() call
- ParseResult: outcome of reading a whole document
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationInfo, model_validator

from .dialect import validate_comment, validate_delimiter, validate_quote
from .errors import ParserError

_FIELD_VALIDATORS = {
    "quotechar": validate_quote,
    "delimiter": validate_delimiter,
    "comment": validate_comment,
}


class Dialect(BaseModel, frozen=True):
    """CSV dialect settings."""

    quotechar: str = '"'
    delimiter: str = ","
    comment: str | None = None  # None disables comment lines

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _normalize_comment(cls, data: object) -> object:
        if isinstance(data, dict) and data.get("comment") in ("", "\x00"):
            return {**data, "comment": None}
        return data

    @model_validator(mode="after")
    def _check_special_characters(self, info: ValidationInfo) -> Dialect:
        # Fields the caller set are checked last so a collision names one of them.
        # Fields listed in the "check_last" validation context go after those.
        check_last = (info.context or {}).get("check_last", ())
        order = sorted(
            _FIELD_VALIDATORS,
            key=lambda n: (n in self.model_fields_set, n in check_last),
        )
        checked: dict[str, str | None] = {}
        for name in order:
            others = {other: checked.get(other) for other in _FIELD_VALIDATORS if other != name}
            checked[name] = _FIELD_VALIDATORS[name](getattr(self, name), **others)
        return self


class ReadResult(BaseModel, frozen=True):
    """
    Outcome of reading one record.

    - record is None when nothing was read (blank line, comment, end of input)
    - at_end is True once end of input was consumed; a final record without
      a line terminator comes back together with at_end=True
    - error is set on a parse error; record then holds the fields completed
      before the failure, if any
    """

    record: list[str] | None = None
    error: ParserError | None = None
    at_end: bool = False
    start_line: int | None = Field(default=None, description="First line of the record")
    end_line: int | None = Field(default=None, description="Last line of the record")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """True if no parse error occurred."""
        return self.error is None

    @property
    def skipped(self) -> bool:
        """True for a blank line: no record, no error, more input may follow."""
        return self.record is None and self.error is None and not self.at_end


class ParseResult(BaseModel, frozen=True):
    """Result of reading a whole document."""

    file_path: Path | None = None
    encoding: str
    dialect: Dialect
    records: list[list[str]] = Field(default_factory=list)
    error: ParserError | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """True if the document was read to the end without a parse error."""
        return self.error is None

    @property
    def record_count(self) -> int:
        """Number of records read."""
        return len(self.records)

    @property
    def max_fields(self) -> int:
        """Width of the widest record."""
        return max((len(r) for r in self.records), default=0)
