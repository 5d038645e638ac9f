"""
Validation of dialect special characters.

Quote, delimiter and comment must each be a single Unicode scalar value,
must not be a line terminator or the replacement character, and must be
pairwise distinct. Comment may be None to disable comment lines.
"""

from __future__ import annotations

from .errors import (
    DialectError,
    InvalidCommentError,
    InvalidDelimiterError,
    InvalidQuoteError,
)

LINE_TERMINATORS = frozenset("\r\n")
REPLACEMENT_CHARACTER = "\ufffd"


def _reason(char: object) -> str | None:
    """Return why char cannot be a special character, or None if it can."""
    if not isinstance(char, str):
        return "must be a string"
    if len(char) != 1:
        return "must be exactly one character"
    if char in LINE_TERMINATORS:
        return "must not be a line terminator"
    if char == REPLACEMENT_CHARACTER:
        return "must not be the replacement character"
    if "\ud800" <= char <= "\udfff":
        return "must be a Unicode scalar value"
    return None


def _check(
    error_cls: type[DialectError],
    char: object,
    others: tuple[str | None, ...],
) -> str:
    reason = _reason(char)
    if reason is None and char == "\x00":
        reason = "must not be NUL"
    if reason is not None:
        raise error_cls(char, reason)
    if char in others:
        raise error_cls(char, "collides with another special character")
    return char  # type: ignore[return-value]


def validate_quote(
    quotechar: object, *, delimiter: str | None, comment: str | None
) -> str:
    """Validate a quote character against the other special characters."""
    return _check(InvalidQuoteError, quotechar, (delimiter, comment))


def validate_delimiter(
    delimiter: object, *, quotechar: str | None, comment: str | None
) -> str:
    """Validate a delimiter against the other special characters."""
    return _check(InvalidDelimiterError, delimiter, (quotechar, comment))


def validate_comment(
    comment: object, *, quotechar: str | None, delimiter: str | None
) -> str | None:
    """
    Validate a comment character against the other special characters.

    None, the empty string and NUL all mean "comments disabled".
    """
    if comment is None or comment in ("", "\x00"):
        return None
    return _check(InvalidCommentError, comment, (quotechar, delimiter))
