"""
runecsv parser core.

Public API for reading CSV documents.

Usage:
    from runecsv.core.parser import read_file, Reader

    result = read_file("data.csv")
    for record in result.records:
        print(record)

    with open_reader("data.csv", Dialect(delimiter=";")) as reader:
        for record in reader:
            print(record)

API Functions:
    read_text(text, dialect) -> ParseResult
    read_bytes(data, dialect, encoding) -> ParseResult
    read_file(path, dialect, encoding) -> ParseResult
    open_reader(path, dialect, encoding) -> Reader
    detect_encoding(data) -> str
"""

from __future__ import annotations

import logging
from pathlib import Path

from .encoding import DETECTION_SAMPLE_SIZE, codec_name, detect_encoding
from .errors import (
    PARSER_ERROR_CODES,
    DialectError,
    ErrorKind,
    InputTooLargeError,
    InvalidCommentError,
    InvalidDelimiterError,
    InvalidQuoteError,
    Location,
    ParserError,
    TokenizerError,
    get_error_description,
)
from .models import Dialect, ParseResult, ReadResult
from .reader import Reader
from .source import EOF, RuneSource
from .tokenizer import State

logger = logging.getLogger(__name__)


def read_text(text: str, dialect: Dialect | None = None) -> ParseResult:
    """
    Read all records from a string.

    Args:
        text: CSV document
        dialect: CSV dialect (defaults to Dialect())

    Returns:
        ParseResult with records and the first parse error, if any
    """
    dialect = dialect or Dialect()
    records, error = Reader(text, dialect).read_all()
    return ParseResult(encoding="<str>", dialect=dialect, records=records, error=error)


def read_bytes(
    data: bytes,
    dialect: Dialect | None = None,
    *,
    encoding: str | None = None,
    filename: str = "<bytes>",
    max_bytes: int | None = None,
) -> ParseResult:
    """
    Read all records from bytes.

    Args:
        data: Raw file content
        dialect: CSV dialect
        encoding: Encoding to decode with (detected if None)
        filename: Optional filename for error locations
        max_bytes: Maximum input size (None or <= 0 = unlimited)

    Returns:
        ParseResult with records and the first parse error, if any

    Raises:
        InputTooLargeError: If data exceeds max_bytes
        LookupError: If Python has no codec for encoding
        UnicodeDecodeError: If data is not valid in the encoding
    """
    if max_bytes is not None and max_bytes > 0 and len(data) > max_bytes:
        raise InputTooLargeError(len(data), max_bytes)

    if encoding is None:
        encoding = detect_encoding(data)
        logger.debug("Detected encoding %s for %s", encoding, filename)
    else:
        encoding = codec_name(encoding)

    text = data.decode(encoding)
    dialect = dialect or Dialect()
    records, error = Reader(text, dialect).read_all()

    if error is not None:
        error = error.model_copy(
            update={"location": error.location.model_copy(update={"file": filename})}
        )

    return ParseResult(
        file_path=Path(filename),
        encoding=encoding,
        dialect=dialect,
        records=records,
        error=error,
    )


def read_file(
    path: Path | str,
    dialect: Dialect | None = None,
    *,
    encoding: str | None = None,
    max_bytes: int | None = None,
) -> ParseResult:
    """
    Read all records from a file.

    Raises:
        FileNotFoundError: If file does not exist
        InputTooLargeError: If the file exceeds max_bytes
        UnicodeDecodeError: If the file is not valid in the encoding
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if max_bytes is not None and max_bytes > 0:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1)
        if len(data) > max_bytes:
            file_size: int | None
            try:
                file_size = path.stat().st_size
            except OSError:
                file_size = None
            raise InputTooLargeError(file_size, max_bytes)
    else:
        data = path.read_bytes()

    return read_bytes(data, dialect, encoding=encoding, filename=str(path))


def open_reader(
    path: Path | str,
    dialect: Dialect | None = None,
    *,
    encoding: str | None = None,
) -> Reader:
    """
    Open a file for streaming record reads.

    The returned Reader owns the file; use it as a context manager.
    Invalid byte sequences raise UnicodeDecodeError when reached.
    """
    path = Path(path)

    if encoding is None:
        with path.open("rb") as f:
            encoding = detect_encoding(f.read(DETECTION_SAMPLE_SIZE))
        logger.debug("Detected encoding %s for %s", encoding, path)
    else:
        encoding = codec_name(encoding)

    # newline="" keeps CR and CRLF untranslated for the tokenizer
    stream = path.open(encoding=encoding, errors="strict", newline="")
    return Reader(stream, dialect)


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "DETECTION_SAMPLE_SIZE",
    "EOF",
    "PARSER_ERROR_CODES",
    "Dialect",
    "DialectError",
    "ErrorKind",
    "InputTooLargeError",
    "InvalidCommentError",
    "InvalidDelimiterError",
    "InvalidQuoteError",
    "Location",
    "ParseResult",
    "ParserError",
    "ReadResult",
    "Reader",
    "RuneSource",
    "State",
    "TokenizerError",
    "codec_name",
    "detect_encoding",
    "get_error_description",
    "open_reader",
    "read_bytes",
    "read_file",
    "read_text",
]
