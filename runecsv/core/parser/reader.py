"""
CSV reader.

Reads records from a CSV document one at a time. The document must be
valid Unicode text; CR, LF and CRLF each end a record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from .dialect import validate_comment, validate_delimiter, validate_quote
from .errors import TokenizerError
from .models import Dialect
from .source import RuneSource
from .tokenizer import read_record

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

    from .errors import ParserError
    from .models import ReadResult

logger = logging.getLogger(__name__)


class Reader:
    """
    Reads records from a CSV document.

    Quote, delimiter and comment can be changed between reads; a change is
    validated immediately and applies from the next read onward. A Reader is
    meant for a single caller.
    """

    def __init__(self, source: RuneSource | TextIO | str, dialect: Dialect | None = None) -> None:
        if not isinstance(source, RuneSource):
            source = RuneSource(source)
        self._source = source
        self._dialect = dialect or Dialect()
        self._records_read = 0

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def dialect(self) -> Dialect:
        """Current dialect."""
        return self._dialect

    @dialect.setter
    def dialect(self, dialect: Dialect) -> None:
        self._dialect = dialect

    @property
    def quote(self) -> str:
        """Field quotation character. Defaults to (")."""
        return self._dialect.quotechar

    @quote.setter
    def quote(self, quotechar: str) -> None:
        quotechar = validate_quote(
            quotechar, delimiter=self._dialect.delimiter, comment=self._dialect.comment
        )
        self._dialect = self._dialect.model_copy(update={"quotechar": quotechar})

    @property
    def delimiter(self) -> str:
        """Field delimiter. Defaults to (,)."""
        return self._dialect.delimiter

    @delimiter.setter
    def delimiter(self, delimiter: str) -> None:
        delimiter = validate_delimiter(
            delimiter, quotechar=self._dialect.quotechar, comment=self._dialect.comment
        )
        self._dialect = self._dialect.model_copy(update={"delimiter": delimiter})

    @property
    def comment(self) -> str | None:
        """Comment character, or None if comment lines are disabled (the default)."""
        return self._dialect.comment

    @comment.setter
    def comment(self, comment: str | None) -> None:
        comment = validate_comment(
            comment, quotechar=self._dialect.quotechar, delimiter=self._dialect.delimiter
        )
        self._dialect = self._dialect.model_copy(update={"comment": comment})

    @property
    def records_read(self) -> int:
        """Number of records returned so far."""
        return self._records_read

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def read_record(self) -> ReadResult:
        """
        Read one record.

        Returns a ReadResult whose record is None for a skipped blank line
        and at end of input. After end of input every further call reports
        at_end again. Decoding and I/O errors from the stream propagate.
        """
        result = read_record(self._source, self._dialect, self._records_read + 1)

        if result.error is not None:
            logger.debug("Parse error: %s", result.error)
        elif result.record is not None:
            self._records_read += 1
        elif not result.at_end:
            logger.debug("Skipped blank line %d", self._source.line)

        return result

    def read_all(self) -> tuple[list[list[str]], ParserError | None]:
        """
        Read all remaining records.

        Returns the records and None on a clean end of input. On a parse
        error, returns the records read before the failing one and the error.
        """
        records: list[list[str]] = []
        while True:
            result = self.read_record()
            if result.error is not None:
                return records, result.error
            if result.record is not None:
                records.append(result.record)
            if result.at_end or self._source.at_end():
                return records, None

    def __iter__(self) -> Iterator[list[str]]:
        """Yield records until end of input; raise TokenizerError on a parse error."""
        while True:
            result = self.read_record()
            if result.error is not None:
                raise TokenizerError(result.error, result.record)
            if result.record is not None:
                yield result.record
            if result.at_end:
                return

    # -------------------------------------------------------------------------
    # Resource handling
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying stream."""
        self._source.close()

    def __enter__(self) -> Reader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
