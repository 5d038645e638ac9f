"""
CSV tokenizer.

Handles the usual CSV dialect:
- Configurable delimiter, quote and comment characters
- Escape: doubled quotes ("")
- Line terminators: LF, CR or CRLF; all three may appear inside quoted fields
- Blank lines are skipped, comment lines only count at the start of a line

One read drives the state machine from START_LINE until a state handler
returns None, then hands back a ReadResult. All transient state lives in a
RecordScan created for that read, so only the source cursor carries over
between reads.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from .dialect import LINE_TERMINATORS
from .errors import Location, ParserError
from .models import ReadResult
from .source import EOF

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models import Dialect
    from .source import RuneSource


class State(Enum):
    """State of the tokenizer state machine."""

    START_LINE = auto()  # At start of a line, blank and comment lines are skipped here
    COMMENT = auto()  # Inside a comment line
    START_FIELD = auto()  # At start of a field
    FIELD = auto()  # Inside an unquoted field
    QUOTED_FIELD = auto()  # Inside a quoted field
    # DoubleQuotedField: just saw a quote inside a quoted field, either an
    # escaped quote ("") or the closing quote
    QUOTE_IN_QUOTED = auto()


class RecordScan:
    """Transient state for reading one record."""

    def __init__(self, source: RuneSource, dialect: Dialect, record_no: int = 1) -> None:
        self._source = source
        self._quote = dialect.quotechar
        self._delimiter = dialect.delimiter
        self._comment = dialect.comment
        self._record_no = record_no

        self._field: list[str] = []
        self._record: list[str] | None = None
        self._error: ParserError | None = None
        self._at_end = False
        self._start_line: int | None = None
        self._quote_line: int | None = None

        self._handlers: dict[State, Callable[[], State | None]] = {
            State.START_LINE: self._start_line_state,
            State.COMMENT: self._comment_state,
            State.START_FIELD: self._start_field_state,
            State.FIELD: self._field_state,
            State.QUOTED_FIELD: self._quoted_field_state,
            State.QUOTE_IN_QUOTED: self._quote_in_quoted_state,
        }

    def run(self) -> ReadResult:
        """Drive the state machine until it halts."""
        state: State | None = State.START_LINE
        while state is not None:
            state = self._handlers[state]()

        return ReadResult(
            record=self._record,
            error=self._error,
            at_end=self._at_end,
            start_line=self._start_line if self._record is not None else None,
            end_line=self._source.line if self._record is not None else None,
        )

    # -------------------------------------------------------------------------
    # Field and record assembly
    # -------------------------------------------------------------------------

    def _end_field(self) -> None:
        if self._record is None:
            self._record = []
        self._record.append("".join(self._field))
        self._field = []

    def _fail(self, error: ParserError) -> None:
        self._error = error

    def _location(self) -> Location:
        return Location(
            line_no=self._source.line,
            column=self._source.column,
            record_no=self._record_no,
        )

    # -------------------------------------------------------------------------
    # States
    # -------------------------------------------------------------------------

    def _start_line_state(self) -> State | None:
        char = self._source.next()
        if char == EOF:
            self._at_end = True
            return None
        if char in LINE_TERMINATORS:
            # Blank line: no record
            return None
        if char == self._comment:
            return State.COMMENT

        self._start_line = self._source.line
        self._source.backup()
        return State.START_FIELD

    def _comment_state(self) -> State | None:
        while True:
            char = self._source.next()
            if char == EOF:
                self._at_end = True
                return None
            if char in LINE_TERMINATORS:
                return State.START_LINE

    def _start_field_state(self) -> State | None:
        char = self._source.next()
        if char == EOF:
            self._at_end = True
            self._end_field()
            return None
        if char in LINE_TERMINATORS:
            self._end_field()
            return None
        if char == self._quote:
            self._quote_line = self._source.line
            return State.QUOTED_FIELD

        self._source.backup()
        return State.FIELD

    def _field_state(self) -> State | None:
        while True:
            char = self._source.next()
            if char == EOF:
                self._at_end = True
                self._end_field()
                return None
            if char in LINE_TERMINATORS:
                self._end_field()
                return None
            if char == self._delimiter:
                self._end_field()
                return State.START_FIELD
            if char == self._quote:
                self._fail(ParserError.bare_quote(self._quote, location=self._location()))
                return None
            self._field.append(char)

    def _quoted_field_state(self) -> State | None:
        while True:
            char = self._source.next()
            if char == EOF:
                self._at_end = True
                self._fail(
                    ParserError.unterminated_quote(
                        self._quote,
                        location=self._location(),
                        context={"quote_line": self._quote_line, "reason": "end of input"},
                    )
                )
                return None
            if char == self._quote:
                return State.QUOTE_IN_QUOTED
            self._field.append(char)

    def _quote_in_quoted_state(self) -> State | None:
        char = self._source.next()
        if char == EOF:
            self._at_end = True
            self._end_field()
            return None
        if char in LINE_TERMINATORS:
            self._end_field()
            return None
        if char == self._quote:
            # Escaped quote
            self._field.append(char)
            return State.QUOTED_FIELD
        if char == self._delimiter:
            self._end_field()
            return State.START_FIELD

        # Content after closing quote
        self._fail(
            ParserError.unterminated_quote(
                self._quote,
                location=self._location(),
                context={"quote_line": self._quote_line, "char": char},
            )
        )
        return None


def read_record(source: RuneSource, dialect: Dialect, record_no: int = 1) -> ReadResult:
    """Read one record from source."""
    return RecordScan(source, dialect, record_no).run()
