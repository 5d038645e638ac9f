"""
Buffered rune source.

Feeds the tokenizer one character at a time from a text stream, with a
single held-back slot for one level of pushback and line/column tracking.
"""

from __future__ import annotations

import io
import re
from typing import TextIO

# Returned by RuneSource.next() at end of input, like TextIO.read()
EOF = ""

DEFAULT_CHUNK_SIZE = 8192

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


class RuneSource:
    """
    Pull-based character source over a text stream.

    Position is that of the most recently read character: line and column
    are 1-based, and CRLF counts as a single line break.
    """

    def __init__(self, stream: TextIO | str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if isinstance(stream, str):
            stream = io.StringIO(stream, newline="")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = ""
        self._pos = 0
        self._held: str | None = None
        self._last: str | None = None

        self.line = 1
        self.column = 0
        self._pending_break = ""
        self._saved: tuple[int, int, str] | None = None

    def next(self) -> str:
        """Return the next character, or EOF at end of input."""
        if self._held is not None:
            char = self._held
            self._held = None
        else:
            if self._pos >= len(self._buffer) and not self._fill():
                self._last = None
                return EOF
            char = self._buffer[self._pos]
            self._pos += 1

        self._saved = (self.line, self.column, self._pending_break)
        if self._pending_break == "\r" and char == "\n":
            self.column += 1
        elif self._pending_break:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self._pending_break = char if char in "\r\n" else ""

        self._last = char
        return char

    def backup(self) -> None:
        """Un-read the most recently read character."""
        if self._last is None or self._saved is None:
            raise RuntimeError("backup() requires a preceding successful next()")
        self._held = self._last
        self.line, self.column, self._pending_break = self._saved
        self._last = None
        self._saved = None

    def at_end(self) -> bool:
        """Check for end of input without consuming anything."""
        if self._held is not None:
            return False
        return self._pos >= len(self._buffer) and not self._fill()

    def _fill(self) -> bool:
        """Read the next chunk from the stream. Returns False at end of input."""
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            return False
        match = _SURROGATE_RE.search(chunk)
        if match is not None:
            raise UnicodeError(
                f"invalid Unicode scalar value U+{ord(match.group()):04X} in input"
            )
        self._buffer = chunk
        self._pos = 0
        return True

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()
