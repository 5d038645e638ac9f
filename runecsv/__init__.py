"""
runecsv: streaming CSV reader.

A library and CLI tool for reading delimiter-separated text one record at a
time, with configurable quote, delimiter and comment characters.

Usage:
    from runecsv import Reader
    records, error = Reader("a,b,c\n").read_all()
"""

from runecsv.core.parser import Dialect, ParserError, Reader, ReadResult, read_file, read_text

__version__ = "0.1.0"
__all__ = [
    "Dialect",
    "ParserError",
    "ReadResult",
    "Reader",
    "__version__",
    "read_file",
    "read_text",
]
