"""
runecsv core library.

This package contains the core functionality:
- parser: rune source, tokenizer state machine and reader
"""

__all__: list[str] = []
