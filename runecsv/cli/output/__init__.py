"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from runecsv.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from runecsv.cli.output.json import JsonOutput
from runecsv.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
