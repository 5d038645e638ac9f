"""
Pytest configuration and fixtures for runecsv tests.

Provides fixtures for:
- Sample CSV files written to a temporary directory
- Config files for the CLI
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Sample File Fixtures
# =============================================================================


@pytest.fixture
def simple_csv(tmp_path: Path) -> Path:
    """Comma-separated file with a quoted multi-line field."""
    path = tmp_path / "simple.csv"
    path.write_bytes(b'name,comment\nalice,"likes, commas"\nbob,"two\nlines"\n')
    return path


@pytest.fixture
def semicolon_csv(tmp_path: Path) -> Path:
    """Semicolon-separated file with a comment line and CRLF endings."""
    path = tmp_path / "semicolon.csv"
    path.write_bytes(b"# exported\r\na;b;c\r\n1;2;3\r\n")
    return path


@pytest.fixture
def bare_quote_csv(tmp_path: Path) -> Path:
    """File with a bare quote on the second line."""
    path = tmp_path / "bare_quote.csv"
    path.write_bytes(b'a,b\nc,d"e\nf,g\n')
    return path


@pytest.fixture
def utf8_bom_csv(tmp_path: Path) -> Path:
    """UTF-8 file with BOM and non-ASCII content."""
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbf" + "stadt,land\nMünchen,Deutschland\n".encode("utf-8"))
    return path


@pytest.fixture
def invalid_utf8_csv(tmp_path: Path) -> Path:
    """File that is not valid UTF-8."""
    path = tmp_path / "invalid.csv"
    path.write_bytes(b"a,b\nc,\xff\xfe\xfa\n")
    return path


@pytest.fixture
def crlf_in_quotes_csv(tmp_path: Path) -> Path:
    """File with CRLF inside a quoted field."""
    path = tmp_path / "crlf.csv"
    path.write_bytes(b'A,"Hello\r\nHi",B\r\n')
    return path


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def semicolon_config(tmp_path: Path) -> Path:
    """Config file selecting the semicolon dialect with # comments."""
    path = tmp_path / "runecsv.yaml"
    path.write_text(
        'dialect:\n  delimiter: ";"\n  comment: "#"\nencoding: utf-8\n',
        encoding="utf-8",
    )
    return path
