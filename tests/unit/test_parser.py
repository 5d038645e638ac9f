"""Tests for the parser convenience API."""

from pathlib import Path

import pytest

from runecsv.core.parser import (
    Dialect,
    ErrorKind,
    InputTooLargeError,
    open_reader,
    read_bytes,
    read_file,
    read_text,
)


class TestReadText:
    """Tests for read_text function."""

    def test_read_text(self) -> None:
        """Test reading records from a string."""
        result = read_text("a,b\nc,d\n")
        assert result.ok
        assert result.records == [["a", "b"], ["c", "d"]]
        assert result.record_count == 2
        assert result.max_fields == 2

    def test_read_text_with_dialect(self) -> None:
        """Test reading with a custom dialect."""
        result = read_text("# note\na;b\n", Dialect(delimiter=";", comment="#"))
        assert result.records == [["a", "b"]]

    def test_read_text_error(self) -> None:
        """Test that the first parse error is reported with earlier records."""
        result = read_text('a\nb"\nc\n')
        assert not result.ok
        assert result.records == [["a"]]
        assert result.error is not None
        assert result.error.kind is ErrorKind.BARE_QUOTE


class TestReadBytes:
    """Tests for read_bytes function."""

    def test_utf8_bom_stripped(self) -> None:
        """Test that the BOM is not part of the first field."""
        result = read_bytes(b"\xef\xbb\xbfa,b\n")
        assert result.encoding == "utf-8-sig"
        assert result.records == [["a", "b"]]

    def test_explicit_encoding(self) -> None:
        """Test decoding with a given encoding."""
        result = read_bytes("ä,ö\n".encode("cp1252"), encoding="cp1252")
        assert result.records == [["ä", "ö"]]

    def test_invalid_bytes_raise(self) -> None:
        """Test that invalid bytes raise UnicodeDecodeError."""
        with pytest.raises(UnicodeDecodeError):
            read_bytes(b"a,\xff\n", encoding="utf-8")

    def test_max_bytes(self) -> None:
        """Test that oversized input is rejected."""
        with pytest.raises(InputTooLargeError) as excinfo:
            read_bytes(b"a,b,c\n", max_bytes=3)
        assert excinfo.value.size == 6
        assert excinfo.value.code == "CSV-IO-001"

    def test_error_location_has_filename(self) -> None:
        """Test that parse errors name the input."""
        result = read_bytes(b'"a', encoding="utf-8", filename="in.csv")
        assert result.error is not None
        assert result.error.location.file == "in.csv"
        assert "in.csv" in str(result.error)


class TestReadFile:
    """Tests for read_file function."""

    def test_read_file(self, simple_csv: Path) -> None:
        """Test reading a file with quoted fields."""
        result = read_file(simple_csv)
        assert result.ok
        assert result.records == [
            ["name", "comment"],
            ["alice", "likes, commas"],
            ["bob", "two\nlines"],
        ]
        assert result.file_path == simple_csv

    def test_read_file_bare_quote(self, bare_quote_csv: Path) -> None:
        """Test that a parse error stops reading."""
        result = read_file(bare_quote_csv)
        assert result.records == [["a", "b"]]
        assert result.error is not None
        assert result.error.location.line_no == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "missing.csv")

    def test_max_bytes(self, simple_csv: Path) -> None:
        """Test that files over the limit are rejected."""
        with pytest.raises(InputTooLargeError) as excinfo:
            read_file(simple_csv, max_bytes=10)
        assert excinfo.value.size == simple_csv.stat().st_size


class TestOpenReader:
    """Tests for streaming reads from files."""

    def test_stream_records(self, semicolon_csv: Path) -> None:
        """Test reading a file record by record."""
        with open_reader(semicolon_csv, Dialect(delimiter=";", comment="#")) as reader:
            assert list(reader) == [["a", "b", "c"], ["1", "2", "3"]]

    def test_crlf_preserved_in_quotes(self, crlf_in_quotes_csv: Path) -> None:
        """Test that newline translation is disabled."""
        with open_reader(crlf_in_quotes_csv, encoding="utf-8") as reader:
            assert reader.read_all() == ([["A", "Hello\r\nHi", "B"]], None)

    def test_bom_detected(self, utf8_bom_csv: Path) -> None:
        """Test encoding detection for streamed files."""
        with open_reader(utf8_bom_csv) as reader:
            assert list(reader) == [["stadt", "land"], ["München", "Deutschland"]]

    def test_invalid_bytes_raise(self, invalid_utf8_csv: Path) -> None:
        """Test that decoding errors propagate from streamed reads."""
        with open_reader(invalid_utf8_csv, encoding="utf-8") as reader:
            with pytest.raises(UnicodeDecodeError):
                reader.read_all()
