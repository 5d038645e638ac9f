"""Tests for the CSV tokenizer state machine."""

from __future__ import annotations

import pytest

from runecsv.core.parser import Dialect, ErrorKind, Reader

# (id, input, expected records, dialect overrides)
READ_CASES = [
    ("simple", "a,b,c\n", [["a", "b", "c"]], {}),
    ("simple_no_final_eol", "a,b,c\nd,e", [["a", "b", "c"], ["d", "e"]], {}),
    ("crlf", "a,b\r\nc,d\r\n", [["a", "b"], ["c", "d"]], {}),
    ("bare_cr", "a,b\rc,d\r\n", [["a", "b"], ["c", "d"]], {}),
    (
        "rfc4180",
        '#field1,field2,field3\n"aaa","bb\nb","ccc"\n"a,a","b""bb","ccc"\nzzz,yyy,xxx\n',
        [
            ["#field1", "field2", "field3"],
            ["aaa", "bb\nb", "ccc"],
            ["a,a", 'b"bb', "ccc"],
            ["zzz", "yyy", "xxx"],
        ],
        {},
    ),
    ("no_eol", "a,b,c", [["a", "b", "c"]], {}),
    ("semicolon", "a;b;c\n", [["a", "b", "c"]], {"delimiter": ";"}),
    (
        "multi_line",
        '"two\nline","one line","three\nline\nfield"',
        [["two\nline", "one line", "three\nline\nfield"]],
        {},
    ),
    ("blank_line", "a,b,c\n\nd,e,f\n\n", [["a", "b", "c"], ["d", "e", "f"]], {}),
    ("leading_space", " a,  b,   c\n", [[" a", "  b", "   c"]], {}),
    ("comment", "#1,2,3\na,b,c\n#comment", [["a", "b", "c"]], {"comment": "#"}),
    ("no_comment", "#1,2,3\na,b,c", [["#1", "2", "3"], ["a", "b", "c"]], {}),
    ("comment_not_mid_line", "a,#b\n", [["a", "#b"]], {"comment": "#"}),
    ("trailing_delimiter_eof", "a,b,c,", [["a", "b", "c", ""]], {}),
    ("trailing_delimiter_eol", "a,b,c,\n", [["a", "b", "c", ""]], {}),
    ("trailing_delimiter_space_eof", "a,b,c, ", [["a", "b", "c", " "]], {}),
    ("trailing_delimiter_space_eol", "a,b,c, \n", [["a", "b", "c", " "]], {}),
    (
        "trailing_delimiter_line3",
        "a,b,c\nd,e,f\ng,hi,",
        [["a", "b", "c"], ["d", "e", "f"], ["g", "hi", ""]],
        {},
    ),
    (
        "delimiter_fields",
        'x,y,z,w\nx,y,z,\nx,y,,\nx,,,\n,,,\n"x","y","z","w"\n"x","y","z",""\n'
        '"x","y","",""\n"x","","",""\n"","","",""\n',
        [
            ["x", "y", "z", "w"],
            ["x", "y", "z", ""],
            ["x", "y", "", ""],
            ["x", "", "", ""],
            ["", "", "", ""],
            ["x", "y", "z", "w"],
            ["x", "y", "z", ""],
            ["x", "y", "", ""],
            ["x", "", "", ""],
            ["", "", "", ""],
        ],
        {},
    ),
    ("trailing_delimiter_ineffective", "a,b,\nc,d,e", [["a", "b", ""], ["c", "d", "e"]], {}),
    ("crlf_in_quoted_field", 'A,"Hello\r\nHi",B\r\n', [["A", "Hello\r\nHi", "B"]], {}),
    ("trailing_cr", "field1,field2\r", [["field1", "field2"]], {}),
    ("quoted_trailing_cr", '"field"\r', [["field"]], {}),
    ("quoted_trailing_crcr", '"field"\r\r', [["field"]], {}),
    ("field_cr", "field\rfield\r", [["field"], ["field"]], {}),
    ("field_crcr", "field\r\rfield\r\r", [["field"], ["field"]], {}),
    ("field_crcrlf", "field\r\r\nfield\r\r\n", [["field"], ["field"]], {}),
    ("field_crcrlfcr", "field\r\r\n\rfield\r\r\n\r", [["field"], ["field"]], {}),
    ("field_crcrlfcrcr", "field\r\r\n\r\rfield\r\r\n\r\r", [["field"], ["field"]], {}),
    (
        "multi_field_crcrlfcrcr",
        "field1,field2\r\r\n\r\rfield1,field2\r\r\n\r\r,",
        [["field1", "field2"], ["field1", "field2"], ["", ""]],
        {},
    ),
    (
        "non_ascii_delimiter_and_comment",
        "a£b,c£ \td,e\n€ comment\n",
        [["a", "b,c", " \td,e"]],
        {"delimiter": "£", "comment": "€"},
    ),
    (
        "non_ascii_delimiter_and_comment_with_quotes",
        'a€"  b,"€ c\nλ comment\n',
        [["a", "  b,", " c"]],
        {"delimiter": "€", "comment": "λ"},
    ),
    # λ and θ share their first UTF-8 byte
    (
        "non_ascii_delimiter_confusion",
        '"abθcd"λefθgh',
        [["abθcd", "efθgh"]],
        {"delimiter": "λ", "comment": "€"},
    ),
    ("non_ascii_comment_confusion", "λ\nλ\nθ\nλ\n", [["λ"], ["λ"], ["λ"]], {"comment": "θ"}),
    ("quoted_field_multiple_lf", '"\n\n\n\n"', [["\n\n\n\n"]], {}),
    ("multiple_crlf", "\r\n\r\n\r\n\r\n", [], {}),
    ("empty_input", "", [], {}),
    (
        "huge_lines",
        "#ignore\n" * 10000 + "@" * 5000 + "," + "*" * 5000,
        [["@" * 5000, "*" * 5000]],
        {"comment": "#"},
    ),
    ("double_quote_with_trailing_crlf", '"foo""bar"\r\n', [['foo"bar']], {}),
    ("even_quotes", '""""""""', [['"""']], {}),
    ("quoted_quote", '"""z"""', [['"z"']], {}),
    ("custom_quote", "'a,b',c\n", [["a,b", "c"]], {"quotechar": "'"}),
]

# (id, input, expected records, expected error kind)
ERROR_CASES = [
    ("bad_double_quotes", 'a""b,c', [], ErrorKind.BARE_QUOTE),
    ("bad_bare_quote", 'a "word","b"', [], ErrorKind.BARE_QUOTE),
    ("bad_trailing_quote", '"a word",b"', [], ErrorKind.BARE_QUOTE),
    ("extraneous_quote", '"a "word","b"', [], ErrorKind.UNTERMINATED_QUOTE),
    ("start_line_1", 'a,"b\nc"d,e', [], ErrorKind.UNTERMINATED_QUOTE),
    ("start_line_2", 'a,b\n"d\n\n,e', [["a", "b"]], ErrorKind.UNTERMINATED_QUOTE),
    ("quote_with_trailing_crlf", '"foo"bar"\r\n', [], ErrorKind.UNTERMINATED_QUOTE),
    ("odd_quotes", '"""""""', [], ErrorKind.UNTERMINATED_QUOTE),
    ("unterminated_at_eof", 'a,b\nc,"d', [["a", "b"]], ErrorKind.UNTERMINATED_QUOTE),
]


class TestReadAll:
    """Tests for reading whole documents."""

    @pytest.mark.parametrize(
        ("text", "expected", "dialect"),
        [pytest.param(text, expected, dialect, id=name) for name, text, expected, dialect in READ_CASES],
    )
    def test_read(self, text: str, expected: list[list[str]], dialect: dict[str, str]) -> None:
        """Test that well-formed input reads to the expected records."""
        records, error = Reader(text, Dialect(**dialect)).read_all()
        assert error is None
        assert records == expected

    @pytest.mark.parametrize(
        ("text", "expected", "kind"),
        [pytest.param(text, expected, kind, id=name) for name, text, expected, kind in ERROR_CASES],
    )
    def test_read_error(self, text: str, expected: list[list[str]], kind: ErrorKind) -> None:
        """Test that malformed input reports the expected error."""
        records, error = Reader(text).read_all()
        assert error is not None
        assert error.kind is kind
        assert records == expected


class TestLineTerminators:
    """Tests for terminator equivalence."""

    @pytest.mark.parametrize("terminator", ["\n", "\r", "\r\n"])
    def test_terminators_are_equivalent(self, terminator: str) -> None:
        """Test that LF, CR and CRLF each end a record."""
        reader = Reader(f"a,b{terminator}")
        result = reader.read_record()
        assert result.record == ["a", "b"]
        assert result.error is None

    @pytest.mark.parametrize("terminator", ["\n", "\r", "\r\n"])
    def test_terminators_are_literal_in_quotes(self, terminator: str) -> None:
        """Test that terminators inside quotes are field content."""
        records, error = Reader(f'"x{terminator}y",z\n').read_all()
        assert error is None
        assert records == [[f"x{terminator}y", "z"]]


class TestErrorDetails:
    """Tests for parse error codes and locations."""

    def test_bare_quote_location(self) -> None:
        """Test that a bare quote is located at the quote character."""
        _, error = Reader('a,b\nc,d"e\n').read_all()
        assert error is not None
        assert error.code == "CSV-QUOTE-001"
        assert error.location.line_no == 2
        assert error.location.column == 4
        assert error.location.record_no == 2

    def test_unterminated_quote_context(self) -> None:
        """Test that an unterminated quote records where the quote opened."""
        _, error = Reader('a\n"b\nc\n').read_all()
        assert error is not None
        assert error.code == "CSV-QUOTE-002"
        assert error.context["quote_line"] == 2
        assert error.context["reason"] == "end of input"

    def test_content_after_closing_quote(self) -> None:
        """Test that content after a closing quote names the offending character."""
        _, error = Reader('"foo"bar\n').read_all()
        assert error is not None
        assert error.kind is ErrorKind.UNTERMINATED_QUOTE
        assert error.context["char"] == "b"
        assert error.location.column == 6
