"""Unit tests for the field scanner."""

import io

import pytest

from tidycsv.models import MalformedQuoteError
from tidycsv.scanner import FieldScanner, FieldState, iter_chars, scan_text


def scan_one(text, separator=","):
    rows = scan_text(text, separator)
    assert len(rows) == 1, f"one row expected for {text!r}, got {rows!r}"
    return rows[0]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1\n", ["1"]),
        ("1", ["1"]),
        ("1,2,3,4,5\n", ["1", "2", "3", "4", "5"]),
        ('"a"\n', ["a"]),
        ('"a",b', ["a", "b"]),
        ('"a","""b""","c"', ["a", '"b"', "c"]),
        ('"a",""",b,""","c"', ["a", '",b,"', "c"]),
        ('"a"," "",b,"" ","c"', ["a", ' ",b," ', "c"]),
        (" 1 , 2 , 3 ", ["1", "2", "3"]),
        ('"a"," b ","c d"', ["a", " b ", "c d"]),
        ("a,b c,d", ["a", "b c", "d"]),
    ],
)
def test_scan_fields(text, expected):
    """Quoting, escaped quotes and whitespace trimming."""
    assert scan_one(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ('ignore-"a","b","c"-ignore', ["a", "b", "c"]),
        ('a,x "b",c', ["a", "b", "c"]),
        ('a,x  "b",c', ["a", "b", "c"]),
        ('"a"x"b"', ["b"]),
    ],
)
def test_text_around_quotes_is_discarded(text, expected):
    """Documented quirk: the quoted span wins over surrounding text."""
    assert scan_one(text) == expected


def test_separator_only_line_yields_two_empty_fields():
    assert scan_one(",") == ["", ""]


def test_trailing_separator_yields_empty_last_field():
    assert scan_one("a,") == ["a", ""]


def test_quoted_empty_field():
    assert scan_one('""') == [""]
    assert scan_one('a,"",b') == ["a", "", "b"]


def test_blank_lines_yield_empty_rows():
    scanner = FieldScanner("a\n\n   \nb")
    assert scanner.scan_row() == ["a"]
    assert scanner.scan_row() == []
    assert scanner.scan_row() == []
    assert scanner.scan_row() == ["b"]
    assert scanner.scan_row() is None


def test_empty_input():
    assert FieldScanner("").scan_row() is None
    assert scan_text("") == []


def test_quoted_separator_and_newline_are_content():
    rows = scan_text('a,"x,y\nz",b\nc')
    assert rows == [["a", "x,y\nz", "b"], ["c"]]


def test_crlf_line_endings():
    assert scan_text("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]


def test_carriage_return_inside_quotes_is_kept():
    assert scan_one('"a\r\nb"') == ["a\r\nb"]


def test_tab_separator_is_not_trimmed_as_whitespace():
    assert scan_one("a\t\tb", "\t") == ["a", "", "b"]
    assert scan_one(" a \t b ", "\t") == ["a", "b"]


def test_semicolon_separator_keeps_commas():
    assert scan_one("1,5;2,5", ";") == ["1,5", "2,5"]


def test_unterminated_quote_raises():
    with pytest.raises(MalformedQuoteError) as excinfo:
        scan_text('a,b\nc,"open\nstill open')
    assert excinfo.value.line == 2
    assert "line 2" in str(excinfo.value)


def test_unterminated_quote_lenient():
    assert scan_text('a,"open', strict=False) == [["a", "open"]]


def test_line_counter_tracks_quoted_newlines():
    scanner = FieldScanner('"x\ny",1\nz\n')
    scanner.scan_row()
    assert scanner.line == 3
    scanner.scan_row()
    assert scanner.line == 4


def test_skip_comments():
    scanner = FieldScanner("# header\n  # indented\na,#b\n#last", skip_comments=True)
    rows = [row for row in scanner if row]
    assert rows == [["a", "#b"]]


def test_comments_kept_by_default():
    assert scan_text("# note, here") == [["# note", "here"]]


def test_field_states_are_distinct():
    assert len(set(FieldState)) == 4


def test_iter_chars_reads_chunks():
    stream = io.StringIO("abcdef")
    assert "".join(iter_chars(stream, chunk_size=4)) == "abcdef"


def test_scanner_over_stream_chars():
    stream = io.StringIO("x,y\n1,2\n")
    rows = [row for row in FieldScanner(iter_chars(stream, 3)) if row]
    assert rows == [["x", "y"], ["1", "2"]]
