"""Tests for CSV input parsing and result serialization."""

import csv
import io

import pytest

from webmcp_crawler.config import CSV_HEADER
from webmcp_crawler.csv_io import (
    outcome_to_row,
    parse_origins,
    read_origins,
    results_to_csv,
    write_results,
)
from webmcp_crawler.models.outcome import CheckOutcome

HEADER_LINE = "url,detected,valid,version,tool_count,tool_names,error"


@pytest.fixture
def outcomes() -> list[CheckOutcome]:
    return [
        CheckOutcome(
            url="https://example.com",
            detected=True,
            valid=True,
            version="0.1",
            tool_count=3,
            tool_names="search_products; get_order; create_return",
        ),
        CheckOutcome(url="https://stripe.com", error="HTTP 404"),
        CheckOutcome(
            url="https://bad.example",
            detected=True,
            error="Invalid manifest: / Additional properties are not allowed ('x', 'y' were unexpected)",
        ),
    ]


class TestParseOrigins:
    """Tests for reading origins from table text."""

    def test_one_per_line(self):
        """Each non-blank line contributes one origin."""
        assert parse_origins("example.com\nstripe.com\n") == ["example.com", "stripe.com"]

    @pytest.mark.parametrize("header", ["url", "URL", " Domain ", "website", '"url"'])
    def test_header_skipped(self, header):
        """A url/domain/website header row is skipped."""
        assert parse_origins(f"{header},notes\nexample.com,shop\n") == ["example.com"]

    def test_non_header_first_row_kept(self):
        """A first row that is not a header is data."""
        assert parse_origins("example.com,notes\n") == ["example.com"]

    def test_header_only_after_blank_lines(self):
        """Leading blank lines do not hide the header."""
        assert parse_origins("\n  \nurl\nexample.com\n") == ["example.com"]

    def test_header_alias_later_is_data(self):
        """Only the first non-blank row can be a header."""
        assert parse_origins("example.com\nurl\n") == ["example.com", "url"]

    def test_first_column_quotes_and_whitespace_stripped(self):
        """Surrounding quotes and whitespace are removed from the first column."""
        text = '"https://a.example", x\n  \'b.example\' ,y\r\n c.example \n'
        assert parse_origins(text) == ["https://a.example", "b.example", "c.example"]

    def test_stray_quote_stays_on_its_line(self):
        """An unterminated quote does not merge the following lines."""
        assert parse_origins('"a.example\nb.example\nc.example\n') == ["a.example", "b.example", "c.example"]

    def test_quoted_first_column_with_comma(self):
        """A quoted first column may contain commas."""
        assert parse_origins('"https://a.example/?x=1,2",notes\n') == ["https://a.example/?x=1,2"]

    def test_blank_lines_ignored(self):
        """Blank and whitespace-only lines are ignored."""
        assert parse_origins("\n\na.example\n   \n\nb.example") == ["a.example", "b.example"]

    def test_empty_text(self):
        """Empty input yields no origins."""
        assert parse_origins("") == []
        assert parse_origins("url\n") == []

    def test_read_origins_from_file(self, tmp_path):
        """read_origins reads a UTF-8 file, BOM included."""
        path = tmp_path / "urls.csv"
        path.write_bytes("\ufeffdomain\nexample.com\nstripe.com\n".encode("utf-8"))
        assert read_origins(path) == ["example.com", "stripe.com"]

    def test_read_origins_non_utf8(self, tmp_path):
        """A non-UTF-8 file raises UnicodeDecodeError for the caller to report."""
        path = tmp_path / "urls.csv"
        path.write_bytes("b\u00fccher.example\n".encode("latin-1"))
        with pytest.raises(UnicodeDecodeError):
            read_origins(path)

    def test_read_origins_missing_file(self, tmp_path):
        """A missing file raises OSError for the caller to report."""
        with pytest.raises(OSError):
            read_origins(tmp_path / "missing.csv")


class TestResultsToCsv:
    """Tests for serializing outcomes."""

    def test_header_row(self):
        """The header is fixed and present even with no outcomes."""
        assert results_to_csv([]) == HEADER_LINE + "\n"
        assert ",".join(CSV_HEADER) == HEADER_LINE

    def test_rows_and_booleans(self, outcomes):
        """Booleans render as true/false, one row per outcome."""
        lines = results_to_csv(outcomes[:2]).split("\n")
        assert lines == [
            HEADER_LINE,
            "https://example.com,true,true,0.1,3,search_products; get_order; create_return,",
            "https://stripe.com,false,false,,0,,HTTP 404",
            "",
        ]

    def test_fields_with_comma_and_quote_escaped(self, outcomes):
        """Fields with commas or quotes are quoted with inner quotes doubled."""
        outcome = CheckOutcome(url="https://q.example", error='bad "value", here')
        row = results_to_csv([outcome]).splitlines()[1]
        assert row == 'https://q.example,false,false,,0,,"bad ""value"", here"'

    def test_field_with_newline_quoted(self):
        """Fields with line breaks are quoted."""
        outcome = CheckOutcome(url="https://n.example", error="line one\nline two")
        text = results_to_csv([outcome])
        assert text.endswith(',"line one\nline two"\n')

    def test_exactly_one_trailing_newline(self, outcomes):
        """Output always ends with a single newline."""
        text = results_to_csv(outcomes)
        assert text.endswith("\n")
        assert not text.endswith("\n\n")

    def test_round_trip_row_count_and_columns(self, outcomes):
        """Re-parsing gives the header plus one row per outcome, columns in order."""
        rows = list(csv.reader(io.StringIO(results_to_csv(outcomes))))
        assert rows[0] == list(CSV_HEADER)
        assert len(rows) == len(outcomes) + 1
        assert rows[3] == outcome_to_row(outcomes[2])

    def test_write_results(self, tmp_path, outcomes):
        """write_results creates parent directories and writes the CSV text."""
        path = tmp_path / "out" / "results.csv"
        write_results(path, outcomes)
        assert path.read_text(encoding="utf-8") == results_to_csv(outcomes)
