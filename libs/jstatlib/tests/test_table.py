"""Tests for parsing captured tool output into a table."""

from __future__ import annotations

import pytest

from jstatlib.report import ResultTable, TableParseError, ToolResults, parse_table, parse_tool_results

HEADER = (
    " NGCMN    NGCMX     NGC     S0C   S1C       EC      OGCMN      OGCMX       OGC         OC"
    "       MCMN     MCMX      MC     YGC    FGC"
)
ROW = (
    " 41984.0 671744.0  41984.0 5248.0 5248.0  31488.0    83968.0  1343488.0    83968.0    83968.0"
    "    512.0 110592.0   4480.0      0     0"
)


def parse_ok(text: str) -> ResultTable:
    table, diag = parse_table(text, "<test>")
    assert not diag.has_errors(), diag.format_all()
    return table


class TestParseTable:
    def test_header_and_row(self) -> None:
        table = parse_ok(f"{HEADER}\n{ROW}\n")
        assert table.columns[:3] == ("NGCMN", "NGCMX", "NGC")
        assert len(table.columns) == 15
        assert len(table) == 1
        row = table.row(0)
        assert row["NGC"] == "41984.0"
        assert row["FGC"] == "0"

    def test_multiple_rows(self) -> None:
        table = parse_ok("A B\n1 2\n3 4\n")
        assert len(table) == 2
        assert table.row(1) == {"A": "3", "B": "4"}
        assert table.row(-1) == {"A": "3", "B": "4"}
        assert table.column("A") == ("1", "3")

    def test_blank_lines_ignored(self) -> None:
        table = parse_ok("\n\nA B\n\n1 2\n\n")
        assert table.rows == (("1", "2"),)

    def test_repeated_header_skipped(self) -> None:
        table = parse_ok("A B\n1 2\nA B\n3 4\n")
        assert table.rows == (("1", "2"), ("3", "4"))

    def test_source_name_kept(self) -> None:
        table, _ = parse_table("A\n1\n", "report.txt")
        assert table.source == "report.txt"

    def test_unknown_column(self) -> None:
        table = parse_ok("A B\n1 2\n")
        with pytest.raises(KeyError):
            table.column("C")

    def test_row_out_of_range(self) -> None:
        table = parse_ok("A B\n1 2\n")
        with pytest.raises(TableParseError, match="row 3 out of range"):
            table.row(3)


class TestParseErrors:
    def test_empty_output(self) -> None:
        table, diag = parse_table("", "<test>")
        assert diag.has_errors()
        assert "Missing header line" in diag.format_all()
        assert table.columns == ()

    def test_header_only(self) -> None:
        _, diag = parse_table("A B\n", "<test>")
        assert "No data rows" in diag.format_all()

    def test_missing_value(self) -> None:
        table, diag = parse_table("A B C\n1 2\n4 5 6\n", "<test>")
        (error,) = diag.errors()
        assert "missing value for column C" in error.message
        assert error.location.line == 2
        assert error.location.column == 4
        assert table.rows == (("4", "5", "6"),)

    def test_extra_value(self) -> None:
        _, diag = parse_table("A B\n1 2 3\n", "<test>")
        (error,) = diag.errors()
        assert "unexpected extra value" in error.message
        assert str(error.location) == "<test>:2:5"

    def test_duplicate_columns(self) -> None:
        _, diag = parse_table("A B A\n1 2 3\n", "<test>")
        assert "Duplicate column names in header: A" in diag.format_all()


class TestParseToolResults:
    def test_ok(self) -> None:
        table = parse_tool_results(ToolResults(0, f"{HEADER}\n{ROW}\n"))
        assert table.row()["OC"] == "83968.0"

    def test_raises_on_errors(self) -> None:
        with pytest.raises(TableParseError) as exc_info:
            parse_tool_results(ToolResults(1, "", "jstat: pid not found"))
        assert "Missing header line" in str(exc_info.value)
        assert exc_info.value.location is not None
