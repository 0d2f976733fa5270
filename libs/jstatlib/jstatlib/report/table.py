"""Parse captured tool output into a table of named columns.

The tool prints a header line of whitespace-separated column names followed by
one data line per sample, e.g.::

     NGCMN    NGCMX     NGC     S0C   S1C       EC  ...
    41984.0 671744.0  41984.0 5248.0 5248.0  31488.0  ...

With ``-h <n>`` the header is repeated every *n* samples; repeated headers are
skipped.  Rows whose value count does not match the header are reported as
diagnostics and dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from jstatlib.diagnostics.collector import DiagnosticCollector
from jstatlib.diagnostics.location import TextLocation
from jstatlib.report.errors import TableParseError

_TOKEN = re.compile(r"\S+")


@dataclass(frozen=True)
class ToolResults:
    """Captured result of one tool invocation."""

    exit_code: int
    stdout: str
    stderr: str = ""


@dataclass(frozen=True)
class ResultTable:
    """Column names and the raw string values of every data row."""

    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    source: str = "<string>"

    def __len__(self) -> int:
        return len(self.rows)

    def row(self, index: int = 0) -> dict[str, str]:
        """Return data row *index* (negative indexes count from the end) as a dict."""
        try:
            values = self.rows[index]
        except IndexError:
            raise TableParseError(
                f"{self.source}: row {index} out of range ({len(self.rows)} data rows)"
            ) from None
        return dict(zip(self.columns, values))

    def column(self, name: str) -> tuple[str, ...]:
        """Return every value of column *name*."""
        if name not in self.columns:
            raise KeyError(name)
        idx = self.columns.index(name)
        return tuple(r[idx] for r in self.rows)


def _tokens(line: str) -> list[tuple[str, int]]:
    """Split *line* into (token, 1-indexed column) pairs."""
    return [(m.group(0), m.start() + 1) for m in _TOKEN.finditer(line)]


def parse_table(text: str, source: str = "<string>") -> tuple[ResultTable, DiagnosticCollector]:
    """Parse tool output into a ResultTable.

    Args:
        text: Captured standard output of the tool.
        source: Name used in diagnostic locations.

    Returns:
        ``(table, diagnostics)``. The table is always returned; check
        ``diagnostics.has_errors()`` before trusting it.
    """
    diag = DiagnosticCollector()
    header: tuple[str, ...] = ()
    rows: list[tuple[str, ...]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = _tokens(line)
        if not tokens:
            continue
        names = tuple(tok for tok, _ in tokens)
        if not header:
            header = names
            if len(set(header)) != len(header):
                dupes = sorted({n for n in header if header.count(n) > 1})
                diag.error(
                    f"Duplicate column names in header: {', '.join(dupes)}",
                    TextLocation(source, lineno, 1),
                    code="header",
                )
            continue
        if names == header:
            continue

        if len(tokens) != len(header):
            if len(tokens) > len(header):
                column = tokens[len(header)][1]
                detail = "unexpected extra value"
            else:
                column = len(line.rstrip()) + 1
                detail = f"missing value for column {header[len(tokens)]}"
            diag.error(
                f"Expected {len(header)} values but found {len(tokens)}: {detail}",
                TextLocation(source, lineno, column),
                code="row-width",
            )
            continue
        rows.append(names)

    if not header:
        diag.error("Missing header line", TextLocation(source, 1), code="header")
    elif not rows and not diag.has_errors():
        diag.error("No data rows after header", TextLocation(source, 1), code="no-data")

    return ResultTable(columns=header, rows=tuple(rows), source=source), diag


def parse_tool_results(results: ToolResults, source: str = "<jstat>") -> ResultTable:
    """Parse the standard output of *results*, raising on any parse error."""
    table, diag = parse_table(results.stdout, source)
    if diag.has_errors():
        first = diag.errors()[0]
        raise TableParseError(diag.format_all(), first.location)
    return table
