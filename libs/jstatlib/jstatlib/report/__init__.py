"""Report subpackage (Layer 1 -- depends on diagnostics)."""

from jstatlib.report.capacity import CapacityReport, parse_value
from jstatlib.report.errors import FieldMissingError, TableParseError
from jstatlib.report.table import ResultTable, ToolResults, parse_table, parse_tool_results

__all__ = [
    "CapacityReport",
    "FieldMissingError",
    "ResultTable",
    "TableParseError",
    "ToolResults",
    "parse_table",
    "parse_tool_results",
    "parse_value",
]
