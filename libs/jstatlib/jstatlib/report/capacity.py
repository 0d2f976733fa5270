"""Immutable view over one row of ``jstat -gccapacity`` output."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from jstatlib.report.errors import FieldMissingError
from jstatlib.report.table import ResultTable, ToolResults, parse_tool_results


def parse_value(text: str) -> float | None:
    """Parse one printed value, accepting ``,`` as the decimal separator.

    Returns None for anything that is not a finite number (jstat prints ``-``
    for values it cannot sample).
    """
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class CapacityReport:
    """One capacity sample plus the exit status of the process that printed it.

    Attributes
    ----------
    exit_status:
        Exit code of the tool; the numbers are only meaningful when it is 0.
    fields:
        Numeric values keyed by column name (``NGC``, ``OC``, ...).
    unparsed:
        Raw text of columns whose value was not numeric.
    """

    exit_status: int
    fields: Mapping[str, float] = field(default_factory=dict)
    unparsed: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        fields: dict[str, float] = {}
        unparsed = dict(self.unparsed)
        for name, value in self.fields.items():
            # bool is an int subclass but never a capacity
            if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
                fields[name] = float(value)
            else:
                unparsed[name] = str(value)
        object.__setattr__(self, "fields", MappingProxyType(fields))
        object.__setattr__(self, "unparsed", MappingProxyType(unparsed))

    @classmethod
    def from_values(cls, values: Mapping[str, str], exit_status: int = 0) -> CapacityReport:
        """Build a report from raw string values keyed by column name."""
        fields: dict[str, float] = {}
        unparsed: dict[str, str] = {}
        for name, text in values.items():
            value = parse_value(text)
            if value is None:
                unparsed[name] = text
            else:
                fields[name] = value
        return cls(exit_status=exit_status, fields=fields, unparsed=unparsed)

    @classmethod
    def from_table(cls, table: ResultTable, exit_status: int, row: int = 0) -> CapacityReport:
        """Build a report from data row *row* of a parsed table."""
        return cls.from_values(table.row(row), exit_status)

    @classmethod
    def from_tool_results(
        cls, results: ToolResults, row: int = 0, source: str = "<jstat>"
    ) -> CapacityReport:
        """Parse captured tool output and build a report from one of its rows."""
        table = parse_tool_results(results, source)
        return cls.from_table(table, results.exit_code, row)

    def float_value(self, name: str) -> float:
        """Return the value of field *name*.

        Raises:
            FieldMissingError: if the field is absent or was not numeric.
        """
        try:
            return self.fields[name]
        except KeyError:
            if name in self.unparsed:
                raise FieldMissingError(name, f"non-numeric value {self.unparsed[name]!r}") from None
            raise FieldMissingError(name) from None

    def int_value(self, name: str) -> int:
        """Return an event counter such as ``YGC`` or ``FGC``."""
        value = self.float_value(name)
        if not value.is_integer():
            raise FieldMissingError(name, f"expected an integer count, got {value}")
        return int(value)

    def __contains__(self, name: object) -> bool:
        return name in self.fields
