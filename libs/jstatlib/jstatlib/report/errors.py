"""Error types for reading tool output."""

from __future__ import annotations

from jstatlib.diagnostics.location import TextLocation


class TableParseError(Exception):
    """Raised when tool output cannot be turned into a usable table."""

    def __init__(self, message: str, location: TextLocation | None = None) -> None:
        super().__init__(message)
        self.location = location


class FieldMissingError(LookupError):
    """Raised when a report has no numeric value for a required field."""

    def __init__(self, name: str, reason: str = "not present in report") -> None:
        super().__init__(f"Field {name}: {reason}")
        self.name = name
        self.reason = reason
