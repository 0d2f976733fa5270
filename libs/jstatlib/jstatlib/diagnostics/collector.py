"""Diagnostic collector for accumulating messages during parsing and checking."""

from __future__ import annotations

from jstatlib.diagnostics.diagnostic import Diagnostic, DiagnosticSeverity
from jstatlib.diagnostics.location import TextLocation


class DiagnosticCollector:
    """Accumulates diagnostics in the order they are reported."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        location: TextLocation | None,
        code: str | None,
        notes: tuple[str, ...],
    ) -> None:
        self._diagnostics.append(Diagnostic(severity, message, location, code, notes))

    def error(
        self,
        message: str,
        location: TextLocation | None = None,
        *,
        code: str | None = None,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._add(DiagnosticSeverity.ERROR, message, location, code, notes)

    def warning(
        self,
        message: str,
        location: TextLocation | None = None,
        *,
        code: str | None = None,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._add(DiagnosticSeverity.WARNING, message, location, code, notes)

    def info(
        self,
        message: str,
        location: TextLocation | None = None,
        *,
        code: str | None = None,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._add(DiagnosticSeverity.INFO, message, location, code, notes)

    def extend(self, other: DiagnosticCollector) -> None:
        """Append every diagnostic recorded by *other*."""
        self._diagnostics.extend(other.get_all())

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def errors(self) -> list[Diagnostic]:
        """Return the error diagnostics only."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR]

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
