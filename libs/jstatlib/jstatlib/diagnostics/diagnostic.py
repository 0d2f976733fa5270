"""Diagnostic messages and their severity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jstatlib.diagnostics.location import TextLocation


class DiagnosticSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message.

    ``code`` names what produced the message: a relation expression such as
    ``"OC == OGC"`` for check failures, or a short tag like ``"field-missing"``.
    """

    severity: DiagnosticSeverity
    message: str
    location: TextLocation | None = None
    code: str | None = None
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.severity}: {self.message}"
