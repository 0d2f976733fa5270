"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from jstatlib.diagnostics.collector import DiagnosticCollector
from jstatlib.diagnostics.diagnostic import Diagnostic, DiagnosticSeverity
from jstatlib.diagnostics.location import TextLocation

__all__ = ["TextLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
