"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from langtest.diagnostics.collector import DiagnosticCollector
from langtest.diagnostics.diagnostic import Diagnostic
from langtest.diagnostics.location import SourceLocation
from langtest.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
