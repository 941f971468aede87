"""Diagnostic collector for accumulating messages while loading test files."""

from __future__ import annotations

from langtest.diagnostics.diagnostic import Diagnostic
from langtest.diagnostics.location import SourceLocation
from langtest.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics across every file handed to the parser."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        location: SourceLocation | None,
        notes: tuple[str, ...],
    ) -> None:
        self._diagnostics.append(Diagnostic(severity, message, location, notes))

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._add(DiagnosticSeverity.ERROR, message, location, notes)

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._add(DiagnosticSeverity.WARNING, message, location, notes)

    def info(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._add(DiagnosticSeverity.INFO, message, location, notes)

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def count(self, severity: DiagnosticSeverity) -> int:
        return sum(1 for d in self._diagnostics if d.severity == severity)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
