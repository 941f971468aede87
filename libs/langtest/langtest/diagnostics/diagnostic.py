"""Diagnostic message representation."""

from __future__ import annotations

from dataclasses import dataclass

from langtest.diagnostics.location import SourceLocation
from langtest.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message."""

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        text = f"{loc}{self.severity}: {self.message}"
        for note in self.notes:
            text += f"\n  note: {note}"
        return text
