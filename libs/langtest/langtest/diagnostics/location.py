"""Source location tracking for test files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position inside a test file.

    ``line`` counts logical lines, i.e. lines left after comments and blank
    lines have been stripped and continuations folded.
    """

    file: str
    line: int  # 1-indexed
    test_name: str | None = None

    def __str__(self) -> str:
        where = f"{self.file}:{self.line}"
        if self.test_name:
            where += f" [{self.test_name}]"
        return where
