"""Parse error types for language test files."""

from __future__ import annotations

from langtest.diagnostics.location import SourceLocation


class ParseError(Exception):
    """Raised on input the test-file grammar cannot accept. Fatal for the file."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    def at(self, location: SourceLocation) -> ParseError:
        """Attach *location* unless one is already known; returns ``self``."""
        if self.location is None:
            self.location = location
        return self

    def __str__(self) -> str:
        if self.location is not None:
            return f"{self.location}: {self.message}"
        return self.message


class UnrecognizedLineError(ParseError):
    """No grammar rule matches the line."""

    def __init__(self, line: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"unrecognized line: {line}", location)
        self.line = line


class UnrecognizedAgentError(ParseError):
    """An agent prefix other than O, T, P or L."""

    def __init__(self, code: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"unrecognized agent type: {code}", location)
        self.code = code


class MissingErrorKeywordError(ParseError):
    """A command has ``=>`` but the outcome is not ERROR, COMPILER ERROR or STACKTRACE."""

    def __init__(self, outcome: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"error keyword missing after '=>': {outcome}", location)
        self.outcome = outcome


class OrphanLineError(ParseError):
    """An indented line appears before any test header."""

    def __init__(self, line: str, location: SourceLocation | None = None) -> None:
        super().__init__(f"statement outside of any test: {line.strip()}", location)
        self.line = line
