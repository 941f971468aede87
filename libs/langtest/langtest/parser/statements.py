"""Statement types produced by the line classifier.

Each body line of a test file becomes exactly one of the nine frozen
dataclasses below.  ``Statement`` is their union; consumers dispatch on it
with ``isinstance`` chains that raise ``TypeError`` on anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from langtest.core.agents import AgentKind

__all__ = [
    "OpenModel",
    "Definition",
    "Command",
    "CommandExpectingError",
    "CommandExpectingCompileError",
    "CommandExpectingStackTrace",
    "ExpressionExpectingResult",
    "ExpressionExpectingError",
    "ExpressionExpectingStackTrace",
    "Statement",
    "statement_source",
    "encode_trace",
    "decode_trace",
]

# Outcome keywords that may follow ``=>``.
ERROR = "ERROR"
COMPILER_ERROR = "COMPILER ERROR"
STACKTRACE = "STACKTRACE"

ARROW = " => "
TRACE_ESCAPE = "\\n"


# ---------------------------------------------------------------------------
# Setup statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OpenModel:
    """``OPEN> path``: load a model into the runtime."""

    path: str


@dataclass(frozen=True)
class Definition:
    """A ``to``/``to-report`` procedure or ``extensions`` line, kept verbatim."""

    source: str


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Command:
    """``A> command``: must run without error."""

    agent: AgentKind
    text: str


@dataclass(frozen=True)
class CommandExpectingError:
    """``A> command => ERROR message``."""

    agent: AgentKind
    text: str
    message: str


@dataclass(frozen=True)
class CommandExpectingCompileError:
    """``A> command => COMPILER ERROR message``."""

    agent: AgentKind
    text: str
    message: str


@dataclass(frozen=True)
class CommandExpectingStackTrace:
    """``A> command => STACKTRACE trace``; ``trace`` holds real newlines."""

    agent: AgentKind
    text: str
    trace: str


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExpressionExpectingResult:
    """``expression => expected``: the rendered result must equal ``expected``."""

    text: str
    expected: str


@dataclass(frozen=True)
class ExpressionExpectingError:
    """``expression => ERROR message``."""

    text: str
    message: str


@dataclass(frozen=True)
class ExpressionExpectingStackTrace:
    """``expression => STACKTRACE trace``."""

    text: str
    trace: str


Statement = Union[
    OpenModel,
    Definition,
    Command,
    CommandExpectingError,
    CommandExpectingCompileError,
    CommandExpectingStackTrace,
    ExpressionExpectingResult,
    ExpressionExpectingError,
    ExpressionExpectingStackTrace,
]


def decode_trace(payload: str) -> str:
    """Turn the two-character ``\\n`` escapes of a STACKTRACE payload into newlines."""
    return payload.replace(TRACE_ESCAPE, "\n")


def encode_trace(trace: str) -> str:
    return trace.replace("\n", TRACE_ESCAPE)


def statement_source(stmt: Statement) -> str:
    """Render *stmt* back into the single-line form the classifier accepts."""
    if isinstance(stmt, OpenModel):
        return f"OPEN> {stmt.path}"
    if isinstance(stmt, Definition):
        return stmt.source
    if isinstance(stmt, Command):
        return f"{stmt.agent.code}> {stmt.text}"
    if isinstance(stmt, CommandExpectingError):
        return f"{stmt.agent.code}> {stmt.text}{ARROW}{ERROR} {stmt.message}"
    if isinstance(stmt, CommandExpectingCompileError):
        return f"{stmt.agent.code}> {stmt.text}{ARROW}{COMPILER_ERROR} {stmt.message}"
    if isinstance(stmt, CommandExpectingStackTrace):
        return f"{stmt.agent.code}> {stmt.text}{ARROW}{STACKTRACE} {encode_trace(stmt.trace)}"
    if isinstance(stmt, ExpressionExpectingResult):
        return f"{stmt.text}{ARROW}{stmt.expected}"
    if isinstance(stmt, ExpressionExpectingError):
        return f"{stmt.text}{ARROW}{ERROR} {stmt.message}"
    if isinstance(stmt, ExpressionExpectingStackTrace):
        return f"{stmt.text}{ARROW}{STACKTRACE} {encode_trace(stmt.trace)}"
    raise TypeError(f"not a statement: {type(stmt).__name__}")
