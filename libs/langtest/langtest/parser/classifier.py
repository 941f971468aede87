"""Line classifier: one trimmed body line in, one ``Statement`` out.

Grammar, first match wins:

- ``to ...``, ``to-report ...``, ``extensions ...``  -> ``Definition``
- ``A> command => ERROR|COMPILER ERROR|STACKTRACE payload``
- ``expression => ERROR|STACKTRACE payload`` or ``expression => result``
- ``A> command``
- ``OPEN> path``

``A`` is an agent code (``O``, ``T``, ``P`` or ``L``).
"""

from __future__ import annotations

import re

from langtest.core.agents import AgentKind
from langtest.parser.errors import (
    MissingErrorKeywordError,
    UnrecognizedAgentError,
    UnrecognizedLineError,
)
from langtest.parser.statements import (
    COMPILER_ERROR,
    ERROR,
    STACKTRACE,
    Command,
    CommandExpectingCompileError,
    CommandExpectingError,
    CommandExpectingStackTrace,
    Definition,
    ExpressionExpectingError,
    ExpressionExpectingResult,
    ExpressionExpectingStackTrace,
    OpenModel,
    Statement,
    decode_trace,
)

DEFINITION_PREFIXES: tuple[str, ...] = ("to ", "to-report ", "extensions")

# Any single capital letter is taken as an agent code so that a typo such as
# ``X> crt 1`` is reported as a bad agent rather than as an unrecognized line.
COMMAND_WITH_OUTCOME_RE = re.compile(r"^([A-Z])>\s+(.*)\s+=>\s+(.*)$")
EXPRESSION_RE = re.compile(r"^(.*)\s+=>\s+(.*)$")
COMMAND_RE = re.compile(r"^([A-Z])>\s+(.*)$")
OPEN_MODEL_RE = re.compile(r"^OPEN>\s+(.*)$")


def _payload(outcome: str, keyword: str) -> str:
    # keyword plus the single separating space
    return outcome[len(keyword) + 1 :]


def agent_kind(code: str) -> AgentKind:
    """Decode an agent code, raising ``UnrecognizedAgentError`` for anything else."""
    kind = AgentKind.from_code(code)
    if kind is None:
        raise UnrecognizedAgentError(code)
    return kind


def _classify_command_outcome(agent: AgentKind, command: str, outcome: str) -> Statement:
    if outcome.startswith(ERROR):
        return CommandExpectingError(agent, command, _payload(outcome, ERROR))
    if outcome.startswith(COMPILER_ERROR):
        return CommandExpectingCompileError(agent, command, _payload(outcome, COMPILER_ERROR))
    if outcome.startswith(STACKTRACE):
        return CommandExpectingStackTrace(
            agent, command, decode_trace(_payload(outcome, STACKTRACE))
        )
    raise MissingErrorKeywordError(outcome)


def _classify_expression_outcome(expression: str, outcome: str) -> Statement:
    if outcome.startswith(ERROR):
        return ExpressionExpectingError(expression, _payload(outcome, ERROR))
    if outcome.startswith(STACKTRACE):
        return ExpressionExpectingStackTrace(expression, decode_trace(_payload(outcome, STACKTRACE)))
    return ExpressionExpectingResult(expression, outcome)


def classify(line: str) -> Statement:
    """Classify a single test-file body line.

    Raises:
        UnrecognizedLineError: no grammar rule matches.
        UnrecognizedAgentError: the agent prefix is not O, T, P or L.
        MissingErrorKeywordError: a command outcome lacks its keyword.
    """
    if line.startswith(DEFINITION_PREFIXES):
        return Definition(line)

    text = line.strip()

    m = COMMAND_WITH_OUTCOME_RE.match(text)
    if m:
        code, command, outcome = m.groups()
        return _classify_command_outcome(agent_kind(code), command, outcome)

    m = EXPRESSION_RE.match(text)
    if m:
        expression, outcome = m.groups()
        return _classify_expression_outcome(expression, outcome)

    m = COMMAND_RE.match(text)
    if m:
        code, command = m.groups()
        return Command(agent_kind(code), command)

    m = OPEN_MODEL_RE.match(text)
    if m:
        return OpenModel(m.group(1))

    raise UnrecognizedLineError(line)
