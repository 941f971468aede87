"""Execution dispatcher: runs a parsed test case against a runtime.

Every eligible test case runs in ``RunMode.NORMAL`` and, unless its name
starts with ``*``, again in ``RunMode.RUN``.  Each run gets a fresh runtime
from the factory and disposes it on the way out, however the run ended.

Within a run the statements execute in source order and the first one that
misbehaves ends the run.  Runtime faults never escape: they are turned into
a ``StatementFailure`` so sibling runs and tests carry on.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator

from langtest.core.agents import AgentKind
from langtest.core.environment import Environment
from langtest.core.modes import RunMode
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
    statement_source,
)
from langtest.parser.test_case import Suite, TestCase
from langtest.runner.eligibility import run_modes, should_run
from langtest.runner.results import (
    FailureKind,
    RunOutcome,
    RunReport,
    RunResult,
    StatementFailure,
)
from langtest.runtime.errors import CompilerError, ExecutionError, RuntimeFault
from langtest.runtime.protocol import Runtime, RuntimeFactory

logger = logging.getLogger(__name__)

# Expressions are evaluated in the observer context.
EXPRESSION_AGENT = AgentKind.OBSERVER

NO_ERROR = "no error"


class Mismatch(Exception):
    """Raised inside a run when a statement's outcome differs from the expected one."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


def describe_fault(exc: BaseException) -> str:
    """One-line description of an exception for failure reports."""
    if isinstance(exc, CompilerError):
        return f"{COMPILER_ERROR} {exc.message}"
    if isinstance(exc, RuntimeFault):
        return f"{ERROR} {exc.message}"
    return f"{type(exc).__name__}: {exc}"


@contextmanager
def runtime_scope(factory: RuntimeFactory, mode: RunMode, owner: str) -> Iterator[Runtime]:
    """Create a runtime and dispose of it exactly once when the block exits."""
    runtime = factory(mode, owner=owner)
    try:
        yield runtime
    finally:
        runtime.dispose()


# ---------------------------------------------------------------------------
# Expectation helpers
# ---------------------------------------------------------------------------


def _expect_execution_error(call: Callable[[], object], expected: str, *, trace: bool) -> None:
    keyword = STACKTRACE if trace else ERROR
    try:
        call()
    except ExecutionError as e:
        actual = e.stack_trace if trace else e.message
        if actual != expected:
            raise Mismatch(expected, actual) from None
        return
    raise Mismatch(f"{keyword} {expected}", NO_ERROR)


def _expect_compile_error(runtime: Runtime, stmt: CommandExpectingCompileError) -> None:
    try:
        runtime.compile_command(stmt.text, stmt.agent)
    except CompilerError as e:
        if e.message != stmt.message:
            raise Mismatch(stmt.message, e.message) from None
        return
    raise Mismatch(f"{COMPILER_ERROR} {stmt.message}", "compiled without error")


# ---------------------------------------------------------------------------
# Statement dispatch
# ---------------------------------------------------------------------------


class _Run:
    """State of one (test case, run mode) execution."""

    def __init__(self, test: TestCase, runtime: Runtime) -> None:
        self.test = test
        self.runtime = runtime
        self.definitions: list[str] = [test.definitions] if test.definitions else []

    def define(self, source: str) -> None:
        self.definitions.append(source)
        self.runtime.compile("\n".join(self.definitions))

    def dispatch(self, stmt: Statement) -> None:
        rt = self.runtime
        if isinstance(stmt, OpenModel):
            rt.open_model(stmt.path)
        elif isinstance(stmt, Definition):
            self.define(stmt.source)
        elif isinstance(stmt, Command):
            rt.execute(stmt.text, stmt.agent)
        elif isinstance(stmt, CommandExpectingError):
            _expect_execution_error(
                lambda: rt.execute(stmt.text, stmt.agent), stmt.message, trace=False
            )
        elif isinstance(stmt, CommandExpectingCompileError):
            _expect_compile_error(rt, stmt)
        elif isinstance(stmt, CommandExpectingStackTrace):
            _expect_execution_error(
                lambda: rt.execute(stmt.text, stmt.agent), stmt.trace, trace=True
            )
        elif isinstance(stmt, ExpressionExpectingResult):
            actual = rt.evaluate(stmt.text, EXPRESSION_AGENT)
            if actual != stmt.expected:
                raise Mismatch(stmt.expected, actual)
        elif isinstance(stmt, ExpressionExpectingError):
            _expect_execution_error(
                lambda: rt.evaluate(stmt.text, EXPRESSION_AGENT), stmt.message, trace=False
            )
        elif isinstance(stmt, ExpressionExpectingStackTrace):
            _expect_execution_error(
                lambda: rt.evaluate(stmt.text, EXPRESSION_AGENT), stmt.trace, trace=True
            )
        else:
            raise TypeError(f"not a statement: {type(stmt).__name__}")

    def execute(self) -> StatementFailure | None:
        try:
            self.runtime.compile(self.test.definitions)
        except Exception as e:
            return StatementFailure(
                0, "procedure definitions", FailureKind.UNEXPECTED_ERROR, None, describe_fault(e)
            )

        for index, stmt in enumerate(self.test.executable, start=1):
            logger.debug("%s: statement %d: %s", self.test.full_name, index, stmt)
            try:
                self.dispatch(stmt)
            except Mismatch as m:
                return StatementFailure(
                    index, statement_source(stmt), FailureKind.MISMATCH, m.expected, m.actual
                )
            except Exception as e:
                return StatementFailure(
                    index, statement_source(stmt), FailureKind.UNEXPECTED_ERROR, None, describe_fault(e)
                )
        return None


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run_in_mode(test: TestCase, factory: RuntimeFactory, mode: RunMode) -> RunResult:
    """Run *test* once in *mode* against a fresh runtime."""
    logger.info("running %s [%s]", test.full_name, mode)
    failure = None
    try:
        with runtime_scope(factory, mode, test.full_name) as runtime:
            failure = _Run(test, runtime).execute()
    except Exception as e:
        # the factory or dispose() itself failed; a statement failure takes precedence
        if failure is None:
            failure = StatementFailure(
                0, "runtime setup/teardown", FailureKind.UNEXPECTED_ERROR, None, describe_fault(e)
            )
        else:
            logger.warning("%s [%s]: teardown also failed: %s", test.full_name, mode, describe_fault(e))

    if failure is None:
        return RunResult(test.full_name, mode, RunOutcome.PASSED)
    logger.warning("%s [%s] failed: %s", test.full_name, mode, failure)
    return RunResult(test.full_name, mode, RunOutcome.FAILED, failure)


def run_test(test: TestCase, factory: RuntimeFactory, env: Environment) -> list[RunResult]:
    """Run *test* in every applicable mode, or report it skipped.

    The modes are independent: a failure in normal mode does not stop the
    run-mode attempt.
    """
    modes = run_modes(test)
    if not should_run(test, env):
        logger.info("skipping %s (not applicable to %s)", test.full_name, env.describe())
        return [RunResult(test.full_name, mode, RunOutcome.SKIPPED) for mode in modes]
    return [run_in_mode(test, factory, mode) for mode in modes]


def run_suites(
    suites: Iterable[Suite],
    factory: RuntimeFactory,
    env: Environment,
    *,
    only: str | None = None,
) -> RunReport:
    """Run every test of *suites* in order.

    ``only`` restricts the session to tests whose name or full name equals it.
    """
    report = RunReport()
    for suite in suites:
        for test in suite.tests:
            if only is not None and only not in (test.name, test.full_name):
                continue
            report.extend(run_test(test, factory, env))
    return report
