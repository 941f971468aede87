"""Runner subpackage (Layer 3 -- eligibility, dispatch, results)."""

from langtest.runner.dispatcher import run_in_mode, run_suites, run_test, runtime_scope
from langtest.runner.eligibility import run_modes, should_run
from langtest.runner.results import (
    FailureKind,
    RunOutcome,
    RunReport,
    RunResult,
    StatementFailure,
)

__all__ = [
    "should_run",
    "run_modes",
    "run_in_mode",
    "run_test",
    "run_suites",
    "runtime_scope",
    "RunOutcome",
    "FailureKind",
    "RunResult",
    "StatementFailure",
    "RunReport",
]
