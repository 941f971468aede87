"""Result types for test-case runs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from langtest.core.modes import RunMode


class RunOutcome(Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"

    def __str__(self) -> str:
        return self.value


class FailureKind(Enum):
    """Why a run stopped."""

    MISMATCH = "mismatch"  # outcome differed from the expectation
    UNEXPECTED_ERROR = "unexpected error"  # runtime fault where none was expected

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StatementFailure:
    """The first statement of a run that did not behave as written.

    ``index`` is 1-based over the executable statements; 0 means the failure
    happened before the first statement (runtime setup or definitions).
    """

    index: int
    source: str
    kind: FailureKind
    expected: str | None
    actual: str

    def __str__(self) -> str:
        where = f"statement {self.index}: {self.source}" if self.index else self.source
        lines = [f"{self.kind} at {where}"]
        if self.expected is not None:
            lines.append(f"  expected: {self.expected}")
        lines.append(f"  actual:   {self.actual}")
        return "\n".join(lines)


@dataclass(frozen=True)
class RunResult:
    """Result of one test case in one run mode."""

    test_name: str  # suite::test
    mode: RunMode
    outcome: RunOutcome
    failure: StatementFailure | None = None

    @property
    def passed(self) -> bool:
        return self.outcome == RunOutcome.PASSED

    def __str__(self) -> str:
        text = f"{self.test_name} [{self.mode}] {self.outcome}"
        if self.failure is not None:
            text += f"\n{self.failure}"
        return text


@dataclass
class RunReport:
    """All run results of a session, in execution order."""

    results: list[RunResult] = field(default_factory=list)

    def extend(self, results: list[RunResult]) -> None:
        self.results.extend(results)

    def counts(self) -> Counter[RunOutcome]:
        return Counter(r.outcome for r in self.results)

    def failures(self) -> list[RunResult]:
        return [r for r in self.results if r.outcome == RunOutcome.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failures()
