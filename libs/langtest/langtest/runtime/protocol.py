"""The runtime interface the execution dispatcher drives."""

from __future__ import annotations

from typing import Protocol

from langtest.core.agents import AgentKind
from langtest.core.modes import RunMode


class Runtime(Protocol):
    """One fresh instance per (test case, run mode); never shared between runs.

    Methods signal failure by raising ``CompilerError``, ``ExecutionError`` or
    ``ModelLoadError`` from ``langtest.runtime.errors``.
    """

    def compile(self, source: str) -> None:
        """Compile procedure and extension definitions, replacing earlier ones."""
        ...

    def compile_command(self, text: str, agent: AgentKind) -> None:
        """Compile *text* as a command for *agent* without running it."""
        ...

    def execute(self, text: str, agent: AgentKind) -> None:
        """Compile and run *text* as a command for *agent*."""
        ...

    def evaluate(self, text: str, agent: AgentKind) -> str:
        """Compile and run *text* as an expression; return its canonical rendering."""
        ...

    def open_model(self, path: str) -> None:
        ...

    def dispose(self) -> None:
        """Release everything the instance holds. Safe to call more than once."""
        ...


class RuntimeFactory(Protocol):
    """Builds a runtime for one run of one test case.

    ``owner`` is the test's full name, for runtimes that label their jobs or
    stack traces with it.
    """

    def __call__(self, mode: RunMode, *, owner: str) -> Runtime:
        ...
