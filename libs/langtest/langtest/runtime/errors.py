"""Exceptions a runtime raises back into the runner."""

from __future__ import annotations


class RuntimeFault(Exception):
    """Base class for failures reported by the runtime under test."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ExecutionError(RuntimeFault):
    """A command or expression failed while running."""

    def __init__(self, message: str, stack_trace: str | None = None) -> None:
        super().__init__(message)
        # Runtimes without frame information report the bare message.
        self.stack_trace = stack_trace if stack_trace is not None else message


class CompilerError(RuntimeFault):
    """Source was rejected before it could run."""


class ModelLoadError(RuntimeFault):
    """A model named by ``OPEN>`` could not be opened."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
