"""Run modes every eligible test case is exercised under."""

from __future__ import annotations

from enum import Enum


class RunMode(Enum):
    """How the runtime is asked to run the test.

    What differs between the two is up to the runtime; the runner only
    guarantees both are exercised, each against its own runtime instance.
    """

    NORMAL = "normal"
    RUN = "run"

    def __str__(self) -> str:
        return self.value
