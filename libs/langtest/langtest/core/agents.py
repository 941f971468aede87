"""Agent kinds a command or expression can be scoped to."""

from __future__ import annotations

from enum import Enum


class AgentKind(Enum):
    """The four agent kinds, keyed by their single-letter code in test files."""

    OBSERVER = "O"
    TURTLE = "T"
    PATCH = "P"
    LINK = "L"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> AgentKind | None:
        """Look up an agent kind by its test-file code (``O``, ``T``, ``P``, ``L``)."""
        for member in cls:
            if member.value == code:
                return member
        return None
