"""The run environment that decides which tests are eligible."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Environment:
    """Flags of the runtime build the tests are executed against."""

    is_3d: bool = False
    uses_code_generator: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Environment:
        """Build an environment from a config mapping; missing keys keep their defaults."""
        if not data:
            return cls()
        return cls(
            is_3d=bool(data.get("is_3d", False)),
            uses_code_generator=bool(data.get("uses_code_generator", True)),
        )

    def describe(self) -> str:
        dims = "3D" if self.is_3d else "2D"
        gen = "generator" if self.uses_code_generator else "no generator"
        return f"{dims}, {gen}"
