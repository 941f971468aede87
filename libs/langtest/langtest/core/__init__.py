"""Core subpackage (Layer 1 -- depends only on diagnostics)."""

from langtest.core.agents import AgentKind
from langtest.core.environment import Environment
from langtest.core.modes import RunMode

__all__ = ["AgentKind", "RunMode", "Environment"]
