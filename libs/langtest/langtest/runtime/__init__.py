"""Runtime contract subpackage (Layer 2 -- depends on core)."""

from langtest.runtime.errors import CompilerError, ExecutionError, ModelLoadError, RuntimeFault
from langtest.runtime.protocol import Runtime, RuntimeFactory

__all__ = [
    "Runtime",
    "RuntimeFactory",
    "RuntimeFault",
    "ExecutionError",
    "CompilerError",
    "ModelLoadError",
]
