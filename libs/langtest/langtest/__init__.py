"""langtest: plain-text language test files and the runner that executes them.

Layering mirrors the dependency order of the subpackages:

- ``diagnostics`` (Layer 0) -- source locations and collected messages
- ``core`` (Layer 1) -- agent kinds, run modes, the run environment
- ``parser`` / ``runtime`` (Layer 2) -- test-file grammar and the runtime contract
- ``runner`` / ``discovery`` / ``config`` (Layer 3) -- execution and wiring
"""

__version__ = "0.3.0"
