"""Shared locations and environments for the conformance suites."""

from __future__ import annotations

from pathlib import Path

from langtest.core.environment import Environment

DATA_DIR = Path(__file__).resolve().parent / "data"

ENV_2D = Environment(is_3d=False, uses_code_generator=True)
ENV_3D = Environment(is_3d=True, uses_code_generator=False)
