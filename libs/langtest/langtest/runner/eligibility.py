"""Which tests run in a given environment, and in which modes."""

from __future__ import annotations

from langtest.core.environment import Environment
from langtest.core.modes import RunMode
from langtest.parser.test_case import TestCase


def dimension_ok(name: str, env: Environment) -> bool:
    if name.endswith("_2D"):
        return not env.is_3d
    if name.endswith("_3D"):
        return env.is_3d
    return True


def generator_ok(name: str, env: Environment) -> bool:
    if name.startswith("Generator"):
        return env.uses_code_generator
    if name.startswith("NoGenerator"):
        return not env.uses_code_generator
    return True


def should_run(test: TestCase, env: Environment) -> bool:
    """True when both the name-suffix and name-prefix rules admit *test*."""
    return dimension_ok(test.name, env) and generator_ok(test.name, env)


def run_modes(test: TestCase) -> tuple[RunMode, ...]:
    """``*``-prefixed tests run in normal mode only; everything else runs twice."""
    if test.runs_once:
        return (RunMode.NORMAL,)
    return (RunMode.NORMAL, RunMode.RUN)
