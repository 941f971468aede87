"""Helpers for running language test files as pytest tests.

This module needs pytest, which is not a core dependency; install it with
``pip install langtest[pytest]``.

Typical ``test_language.py``::

    from langtest.core import Environment
    from langtest.discovery import TxtsInDir
    from langtest.pytest_support import collect_params, assert_passes

    ENV = Environment(is_3d=False)

    @pytest.mark.parametrize("test", collect_params(TxtsInDir(DIR), ENV))
    def test_commands(test, runtime_factory):
        assert_passes(test, runtime_factory, ENV)
"""

from __future__ import annotations

import os
from typing import Iterable

import pytest

from langtest.core.environment import Environment
from langtest.parser.splitter import parse_file
from langtest.parser.test_case import TestCase
from langtest.runner.dispatcher import run_test
from langtest.runner.eligibility import should_run
from langtest.runner.results import RunOutcome
from langtest.runtime.protocol import RuntimeFactory


def collect_params(paths: Iterable[str | os.PathLike[str]], env: Environment) -> list:
    """One ``pytest.param`` per test case, with ineligible ones marked skip.

    Parse errors are not caught: a malformed file fails collection.
    """
    params = []
    for path in paths:
        for test in parse_file(path).tests:
            marks = ()
            if not should_run(test, env):
                marks = (pytest.mark.skip(reason=f"not applicable to {env.describe()}"),)
            params.append(pytest.param(test, id=test.full_name, marks=marks))
    return params


def assert_passes(test: TestCase, factory: RuntimeFactory, env: Environment) -> None:
    """Run *test* in all of its modes and fail with every failing mode's report."""
    results = run_test(test, factory, env)
    failed = [r for r in results if r.outcome == RunOutcome.FAILED]
    if failed:
        pytest.fail("\n\n".join(str(r) for r in failed), pytrace=False)
