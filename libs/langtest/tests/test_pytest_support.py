"""Tests for the pytest helpers."""

from __future__ import annotations

import pytest

from fakes import RuntimeRecorder
from langtest.core.environment import Environment
from langtest.parser.splitter import parse_string
from langtest.parser.test_case import TestCase
from langtest.pytest_support import assert_passes, collect_params
from langtest.runtime.errors import ExecutionError


def test_collect_params_marks_ineligible_tests(tmp_path):
    path = tmp_path / "Dims.txt"
    path.write_text("Both\n  O> a\nFlat_2D\n  O> a\nDeep_3D\n  O> a\n", encoding="utf-8")
    params = collect_params([path], Environment(is_3d=False))
    assert [p.id for p in params] == ["Dims::Both", "Dims::Flat_2D", "Dims::Deep_3D"]
    skipped = [p.id for p in params if p.marks]
    assert skipped == ["Dims::Deep_3D"]
    assert all(isinstance(p.values[0], TestCase) for p in params)


def test_assert_passes():
    assert_passes(TestCase("s", "Empty"), RuntimeRecorder(), Environment())


def test_assert_passes_reports_every_failing_mode():
    (test,) = parse_string("s", "Foo\n  O> die\n")
    recorder = RuntimeRecorder({"die": ExecutionError("dead")})
    with pytest.raises(pytest.fail.Exception) as exc:
        assert_passes(test, recorder, Environment())
    message = str(exc.value)
    assert "s::Foo [normal] failed" in message
    assert "s::Foo [run] failed" in message
    assert "ERROR dead" in message
