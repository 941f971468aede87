"""Tests for test file discovery."""

from __future__ import annotations

import pytest

from langtest.discovery import TestsDotTxt, TxtsInDir, make_finder


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "commands").mkdir()
    for name in ("Ask.txt", "Agentsets.txt", "notes.md"):
        (tmp_path / "commands" / name).write_text("", encoding="utf-8")
    (tmp_path / "commands" / "nested.txt").mkdir()
    for ext in ("array", "table/sub"):
        d = tmp_path / "extensions" / ext
        d.mkdir(parents=True)
        (d / "tests.txt").write_text("", encoding="utf-8")
    (tmp_path / "extensions" / "array" / "other.txt").write_text("", encoding="utf-8")
    return tmp_path


def test_txts_in_dir(tree):
    names = [p.name for p in TxtsInDir(tree / "commands")]
    assert names == ["Agentsets.txt", "Ask.txt"]


def test_tests_dot_txt(tree):
    found = [p.relative_to(tree).as_posix() for p in TestsDotTxt(tree / "extensions")]
    assert found == ["extensions/array/tests.txt", "extensions/table/sub/tests.txt"]


def test_finders_are_reiterable(tree):
    finder = TxtsInDir(tree / "commands")
    assert list(finder) == list(finder)


def test_make_finder(tree):
    assert make_finder("txts_in_dir", tree) == TxtsInDir(tree)
    assert make_finder("tests_dot_txt", tree) == TestsDotTxt(tree)
    with pytest.raises(ValueError):
        make_finder("glob", tree)
