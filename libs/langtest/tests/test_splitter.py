"""Tests for preprocessing, block splitting and file parsing."""

from __future__ import annotations

import textwrap

import pytest

from langtest.core.agents import AgentKind
from langtest.diagnostics import DiagnosticSeverity
from langtest.parser.errors import OrphanLineError, UnrecognizedLineError
from langtest.parser.splitter import (
    parse_file,
    parse_files,
    parse_string,
    preprocess,
    split,
    suite_name_for,
)
from langtest.parser.statements import (
    Command,
    CommandExpectingStackTrace,
    ExpressionExpectingResult,
)
from langtest.parser.test_case import TestCase

O = AgentKind.OBSERVER


def src(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


# ---------------------------------------------------------------------------
# Preprocessing
# ---------------------------------------------------------------------------


class TestPreprocess:
    def test_strips_comments_and_blank_lines(self) -> None:
        text = "# header comment\n\nFoo\n  # indented comment\n   \n  O> crt 1\n"
        assert preprocess(text) == ["Foo", "  O> crt 1"]

    def test_folds_continuations(self) -> None:
        text = "Foo\n  O> x => STACKTRACE a\\\n  b\\\n    c\n"
        assert preprocess(text) == ["Foo", "  O> x => STACKTRACE a\\nb\\n  c"]

    def test_handles_crlf(self) -> None:
        assert preprocess("Foo\r\n  O> crt 1\r\n") == ["Foo", "  O> crt 1"]

    def test_idempotent(self) -> None:
        text = "# c\nFoo\n\n  O> crt 1\n  # c2\nBar\n  1 => 1\n"
        once = preprocess(text)
        assert preprocess("\n".join(once)) == once

    def test_empty(self) -> None:
        assert preprocess("") == []
        assert preprocess("# only\n\n# comments\n") == []


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSplit:
    def test_simple_test(self) -> None:
        code = """
TurtleSet_2D
  O> crt 1
  [turtle-set self] of turtle 0 = turtles => true
"""
        tests = parse_string("test", code)
        assert tests == [
            TestCase(
                "test",
                "TurtleSet_2D",
                (
                    Command(O, "crt 1"),
                    ExpressionExpectingResult("[turtle-set self] of turtle 0 = turtles", "true"),
                ),
            )
        ]

    def test_several_tests_keep_order(self) -> None:
        tests = split("s", ["A", "  O> a", "B", "  O> b1", "  O> b2", "C", "  O> c"])
        assert [t.name for t in tests] == ["A", "B", "C"]
        assert [len(t.statements) for t in tests] == [1, 2, 1]

    def test_header_without_statements(self) -> None:
        tests = split("s", ["Empty", "Next", "  O> crt 1"])
        assert tests[0] == TestCase("s", "Empty", ())
        assert tests[1].statements == (Command(O, "crt 1"),)

    def test_header_is_trimmed(self) -> None:
        (test,) = split("s", ["Foo   "])
        assert test.name == "Foo"

    def test_tab_indented_lines_are_body_lines(self) -> None:
        (test,) = split("s", ["Foo", "\tO> crt 1"])
        assert test.statements == (Command(O, "crt 1"),)

    def test_no_lines(self) -> None:
        assert split("s", []) == []

    def test_orphan_body_line(self) -> None:
        with pytest.raises(OrphanLineError) as exc:
            split("s", ["  O> crt 1", "Foo"])
        assert exc.value.location.line == 1

    def test_bad_line_reports_location(self) -> None:
        with pytest.raises(UnrecognizedLineError) as exc:
            parse_string("s", "Foo\n  O> crt 1\n  nonsense here\n", "s.txt")
        loc = exc.value.location
        assert (loc.file, loc.line, loc.test_name) == ("s.txt", 3, "Foo")
        assert "s.txt:3 [Foo]" in str(exc.value)

    def test_multi_line_stack_trace(self) -> None:
        text = src(
            """
            Trace
              O> foo => STACKTRACE boom\\
              error while observer running FOO\\
                called by procedure BAR
            """
        )
        (test,) = parse_string("s", text)
        assert test.statements == (
            CommandExpectingStackTrace(
                O, "foo", "boom\nerror while observer running FOO\n  called by procedure BAR"
            ),
        )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_suite_names(self, tmp_path) -> None:
        assert suite_name_for(tmp_path / "commands" / "Ask.txt") == "Ask"
        assert suite_name_for(tmp_path / "extensions" / "array" / "tests.txt") == "array"

    def test_parse_file(self, tmp_path) -> None:
        path = tmp_path / "Ask.txt"
        path.write_text("Foo\n  O> crt 1\nBar\n  1 => 1\n", encoding="utf-8")
        suite = parse_file(path)
        assert suite.name == "Ask"
        assert suite.source == str(path)
        assert [t.full_name for t in suite] == ["Ask::Foo", "Ask::Bar"]

    def test_parse_files_skips_bad_files_and_directories(self, tmp_path) -> None:
        good = tmp_path / "Good.txt"
        good.write_text("Foo\n  O> crt 1\nEmpty\n", encoding="utf-8")
        bad = tmp_path / "Bad.txt"
        bad.write_text("Foo\n  what is this\n", encoding="utf-8")
        subdir = tmp_path / "sub"
        subdir.mkdir()

        suites, diag = parse_files([bad, subdir, good])

        assert [s.name for s in suites] == ["Good"]
        assert diag.has_errors()
        errors = [d for d in diag.get_all() if d.severity == DiagnosticSeverity.ERROR]
        assert len(errors) == 1
        assert errors[0].location.file == str(bad)
        assert "unrecognized line" in errors[0].message
        infos = [d for d in diag.get_all() if d.severity == DiagnosticSeverity.INFO]
        assert [d.location.test_name for d in infos] == ["Empty"]

    def test_parse_files_warns_on_file_without_tests(self, tmp_path) -> None:
        path = tmp_path / "Blank.txt"
        path.write_text("# only a comment\n", encoding="utf-8")
        suites, diag = parse_files([path])
        assert [len(s) for s in suites] == [0]
        assert not diag.has_errors()
        assert diag.count(DiagnosticSeverity.WARNING) == 1
        (warning,) = diag.get_all()
        assert (warning.message, warning.location.file) == ("no tests found", str(path))

    def test_parse_files_reports_missing_file(self, tmp_path) -> None:
        suites, diag = parse_files([tmp_path / "Missing.txt"])
        assert suites == []
        assert diag.has_errors()
        assert "cannot read" in diag.format_all()
