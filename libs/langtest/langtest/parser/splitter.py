"""Block splitter and file-level entry points.

A test file is a sequence of blocks::

    # comment
    TurtleSet_2D
      O> crt 1
      [turtle-set self] of turtle 0 = turtles => true

A line without leading whitespace is a header naming a new test case; the
indented lines that follow it are that test's statements.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from langtest.diagnostics.collector import DiagnosticCollector
from langtest.diagnostics.location import SourceLocation
from langtest.parser.classifier import classify
from langtest.parser.errors import OrphanLineError, ParseError
from langtest.parser.statements import TRACE_ESCAPE
from langtest.parser.test_case import Suite, TestCase

# A stack trace spread over several source lines ends each line with a
# backslash and continues on the next, indented by two spaces.
CONTINUATION = "\\\n  "

PER_DIRECTORY_FILE = "tests.txt"


def preprocess(text: str) -> list[str]:
    """Fold continuations and drop comment and blank lines."""
    text = text.replace("\r\n", "\n").replace(CONTINUATION, TRACE_ESCAPE)
    return [
        line
        for line in text.split("\n")
        if line.strip() and not line.strip().startswith("#")
    ]


def _is_body(line: str) -> bool:
    return line[:1].isspace()


def split(suite_name: str, lines: list[str], filename: str | None = None) -> list[TestCase]:
    """Group preprocessed *lines* into test cases.

    Raises:
        ParseError: a body line fails to classify, or appears before any header.
    """
    file = filename or suite_name
    tests: list[TestCase] = []
    pos = 0
    while pos < len(lines):
        header = lines[pos]
        if _is_body(header):
            raise OrphanLineError(header, SourceLocation(file, pos + 1))
        name = header.strip()
        pos += 1

        statements = []
        while pos < len(lines) and _is_body(lines[pos]):
            try:
                statements.append(classify(lines[pos].strip()))
            except ParseError as e:
                raise e.at(SourceLocation(file, pos + 1, name))
            pos += 1

        tests.append(TestCase(suite_name, name, tuple(statements)))
    return tests


def parse_string(suite_name: str, text: str, filename: str | None = None) -> list[TestCase]:
    """Parse the full text of a test file into its test cases."""
    return split(suite_name, preprocess(text), filename)


def suite_name_for(path: Path) -> str:
    """``extensions/array/tests.txt`` is suite ``array``; ``commands/Ask.txt`` is ``Ask``."""
    if path.name == PER_DIRECTORY_FILE:
        return path.parent.name
    return path.name.replace(".txt", "")


def parse_file(path: str | os.PathLike[str]) -> Suite:
    """Read and parse one test file (UTF-8)."""
    path = Path(path)
    name = suite_name_for(path)
    text = path.read_text(encoding="utf-8")
    return Suite(name, tuple(parse_string(name, text, str(path))), str(path))


def parse_files(
    paths: Iterable[str | os.PathLike[str]],
    diagnostics: DiagnosticCollector | None = None,
) -> tuple[list[Suite], DiagnosticCollector]:
    """Parse every file in *paths*, skipping directories.

    A file that fails to parse is reported as an error diagnostic and left out;
    the remaining files are still parsed.

    Returns:
        ``(suites, diagnostics)``
    """
    diag = diagnostics or DiagnosticCollector()
    suites: list[Suite] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            continue
        try:
            suite = parse_file(path)
        except ParseError as e:
            diag.error(e.message, e.location or SourceLocation(str(path), 0))
            continue
        except (OSError, UnicodeDecodeError) as e:
            diag.error(f"cannot read test file: {e}", SourceLocation(str(path), 0))
            continue
        if not suite.tests:
            diag.warning("no tests found", SourceLocation(str(path), 0))
        for test in suite.tests:
            if not test.statements:
                diag.info(f"test {test.name} has no statements", SourceLocation(str(path), 0, test.name))
        suites.append(suite)
    return suites, diag
