"""Parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from langtest.parser.classifier import classify
from langtest.parser.errors import (
    MissingErrorKeywordError,
    OrphanLineError,
    ParseError,
    UnrecognizedAgentError,
    UnrecognizedLineError,
)
from langtest.parser.splitter import parse_file, parse_files, parse_string, preprocess, split
from langtest.parser.statements import (
    Command,
    CommandExpectingCompileError,
    CommandExpectingError,
    CommandExpectingStackTrace,
    Definition,
    ExpressionExpectingError,
    ExpressionExpectingResult,
    ExpressionExpectingStackTrace,
    OpenModel,
    Statement,
    statement_source,
)
from langtest.parser.test_case import Suite, TestCase

__all__ = [
    "OpenModel",
    "Definition",
    "Command",
    "CommandExpectingError",
    "CommandExpectingCompileError",
    "CommandExpectingStackTrace",
    "ExpressionExpectingResult",
    "ExpressionExpectingError",
    "ExpressionExpectingStackTrace",
    "Statement",
    "statement_source",
    "TestCase",
    "Suite",
    "classify",
    "preprocess",
    "split",
    "parse_string",
    "parse_file",
    "parse_files",
    "ParseError",
    "UnrecognizedLineError",
    "UnrecognizedAgentError",
    "MissingErrorKeywordError",
    "OrphanLineError",
]
