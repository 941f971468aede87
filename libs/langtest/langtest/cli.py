"""``langtest`` command line entry point.

Usage:
    langtest CONFIG.yaml [--only NAME] [--list] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from itertools import chain

from langtest.config.loader import ConfigError, RunConfig, load_config
from langtest.diagnostics import DiagnosticSeverity
from langtest.parser.splitter import parse_files
from langtest.parser.test_case import Suite
from langtest.runner.dispatcher import run_suites
from langtest.runner.eligibility import should_run
from langtest.runner.results import RunOutcome, RunReport


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="langtest", description="Run language test files against a runtime.")
    ap.add_argument("config", help="YAML run configuration")
    ap.add_argument("--only", help="run only the test with this name (or suite::name)")
    ap.add_argument("--list", action="store_true", help="list the parsed tests and exit")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="log progress (-vv for every statement)")
    return ap


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def list_tests(suites: list[Suite], config: RunConfig) -> None:
    for suite in suites:
        for test in suite.tests:
            mark = " " if should_run(test, config.environment) else "-"
            print(f"{mark} {test.full_name}")


def print_summary(report: RunReport) -> None:
    """Print run summary."""
    counts = report.counts()
    print("=" * 70)
    print("RUN SUMMARY")
    print("=" * 70)
    print(f"\nTotal runs: {len(report.results)}")
    for outcome in RunOutcome:
        print(f"  {str(outcome):30s} {counts[outcome]:5d}")
    print()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(f"Environment: {config.environment.describe()}")
    suites, diag = parse_files(chain.from_iterable(config.finders()))
    print(
        f"Parsed {sum(len(s) for s in suites)} tests from {len(suites)} suites "
        f"({diag.count(DiagnosticSeverity.ERROR)} errors, {diag.count(DiagnosticSeverity.WARNING)} warnings)"
    )
    if diag.get_all():
        print(diag.format_all())
    print()

    if args.list:
        list_tests(suites, config)
        return 1 if diag.has_errors() else 0

    try:
        factory = config.factory()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    report = run_suites(suites, factory, config.environment, only=args.only)

    failures = report.failures()
    if failures:
        print("FAILURES:")
        for result in failures:
            print(f"  ✗ {result}")
        print()

    print_summary(report)

    if diag.has_errors() or failures:
        print("Run FAILED.")
        return 1
    print("Run PASSED.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
