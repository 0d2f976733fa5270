"""Command-line front end: check a saved ``jstat -gccapacity`` report.

Usage:
    jstat-capacity-check report.txt --collector "PS MarkSweep" --collector "PS Scavenge"
    jstat -gccapacity <pid> | jstat-capacity-check - --all-rows
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from jstatlib.checks.capacity import CapacityChecker
from jstatlib.core.config import CheckerConfig, ConfigError, load_config
from jstatlib.core.variant import StaticStrategyRegistry
from jstatlib.report.capacity import CapacityReport
from jstatlib.report.errors import TableParseError
from jstatlib.report.table import parse_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jstat-capacity-check",
        description="Check the consistency of jstat -gccapacity output.",
    )
    parser.add_argument("report", help="File holding the tool output, or '-' for stdin")
    parser.add_argument(
        "--exit-code",
        type=int,
        default=0,
        help="Exit status of the jstat process that produced the report (default: 0)",
    )
    parser.add_argument(
        "--collector",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of an active garbage collector, e.g. 'PS MarkSweep' (repeatable)",
    )
    parser.add_argument("--config", type=Path, help="YAML checker configuration")
    rows = parser.add_mutually_exclusive_group()
    rows.add_argument("--row", type=int, default=0, help="Data row to check (default: 0)")
    rows.add_argument("--all-rows", action="store_true", help="Check every data row")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first violation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_report(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    with open(name, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    try:
        config = load_config(args.config) if args.config else CheckerConfig()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    if args.fail_fast:
        config = dataclasses.replace(config, fail_fast=True)

    source = "<stdin>" if args.report == "-" else args.report
    try:
        text = _read_report(args.report)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: Cannot read {source}: {e}", file=sys.stderr)
        return EXIT_USAGE

    table, diag = parse_table(text, source)
    if diag.has_errors():
        print(diag.format_all(), file=sys.stderr)
        return EXIT_USAGE

    checker = CapacityChecker.for_registry(StaticStrategyRegistry(args.collector), config)
    indexes = range(len(table)) if args.all_rows else [args.row]
    logger.debug("Checking %d of %d row(s) from %s", len(indexes), len(table), source)

    failed = 0
    for index in indexes:
        try:
            report = CapacityReport.from_table(table, args.exit_code, index)
        except TableParseError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_USAGE
        result = checker.check(report)
        if result.ok:
            print(f"✓ row {index}: consistent ({result.variant} young generation sum)")
            continue
        failed += 1
        print(f"✗ row {index}:")
        for message in result.messages():
            print(f"    {message}")

    if failed:
        print(f"Check FAILED for {failed} of {len(indexes)} row(s).")
        return EXIT_FAILED
    print("Check PASSED.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
