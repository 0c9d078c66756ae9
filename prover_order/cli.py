"""
CLI entry point for prover_order.

Usage:
    python -m prover_order <path> [<path> ...] [--format text|csv|json|markdown]
                           [--output FILE] [--exclude PROVER] [--verbose]

Paths may be report files or directories (searched recursively). The CLI
parses arguments, configures logging and prints or writes the rendered
report. All analysis lives in pipeline.py.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from prover_order.config import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_REPORT_EXTENSION,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    OUTPUT_FORMATS,
    env_excluded_provers,
    env_log_level,
)
from prover_order.loader import ReportFormatError
from prover_order.pipeline import run_analysis
from prover_order.report import render, write_report


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="prover_order",
        description=(
            "Rank provers per source file from verification report timings, "
            "to decide which prover to try first."
        ),
    )
    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Report files or directories containing them.",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format. Default: {DEFAULT_OUTPUT_FORMAT}",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    parser.add_argument(
        "--extension",
        type=str,
        default=DEFAULT_REPORT_EXTENSION,
        help=f"Report file extension. Default: {DEFAULT_REPORT_EXTENSION}",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PROVER",
        help="Leave a prover out of the ranking (repeatable). "
             "Trivial is always left out.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level="DEBUG" if args.verbose else env_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    exclude = [*env_excluded_provers(), *args.exclude]

    try:
        run = run_analysis(args.paths, extension=args.extension, exclude=exclude)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ReportFormatError as e:
        print(f"Invalid report: {e}", file=sys.stderr)
        sys.exit(1)

    if not run.report_paths:
        print(f"Error: no {args.extension} files found", file=sys.stderr)
        sys.exit(1)

    content = render(run, args.format)
    if args.output is not None:
        path = write_report(content, args.output)
        print(f"Report: {path}")
    else:
        sys.stdout.write(content)
