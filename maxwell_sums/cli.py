"""
Command line entry point.

Reads the temperature T (from the command line or a prompt on stdin), runs
the Maxwell distribution test and prints the report.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .distribution import validate_temperature
from .log import setup_logging
from .report import accuracy_table, format_report, run_distribution_test

logger = logging.getLogger(__name__)

PROMPT = "Type in the value of T: "
LOG_LEVEL_ENV = "MAXWELL_SUMS_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maxwell-sums",
        description="Compare summation strategies on the mean of a Maxwell speed distribution",
    )
    parser.add_argument("temperature", nargs="?", type=float, metavar="T",
                        help="distribution temperature (prompted for when omitted)")
    parser.add_argument("--table", action="store_true", default=False,
                        help="also print the per-method error table")
    parser.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
                        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    return parser


def read_temperature(parser: argparse.ArgumentParser) -> float:
    """Prompt for T on stdin."""
    try:
        text = input(PROMPT)
    except EOFError:
        parser.error("no value of T given")
    try:
        return float(text)
    except ValueError:
        parser.error(f"invalid value of T: {text.strip()!r}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    temperature = args.temperature
    if temperature is None:
        temperature = read_temperature(parser)
    try:
        temperature = validate_temperature(temperature)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Maxwell distribution test for T=%g", temperature)
    result = run_distribution_test(temperature)
    sys.stdout.write(format_report(result))

    if args.table:
        print()
        print(accuracy_table(result).to_string(index=False))

    return 0
