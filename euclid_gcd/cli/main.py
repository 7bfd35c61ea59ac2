"""CLI entry point for euclid-gcd.

Reads two integers and prints their greatest common divisor.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from euclid_gcd import __version__
from euclid_gcd.core.calculator import GcdCalculator
from euclid_gcd.core.config import GcdConfig
from euclid_gcd.core.parser import parse_int
from euclid_gcd.core.types import DegenerateInputError, GcdResult, InputParseError
from euclid_gcd.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="euclid-gcd",
        description="Print the greatest common divisor of two integers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read both integers from standard input
  echo "12 18" | euclid-gcd

  # Pass them as arguments instead (arguments win over stdin)
  euclid-gcd 100 75

  # Show each iteration of the algorithm on stderr
  euclid-gcd 100 75 --steps

Environment Variables:
  EUCLID_GCD_LOG_LEVEL: Log level (default: WARNING)
  EUCLID_GCD_ALLOW_ZERO_PAIR: Return 0 for "0 0" instead of failing (default: true)
        """,
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="N",
        help="Two integers; read from standard input when omitted",
    )

    parser.add_argument(
        "--steps", "-s",
        action="store_true",
        help="Print the Euclidean iterations to standard error",
    )

    parser.add_argument(
        "--log-level", "-l",
        type=str,
        default=None,
        help="Log level, overrides EUCLID_GCD_LOG_LEVEL",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def render_steps(result: GcdResult, console: Console) -> None:
    """Render the iterations of a computation as a table."""
    table = Table(title=f"gcd({result.a}, {result.b})")
    table.add_column("#", justify="right")
    table.add_column("a", justify="right")
    table.add_column("b", justify="right")
    table.add_column("a rem b", justify="right")

    for index, step in enumerate(result.steps, start=1):
        table.add_row(str(index), str(step.a), str(step.b), str(step.remainder))

    console.print(table)
    console.print(f"Result: {result.result} ({result.iterations} iteration(s))")


def _load_config(args: argparse.Namespace) -> GcdConfig:
    """Load config from the environment, applying CLI overrides."""
    config = GcdConfig.from_env()
    if args.log_level:
        config = GcdConfig(
            log_level=args.log_level,
            allow_zero_pair=config.allow_zero_pair,
        )
    return config


def main(
    argv: list[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Main entry point for the CLI."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)

    if len(args.numbers) not in (0, 2):
        parser.error("expected two integers or none (read from standard input)")

    try:
        config = _load_config(args)
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=stderr)
        return 1

    setup_logging(config.log_level, quiet=args.quiet, stream=stderr)
    calculator = GcdCalculator(config)

    try:
        if args.numbers:
            logger.debug("Reading integers from arguments")
            a, b = (parse_int(token) for token in args.numbers)
            result = calculator.compute(a, b)
        else:
            logger.debug("Reading integers from standard input")
            result = calculator.compute_text(stdin.read())
    except (InputParseError, DegenerateInputError) as e:
        print(f"error: {e}", file=stderr)
        return 1

    print(result, file=stdout)

    if args.steps:
        render_steps(result, Console(file=stderr))

    return 0


if __name__ == "__main__":
    sys.exit(main())
