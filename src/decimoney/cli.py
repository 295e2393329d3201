"""Command-line front end for the decimal engine.

Usage:
    decimoney add 10.005 0.004
    decimoney --precision 4 divide 1 3
    decimoney --rounding half_even round 2.345
    decimoney sum 1.10 2.20 3.30
    decimoney validate 12.3.4
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from decimoney import __version__
from decimoney.config import LOG_LEVELS, Settings, get_settings
from decimoney.domain.types import RoundingMode
from decimoney.engine import MoneyCalculator
from decimoney.exceptions import ConfigurationError, ErrorHandler, MoneyError
from decimoney.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_MONEY_ERROR = 2

# =============================================================================
# Operations
# =============================================================================
BINARY_OPERATIONS = ("add", "subtract", "multiply", "divide", "modulus", "compare")
UNARY_OPERATIONS = ("round", "validate")
VARIADIC_OPERATIONS = ("sum",)


def _run_operation(calculator: MoneyCalculator, operation: str, operands: list[str]) -> str:
    """Dispatch one operation and render its result as text."""
    if operation in BINARY_OPERATIONS:
        _require_operands(operation, operands, 2)
        method: Callable[[str, str], Any] = getattr(calculator, operation)
        return str(method(operands[0], operands[1]))

    if operation == "round":
        _require_operands(operation, operands, 1)
        return calculator.round(operands[0])

    if operation == "validate":
        _require_operands(operation, operands, 1)
        return "true" if calculator.is_valid_money(operands[0]) else "false"

    return calculator.sum(operands)


def _require_operands(operation: str, operands: list[str], count: int) -> None:
    if len(operands) != count:
        raise ConfigurationError(
            f"{operation} takes {count} operand(s), got {len(operands)}",
            parameter="operands",
            value=len(operands),
        )


# =============================================================================
# Argument parsing
# =============================================================================
def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    settings = settings or get_settings()

    parser = argparse.ArgumentParser(
        prog="decimoney",
        description="Exact fixed-precision decimal arithmetic for monetary values",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--precision",
        "-p",
        type=int,
        default=settings.default_precision,
        help=f"Fractional digits in the result (default: {settings.default_precision})",
    )
    parser.add_argument(
        "--rounding",
        "-r",
        type=str,
        default=settings.rounding.name,
        choices=[mode.name.lower() for mode in RoundingMode] + [mode.name for mode in RoundingMode],
        metavar="MODE",
        help=f"Rounding rule, e.g. half_up, half_even, down (default: {settings.rounding.name})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["json", "text"],
        default=settings.log_format,
        help=f"Log format (default: {settings.log_format})",
    )
    parser.add_argument("--log-file", type=Path, help="Also write JSON logs to this file")
    parser.add_argument(
        "operation",
        choices=BINARY_OPERATIONS + UNARY_OPERATIONS + VARIADIC_OPERATIONS,
        help="Operation to perform",
    )
    # Amounts such as "-2.50" must not be mistaken for options
    parser.add_argument("operands", nargs=argparse.REMAINDER, help="Decimal amounts")
    return parser


def _load_settings() -> Settings:
    """Load settings, reporting invalid DECIMONEY_* values as a ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        parameter = str(error["loc"][0]) if error["loc"] else None
        raise ConfigurationError(
            f"Invalid settings: {error['msg']}",
            parameter=parameter,
            value=error.get("input"),
            cause=e,
        ) from e


def _strip_separator(operands: list[str]) -> list[str]:
    """Drop the "--" that separates options from operands, if present."""
    if operands[:1] == ["--"]:
        return operands[1:]
    return operands


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        settings = _load_settings()
    except ConfigurationError as e:
        # Logging is configured from settings, so there is nothing to log to yet
        print(f"error: {e}", file=sys.stderr)
        return EXIT_MONEY_ERROR

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    operands = _strip_separator(args.operands)

    setup_logging(level=args.log_level, log_format=args.log_format, log_file=args.log_file)

    try:
        if args.precision > settings.max_precision:
            raise ConfigurationError(
                f"precision {args.precision} exceeds max_precision {settings.max_precision}",
                parameter="precision",
                value=args.precision,
            )
        calculator = MoneyCalculator(precision=args.precision, rounding=args.rounding)
        logger.debug(
            "Running %s with %d operand(s) using %r", args.operation, len(operands), calculator
        )
        result = _run_operation(calculator, args.operation, operands)
    except MoneyError as e:
        ErrorHandler.handle_error(e, logger, context={"operation": args.operation})
        print(f"error: {e}", file=sys.stderr)
        return EXIT_MONEY_ERROR

    print(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
