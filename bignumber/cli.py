"""Command-line front end for BigNumber.

Usage:
    # Arithmetic
    bignumber calc 123.456 add 0.544
    bignumber --decimal-places 10 calc 1 div 3
    bignumber calc 2 sqrt

    # Base conversion
    bignumber convert ff --from-base 16 --to-base 2

    # Formatting
    bignumber format 1234567.891 --notation grouped --digits 2
    bignumber format 0.75 --notation fraction
"""

import argparse
import logging
import sys

import structlog

from bignumber.config import configure
from bignumber.errors import BigNumberError
from bignumber.number import BigNumber

logger = structlog.get_logger()

BINARY_OPERATIONS = {
    "add": BigNumber.add,
    "sub": BigNumber.sub,
    "mul": BigNumber.mul,
    "div": BigNumber.div,
    "mod": BigNumber.mod,
}

UNARY_OPERATIONS = {
    "sqrt": BigNumber.sqrt,
    "neg": BigNumber.neg,
    "abs": BigNumber.abs,
    "ceil": BigNumber.ceil,
    "floor": BigNumber.floor,
    "trunc": BigNumber.trunc,
}

NOTATIONS = ["string", "fixed", "exponential", "precision", "grouped", "fraction"]


def run_calc(args: argparse.Namespace) -> str:
    left = BigNumber(args.left, args.base)

    if args.operation in UNARY_OPERATIONS:
        if args.right is not None:
            raise ValueError(f"{args.operation} takes a single operand")
        return str(UNARY_OPERATIONS[args.operation](left))

    if args.right is None:
        raise ValueError(f"{args.operation} needs a second operand")

    if args.operation == "pow":
        return str(left.pow(int(args.right)))
    if args.operation == "cmp":
        result = left.compare(args.right, args.base)
        return "NaN" if result is None else str(result)
    return str(BINARY_OPERATIONS[args.operation](left, args.right, args.base))


def run_convert(args: argparse.Namespace) -> str:
    value = BigNumber(args.value, args.from_base)
    return value.to_string(args.to_base)


def run_format(args: argparse.Namespace) -> str:
    value = BigNumber(args.value)
    digits = args.digits

    if args.notation == "fixed":
        return value.to_fixed(digits)
    if args.notation == "exponential":
        return value.to_exponential(digits)
    if args.notation == "precision":
        return value.to_precision(digits)
    if args.notation == "grouped":
        return value.to_format(digits)
    if args.notation == "fraction":
        numerator, denominator = value.to_fraction(digits)
        return f"{numerator}/{denominator}"
    return value.to_string()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignumber",
        description="Arbitrary-precision decimal arithmetic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bignumber calc 123.456 add 0.544
  bignumber --decimal-places 10 calc 1 div 3
  bignumber convert ff --from-base 16 --to-base 2
  bignumber format 1234567.891 --notation grouped --digits 2
        """,
    )

    parser.add_argument(
        "--decimal-places",
        type=int,
        default=None,
        help="Decimal places of division, sqrt and base conversion results (default: 20)",
    )
    parser.add_argument(
        "--rounding-mode",
        type=int,
        default=None,
        help="Rounding mode 0-8 (default: 4, HALF_UP)",
    )
    parser.add_argument(
        "--modulo-mode",
        type=int,
        default=None,
        help="Rounding mode of the quotient in mod, 9 for Euclidean (default: 1)",
    )
    parser.add_argument(
        "--no-errors",
        action="store_true",
        help="Produce NaN for invalid numbers instead of failing",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    calc = subparsers.add_parser("calc", help="Apply an operation to one or two operands")
    calc.add_argument("left", help="First operand")
    calc.add_argument(
        "operation",
        choices=[*BINARY_OPERATIONS, "pow", "cmp", *UNARY_OPERATIONS],
        help="Operation",
    )
    calc.add_argument("right", nargs="?", default=None, help="Second operand")
    calc.add_argument("--base", type=int, default=None, help="Base of the operands (default: 10)")
    calc.set_defaults(handler=run_calc)

    convert = subparsers.add_parser("convert", help="Convert a value between bases 2-64")
    convert.add_argument("value", help="Value to convert")
    convert.add_argument("--from-base", type=int, default=None, help="Base of the input (default: 10)")
    convert.add_argument("--to-base", type=int, default=None, help="Base of the output (default: 10)")
    convert.set_defaults(handler=run_convert)

    fmt = subparsers.add_parser("format", help="Format a value")
    fmt.add_argument("value", help="Value to format")
    fmt.add_argument("--notation", choices=NOTATIONS, default="string", help="Output notation (default: string)")
    fmt.add_argument(
        "--digits",
        type=int,
        default=None,
        help="Decimal places, significant digits (precision) or maximum denominator (fraction)",
    )
    fmt.set_defaults(handler=run_format)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, args.log_level)),
    )

    options = {
        "decimal_places": args.decimal_places,
        "rounding_mode": args.rounding_mode,
        "modulo_mode": args.modulo_mode,
    }
    options = {name: value for name, value in options.items() if value is not None}
    if args.no_errors:
        options["errors"] = False

    try:
        if options:
            configure(**options)
        output = args.handler(args)
    except (BigNumberError, ValueError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
