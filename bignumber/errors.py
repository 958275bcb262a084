"""BigNumber error classes.

Every error names the operation that raised it and the offending value.
Whether they are raised at all depends on the ``errors`` configuration
option: with errors disabled, invalid numbers become NaN and invalid
arguments or options are ignored.
"""

from __future__ import annotations

from typing import Any


class BigNumberError(ArithmeticError):
    """Base error for BigNumber operations."""

    def __init__(self, operation: str, detail: str, value: Any) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} {detail}: {value!r}")


class InvalidNumber(BigNumberError, ValueError):
    """String (or other input) cannot be parsed as a number."""

    pass


class InvalidDigits(InvalidNumber):
    """String contains characters outside the digit set of its base."""

    pass


class InvalidBase(BigNumberError, ValueError):
    """Base is not an integer in the range 2 to 64."""

    pass


class PrecisionLoss(BigNumberError, ValueError):
    """Float input has more than 15 significant digits."""

    pass


class OutOfRangeOption(BigNumberError, ValueError):
    """Configuration value or method argument is outside its bound."""

    pass


class NotABooleanOption(BigNumberError, TypeError):
    """Option expected a boolean (or binary digit) but got something else."""

    pass


__all__ = [
    "BigNumberError",
    "InvalidNumber",
    "InvalidDigits",
    "InvalidBase",
    "PrecisionLoss",
    "OutOfRangeOption",
    "NotABooleanOption",
]
