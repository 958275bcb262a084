"""Digit-group (limb) representation.

A finite value is a sign, a base-10 exponent and a coefficient of limbs in
base 10^14, most significant first. Limbs are aligned to the decimal point:
limb 0 sits at base-10^14 position ``exponent // LOG_BASE``, so

    value = sign * sum(c[k] * BASE ** (exponent // LOG_BASE - k))

NaN is ``Parts(None, None, None)`` and ±Infinity is ``Parts(±1, None, None)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from bignumber.constants import LOG_BASE

if TYPE_CHECKING:
    from bignumber.config import Config

__all__ = [
    "Parts",
    "NAN",
    "infinity",
    "zero",
    "limb_digits",
    "limb_exponent",
    "coefficient_to_string",
    "digits_to_coefficient",
    "normalize",
    "clamp",
    "compare",
    "fixed_point_string",
    "exponential_string",
]


class Parts(NamedTuple):
    """Sign, exponent and coefficient of a value."""

    sign: int | None
    exponent: int | None
    coefficient: tuple[int, ...] | None

    @property
    def is_nan(self) -> bool:
        return self.sign is None

    @property
    def is_finite(self) -> bool:
        return self.coefficient is not None

    @property
    def is_zero(self) -> bool:
        return self.coefficient is not None and self.coefficient[0] == 0


NAN = Parts(None, None, None)


def infinity(sign: int) -> Parts:
    return Parts(sign, None, None)


def zero(sign: int = 1) -> Parts:
    return Parts(sign, 0, (0,))


def limb_digits(limb: int) -> int:
    """Number of decimal digits in a limb (1 for zero)."""
    return len(str(limb))


def limb_exponent(exponent: int) -> int:
    """Base-10^14 position of the limb holding the digit at ``exponent``."""
    return exponent // LOG_BASE


def coefficient_to_string(coefficient: tuple[int, ...] | list[int]) -> str:
    """Concatenate limbs into a digit string without trailing zeros.

    Example: (12, 34500000000000) -> "12345"
    """
    text = str(coefficient[0]) + "".join(f"{limb:014d}" for limb in coefficient[1:])
    return text.rstrip("0") or "0"


def digits_to_coefficient(digits: str, exponent: int) -> tuple[int, ...]:
    """Regroup a digit string (no leading/trailing zeros) into limbs.

    Args:
        digits: Significant digits, the first being non-zero
        exponent: Base-10 exponent of the first digit

    Returns:
        Limbs aligned so the decimal point falls on a limb boundary
    """
    # Digits in the first limb
    head = (exponent + 1) % LOG_BASE or LOG_BASE
    limbs = []
    if head < len(digits):
        limbs.append(int(digits[:head]))
        position = head
        while position < len(digits):
            limbs.append(int(digits[position : position + LOG_BASE].ljust(LOG_BASE, "0")))
            position += LOG_BASE
    else:
        limbs.append(int(digits.ljust(head, "0")))
    return tuple(limbs)


def clamp(parts: Parts, config: Config) -> Parts:
    """Replace a finite value outside the exponent range by Infinity or Zero."""
    if parts.coefficient is None:
        return parts
    if parts.exponent > config.max_exp:
        return infinity(parts.sign)
    if parts.exponent < config.min_exp:
        return zero(parts.sign)
    return parts


def normalize(sign: int, coefficient: list[int], position: int, config: Config) -> Parts:
    """Build canonical Parts from a working limb list.

    Args:
        sign: 1 or -1
        coefficient: Limbs, the first being non-zero
        position: Base-10^14 position of the first limb
        config: Supplies the exponent range

    Returns:
        Parts with trailing zero limbs removed, or Infinity/Zero when the
        exponent falls outside the configured range
    """
    while len(coefficient) > 1 and coefficient[-1] == 0:
        coefficient.pop()

    exponent = limb_digits(coefficient[0]) + position * LOG_BASE - 1
    return clamp(Parts(sign, exponent, tuple(coefficient)), config)


def compare(x: Parts, y: Parts) -> int | None:
    """Compare two values.

    Returns:
        -1, 0 or 1 as x is less than, equal to or greater than y, or None
        when either is NaN. Zeros of either sign are equal.
    """
    if x.sign is None or y.sign is None:
        return None

    x_zero, y_zero = x.is_zero, y.is_zero
    if x_zero or y_zero:
        if x_zero:
            return 0 if y_zero else -y.sign
        return x.sign

    if x.sign != y.sign:
        return x.sign

    negative = x.sign < 0

    # Either Infinity?
    if x.coefficient is None or y.coefficient is None:
        if x.coefficient is None and y.coefficient is None:
            return 0
        larger = x.coefficient is None
        return 1 if larger != negative else -1

    if x.exponent != y.exponent:
        return 1 if (x.exponent > y.exponent) != negative else -1

    xc, yc = x.coefficient, y.coefficient
    for a, b in zip(xc, yc):
        if a != b:
            return 1 if (a > b) != negative else -1

    if len(xc) == len(yc):
        return 0
    return 1 if (len(xc) > len(yc)) != negative else -1


def fixed_point_string(digits: str, exponent: int) -> str:
    """Place the decimal point in a digit string.

    Example: ("12345", 2) -> "123.45", ("5", -3) -> "0.005"
    """
    if exponent < 0:
        return "0." + "0" * (-exponent - 1) + digits
    length = len(digits)
    if exponent + 1 > length:
        return digits + "0" * (exponent + 1 - length)
    if exponent + 1 < length:
        return digits[: exponent + 1] + "." + digits[exponent + 1 :]
    return digits


def exponential_string(digits: str, exponent: int) -> str:
    """Write a digit string in exponential notation.

    Example: ("12345", 2) -> "1.2345e+2"
    """
    mantissa = digits[0] + "." + digits[1:] if len(digits) > 1 else digits
    return f"{mantissa}e{'+' if exponent >= 0 else ''}{exponent}"
