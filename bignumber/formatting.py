"""String output for ``Parts`` values.

Each function takes already validated arguments; argument checking lives
with the ``BigNumber`` methods that call them.
"""

from __future__ import annotations

import re

from bignumber.config import Config
from bignumber.constants import MAX, RoundingMode
from bignumber.math.arithmetic import absolute, add, multiply, subtract
from bignumber.math.base_conversion import convert_base
from bignumber.math.division import divide
from bignumber.math.limbs import (
    Parts,
    coefficient_to_string,
    compare,
    digits_to_coefficient,
    exponential_string,
    fixed_point_string,
    zero,
)
from bignumber.math.rounding import round_parts

__all__ = [
    "to_string",
    "value_of",
    "to_fixed",
    "to_exponential",
    "to_precision",
    "to_format",
    "group_digits",
    "to_fraction",
]

_ONE = Parts(1, 0, (1,))


def _special(x: Parts) -> str:
    if x.sign is None:
        return "NaN"
    return "-Infinity" if x.sign < 0 else "Infinity"


def _signed(x: Parts, text: str) -> str:
    """Prefix a minus sign for negative non-zero values."""
    return "-" + text if x.sign < 0 and not x.is_zero else text


def _pad_fraction(text: str, places: int) -> str:
    """Extend the fraction of a fixed-point string with zeros to ``places`` digits."""
    if places <= 0:
        return text
    integer, _, fraction = text.partition(".")
    return f"{integer}.{fraction.ljust(places, '0')}"


def _notation(x: Parts, config: Config) -> str:
    digits = coefficient_to_string(x.coefficient)
    if x.exponent <= config.exp_neg or x.exponent >= config.exp_pos:
        return exponential_string(digits, x.exponent)
    return fixed_point_string(digits, x.exponent)


# =============================================================================
# Plain notations
# =============================================================================


def to_string(x: Parts, config: Config, radix: int | None = None) -> str:
    """Exponential beyond the exponential_at bounds, fixed-point otherwise.

    With a radix the value is converted to that base, the fraction rounded to
    decimal_places digits of the radix.
    """
    if x.coefficient is None:
        return _special(x)

    if radix is None:
        text = _notation(x, config)
    else:
        digits = coefficient_to_string(x.coefficient)
        text = convert_base(fixed_point_string(digits, x.exponent), radix, 10, x.sign, config)
        if text == "0":
            return text

    return _signed(x, text)


def value_of(x: Parts, config: Config) -> str:
    """Like to_string() but keeps the sign of negative zero."""
    if x.coefficient is None:
        return _special(x)
    text = _notation(x, config)
    return "-" + text if x.sign < 0 else text


def to_fixed(x: Parts, dp: int | None, mode: int, config: Config) -> str:
    """Fixed-point notation with exactly dp fraction digits (all digits when None)."""
    if x.coefficient is None:
        return _special(x)

    if dp is None:
        text = fixed_point_string(coefficient_to_string(x.coefficient), x.exponent)
        return _signed(x, text)

    rounded = round_parts(x, dp + x.exponent + 1, mode, config)
    if rounded.coefficient is None:
        return _special(rounded)
    text = fixed_point_string(coefficient_to_string(rounded.coefficient), rounded.exponent)
    return _signed(x, _pad_fraction(text, dp))


def to_exponential(x: Parts, dp: int | None, mode: int, config: Config) -> str:
    """Exponential notation with dp digits after the point (all digits when None)."""
    if x.coefficient is None:
        return _special(x)

    if dp is None:
        text = exponential_string(coefficient_to_string(x.coefficient), x.exponent)
        return _signed(x, text)

    rounded = round_parts(x, dp + 1, mode, config)
    if rounded.coefficient is None:
        return _special(rounded)
    digits = coefficient_to_string(rounded.coefficient).ljust(dp + 1, "0")
    return _signed(x, exponential_string(digits, rounded.exponent))


def to_precision(x: Parts, sd: int | None, mode: int, config: Config) -> str:
    """sd significant digits, exponential when the integer part needs more."""
    if x.coefficient is None or sd is None:
        return to_string(x, config)

    rounded = round_parts(x, sd, mode, config)
    if rounded.coefficient is None:
        return _special(rounded)

    digits = coefficient_to_string(rounded.coefficient)
    exponent = rounded.exponent
    if sd <= exponent or exponent <= config.exp_neg:
        text = exponential_string(digits.ljust(sd, "0"), exponent)
    else:
        text = _pad_fraction(fixed_point_string(digits, exponent), sd - exponent - 1)
    return _signed(x, text)


# =============================================================================
# Grouped output
# =============================================================================


def group_digits(text: str, config: Config) -> str:
    """Insert the configured separators into a fixed-point string.

    Example (defaults): "-1234567.891" -> "-1,234,567.891"
    """
    spec = config.format
    negative = text.startswith("-")
    integer, point, fraction = (text[1:] if negative else text).partition(".")

    primary, secondary = spec.group_size, spec.secondary_group_size
    length = len(integer)
    if secondary:
        primary, secondary = secondary, primary
        length -= secondary

    if primary > 0 and length > 0:
        i = length % primary or primary
        grouped = integer[:i]
        while i < length:
            grouped += spec.group_separator + integer[i : i + primary]
            i += primary
        if secondary > 0:
            grouped += spec.group_separator + integer[i:]
        integer = grouped

    result = ("-" if negative else "") + integer
    if point:
        size = spec.fraction_group_size
        if size:
            fraction = re.sub(
                rf"[0-9]{{{size}}}\B",
                lambda match: match.group(0) + spec.fraction_group_separator,
                fraction,
            )
        result += spec.decimal_separator + fraction
    return result


def to_format(x: Parts, dp: int | None, mode: int, config: Config) -> str:
    """to_fixed() output with separators from the format configuration."""
    text = to_fixed(x, dp, mode, config)
    if x.coefficient is None:
        return text
    return group_digits(text, config)


# =============================================================================
# Fractions
# =============================================================================


def to_fraction(x: Parts, max_denominator: Parts | None, config: Config) -> tuple[Parts, Parts]:
    """Closest fraction to finite x with denominator at most max_denominator.

    Runs the continued-fraction expansion of digits / 10^k, then checks the
    best semiconvergent against the last convergent. Intermediate values may
    exceed max_exp, up to the MAX exponent.

    Returns:
        Tuple of (numerator, denominator), the numerator carrying x's sign
    """
    unbounded = config.updated(range=(config.min_exp, MAX))
    mode = config.rounding_mode

    digits = coefficient_to_string(x.coefficient)
    places = len(digits) - x.exponent - 1

    d = Parts(1, places, digits_to_coefficient("1", places))
    n = Parts(1, len(digits) - 1, digits_to_coefficient(digits, len(digits) - 1))

    if max_denominator is None or compare(max_denominator, d) == 1:
        limit = d if places > 0 else _ONE
    else:
        limit = max_denominator

    n0, d1 = zero(), zero()
    n1, d0 = _ONE, _ONE

    while not d.is_zero:
        q = divide(n, d, 0, RoundingMode.DOWN, unbounded)
        d2 = add(d0, multiply(q, d1, unbounded), unbounded)
        if compare(d2, limit) == 1:
            break
        d0, d1 = d1, d2
        n0, n1 = n1, add(n0, multiply(q, n1, unbounded), unbounded)
        d, n = subtract(n, multiply(q, d, unbounded), unbounded), d

    # Best semiconvergent
    step = divide(subtract(limit, d0, unbounded), d1, 0, RoundingMode.DOWN, unbounded)
    n0 = add(n0, multiply(step, n1, unbounded), unbounded)
    d0 = add(d0, multiply(step, d1, unbounded), unbounded)

    n0 = Parts(x.sign, n0.exponent, n0.coefficient)
    n1 = Parts(x.sign, n1.exponent, n1.coefficient)

    # Compare the two candidates at twice the input's decimal places
    places = max(places, 0) * 2
    error1 = absolute(subtract(divide(n1, d1, places, mode, unbounded), x, unbounded))
    error0 = absolute(subtract(divide(n0, d0, places, mode, unbounded), x, unbounded))
    if compare(error1, error0) < 1:
        return n1, d1
    return n0, d0
