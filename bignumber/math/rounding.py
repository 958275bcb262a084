"""Rounding to a number of significant digits.

All nine rounding modes are resolved here from three facts about the
discarded digits: the first discarded digit, whether anything non-zero
follows it, and (for HALF_EVEN) the parity of the last kept digit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignumber.constants import BASE, LOG_BASE, RoundingMode
from bignumber.math.limbs import Parts, clamp, digits_to_coefficient, limb_digits

if TYPE_CHECKING:
    from bignumber.config import Config

__all__ = ["round_parts", "rounds_up"]


def rounds_up(digit: int, more: bool, odd: bool, negative: bool, mode: int, half: float = 5) -> bool:
    """Decide whether discarding digits should increment the kept part.

    Args:
        digit: First discarded digit
        more: Whether any non-zero digit follows the discarded one
        odd: Whether the last kept digit is odd
        negative: Sign of the value being rounded
        mode: Rounding mode 0 to 8
        half: Midpoint digit of the base (5 for decimal)
    """
    if mode < RoundingMode.HALF_UP:
        away = RoundingMode.FLOOR if negative else RoundingMode.CEIL
        return bool(digit or more) and (mode == RoundingMode.UP or mode == away)

    if digit > half:
        return True
    if digit != half:
        return False
    return (
        mode == RoundingMode.HALF_UP
        or more
        or (mode == RoundingMode.HALF_EVEN and odd)
        or mode == (RoundingMode.HALF_FLOOR if negative else RoundingMode.HALF_CEIL)
    )


def round_parts(x: Parts, sd: int, mode: int, config: Config, more: bool = False) -> Parts:
    """Round x to sd significant digits.

    Args:
        x: Value to round; NaN and Infinity are returned unchanged
        sd: Significant digits to keep; zero or negative rounds to zero or
            to the smallest unit above it
        mode: Rounding mode 0 to 8
        config: Supplies the exponent range
        more: Whether digits beyond the coefficient were already discarded
            (inexact input, e.g. a truncated quotient)

    Returns:
        Rounded Parts, replaced by Infinity or Zero if the exponent leaves
        the configured range
    """
    if x.coefficient is None:
        return x

    sign, exponent = x.sign, x.exponent
    xc = list(x.coefficient)
    negative = sign < 0

    # Locate the rounding digit: limb index ni, digit j counted from the
    # limb's most significant end
    first_digits = limb_digits(xc[0])
    i = sd - first_digits

    if i < 0:
        i += LOG_BASE
        j = sd
        ni = 0
        n = xc[0]
        d = first_digits
        digit = (n // 10 ** (d - j - 1)) % 10 if j >= 0 else 0
    else:
        ni = -(-(i + 1) // LOG_BASE)
        if ni >= len(xc):
            if not more:
                return _finish(sign, exponent, xc, config)
            xc.extend([0] * (ni + 1 - len(xc)))
            n = digit = 0
            d = 1
            i %= LOG_BASE
            j = i - LOG_BASE + 1
        else:
            n = xc[ni]
            d = limb_digits(n)
            i %= LOG_BASE
            j = i - LOG_BASE + d
            digit = 0 if j < 0 else (n // 10 ** (d - j - 1)) % 10

    rest = n if j < 0 else n % 10 ** (d - j - 1)
    more = more or sd < 0 or ni + 1 < len(xc) or rest != 0

    if i > 0:
        kept = (n // 10 ** (d - j)) % 10 if j > 0 else 0
    else:
        kept = xc[ni - 1] % 10 if ni > 0 else 0
    up = rounds_up(digit, more, bool(kept & 1), negative, mode)

    if sd < 1 or xc[0] == 0:
        if up:
            # 1, 0.1, 0.01 ... at the last requested decimal place
            places = sd - (exponent + 1)
            return clamp(Parts(sign, -places, digits_to_coefficient("1", -places)), config)
        return Parts(sign, 0, (0,))

    # Drop the discarded digits
    if i == 0:
        del xc[ni:]
        step = 1
        ni -= 1
    else:
        del xc[ni + 1 :]
        step = 10 ** (LOG_BASE - i)
        xc[ni] = (n // 10 ** (d - j)) % 10**j * step if j > 0 else 0

    if up:
        while True:
            if ni == 0:
                before = limb_digits(xc[0])
                xc[0] += step
                if limb_digits(xc[0]) != before:
                    exponent += 1
                    if xc[0] == BASE:
                        xc[0] = 1
                break
            xc[ni] += step
            if xc[ni] != BASE:
                break
            xc[ni] = 0
            ni -= 1
            step = 1

    return _finish(sign, exponent, xc, config)


def _finish(sign: int, exponent: int, xc: list[int], config: Config) -> Parts:
    while len(xc) > 1 and xc[-1] == 0:
        xc.pop()
    return clamp(Parts(sign, exponent, tuple(xc)), config)
