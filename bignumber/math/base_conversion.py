"""Conversion of digit strings between bases 2 and 64.

Integer parts are converted exactly by repeated multiply-and-carry. A
fractional part is converted as a division by a power of the input base,
carried out in the output base, and rounded to the configured number of
decimal places (counted in output-base digits).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignumber.constants import ALPHABET, CASE_INSENSITIVE_MAX_RADIX
from bignumber.math.division import divide_digits
from bignumber.math.limbs import fixed_point_string
from bignumber.math.rounding import rounds_up

if TYPE_CHECKING:
    from bignumber.config import Config

__all__ = ["to_base_out", "convert_base"]


def to_base_out(text: str, base_in: int, base_out: int) -> list[int]:
    """Convert an unsigned integer digit string to a digit array.

    Example: to_base_out("ff", 16, 10) -> [2, 5, 5]
    """
    digits = [0]
    for char in text:
        for k in range(len(digits)):
            digits[k] *= base_in
        digits[0] += ALPHABET.index(char)

        # Least significant digit first while carrying
        k = 0
        while k < len(digits):
            if digits[k] > base_out - 1:
                if k + 1 == len(digits):
                    digits.append(0)
                digits[k + 1] += digits[k] // base_out
                digits[k] %= base_out
            k += 1

    digits.reverse()
    return digits


def convert_base(text: str, base_out: int, base_in: int, sign: int, config: Config) -> str:
    """Convert an unsigned digit string from base_in to base_out.

    Args:
        text: Digits of base_in with an optional single point
        base_out: Target radix
        base_in: Source radix
        sign: Sign of the value, used by the directed rounding modes
        config: Supplies decimal places and rounding mode for fractions

    Returns:
        Unsigned digit string in base_out, e.g. "11111111" or "0.1"
    """
    dp, mode = config.decimal_places, config.rounding_mode

    if base_in <= CASE_INSENSITIVE_MAX_RADIX:
        text = text.lower()

    point = text.find(".")
    if point >= 0:
        text = text.replace(".", "")
        # Divisor base_in ** (fraction digits), written in base_out
        divisor = to_base_out("1" + "0" * (len(text) - point), base_in, base_out)

    xc = to_base_out(text, base_in, base_out)
    if xc[0] == 0:
        return "0"

    exponent = len(xc)
    while xc[-1] == 0:
        xc.pop()

    if point < 0:
        exponent -= 1
        more = False
    else:
        xc, exponent, more = divide_digits(
            xc, exponent, divisor, len(divisor), dp, base_out
        )

    # Index of the rounding digit
    d = exponent + dp + 1
    digit = xc[d] if 0 <= d < len(xc) else 0
    more = more or d < 0 or d + 1 < len(xc)
    odd = d >= 1 and d - 1 < len(xc) and bool(xc[d - 1] & 1)
    up = rounds_up(digit, more, odd, sign < 0, mode, half=base_out / 2)

    if d < 1 or not xc[0]:
        return fixed_point_string("1", -dp) if up else "0"

    del xc[d:]

    if up:
        xc.extend([0] * (d - len(xc)))
        k = d - 1
        xc[k] += 1
        while xc[k] > base_out - 1:
            xc[k] = 0
            if k == 0:
                exponent += 1
                xc.insert(0, 1)
                break
            k -= 1
            xc[k] += 1

    while len(xc) > 1 and xc[-1] == 0:
        xc.pop()

    return fixed_point_string("".join(ALPHABET[digit] for digit in xc), exponent)
