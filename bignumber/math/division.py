"""Long division.

The same schoolbook routine serves two callers: decimal division, working
on limbs in base 10^14 and rounding the quotient to a number of decimal
places, and base conversion, working on single digits of an arbitrary
radix and leaving rounding to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignumber.constants import BASE, LOG_BASE
from bignumber.math.limbs import NAN, Parts, infinity, limb_digits, limb_exponent, zero
from bignumber.math.rounding import round_parts

if TYPE_CHECKING:
    from bignumber.config import Config

__all__ = ["divide", "divide_digits"]


def _div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


# =============================================================================
# Digit-array helpers
# =============================================================================


def _multiply_small(xc: list[int], k: int, base: int) -> list[int]:
    """Multiply a digit array by a small integer."""
    result = list(xc)
    carry = 0
    for i in range(len(result) - 1, -1, -1):
        carry, result[i] = divmod(result[i] * k + carry, base)
    if carry:
        result.insert(0, carry)
    return result


def _compare(a: list[int], b: list[int]) -> int:
    """Compare digit arrays without leading zeros."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(a, b):
        if x != y:
            return 1 if x > y else -1
    return 0


def _subtract_into(a: list[int], b: list[int], base: int) -> None:
    """a -= b in place, b being the same length as a and not larger."""
    borrow = 0
    for i in range(len(a) - 1, -1, -1):
        a[i] -= borrow
        borrow = 1 if a[i] < b[i] else 0
        a[i] += borrow * base - b[i]
    while len(a) > 1 and a[0] == 0:
        a.pop(0)


def _long_divide(xc: list[int], yc: list[int], limit: int, base: int) -> tuple[list[int], bool]:
    """Divide digit arrays.

    Args:
        xc: Dividend digits, most significant first
        yc: Divisor digits, most significant first
        limit: Digits to produce after the first one
        base: Radix of the digits

    Returns:
        Tuple of (quotient digits without a leading zero, whether the
        remainder is non-zero)
    """
    # Normalise so the leading divisor digit is at least base / 2
    n = base // (yc[0] + 1)
    if n > 1:
        yc = _multiply_small(yc, n, base)
        xc = _multiply_small(xc, n, base)

    y_len = len(yc)
    x_len = len(xc)
    rem = xc[:y_len] + [0] * max(0, y_len - x_len)
    xi = y_len
    yz = [0] + yc
    yc0 = yc[0] + 1 if y_len > 1 and yc[1] >= base / 2 else yc[0]

    qc: list[int] = []
    while True:
        digit = 0
        cmp = _compare(yc, rem)

        if cmp < 0:
            # Trial digit from the leading remainder digits
            rem0 = rem[0]
            if y_len != len(rem):
                rem0 = rem0 * base + (rem[1] if len(rem) > 1 else 0)
            digit = rem0 // yc0

            if digit > 1:
                digit = min(digit, base - 1)
                product = _multiply_small(yc, digit, base)
                # Trial digit may be one or two too large
                while _compare(product, rem) == 1:
                    digit -= 1
                    _subtract_into(product, yz if y_len < len(product) else yc, base)
                    cmp = 1
            else:
                if digit == 0:
                    cmp = digit = 1
                product = list(yc)

            if len(product) < len(rem):
                product.insert(0, 0)
            _subtract_into(rem, product, base)

            # Trial digit may be too small
            if cmp == -1:
                while _compare(yc, rem) < 1:
                    digit += 1
                    _subtract_into(rem, yz if y_len < len(rem) else yc, base)
        elif cmp == 0:
            digit += 1
            rem = [0]

        qc.append(digit)

        # Bring down the next dividend digit
        if rem[0]:
            rem.append(xc[xi] if xi < x_len else 0)
        elif xi < x_len:
            rem = [xc[xi]]
        else:
            rem = None
        xi += 1

        if rem is None or limit == 0:
            break
        limit -= 1

    more = rem is not None and (any(rem) or any(xc[xi:]))
    if not qc[0] and len(qc) > 1:
        qc.pop(0)
    return qc, more


def _leading_shortfall(xc: tuple[int, ...] | list[int], yc: tuple[int, ...] | list[int]) -> bool:
    """Whether the divisor's digits exceed the dividend's at the first difference."""
    for i, y_digit in enumerate(yc):
        x_digit = xc[i] if i < len(xc) else 0
        if y_digit != x_digit:
            return y_digit > x_digit
    return False


def divide_digits(
    xc: list[int], x_exp: int, yc: list[int], y_exp: int, dp: int, base: int
) -> tuple[list[int], int, bool]:
    """Divide digit arrays of an arbitrary radix.

    Each operand is 0.d1d2... times base ** exp. The quotient is produced to
    dp fractional digits plus guard digits, unrounded.

    Returns:
        Tuple of (quotient digits, exponent of the first digit, whether the
        quotient is inexact)
    """
    e = x_exp - y_exp
    s = dp + e + 1
    if _leading_shortfall(xc, yc):
        e -= 1
    if s < 0:
        return [1], e, True
    qc, more = _long_divide(list(xc), list(yc), s + 2, base)
    return qc, e, more


def divide(x: Parts, y: Parts, dp: int, mode: int, config: Config) -> Parts:
    """Quotient x / y rounded to dp decimal places with the given mode.

    Returns:
        NaN for 0/0, Infinity/Infinity and NaN operands; signed Infinity for
        x/0; signed zero for 0/y and x/Infinity
    """
    if x.sign is None or y.sign is None:
        return NAN

    sign = x.sign * y.sign
    xc, yc = x.coefficient, y.coefficient

    if xc is None or yc is None or xc[0] == 0 or yc[0] == 0:
        if xc is None and yc is None:
            return NAN
        if (xc is not None and xc[0] == 0) and (yc is not None and yc[0] == 0):
            return NAN
        # 0/y or x/Infinity
        if (xc is not None and xc[0] == 0) or yc is None:
            return zero(sign)
        return infinity(sign)

    e = limb_exponent(x.exponent) - limb_exponent(y.exponent)
    s = _div_trunc(dp + (x.exponent - y.exponent) + 1, LOG_BASE)
    if _leading_shortfall(xc, yc):
        e -= 1

    if s < 0:
        qc, more = [1], True
    else:
        qc, more = _long_divide(list(xc), list(yc), s + 2, BASE)

    exponent = limb_digits(qc[0]) + e * LOG_BASE - 1
    quotient = Parts(sign, exponent, tuple(qc))
    return round_parts(quotient, dp + exponent + 1, mode, config, more)
