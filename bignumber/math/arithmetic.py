"""Exact addition, subtraction and multiplication of limb coefficients.

Results are exact; only the exponent range of the configuration is applied
(overflow gives Infinity, underflow gives Zero).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignumber.constants import BASE, SQRT_BASE, RoundingMode
from bignumber.math.limbs import NAN, Parts, infinity, limb_exponent, normalize, zero

if TYPE_CHECKING:
    from bignumber.config import Config

__all__ = ["negate", "absolute", "add", "subtract", "multiply"]


def negate(x: Parts) -> Parts:
    if x.sign is None:
        return x
    return Parts(-x.sign, x.exponent, x.coefficient)


def absolute(x: Parts) -> Parts:
    if x.sign is None or x.sign > 0:
        return x
    return Parts(1, x.exponent, x.coefficient)


def _zero_difference(config: Config) -> Parts:
    """Zero produced by cancellation: negative only when rounding towards -Infinity."""
    return zero(-1 if config.rounding_mode == RoundingMode.FLOOR else 1)


# =============================================================================
# Addition and subtraction
# =============================================================================


def add(x: Parts, y: Parts, config: Config) -> Parts:
    """Exact sum x + y."""
    if x.sign is None or y.sign is None:
        return NAN
    if x.sign != y.sign:
        return subtract(x, negate(y), config)

    if x.coefficient is None or y.coefficient is None:
        return infinity(x.sign)

    if x.is_zero or y.is_zero:
        if not y.is_zero:
            return y
        if not x.is_zero:
            return x
        return zero(x.sign)

    xc, yc = list(x.coefficient), list(y.coefficient)
    xe, ye = limb_exponent(x.exponent), limb_exponent(y.exponent)

    # Align the leading limbs
    if xe > ye:
        yc[:0] = [0] * (xe - ye)
    elif ye > xe:
        xc[:0] = [0] * (ye - xe)
    position = max(xe, ye)

    if len(xc) < len(yc):
        xc, yc = yc, xc

    carry = 0
    for k in range(len(yc) - 1, -1, -1):
        carry, xc[k] = divmod(xc[k] + yc[k] + carry, BASE)

    if carry:
        xc.insert(0, carry)
        position += 1

    return normalize(x.sign, xc, position, config)


def subtract(x: Parts, y: Parts, config: Config) -> Parts:
    """Exact difference x - y."""
    if x.sign is None or y.sign is None:
        return NAN
    if x.sign != y.sign:
        return add(x, negate(y), config)

    if x.coefficient is None or y.coefficient is None:
        if x.coefficient is not None:
            return negate(y)
        if y.coefficient is not None:
            return x
        return NAN

    if x.is_zero or y.is_zero:
        if not y.is_zero:
            return negate(y)
        if not x.is_zero:
            return x
        return _zero_difference(config)

    sign = x.sign
    xc, yc = list(x.coefficient), list(y.coefficient)
    xe, ye = limb_exponent(x.exponent), limb_exponent(y.exponent)

    if xe != ye:
        x_smaller = xe < ye
        if x_smaller:
            xc[:0] = [0] * (ye - xe)
        else:
            yc[:0] = [0] * (xe - ye)
    else:
        x_smaller = len(xc) < len(yc)
        for a, b in zip(xc, yc):
            if a != b:
                x_smaller = a < b
                break
    position = max(xe, ye)

    # Subtract the smaller magnitude from the larger
    if x_smaller:
        xc, yc = yc, xc
        sign = -sign

    if len(yc) > len(xc):
        xc.extend([0] * (len(yc) - len(xc)))

    borrow = 0
    for k in range(len(yc) - 1, -1, -1):
        difference = xc[k] - yc[k] - borrow
        borrow = 1 if difference < 0 else 0
        xc[k] = difference + borrow * BASE

    while xc and xc[0] == 0:
        xc.pop(0)
        position -= 1

    if not xc:
        return _zero_difference(config)

    return normalize(sign, xc, position, config)


# =============================================================================
# Multiplication
# =============================================================================


def multiply(x: Parts, y: Parts, config: Config) -> Parts:
    """Exact product x * y.

    Limbs are split into halves at SQRT_BASE so each partial product is
    formed from values below BASE.
    """
    if x.sign is None or y.sign is None:
        return NAN

    sign = x.sign * y.sign

    if x.coefficient is None or y.coefficient is None:
        # Infinity * 0
        if x.is_zero or y.is_zero:
            return NAN
        return infinity(sign)

    if x.is_zero or y.is_zero:
        return zero(sign)

    position = limb_exponent(x.exponent) + limb_exponent(y.exponent)
    xc, yc = x.coefficient, y.coefficient
    if len(xc) < len(yc):
        xc, yc = yc, xc

    zc = [0] * (len(xc) + len(yc))
    carry = 0
    for i in range(len(yc) - 1, -1, -1):
        carry = 0
        y_lo, y_hi = yc[i] % SQRT_BASE, yc[i] // SQRT_BASE
        j = i + len(xc)
        for k in range(len(xc) - 1, -1, -1):
            x_lo, x_hi = xc[k] % SQRT_BASE, xc[k] // SQRT_BASE
            middle = y_hi * x_lo + x_hi * y_lo
            low = y_lo * x_lo + (middle % SQRT_BASE) * SQRT_BASE + zc[j] + carry
            carry = low // BASE + middle // SQRT_BASE + y_hi * x_hi
            zc[j] = low % BASE
            j -= 1
        zc[j] = carry

    if carry:
        position += 1
    else:
        zc.pop(0)

    return normalize(sign, zc, position, config)
