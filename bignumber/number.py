"""Arbitrary-precision decimal number.

BigNumber wraps an immutable ``Parts`` value and exposes arithmetic,
rounding, comparison and formatting. Operations read the active
configuration (decimal places, rounding mode, exponent range, ...) when
they are called:

    from bignumber import BigNumber, local_config

    BigNumber("123.456").add("0.544")          # BigNumber('124')
    with local_config(decimal_places=10):
        BigNumber(1).div(3)                     # BigNumber('0.3333333333')
    BigNumber("ff", 16).to_string(2)            # '11111111'

Arithmetic with the Python operators accepts int, float and Decimal
operands as well as other BigNumbers; the named methods also accept
strings and an optional base for the other operand.
"""

from __future__ import annotations

import math
import random
import secrets
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Union

import structlog

from bignumber import formatting
from bignumber.config import Config, get_config
from bignumber.constants import EUCLID, LOG_BASE, MAX, MAX_SAFE_INTEGER, RoundingMode
from bignumber.errors import NotABooleanOption, OutOfRangeOption
from bignumber.math.arithmetic import absolute, add, multiply, negate, subtract
from bignumber.math.division import divide
from bignumber.math.limbs import (
    NAN,
    Parts,
    coefficient_to_string,
    compare,
    exponential_string,
    fixed_point_string,
    limb_exponent,
)
from bignumber.math.rounding import round_parts
from bignumber.parsing import parse, validate_base

logger = structlog.get_logger()

Value = Union["BigNumber", str, int, float, Decimal]

_ONE = Parts(1, 0, (1,))
_HALF = Parts(1, -1, (5 * 10**13,))


# =============================================================================
# Argument helpers
# =============================================================================


def _int_argument(value: Any, low: int, high: int, caller: str, name: str, config: Config) -> int | None:
    """Validate an integer method argument.

    Returns:
        The argument as an int, or None (use the default) when it is invalid
        and errors are off. With errors off, finite non-integers are
        truncated first.

    Raises:
        OutOfRangeOption: If the argument is invalid and errors are on
    """
    if value is None:
        return None

    numeric = isinstance(value, (int, float)) and not isinstance(value, bool)
    integral = numeric and (isinstance(value, int) or value.is_integer())
    if integral and low <= value <= high:
        return int(value)

    if config.errors:
        detail = "out of range" if integral else "not an integer"
        raise OutOfRangeOption(caller, f"{name} {detail}", value)

    if numeric and math.isfinite(value) and low <= int(value) <= high:
        return int(value)
    logger.debug("invalid_argument_ignored", caller=caller, argument=name, value=repr(value))
    return None


def _rounding_mode(value: Any, caller: str, config: Config) -> int:
    mode = _int_argument(value, 0, 8, caller, "rounding mode", config)
    return config.rounding_mode if mode is None else mode


def _is_integer(x: Parts) -> bool:
    return x.coefficient is not None and limb_exponent(x.exponent) > len(x.coefficient) - 2


def _operand(other: Value, base: Any, config: Config) -> Parts:
    """Parts of the other operand of a named method."""
    if isinstance(other, BigNumber):
        if base is None:
            return other._parts
        other = other._parts if base == 10 else other.to_string()
    return parse(other, base, config)


def _coerce(other: object, exact: bool = False) -> Parts | None:
    """Parts of the other operand of an operator, None if unsupported.

    With exact, a float is converted from its binary value rather than its
    repr, so comparisons never raise PrecisionLoss.
    """
    if isinstance(other, BigNumber):
        return other._parts
    if isinstance(other, bool) or not isinstance(other, (int, float, Decimal)):
        return None
    if exact and isinstance(other, float):
        other = Decimal(other)
    return parse(other, None, get_config())


# =============================================================================
# Engine operations not covered by bignumber.math
# =============================================================================


def _quotient(x: Parts, y: Parts, config: Config) -> Parts:
    return divide(x, y, config.decimal_places, config.rounding_mode, config)


def _remainder(x: Parts, y: Parts, config: Config) -> Parts:
    """x - q * y with q = x / y rounded to an integer by the modulo mode."""
    if x.coefficient is None or y.sign is None or y.is_zero:
        return NAN
    if y.coefficient is None or x.is_zero:
        return x

    if config.modulo_mode == EUCLID:
        # q = sign(y) * floor(x / |y|), so the remainder is never negative
        q = divide(x, absolute(y), 0, RoundingMode.FLOOR, config)
        q = Parts(q.sign * y.sign, q.exponent, q.coefficient)
    else:
        q = divide(x, y, 0, config.modulo_mode, config)

    return subtract(x, multiply(q, y, config), config)


def _power(x: Parts, n: int, config: Config) -> Parts:
    """x ** n by repeated squaring.

    With a non-zero pow_precision, intermediate coefficients are truncated to
    a few limbs beyond that precision and the result is rounded to it.
    """
    if n == 0:
        return _ONE

    precision = config.pow_precision
    k = math.ceil(precision / LOG_BASE + 2) if precision else 0

    def truncate(value: Parts) -> Parts:
        if k and value.coefficient is not None and len(value.coefficient) > k:
            return Parts(value.sign, value.exponent, value.coefficient[:k])
        return value

    result = _ONE
    i = abs(n)
    while True:
        if i % 2:
            result = truncate(multiply(result, x, config))
            if result.coefficient is None:
                break
        i //= 2
        if not i:
            break
        x = truncate(multiply(x, x, config))

    if n < 0:
        result = _quotient(_ONE, result, config)

    if k:
        return round_parts(result, precision, config.rounding_mode, config)
    return result


def _initial_root(x: Parts, config: Config) -> Parts:
    """Float estimate of sqrt(x), scaled by hand when the float under/overflows."""
    digits = coefficient_to_string(x.coefficient)
    estimate = math.sqrt(float(exponential_string(digits, x.exponent)))
    if estimate != 0 and math.isfinite(estimate):
        return parse(repr(estimate), None, config)

    e = x.exponent
    if (len(digits) + e) % 2 == 0:
        digits += "0"
    root = math.sqrt(float(digits))
    e = (e + 1) // 2 - (1 if e < 0 else e % 2)
    if math.isinf(root):
        text = f"1e{e}"
    else:
        text = f"{root:.15e}".split("e")[0] + f"e{e}"
    return parse(text, None, config)


def _square_root(x: Parts, config: Config) -> Parts:
    """Square root rounded to decimal_places with the rounding mode.

    Newton-Raphson iteration at decimal_places + 4 digits; when the digits
    around the rounding position look like a tie (...4999 or ...9999) the
    candidate is checked exactly or the precision raised.
    """
    if x.sign is None or (x.sign < 0 and not x.is_zero):
        return NAN
    if x.coefficient is None:
        return x
    if x.is_zero:
        return x

    dp = config.decimal_places + 4
    r = _initial_root(x, config)
    more = False

    if not r.is_zero:
        e = r.exponent
        s = e + dp
        if s < 3:
            s = 0

        repeated = False
        while True:
            t = r
            r = multiply(_HALF, add(t, divide(x, t, dp, RoundingMode.DOWN, config), config), config)

            previous = coefficient_to_string(t.coefficient)
            n = coefficient_to_string(r.coefficient)
            if previous[:s] != n[:s]:
                continue

            # The exponent of r may be one less than that of t
            if r.exponent < e:
                s -= 1
            n = n[s - 3 : s + 1]

            if n == "9999" or (not repeated and n == "4999"):
                if not repeated:
                    t = round_parts(t, t.exponent + config.decimal_places + 2, RoundingMode.UP, config)
                    if compare(multiply(t, t, config), x) == 0:
                        r = t
                        break
                dp += 4
                s += 4
                repeated = True
            else:
                # Exact result, or a tie that needs an exact check
                if not int(n or "0") or (not int(n[1:] or "0") and n[:1] == "5"):
                    r = round_parts(r, r.exponent + config.decimal_places + 2, RoundingMode.DOWN, config)
                    more = compare(multiply(r, r, config), x) != 0
                break

    return round_parts(r, r.exponent + config.decimal_places + 1, config.rounding_mode, config, more)


# =============================================================================
# BigNumber
# =============================================================================


class BigNumber:
    """Immutable arbitrary-precision decimal number.

    Values are NaN, ±Infinity, ±0 or a finite decimal with an exponent inside
    the configured range. Addition, subtraction and multiplication are exact;
    division, square root and pow() round as configured.

    Attributes:
        sign: 1, -1, or None for NaN
        exponent: Base-10 exponent of the leading digit (None if not finite)
        coefficient: Limbs of 14 decimal digits (None if not finite)
    """

    __slots__ = ("_parts",)
    _parts: Parts

    def __init__(self, value: Value, base: int | None = None) -> None:
        """Create a BigNumber.

        Args:
            value: Decimal string (exponent notation allowed), string in base,
                int, float, Decimal or BigNumber
            base: Radix 2..64 of a string value; 10 rounds the value to the
                configured decimal places

        Raises:
            InvalidNumber: If value is not a valid number and errors are on
            InvalidBase: If base is invalid and errors are on
            PrecisionLoss: If a float has more than 15 significant digits
            TypeError: If value has an unsupported type
        """
        if isinstance(value, BigNumber):
            if base is None:
                self._parts = value._parts
                return
            value = value._parts if base == 10 else value.to_string()
        self._parts = parse(value, base, get_config())

    @classmethod
    def _from_parts(cls, parts: Parts) -> BigNumber:
        number = cls.__new__(cls)
        number._parts = parts
        return number

    # --- Tagged constructors ---

    @classmethod
    def from_string(cls, text: str, base: int | None = None) -> BigNumber:
        """Create a BigNumber from a numeral, optionally in base 2..64."""
        if not isinstance(text, str):
            raise TypeError(f"from_string() requires str, got {type(text).__name__}")
        return cls(text, base)

    @classmethod
    def from_int(cls, value: int) -> BigNumber:
        """Create an exact BigNumber from an int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int() requires int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_float(cls, value: float) -> BigNumber:
        """Create a BigNumber from the shortest repr of a float."""
        if not isinstance(value, float):
            raise TypeError(f"from_float() requires float, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigNumber:
        if not isinstance(value, Decimal):
            raise TypeError(f"from_decimal() requires Decimal, got {type(value).__name__}")
        return cls(value)

    # --- Aggregates ---

    @classmethod
    def max(cls, *values: Value | Iterable[Value]) -> BigNumber:
        """Largest of the values, NaN if any of them is NaN."""
        return cls._extreme(values, 1)

    @classmethod
    def min(cls, *values: Value | Iterable[Value]) -> BigNumber:
        """Smallest of the values, NaN if any of them is NaN."""
        return cls._extreme(values, -1)

    @classmethod
    def _extreme(cls, values: tuple[Any, ...], direction: int) -> BigNumber:
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])
        if not values:
            raise ValueError("max() and min() require at least one value")

        best = cls(values[0])
        for value in values[1:]:
            candidate = cls(value)
            if candidate.is_nan():
                return candidate
            if compare(candidate._parts, best._parts) == direction:
                best = candidate
        return best

    @classmethod
    def random(cls, dp: int | None = None) -> BigNumber:
        """Uniform random value in [0, 1) with dp decimal places.

        Uses the secrets module when the crypto option is on.
        """
        config = get_config()
        places = _int_argument(dp, 0, MAX, "random()", "decimal places", config)
        if places is None:
            places = config.decimal_places
        limit = 10**places
        draw = secrets.randbelow(limit) if config.crypto else random.randrange(limit)
        return cls._from_parts(parse(f"{draw}e-{places}", None, config))

    # --- Representation ---

    @property
    def sign(self) -> int | None:
        return self._parts.sign

    @property
    def exponent(self) -> int | None:
        return self._parts.exponent

    @property
    def coefficient(self) -> tuple[int, ...] | None:
        return self._parts.coefficient

    @property
    def parts(self) -> Parts:
        """The underlying (sign, exponent, coefficient) record."""
        return self._parts

    def __repr__(self) -> str:
        return f"BigNumber('{self.value_of()}')"

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        if self.is_nan():
            return object.__hash__(self)
        return hash(self.to_decimal())

    # --- Arithmetic ---

    def add(self, other: Value, base: int | None = None) -> BigNumber:
        """Exact sum."""
        config = get_config()
        return self._from_parts(add(self._parts, _operand(other, base, config), config))

    def sub(self, other: Value, base: int | None = None) -> BigNumber:
        """Exact difference."""
        config = get_config()
        return self._from_parts(subtract(self._parts, _operand(other, base, config), config))

    def mul(self, other: Value, base: int | None = None) -> BigNumber:
        """Exact product."""
        config = get_config()
        return self._from_parts(multiply(self._parts, _operand(other, base, config), config))

    def div(self, other: Value, base: int | None = None) -> BigNumber:
        """Quotient rounded to decimal_places with the rounding mode."""
        config = get_config()
        return self._from_parts(_quotient(self._parts, _operand(other, base, config), config))

    def mod(self, other: Value, base: int | None = None) -> BigNumber:
        """Remainder, the quotient being rounded to an integer per modulo_mode.

        The default mode DOWN gives a remainder with the sign of the dividend
        (like ``math.fmod``); FLOOR matches Python's ``%``; EUCLID (9) always
        gives a non-negative remainder.
        """
        config = get_config()
        return self._from_parts(_remainder(self._parts, _operand(other, base, config), config))

    plus = add
    minus = sub
    times = mul
    modulo = mod

    def pow(self, n: int) -> BigNumber:
        """Raise to an integer power.

        Args:
            n: Exponent within ±(2^53 - 1)

        Returns:
            The power, rounded to pow_precision significant digits unless
            that option is 0; negative exponents take the reciprocal
            (rounded to decimal_places)

        Raises:
            OutOfRangeOption: If n is not an integer in range and errors are on
        """
        config = get_config()
        exponent = _int_argument(n, -MAX_SAFE_INTEGER, MAX_SAFE_INTEGER, "pow()", "exponent", config)
        if exponent is None:
            return self._from_parts(NAN)
        return self._from_parts(_power(self._parts, exponent, config))

    def sqrt(self) -> BigNumber:
        """Square root rounded to decimal_places; NaN for negative values."""
        return self._from_parts(_square_root(self._parts, get_config()))

    def neg(self) -> BigNumber:
        return self._from_parts(negate(self._parts))

    def abs(self) -> BigNumber:
        return self._from_parts(absolute(self._parts))

    # --- Rounding ---

    def round(self, dp: int | None = None, rm: int | None = None) -> BigNumber:
        """Round to dp decimal places (default 0).

        An invalid dp with errors off leaves the value unrounded.
        """
        config = get_config()
        x = self._parts
        places = _int_argument(dp, 0, MAX, "round()", "decimal places", config)
        mode = _rounding_mode(rm, "round()", config)
        if x.coefficient is None or (dp is not None and places is None):
            return self
        return self._from_parts(round_parts(x, (places or 0) + x.exponent + 1, mode, config))

    def _to_integer(self, mode: int) -> BigNumber:
        x = self._parts
        if x.coefficient is None:
            return self
        return self._from_parts(round_parts(x, x.exponent + 1, mode, get_config()))

    def ceil(self) -> BigNumber:
        return self._to_integer(RoundingMode.CEIL)

    def floor(self) -> BigNumber:
        return self._to_integer(RoundingMode.FLOOR)

    def trunc(self) -> BigNumber:
        return self._to_integer(RoundingMode.DOWN)

    # --- Comparison ---

    def compare(self, other: Value, base: int | None = None) -> int | None:
        """Return -1, 0 or 1 as self is less than, equal to or greater than
        other, or None if either is NaN."""
        return compare(self._parts, _operand(other, base, get_config()))

    def eq(self, other: Value, base: int | None = None) -> bool:
        return self.compare(other, base) == 0

    def lt(self, other: Value, base: int | None = None) -> bool:
        return self.compare(other, base) == -1

    def lte(self, other: Value, base: int | None = None) -> bool:
        return self.compare(other, base) in (-1, 0)

    def gt(self, other: Value, base: int | None = None) -> bool:
        return self.compare(other, base) == 1

    def gte(self, other: Value, base: int | None = None) -> bool:
        return self.compare(other, base) in (0, 1)

    # --- Predicates ---

    def is_nan(self) -> bool:
        return self._parts.sign is None

    def is_finite(self) -> bool:
        return self._parts.coefficient is not None

    def is_zero(self) -> bool:
        return self._parts.is_zero

    def is_negative(self) -> bool:
        """True for negative values including -0 and -Infinity."""
        return self._parts.sign is not None and self._parts.sign < 0

    def is_integer(self) -> bool:
        return _is_integer(self._parts)

    # --- Introspection ---

    def decimal_places(self) -> int | None:
        """Number of digits after the decimal point, None if not finite."""
        x = self._parts
        if x.coefficient is None:
            return None
        c = x.coefficient
        places = (len(c) - 1 - limb_exponent(x.exponent)) * LOG_BASE
        last = c[-1]
        if last:
            while last % 10 == 0:
                last //= 10
                places -= 1
        return max(places, 0)

    def precision(self, include_zeros: bool = False) -> int | None:
        """Number of significant digits, None if not finite.

        Args:
            include_zeros: Count the zeros of the integer part after the last
                significant digit

        Raises:
            NotABooleanOption: If include_zeros is not a boolean (or 0/1) and
                errors are on
        """
        config = get_config()
        if not isinstance(include_zeros, bool) and include_zeros not in (0, 1):
            if config.errors:
                raise NotABooleanOption("precision()", "argument not a boolean or binary digit", include_zeros)
            include_zeros = False

        x = self._parts
        if x.coefficient is None:
            return None

        c = x.coefficient
        digits = (len(c) - 1) * LOG_BASE + 1
        last = c[-1]
        if last:
            while last % 10 == 0:
                last //= 10
                digits -= 1
            first = c[0]
            while first >= 10:
                first //= 10
                digits += 1

        if include_zeros and x.exponent + 1 > digits:
            digits = x.exponent + 1
        return digits

    # --- Formatting ---

    def to_string(self, base: int | None = None) -> str:
        """Decimal string, exponential beyond the exponential_at bounds, or
        the value in base 2..64 (fraction rounded to decimal_places)."""
        config = get_config()
        if base is not None:
            base = validate_base(base, config, "to_string()")
        return formatting.to_string(self._parts, config, base)

    def value_of(self) -> str:
        """Like to_string() but keeps the minus sign of negative zero."""
        return formatting.value_of(self._parts, get_config())

    to_json = to_string

    def to_fixed(self, dp: int | None = None, rm: int | None = None) -> str:
        """Fixed-point notation with dp decimal places, never exponential."""
        config = get_config()
        places = _int_argument(dp, 0, MAX, "to_fixed()", "decimal places", config)
        mode = _rounding_mode(rm, "to_fixed()", config)
        return formatting.to_fixed(self._parts, places, mode, config)

    def to_exponential(self, dp: int | None = None, rm: int | None = None) -> str:
        """Exponential notation with dp digits after the point."""
        config = get_config()
        places = _int_argument(dp, 0, MAX, "to_exponential()", "decimal places", config)
        mode = _rounding_mode(rm, "to_exponential()", config)
        return formatting.to_exponential(self._parts, places, mode, config)

    def to_precision(self, sd: int | None = None, rm: int | None = None) -> str:
        """sd significant digits; exponential if the integer part needs more
        digits or the exponent is at or below exponential_at's lower bound."""
        config = get_config()
        digits = _int_argument(sd, 1, MAX, "to_precision()", "precision", config)
        mode = _rounding_mode(rm, "to_precision()", config)
        return formatting.to_precision(self._parts, digits, mode, config)

    def to_format(self, dp: int | None = None, rm: int | None = None) -> str:
        """to_fixed() with the separators and group sizes of the format option.

        Example (default format): BigNumber("1234567.891").to_format(2) -> "1,234,567.89"
        """
        config = get_config()
        places = _int_argument(dp, 0, MAX, "to_format()", "decimal places", config)
        mode = _rounding_mode(rm, "to_format()", config)
        return formatting.to_format(self._parts, places, mode, config)

    def to_fraction(self, max_denominator: Value | None = None) -> tuple[BigNumber, BigNumber]:
        """Closest fraction with a denominator of at most max_denominator.

        Returns:
            Tuple of (numerator, denominator); non-finite values give
            (self, 1)

        Raises:
            OutOfRangeOption: If max_denominator is not an integer >= 1 and
                errors are on
        """
        config = get_config()
        x = self._parts
        limit = None

        if max_denominator is not None:
            if isinstance(max_denominator, BigNumber):
                candidate = max_denominator._parts
            else:
                candidate = parse(max_denominator, None, config.model_copy(update={"errors": False}))
            integral = _is_integer(candidate)
            if integral and compare(candidate, _ONE) >= 0:
                limit = candidate
            else:
                if config.errors:
                    detail = "out of range" if integral else "not an integer"
                    raise OutOfRangeOption("to_fraction()", f"max denominator {detail}", max_denominator)
                if candidate.coefficient is not None and not integral:
                    truncated = round_parts(candidate, candidate.exponent + 1, RoundingMode.DOWN, config)
                    if compare(truncated, _ONE) >= 0:
                        limit = truncated
                logger.debug("invalid_argument_ignored", caller="to_fraction()", argument="max denominator")

        if x.coefficient is None:
            return self, self._from_parts(_ONE)

        numerator, denominator = formatting.to_fraction(x, limit, config)
        return self._from_parts(numerator), self._from_parts(denominator)

    # --- Conversion ---

    def to_number(self) -> float:
        """Nearest float (-0.0 for negative zero)."""
        return float(self.value_of())

    def to_decimal(self) -> Decimal:
        return Decimal(self.value_of())

    def __float__(self) -> float:
        return self.to_number()

    def __int__(self) -> int:
        """Truncate toward zero.

        Raises:
            ValueError: For NaN
            OverflowError: For ±Infinity
        """
        x = self._parts
        if x.sign is None:
            raise ValueError("cannot convert NaN to integer")
        if x.coefficient is None:
            raise OverflowError("cannot convert Infinity to integer")
        truncated = self.trunc()._parts
        digits = fixed_point_string(coefficient_to_string(truncated.coefficient), truncated.exponent)
        return int(digits) * x.sign

    def __bool__(self) -> bool:
        """True unless zero (NaN is truthy, as for float)."""
        return not self._parts.is_zero

    def __round__(self, ndigits: int | None = None) -> int | BigNumber:
        """round(x) gives an int; round(x, n) a BigNumber, n < 0 rounding
        to tens, hundreds, ..."""
        if ndigits is None:
            return int(self.round())
        x = self._parts
        if isinstance(ndigits, int) and not isinstance(ndigits, bool) and ndigits < 0:
            if x.coefficient is None:
                return self
            config = get_config()
            return self._from_parts(round_parts(x, x.exponent + 1 + ndigits, config.rounding_mode, config))
        return self.round(ndigits)

    def __trunc__(self) -> int:
        return int(self)

    def __floor__(self) -> int:
        return int(self.floor())

    def __ceil__(self) -> int:
        return int(self.ceil())

    # --- Operators ---

    def _binary(self, other: object, operation: Any, reflected: bool = False) -> BigNumber:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        x = self._parts
        if reflected:
            x, y = y, x
        return self._from_parts(operation(x, y, get_config()))

    def __add__(self, other: Value) -> BigNumber:
        return self._binary(other, add)

    def __radd__(self, other: Value) -> BigNumber:
        return self._binary(other, add, reflected=True)

    def __sub__(self, other: Value) -> BigNumber:
        return self._binary(other, subtract)

    def __rsub__(self, other: Value) -> BigNumber:
        return self._binary(other, subtract, reflected=True)

    def __mul__(self, other: Value) -> BigNumber:
        return self._binary(other, multiply)

    def __rmul__(self, other: Value) -> BigNumber:
        return self._binary(other, multiply, reflected=True)

    def __truediv__(self, other: Value) -> BigNumber:
        return self._binary(other, _quotient)

    def __rtruediv__(self, other: Value) -> BigNumber:
        return self._binary(other, _quotient, reflected=True)

    def __mod__(self, other: Value) -> BigNumber:
        return self._binary(other, _remainder)

    def __rmod__(self, other: Value) -> BigNumber:
        return self._binary(other, _remainder, reflected=True)

    def __pow__(self, n: int) -> BigNumber:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.pow(n)

    def __neg__(self) -> BigNumber:
        return self.neg()

    def __pos__(self) -> BigNumber:
        return self

    def __abs__(self) -> BigNumber:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        y = _coerce(other, exact=True)
        if y is None:
            return NotImplemented
        return compare(self._parts, y) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Value) -> bool:
        y = _coerce(other, exact=True)
        if y is None:
            return NotImplemented
        return compare(self._parts, y) == -1

    def __le__(self, other: Value) -> bool:
        y = _coerce(other, exact=True)
        if y is None:
            return NotImplemented
        return compare(self._parts, y) in (-1, 0)

    def __gt__(self, other: Value) -> bool:
        y = _coerce(other, exact=True)
        if y is None:
            return NotImplemented
        return compare(self._parts, y) == 1

    def __ge__(self, other: Value) -> bool:
        y = _coerce(other, exact=True)
        if y is None:
            return NotImplemented
        return compare(self._parts, y) in (0, 1)


__all__ = ["BigNumber", "Value"]
