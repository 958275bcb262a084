"""Conversion of input values to ``Parts``.

Accepted inputs are decimal strings (with optional exponent), strings in
bases 2 to 64, ints, floats, ``decimal.Decimal`` and existing ``Parts``.
Malformed strings go through a lenient recovery step (whitespace, a leading
plus sign, 0x/0b/0o prefixes, dangling points in non-decimal bases and the
Infinity/NaN literals) before being rejected.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

import structlog

from bignumber.config import Config
from bignumber.constants import ALPHABET, BASE, CASE_INSENSITIVE_MAX_RADIX, MAX_FLOAT_DIGITS, MAX_RADIX, MIN_RADIX
from bignumber.errors import InvalidBase, InvalidDigits, InvalidNumber, PrecisionLoss
from bignumber.math.base_conversion import convert_base
from bignumber.math.limbs import NAN, Parts, digits_to_coefficient, infinity, limb_digits, zero
from bignumber.math.rounding import round_parts

logger = structlog.get_logger()

__all__ = ["parse", "validate_base"]

OPERATION = "BigNumber()"

_DECIMAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_OR_NAN = re.compile(r"-?(?:Infinity|NaN)")
_BASE_PREFIX = re.compile(r"^(-?)0([xbo])(?=[0-9A-Za-z_][0-9A-Za-z_.]*\Z)", re.IGNORECASE)
_DOT_AFTER = re.compile(r"^([^.]+)\.\Z")
_DOT_BEFORE = re.compile(r"^\.([^.]+)\Z")
_WHITESPACE_OR_PLUS = re.compile(r"^\s*\+(?=[0-9A-Za-z_.])|^\s+|\s+\Z")
_SIGNIFICANT = re.compile(r"^0\.0*|\.")

_PREFIX_BASES = {"x": 16, "b": 2, "o": 8}


def _radix_pattern(base: int) -> re.Pattern[str]:
    digits = "[" + re.escape(ALPHABET[:base]) + "]+"
    flags = re.IGNORECASE if base <= CASE_INSENSITIVE_MAX_RADIX else 0
    return re.compile(rf"-?{digits}(?:\.{digits})?", flags)


_RADIX_PATTERNS = {base: _radix_pattern(base) for base in range(MIN_RADIX, MAX_RADIX + 1)}


def validate_base(base: Any, config: Config, operation: str = OPERATION) -> int | None:
    """Return base as an int, or None when it is invalid and errors are off.

    Raises:
        InvalidBase: If base is not an integer in 2..64 and errors are on
    """
    integral = (isinstance(base, int) and not isinstance(base, bool)) or (
        isinstance(base, float) and base.is_integer()
    )
    if integral and MIN_RADIX <= base <= MAX_RADIX:
        return int(base)
    if config.errors:
        detail = "base out of range" if integral else "base not an integer"
        raise InvalidBase(operation, detail, base)
    logger.debug("invalid_argument_ignored", caller=operation, argument="base", value=repr(base))
    return None


def parse(value: Any, base: Any, config: Config) -> Parts:
    """Convert value, read in the given base, to Parts.

    Args:
        value: str, int, float, Decimal or Parts
        base: None for automatic detection, otherwise 2..64
        config: Active configuration

    Raises:
        InvalidNumber: Malformed string with errors on
        InvalidDigits: Digits outside the alphabet of base with errors on
        InvalidBase: Invalid base with errors on
        PrecisionLoss: Float with more than 15 significant digits with errors on
        TypeError: Unsupported value type
    """
    if base is not None:
        base = validate_base(base, config)

    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal, Parts)):
        raise TypeError(f"{OPERATION} unsupported type: {type(value).__name__}")

    if isinstance(value, float) and not math.isfinite(value):
        return NAN if math.isnan(value) else infinity(1 if value > 0 else -1)

    if isinstance(value, Decimal) and not value.is_finite():
        return NAN if value.is_nan() else infinity(-1 if value.is_signed() else 1)

    return _parse_in_base(value, base, config, value)


def _parse_in_base(value: Any, base: int | None, config: Config, original: Any) -> Parts:
    """Dispatch on the base; original is the caller's value, used in errors."""
    if base is None:
        return _parse_auto(value, config, original)

    if base == 10:
        parts = _parse_auto(value, config, original)
        if parts.coefficient is None:
            return parts
        return round_parts(parts, config.decimal_places + parts.exponent + 1, config.rounding_mode, config)

    return _parse_radix(value, base, config, original)


def _parse_auto(value: Any, config: Config, original: Any) -> Parts:
    if isinstance(value, Parts):
        return value
    if isinstance(value, int):
        return _parse_int(value, config)
    if isinstance(value, float):
        return _parse_float(value, config)
    if isinstance(value, Decimal):
        return _parse_decimal(str(value), original, config, from_number=True)
    return _parse_decimal(value, original, config, from_number=False)


def _parse_int(value: int, config: Config) -> Parts:
    sign = -1 if value < 0 else 1
    magnitude = abs(value)
    if magnitude < BASE:
        return Parts(sign, limb_digits(magnitude) - 1, (magnitude,))
    return _decimal_to_parts(str(magnitude), sign, config)


def _parse_float(value: float, config: Config) -> Parts:
    sign = -1 if math.copysign(1.0, value) < 0 else 1
    magnitude = abs(value)
    if magnitude.is_integer() and magnitude < BASE:
        whole = int(magnitude)
        return Parts(sign, limb_digits(whole) - 1, (whole,))
    text = repr(magnitude)
    _check_float_digits(text, value, config)
    return _decimal_to_parts(text, sign, config)


def _check_float_digits(text: str, value: float, config: Config) -> None:
    digits = _SIGNIFICANT.sub("", text.lower().split("e")[0])
    if config.errors and len(digits) > MAX_FLOAT_DIGITS:
        raise PrecisionLoss(OPERATION, "number type has more than 15 significant digits", value)


def _parse_decimal(text: str, original: Any, config: Config, from_number: bool) -> Parts:
    if not _DECIMAL.fullmatch(text):
        return _parse_lenient(text, original, None, config, from_number)
    if text.startswith("-"):
        return _decimal_to_parts(text[1:], -1, config)
    return _decimal_to_parts(text, 1, config)


def _parse_radix(value: Any, base: int, config: Config, original: Any) -> Parts:
    from_number = not isinstance(value, str)
    if isinstance(value, Parts):
        raise TypeError(f"{OPERATION} a base requires a string or number")
    text = repr(abs(value)) if isinstance(value, float) else str(value)
    if isinstance(value, float) and math.copysign(1.0, value) < 0:
        text = "-" + text

    if not _RADIX_PATTERNS[base].fullmatch(text):
        return _parse_lenient(text, original, base, config, from_number)

    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]

    if isinstance(value, float):
        _check_float_digits(text, value, config)

    return _decimal_to_parts(convert_base(text, 10, base, sign, config), sign, config)


def _decimal_to_parts(text: str, sign: int, config: Config) -> Parts:
    """Regroup an unsigned decimal string (optional point and exponent)."""
    point = text.find(".")
    if point >= 0:
        text = text.replace(".", "", 1)

    marker = text.lower().find("e")
    if marker > 0:
        if point < 0:
            point = marker
        point += int(text[marker + 1 :])
        text = text[:marker]
    elif point < 0:
        point = len(text)

    leading = len(text) - len(text.lstrip("0"))
    digits = text.strip("0")
    if not digits:
        return zero(sign)

    exponent = point - leading - 1
    if exponent > config.max_exp:
        return infinity(sign)
    if exponent < config.min_exp:
        return zero(sign)
    return Parts(sign, exponent, digits_to_coefficient(digits, exponent))


def _parse_lenient(text: str, original: Any, base: int | None, config: Config, from_number: bool) -> Parts:
    """Recover common non-canonical spellings or reject the input."""
    cleaned = text if from_number else _WHITESPACE_OR_PLUS.sub("", text)

    if _INFINITY_OR_NAN.fullmatch(cleaned):
        if cleaned.endswith("NaN"):
            return NAN
        return infinity(-1 if cleaned.startswith("-") else 1)

    if not from_number:
        target = base
        match = _BASE_PREFIX.match(cleaned)
        if match:
            prefix_base = _PREFIX_BASES[match.group(2).lower()]
            if base is None or base == prefix_base:
                cleaned = match.group(1) + cleaned[match.end() :]
                target = prefix_base

        if base is not None:
            cleaned = _DOT_AFTER.sub(r"\1", cleaned)
            cleaned = _DOT_BEFORE.sub(r"0.\1", cleaned)

        if cleaned != text:
            return _parse_in_base(cleaned, target, config, original)

    if config.errors:
        if base is not None:
            raise InvalidDigits(OPERATION, f"not a base {base} number", original)
        raise InvalidNumber(OPERATION, "not a number", original)

    logger.debug("invalid_number_as_nan", value=repr(original), base=base)
    return NAN
