"""Engine constants.

Coefficients are stored as limbs of LOG_BASE decimal digits each, so every
limb is an int in [0, BASE).
"""

from enum import IntEnum

# Limb radix (10^14) and the number of decimal digits per limb
BASE = 10**14
LOG_BASE = 14

# Limbs are split at sqrt(BASE) for multiplication so half-products stay
# below 2^53
SQRT_BASE = 10**7

# Upper bound for decimal places, precision and exponent range options
MAX = 10**9

# Largest integer exponent accepted by pow() (2^53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1

# Significant digits a float can carry without loss
MAX_FLOAT_DIGITS = 15

# Digit alphabet for bases 2 to 64
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ$_"

MIN_RADIX = 2
MAX_RADIX = len(ALPHABET)

# Bases up to 36 are parsed case-insensitively
CASE_INSENSITIVE_MAX_RADIX = 36


class RoundingMode(IntEnum):
    """Rounding modes, numbered as accepted by the rounding_mode option."""

    UP = 0  # Away from zero
    DOWN = 1  # Towards zero
    CEIL = 2  # Towards +Infinity
    FLOOR = 3  # Towards -Infinity
    HALF_UP = 4  # Nearest, ties away from zero
    HALF_DOWN = 5  # Nearest, ties towards zero
    HALF_EVEN = 6  # Nearest, ties to even neighbour
    HALF_CEIL = 7  # Nearest, ties towards +Infinity
    HALF_FLOOR = 8  # Nearest, ties towards -Infinity


# Modulo mode only: Euclidean division, remainder is never negative
EUCLID = 9


__all__ = [
    "ALPHABET",
    "BASE",
    "CASE_INSENSITIVE_MAX_RADIX",
    "EUCLID",
    "LOG_BASE",
    "MAX",
    "MAX_FLOAT_DIGITS",
    "MAX_RADIX",
    "MAX_SAFE_INTEGER",
    "MIN_RADIX",
    "RoundingMode",
    "SQRT_BASE",
]
