"""Arithmetic engine for BigNumber.

This package works on ``Parts`` (sign, exponent, limb coefficient) values:
- limbs: representation, normalisation and comparison
- arithmetic: exact add, subtract, multiply
- division: long division for decimal limbs and arbitrary radices
- rounding: rounding to significant digits in all nine modes
- base_conversion: digit strings between bases 2 and 64
"""

from bignumber.math.arithmetic import absolute, add, multiply, negate, subtract
from bignumber.math.base_conversion import convert_base, to_base_out
from bignumber.math.division import divide, divide_digits
from bignumber.math.limbs import NAN, Parts, compare, infinity, zero
from bignumber.math.rounding import round_parts

__all__ = [
    "NAN",
    "Parts",
    "absolute",
    "add",
    "compare",
    "convert_base",
    "divide",
    "divide_digits",
    "infinity",
    "multiply",
    "negate",
    "round_parts",
    "subtract",
    "to_base_out",
    "zero",
]
