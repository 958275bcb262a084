"""Tests for exact addition, subtraction and multiplication."""

import pytest

from bignumber.config import Config
from bignumber.constants import RoundingMode
from bignumber.formatting import to_fixed, to_string, value_of
from bignumber.math.arithmetic import absolute, add, multiply, negate, subtract
from bignumber.math.limbs import NAN, Parts, infinity, zero
from bignumber.parsing import parse

DEFAULT = Config()


def p(text: str, config: Config = DEFAULT) -> Parts:
    return parse(text, None, config)


def s(parts: Parts) -> str:
    return to_string(parts, DEFAULT)


def full(parts: Parts) -> str:
    return to_fixed(parts, None, DEFAULT.rounding_mode, DEFAULT)


class TestSign:
    """Tests for negate and absolute."""

    def test_negate(self):
        """negate flips the sign and leaves NaN alone."""
        assert s(negate(p("1.5"))) == "-1.5"
        assert negate(NAN) is NAN
        assert negate(infinity(1)) == infinity(-1)

    def test_absolute(self):
        """absolute drops a negative sign."""
        assert s(absolute(p("-1.5"))) == "1.5"
        assert absolute(infinity(-1)) == infinity(1)
        assert value_of(absolute(zero(-1)), DEFAULT) == "0"


class TestAdd:
    """Tests for add."""

    def test_carry_into_integer_part(self):
        """123.456 + 0.544 = 124."""
        assert s(add(p("123.456"), p("0.544"), DEFAULT)) == "124"

    def test_carry_into_new_limb(self):
        """A carry out of the leading limb adds a limb."""
        assert s(add(p("99999999999999"), p("1"), DEFAULT)) == "100000000000000"

    def test_mixed_signs(self):
        """Adding a negative subtracts."""
        assert s(add(p("5"), p("-7.25"), DEFAULT)) == "-2.25"

    def test_widely_separated_exponents(self):
        """Operands whose limbs do not overlap are aligned exactly."""
        result = add(p("1e30"), p("1e-30"), DEFAULT)
        assert full(result) == "1" + "0" * 30 + "." + "0" * 29 + "1"

    def test_zero_operands(self):
        """x + 0 is x; signed zeros add per sign."""
        assert s(add(p("5"), zero(-1), DEFAULT)) == "5"
        assert s(add(zero(), p("-3"), DEFAULT)) == "-3"
        assert value_of(add(zero(-1), zero(-1), DEFAULT), DEFAULT) == "-0"
        assert value_of(add(zero(1), zero(-1), DEFAULT), DEFAULT) == "0"

    def test_infinities(self):
        """Infinity absorbs finite values; opposite infinities give NaN."""
        assert add(infinity(1), p("5"), DEFAULT) == infinity(1)
        assert add(infinity(1), infinity(-1), DEFAULT) is NAN
        assert add(infinity(-1), infinity(-1), DEFAULT) == infinity(-1)

    def test_nan_propagates(self):
        """NaN plus anything is NaN."""
        assert add(NAN, p("1"), DEFAULT) is NAN
        assert add(p("1"), NAN, DEFAULT) is NAN


class TestSubtract:
    """Tests for subtract."""

    def test_negative_result(self):
        """0.1 - 0.3 = -0.2."""
        assert s(subtract(p("0.1"), p("0.3"), DEFAULT)) == "-0.2"

    def test_borrow_across_limbs(self):
        """Borrowing runs through zero limbs."""
        result = subtract(p("1"), p("0.0000000000000001"), DEFAULT)
        assert s(result) == "0." + "9" * 16

    def test_x_minus_x_is_positive_zero(self):
        """Exact cancellation gives +0."""
        assert value_of(subtract(p("1.5"), p("1.5"), DEFAULT), DEFAULT) == "0"

    def test_x_minus_x_under_floor_is_negative_zero(self):
        """Rounding toward -Infinity makes cancellation give -0."""
        floor = Config(rounding_mode=RoundingMode.FLOOR)
        assert value_of(subtract(p("1.5"), p("1.5"), floor), floor) == "-0"
        assert value_of(subtract(zero(), zero(), floor), floor) == "-0"

    def test_subtract_from_zero(self):
        """0 - y is -y."""
        assert s(subtract(zero(), p("2.5"), DEFAULT)) == "-2.5"

    def test_infinities(self):
        """Infinity - Infinity is NaN; finite - Infinity is -Infinity."""
        assert subtract(infinity(1), infinity(1), DEFAULT) is NAN
        assert subtract(p("5"), infinity(1), DEFAULT) == infinity(-1)
        assert subtract(infinity(1), p("5"), DEFAULT) == infinity(1)
        assert subtract(infinity(1), infinity(-1), DEFAULT) == infinity(1)

    def test_longer_coefficient_wins(self):
        """Equal leading limbs: the longer coefficient is the larger."""
        result = subtract(p("1.5"), p("1.500000000000001"), DEFAULT)
        assert s(result) == "-1e-15"


class TestMultiply:
    """Tests for multiply."""

    def test_simple(self):
        """1.5 * -2 = -3."""
        assert s(multiply(p("1.5"), p("-2"), DEFAULT)) == "-3"

    def test_matches_python_integers(self):
        """Multi-limb products are exact."""
        a, b = 12345678901234567890, 98765432109876543210
        result = multiply(p(str(a)), p(str(b)), DEFAULT)
        assert full(result) == str(a * b)

    def test_half_limb_split(self):
        """Limbs near BASE exercise the high/low half products."""
        a = 10**14 - 1
        result = multiply(p(str(a)), p(str(a)), DEFAULT)
        assert full(result) == str(a * a)

    def test_fractions(self):
        """Exponents of fractional operands add."""
        assert s(multiply(p("0.001"), p("0.002"), DEFAULT)) == "0.000002"

    def test_zero_and_infinity(self):
        """0 * Infinity is NaN; signs combine otherwise."""
        assert multiply(infinity(1), zero(), DEFAULT) is NAN
        assert multiply(infinity(1), p("-2"), DEFAULT) == infinity(-1)
        assert value_of(multiply(zero(), p("-3"), DEFAULT), DEFAULT) == "-0"

    def test_overflow_and_underflow(self):
        """Products outside the range become Infinity or Zero."""
        narrow = Config(range=(-10, 10))
        assert multiply(p("1e6", narrow), p("1e6", narrow), narrow) == infinity(1)
        assert multiply(p("1e-6", narrow), p("1e-6", narrow), narrow).is_zero

    @pytest.mark.parametrize(
        "a,b",
        [
            ("3.14159", "2.71828"),
            ("-0.5", "123456789.987654321"),
            ("1e-20", "1e20"),
        ],
    )
    def test_commutative(self, a, b):
        """a * b == b * a and a + b == b + a."""
        assert multiply(p(a), p(b), DEFAULT) == multiply(p(b), p(a), DEFAULT)
        assert add(p(a), p(b), DEFAULT) == add(p(b), p(a), DEFAULT)

    @pytest.mark.parametrize(
        "a,b,c",
        [
            ("0.1", "0.2", "0.3"),
            ("99999999999999.5", "-0.25", "123456789012345678901234567890"),
            ("-1e-30", "7.77", "1e30"),
            ("3.14159", "-2.71828", "1.41421356"),
        ],
    )
    def test_associative(self, a, b, c):
        """(a + b) + c == a + (b + c) and likewise for products."""
        x, y, z = p(a), p(b), p(c)
        assert add(add(x, y, DEFAULT), z, DEFAULT) == add(x, add(y, z, DEFAULT), DEFAULT)
        assert multiply(multiply(x, y, DEFAULT), z, DEFAULT) == multiply(x, multiply(y, z, DEFAULT), DEFAULT)
