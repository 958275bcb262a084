"""Tests for string output."""

import pytest

from bignumber.config import Config
from bignumber.constants import RoundingMode
from bignumber.formatting import (
    group_digits,
    to_exponential,
    to_fixed,
    to_format,
    to_fraction,
    to_precision,
    to_string,
    value_of,
)
from bignumber.math.limbs import NAN, Parts, infinity, zero
from bignumber.parsing import parse

DEFAULT = Config()
HALF_UP = RoundingMode.HALF_UP


def p(text: str) -> Parts:
    return parse(text, None, DEFAULT)


def fraction(text: str, max_denominator: str | None = None) -> tuple[str, str]:
    limit = p(max_denominator) if max_denominator is not None else None
    n, d = to_fraction(p(text), limit, DEFAULT)
    return to_string(n, DEFAULT), to_string(d, DEFAULT)


class TestToString:
    """Tests for to_string and value_of."""

    def test_exponential_thresholds(self):
        """Exponential notation starts at the exponential_at bounds."""
        assert to_string(p("1e21"), DEFAULT) == "1e+21"
        assert to_string(p("1e19"), DEFAULT) == "10000000000000000000"
        assert to_string(p("0.0000001"), DEFAULT) == "1e-7"
        assert to_string(p("0.000001"), DEFAULT) == "0.000001"

    def test_narrow_thresholds(self):
        """exponential_at (0, 0) always uses exponential notation."""
        config = Config(exponential_at=0)
        assert to_string(p("12.5"), config) == "1.25e+1"

    def test_specials(self):
        """NaN and the infinities have fixed spellings."""
        assert to_string(NAN, DEFAULT) == "NaN"
        assert to_string(infinity(1), DEFAULT) == "Infinity"
        assert to_string(infinity(-1), DEFAULT) == "-Infinity"

    def test_negative_zero(self):
        """to_string drops the sign of -0, value_of keeps it."""
        assert to_string(zero(-1), DEFAULT) == "0"
        assert value_of(zero(-1), DEFAULT) == "-0"

    def test_radix(self):
        """Values convert to other bases."""
        assert to_string(p("255"), DEFAULT, 2) == "11111111"
        assert to_string(p("-255"), DEFAULT, 16) == "-ff"
        assert to_string(p("0.5"), DEFAULT, 2) == "0.1"
        assert to_string(zero(-1), DEFAULT, 8) == "0"


class TestToFixed:
    """Tests for to_fixed."""

    def test_rounds_and_pads(self):
        """The fraction has exactly dp digits."""
        assert to_fixed(p("123.456"), 2, HALF_UP, DEFAULT) == "123.46"
        assert to_fixed(p("123.456"), 5, HALF_UP, DEFAULT) == "123.45600"
        assert to_fixed(p("7"), 0, HALF_UP, DEFAULT) == "7"

    def test_negative_rounding_to_zero_keeps_sign(self):
        """A negative value rounded to zero keeps its minus sign."""
        assert to_fixed(p("-0.0001"), 2, HALF_UP, DEFAULT) == "-0.00"

    def test_never_exponential(self):
        """Large values are written out in full."""
        assert to_fixed(p("1e21"), None, HALF_UP, DEFAULT) == "1" + "0" * 21

    def test_mode(self):
        """The rounding mode argument is used."""
        assert to_fixed(p("2.5"), 0, RoundingMode.HALF_EVEN, DEFAULT) == "2"
        assert to_fixed(p("-2.5"), 0, RoundingMode.FLOOR, DEFAULT) == "-3"

    def test_specials(self):
        """Infinity is written as such."""
        assert to_fixed(infinity(-1), 2, HALF_UP, DEFAULT) == "-Infinity"


class TestToExponential:
    """Tests for to_exponential."""

    @pytest.mark.parametrize(
        "dp,expected",
        [(0, "5e+1"), (3, "4.560e+1"), (None, "4.56e+1")],
    )
    def test_digits_after_point(self, dp, expected):
        """45.6 with different numbers of fraction digits."""
        assert to_exponential(p("45.6"), dp, HALF_UP, DEFAULT) == expected

    def test_zero(self):
        """Zero is padded like any other value."""
        assert to_exponential(zero(), 2, HALF_UP, DEFAULT) == "0.00e+0"

    def test_negative_small(self):
        """Negative exponents are signed."""
        assert to_exponential(p("-0.000123"), 1, HALF_UP, DEFAULT) == "-1.2e-4"


class TestToPrecision:
    """Tests for to_precision."""

    def test_fixed_when_digits_fit(self):
        """Fixed-point output is padded to sd significant digits."""
        assert to_precision(p("45.6"), 5, HALF_UP, DEFAULT) == "45.600"
        assert to_precision(p("0.000123"), 2, HALF_UP, DEFAULT) == "0.00012"

    def test_exponential_when_integer_part_too_long(self):
        """The integer part needing more digits than sd switches notation."""
        assert to_precision(p("45.6"), 1, HALF_UP, DEFAULT) == "5e+1"
        assert to_precision(p("123456"), 2, HALF_UP, DEFAULT) == "1.2e+5"

    def test_exponential_below_threshold(self):
        """Small exponents follow exponential_at."""
        config = Config(exponential_at=(-3, 20))
        assert to_precision(p("0.000123"), 2, HALF_UP, config) == "1.2e-4"

    def test_no_digits_is_to_string(self):
        """Without sd the value is written as by to_string."""
        assert to_precision(p("1e21"), None, HALF_UP, DEFAULT) == "1e+21"


class TestGrouping:
    """Tests for group_digits and to_format."""

    def test_default_grouping(self):
        """Thousands are separated with commas."""
        assert to_format(p("1234567.891"), 2, HALF_UP, DEFAULT) == "1,234,567.89"
        assert to_format(p("-1234"), None, HALF_UP, DEFAULT) == "-1,234"
        assert to_format(p("123"), None, HALF_UP, DEFAULT) == "123"

    def test_secondary_group_size(self):
        """A secondary group size gives Indian-style grouping."""
        config = Config(format={"secondaryGroupSize": 2})
        assert group_digits("1234567.89", config) == "12,34,567.89"

    def test_fraction_grouping(self):
        """Fraction digits are grouped from the point."""
        config = Config(format={"fractionGroupSize": 2, "fractionGroupSeparator": " "})
        assert to_format(p("0.12345"), None, HALF_UP, config) == "0.12 34 5"

    def test_custom_separators(self):
        """Separators come from the format configuration."""
        config = Config(format={"decimalSeparator": ",", "groupSeparator": "."})
        assert group_digits("1234.5", config) == "1.234,5"

    def test_no_grouping(self):
        """Group size 0 disables integer grouping."""
        config = Config(format={"groupSize": 0})
        assert group_digits("1234567", config) == "1234567"

    def test_specials_untouched(self):
        """NaN is not grouped."""
        assert to_format(NAN, 2, HALF_UP, DEFAULT) == "NaN"


class TestToFraction:
    """Tests for to_fraction."""

    def test_simple_fractions(self):
        """Terminating decimals become exact fractions."""
        assert fraction("0.75") == ("3", "4")
        assert fraction("0.1") == ("1", "10")

    def test_sign_on_numerator(self):
        """The numerator carries the sign."""
        assert fraction("-0.5") == ("-1", "2")

    def test_integer(self):
        """Integers have denominator 1."""
        assert fraction("5") == ("5", "1")

    def test_max_denominator(self):
        """The best approximation within the limit is chosen."""
        assert fraction("3.14159265358979", "1000") == ("355", "113")
        assert fraction("0.333", "10") == ("1", "3")

    def test_intermediates_beyond_max_exp(self):
        """Denominators may grow past max_exp while searching."""
        narrow = Config(range=(-20, 3))
        n, d = to_fraction(parse("0.0625", None, narrow), None, narrow)
        assert (to_string(n, narrow), to_string(d, narrow)) == ("1", "16")
        assert narrow.updated(range=(narrow.min_exp, 10**9)).max_exp == 10**9
