"""Tests for rounding to significant digits."""

import pytest

from bignumber.config import Config
from bignumber.constants import RoundingMode
from bignumber.formatting import to_string, value_of
from bignumber.math.limbs import NAN, Parts, infinity
from bignumber.math.rounding import round_parts, rounds_up
from bignumber.parsing import parse

DEFAULT = Config()


def rounded(text: str, sd: int, mode: int, config: Config = DEFAULT, more: bool = False) -> str:
    return to_string(round_parts(parse(text, None, config), sd, mode, config, more), config)


class TestRoundsUp:
    """Tests for the rounding decision."""

    def test_truncating_modes(self):
        """DOWN never rounds up; UP does for any discarded digit."""
        assert not rounds_up(9, True, False, False, RoundingMode.DOWN)
        assert rounds_up(0, True, False, False, RoundingMode.UP)
        assert not rounds_up(0, False, False, False, RoundingMode.UP)

    def test_directed_modes_depend_on_sign(self):
        """CEIL rounds positives up, FLOOR rounds negatives up in magnitude."""
        assert rounds_up(1, False, False, False, RoundingMode.CEIL)
        assert not rounds_up(1, False, False, True, RoundingMode.CEIL)
        assert rounds_up(1, False, False, True, RoundingMode.FLOOR)
        assert not rounds_up(1, False, False, False, RoundingMode.FLOOR)

    def test_half_modes_away_from_tie(self):
        """Digits above or below half decide regardless of mode."""
        for mode in range(RoundingMode.HALF_UP, RoundingMode.HALF_FLOOR + 1):
            assert rounds_up(6, False, False, False, mode)
            assert not rounds_up(4, True, False, False, mode)

    def test_half_even(self):
        """An exact tie goes to the even neighbour."""
        assert rounds_up(5, False, True, False, RoundingMode.HALF_EVEN)
        assert not rounds_up(5, False, False, False, RoundingMode.HALF_EVEN)
        assert rounds_up(5, True, False, False, RoundingMode.HALF_EVEN)

    def test_fractional_half(self):
        """Odd radixes compare against a fractional midpoint."""
        assert rounds_up(2, False, False, False, RoundingMode.HALF_DOWN, half=1.5)
        assert not rounds_up(1, True, False, False, RoundingMode.HALF_UP, half=1.5)


class TestRoundingModes:
    """Tests for each mode on exact ties."""

    @pytest.mark.parametrize(
        "mode,positive,negative",
        [
            (RoundingMode.UP, "3", "-3"),
            (RoundingMode.DOWN, "2", "-2"),
            (RoundingMode.CEIL, "3", "-2"),
            (RoundingMode.FLOOR, "2", "-3"),
            (RoundingMode.HALF_UP, "3", "-3"),
            (RoundingMode.HALF_DOWN, "2", "-2"),
            (RoundingMode.HALF_EVEN, "2", "-2"),
            (RoundingMode.HALF_CEIL, "3", "-2"),
            (RoundingMode.HALF_FLOOR, "2", "-3"),
        ],
    )
    def test_two_and_a_half(self, mode, positive, negative):
        """2.5 and -2.5 rounded to one significant digit."""
        assert rounded("2.5", 1, mode) == positive
        assert rounded("-2.5", 1, mode) == negative

    def test_half_even_rounds_odd_up(self):
        """3.5 goes to 4 under HALF_EVEN."""
        assert rounded("3.5", 1, RoundingMode.HALF_EVEN) == "4"


class TestRoundParts:
    """Tests for round_parts."""

    def test_carry_adds_digit(self):
        """9.5 rounds to 10, increasing the exponent."""
        assert rounded("9.5", 1, RoundingMode.HALF_UP) == "10"

    def test_carry_across_limbs(self):
        """A carry out of the fraction limb reaches the integer limb."""
        assert rounded("99999999999999.99", 14, RoundingMode.HALF_UP) == "100000000000000"

    def test_keeps_enough_digits(self):
        """Rounding to more digits than present changes nothing."""
        assert rounded("1.25", 10, RoundingMode.DOWN) == "1.25"

    def test_inside_limb(self):
        """Rounding inside a limb clears the discarded digits."""
        assert rounded("123456.789", 4, RoundingMode.HALF_UP) == "123500"
        assert rounded("0.123456", 3, RoundingMode.DOWN) == "0.123"

    def test_zero_significant_digits(self):
        """sd 0 rounds to zero or to one unit of the next place up."""
        assert rounded("0.5", 0, RoundingMode.HALF_UP) == "1"
        assert rounded("0.5", 0, RoundingMode.HALF_EVEN) == "0"
        assert rounded("0.05", 0, RoundingMode.HALF_UP) == "0.1"

    def test_negative_significant_digits(self):
        """Digits entirely below the rounding place collapse."""
        assert rounded("0.001", -1, RoundingMode.UP) == "0.1"
        assert rounded("0.001", -1, RoundingMode.DOWN) == "0"

    def test_zero_keeps_sign(self):
        """A value rounded away keeps its sign on the zero."""
        result = round_parts(parse("-0.001", None, DEFAULT), -1, RoundingMode.DOWN, DEFAULT)
        assert value_of(result, DEFAULT) == "-0"

    def test_inexact_input(self):
        """The more flag turns an apparent exact value into a rounded one."""
        assert rounded("2", 1, RoundingMode.UP, more=True) == "3"
        assert rounded("2", 1, RoundingMode.DOWN, more=True) == "2"

    def test_specials_unchanged(self):
        """NaN and Infinity pass through."""
        assert round_parts(NAN, 5, 4, DEFAULT) is NAN
        assert round_parts(infinity(-1), 5, 4, DEFAULT) == infinity(-1)

    def test_overflow_after_carry(self):
        """A carry past max_exp gives Infinity."""
        narrow = Config(range=(-5, 5))
        assert rounded("999999.9", 6, RoundingMode.HALF_UP, narrow) == "Infinity"

    def test_result_is_normalised(self):
        """Trailing zero limbs are dropped after rounding."""
        result = round_parts(parse("1.00000000000000000001", None, DEFAULT), 3, 4, DEFAULT)
        assert result == Parts(1, 0, (1,))
