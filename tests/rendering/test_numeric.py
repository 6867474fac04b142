"""Tests for integer and float rendering."""

import pytest

from typed_format import parse_specifier
from typed_format.rendering.numeric import dynamic_precision
from typed_format.rendering.numeric import render_float
from typed_format.rendering.numeric import render_integer
from typed_format.rendering.numeric import truncate_int64


class TestRenderInteger:
    """Test integer digits in each base."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (5, "b", "101"),
            (8, "o", "10"),
            (255, "x", "ff"),
            (255, "X", "FF"),
            (1234567, ",", "1,234,567"),
            (1234567, "n", "1,234,567"),
            (5, "+", "+5"),
            (-5, "+", "-5"),
            (42, "", "42"),
        ],
    )
    def test_bases_and_flags(self, value: int, spec: str, expected: str) -> None:
        """Test base selection, sign and grouping."""
        assert render_integer(value, parse_specifier(spec)) == expected

    def test_negative_hex_is_twos_complement(self) -> None:
        """Test negative values in a base use 64-bit two's complement."""
        assert render_integer(-1, parse_specifier("x")) == "ffffffffffffffff"

    def test_sign_ignored_for_bases(self) -> None:
        """Test the plus sign only applies to decimal output."""
        assert render_integer(5, parse_specifier("+b")) == "101"


class TestDynamicPrecision:
    """Test automatic precision selection."""

    def test_single_fraction_digit(self) -> None:
        """Test a value with one fractional digit."""
        assert dynamic_precision(2.5) == (1, False)

    def test_whole_number_keeps_minimum(self) -> None:
        """Test whole numbers still get the minimum precision."""
        assert dynamic_precision(10.0) == (1, False)

    def test_general_minimum(self) -> None:
        """Test the general limits allow zero fractional digits."""
        assert dynamic_precision(3.0, 0, 6, 6) == (0, False)

    def test_ceiling_switches_to_exponent(self) -> None:
        """Test large values switch to exponent notation past the ceiling."""
        assert dynamic_precision(1234567.0, 0, 6, 6) == (5, True)
        assert dynamic_precision(1000000.0, 0, 6, 6) == (0, True)

    def test_non_finite(self) -> None:
        """Test infinity and NaN use the minimum precision."""
        assert dynamic_precision(float("inf")) == (1, False)
        assert dynamic_precision(float("nan")) == (1, False)


class TestRenderFloat:
    """Test float rendering under each presentation type."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (2.5, "", "2.5"),
            (-2.5, "", "-2.5"),
            (0.1, "", "0.1"),
            (1.1, "", "1.1"),
            (123.456, "", "123.456"),
            (1e20, "", "100000000000000000000"),
            (3.14159265, ".2f", "3.14"),
            (2.12579, ".2", "2.13"),
            (0.5, "%", "50.000000"),
            (0.125, ".2%", "12.50"),
            (12345.6789, "e", "1.234568e+04"),
            (12345.6789, ".3E", "1.235E+04"),
            (1234567.0, "g", "1.23457e+06"),
            (1000000.0, "g", "1e+06"),
            (3.0, "g", "3"),
            (1234.5, "n", "1,234.5"),
            (2.5, "+", "+2.5"),
            (1.5, "f", "1.500000"),
        ],
    )
    def test_presentation(self, value: float, spec: str, expected: str) -> None:
        """Test the digits produced for each specifier."""
        assert render_float(value, parse_specifier(spec)) == expected

    def test_small_value_uses_exponent(self) -> None:
        """Test very small values switch to exponent notation."""
        assert render_float(0.0009765625, parse_specifier("")) == "9.765625e-04"

    def test_infinity(self) -> None:
        """Test infinity renders as inf."""
        assert render_float(float("inf"), parse_specifier("")) == "inf"
        assert render_float(float("-inf"), parse_specifier("F")) == "-INF"


class TestTruncateInt64:
    """Test conversion of numbers to 64-bit integers."""

    def test_truncates_toward_zero(self) -> None:
        """Test fractions are dropped toward zero."""
        assert truncate_int64(2.7) == 2
        assert truncate_int64(-2.7) == -2

    def test_out_of_range(self) -> None:
        """Test values outside the signed 64-bit range overflow."""
        with pytest.raises(OverflowError):
            truncate_int64(2**63)

    def test_infinity(self) -> None:
        """Test infinity cannot be truncated."""
        with pytest.raises(OverflowError):
            truncate_int64(float("inf"))

    def test_nan(self) -> None:
        """Test NaN cannot be truncated."""
        with pytest.raises(ValueError):
            truncate_int64(float("nan"))
