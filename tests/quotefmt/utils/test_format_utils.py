"""
Tests for number formatting and scalar conversion.
"""

import sys
import unittest
from unittest.mock import patch

import pytest

from quotefmt.core.errors import ConversionError, MagnitudeOutOfRangeError
from quotefmt.utils.data.format_utils import (
    format_abbreviated,
    format_grouped,
    parse_int,
    scale_magnitude,
    to_int,
    to_int_strict,
    to_string,
    to_string_f,
)


class TestFormatGrouped(unittest.TestCase):
    """Test thousands grouping."""

    def test_format_grouped(self):
        self.assertEqual(format_grouped(0), "0")
        self.assertEqual(format_grouped(999), "999")
        self.assertEqual(format_grouped(1000), "1,000")
        self.assertEqual(format_grouped(1234567), "1,234,567")
        self.assertEqual(format_grouped(-1234567), "-1,234,567")

    def test_format_grouped_truncates_floats(self):
        self.assertEqual(format_grouped(1234.9), "1,234")


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (7, "7"),
        (999, "999"),
        (-999, "-999"),
        (1000, "1.00K"),
        (1500, "1.50K"),
        (1999, "1.90K"),  # truncated, not rounded
        (999_999, "999.90K"),
        (1_000_000, "1.00M"),
        (1_500_000, "1.50M"),
        (-1_500_000, "-1.50M"),
        (2_500_000_000, "2.50B"),
        (1_234_000_000_000, "1.20T"),
        (999_999_999_999_999, "999.90T"),
    ],
)
def test_format_abbreviated(value, expected):
    assert format_abbreviated(value) == expected


@pytest.mark.parametrize("value", [10**15, -(10**15), 10**18])
def test_format_abbreviated_out_of_range(value):
    with pytest.raises(MagnitudeOutOfRangeError) as excinfo:
        format_abbreviated(value)
    assert excinfo.value.value == value
    assert excinfo.value.details["exponent"] >= 5


def test_scale_magnitude():
    assert scale_magnitude(1500) == (1, 1.5)
    assert scale_magnitude(1_000_000) == (2, 1.0)
    assert scale_magnitude(2048, base=1024) == (1, 2.0)


class TestIntConversion(unittest.TestCase):
    """Test string to int conversion and its fallbacks."""

    def test_to_int_valid(self):
        self.assertEqual(to_int("42"), 42)
        self.assertEqual(to_int("-7"), -7)
        self.assertEqual(to_int("+5"), 5)
        self.assertEqual(to_int("007"), 7)

    def test_to_int_invalid_yields_zero(self):
        for value in ["", "abc", " 42", "42 ", "4.2", "1_000", "1,000", None, 12]:
            with self.subTest(value=value):
                self.assertEqual(to_int(value), 0)

    def test_to_int_strict_raises(self):
        with self.assertRaises(ConversionError) as ctx:
            to_int_strict("abc")
        self.assertEqual(ctx.exception.details["value"], "'abc'")

    def test_parse_int_success(self):
        result = parse_int("123")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 123)
        self.assertIsNone(result.error)

    def test_parse_int_failure(self):
        result = parse_int("12a")
        self.assertFalse(result.ok)
        self.assertEqual(result.value, 0)
        self.assertIsInstance(result.error, ConversionError)

    def test_int_conversion_failure_is_translated(self):
        with patch(
            "quotefmt.utils.data.format_utils.int", side_effect=ValueError("limit"), create=True
        ):
            self.assertEqual(to_int("123"), 0)
            result = parse_int("123")
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error.__cause__, ValueError)

    @unittest.skipUnless(
        getattr(sys, "get_int_max_str_digits", lambda: 0)(), "no integer string length limit"
    )
    def test_overlong_digit_strings_fail_open(self):
        """Digit strings past the interpreter's conversion limit yield zero."""
        length = max(sys.get_int_max_str_digits() + 1, 5000)
        digits = "1" * length
        self.assertEqual(to_int(digits), 0)

        result = parse_int(digits)
        self.assertFalse(result.ok)
        self.assertEqual(result.value, 0)
        self.assertIsInstance(result.error, ConversionError)
        self.assertEqual(result.error.details["length"], length)

        with self.assertRaises(ConversionError):
            to_int_strict("-" + digits)


@pytest.mark.parametrize("value", [0, 1, -1, 123456789, 2**63 - 1, -(2**63)])
def test_int_string_round_trip(value):
    assert to_int(to_string(value)) == value


class TestFloatConversion(unittest.TestCase):
    def test_to_string_f(self):
        self.assertEqual(to_string_f(3.14159), "3.14")
        self.assertEqual(to_string_f(2), "2.00")
        self.assertEqual(to_string_f(-0.5), "-0.50")
        self.assertEqual(to_string_f(1234.5), "1234.50")

    def test_to_string_f_rejects_non_numbers(self):
        with self.assertRaises(ConversionError) as ctx:
            to_string_f("abc")
        self.assertEqual(ctx.exception.details["value"], "'abc'")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)


if __name__ == "__main__":
    unittest.main()
