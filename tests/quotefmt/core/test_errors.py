#!/usr/bin/env python3
"""
Tests for the error hierarchy

This test file verifies:
- Error class hierarchy and inheritance
- Error details and formatting
"""

import unittest

from quotefmt.core.errors import (
    ConfigError,
    ConversionError,
    DataError,
    MagnitudeOutOfRangeError,
    QuoteFormatError,
    ValidationError,
    format_error_details,
)


class TestErrorHierarchy(unittest.TestCase):
    """Test the error class hierarchy and inheritance."""

    def test_basic_inheritance(self):
        """Test basic inheritance relationships between error classes."""
        self.assertTrue(issubclass(QuoteFormatError, Exception))
        self.assertTrue(issubclass(ValidationError, QuoteFormatError))
        self.assertTrue(issubclass(ConfigError, QuoteFormatError))
        self.assertTrue(issubclass(ConversionError, DataError))
        self.assertTrue(issubclass(MagnitudeOutOfRangeError, DataError))
        self.assertTrue(issubclass(DataError, QuoteFormatError))

    def test_magnitude_error_keeps_value(self):
        error = MagnitudeOutOfRangeError("Too big", value=10**15, details={"exponent": 5})
        self.assertEqual(error.value, 10**15)
        self.assertEqual(error.details["exponent"], 5)

    def test_exception_chaining(self):
        """Test exception chaining"""
        original_error = ValueError("Original error")
        try:
            try:
                raise original_error
            except ValueError as e:
                raise ConversionError("Chained error") from e
        except ConversionError as e:
            self.assertIs(e.__cause__, original_error)


class TestErrorFormatting(unittest.TestCase):
    """Test error formatting and details."""

    def test_str_without_details(self):
        self.assertEqual(str(QuoteFormatError("Simple error")), "Simple error")

    def test_str_with_details(self):
        error = ConversionError("Invalid integer string", {"value": "'abc'"})
        self.assertEqual(str(error), "Invalid integer string (value='abc')")

    def test_format_error_details(self):
        """Test formatting of package and standard errors for logs."""
        self.assertEqual(
            format_error_details(DataError("Bad data", {"field": "volume"})),
            "DataError: Bad data (field=volume)",
        )
        self.assertEqual(format_error_details(ConfigError("Missing")), "ConfigError: Missing")
        self.assertEqual(format_error_details(KeyError("x")), "KeyError: 'x'")


if __name__ == "__main__":
    unittest.main()
