"""
Number formatting and scalar conversion utilities.

This module renders integers with thousands separators or with magnitude
suffixes (K, M, B, T), and provides the string/number conversions used as
glue by display code.
"""

import re
from typing import Any, Optional, Tuple, Union

from ...core.config import NUMBER_FORMAT
from ...core.errors import ConversionError, MagnitudeOutOfRangeError
from ...core.logging import get_logger
from ...core.types import ConversionResult
from ..error_handling import safe_operation, with_error_context


logger = get_logger(__name__)

# Optional sign followed by ASCII digits, nothing else
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_grouped(value: Union[int, float]) -> str:
    """
    Format an integer with thousands separators.

    Args:
        value: Integer to format (floats are truncated)

    Returns:
        Grouped string, e.g. 1234567 -> "1,234,567"
    """
    grouped = f"{int(value):,}"
    separator = NUMBER_FORMAT["THOUSANDS_SEPARATOR"]
    if separator != ",":
        grouped = grouped.replace(",", separator)
    return grouped


def scale_magnitude(value: int, base: Optional[int] = None) -> Tuple[int, float]:
    """
    Split a non-negative integer into a power of the base and a scaled value.

    The exponent is floor(log_base(value)), computed exactly on integers.
    The scaled value keeps one decimal digit, truncated toward zero.

    Args:
        value: Non-negative integer, at least one full base step
        base: Abbreviation base (default from NUMBER_FORMAT)

    Returns:
        Tuple of (exponent, scaled value)
    """
    base = base or NUMBER_FORMAT["ABBREVIATION_BASE"]

    exponent = 0
    divisor = 1
    while value >= divisor * base:
        divisor *= base
        exponent += 1

    tenths = (value * 10) // divisor
    return exponent, tenths / 10


def format_abbreviated(value: Union[int, float]) -> str:
    """
    Format a number with a single magnitude suffix.

    Values below one base step render as plain integers. Larger values are
    scaled, truncated to one decimal digit and shown with two decimals:
    1500 -> "1.50K", 1500000 -> "1.50M". The sign of negative values is kept.

    Args:
        value: Number to format (floats are truncated)

    Returns:
        Abbreviated string

    Raises:
        MagnitudeOutOfRangeError: If the value needs a suffix beyond the table
    """
    number = int(value)
    magnitude = abs(number)
    base = NUMBER_FORMAT["ABBREVIATION_BASE"]
    suffixes = NUMBER_FORMAT["SUFFIXES"]

    if magnitude < base:
        return str(number)

    exponent, scaled = scale_magnitude(magnitude, base)
    if exponent >= len(suffixes):
        raise MagnitudeOutOfRangeError(
            f"Value exceeds largest suffix '{suffixes[-1]}'",
            value=number,
            details={"exponent": exponent},
        )

    sign = "-" if number < 0 else ""
    precision = NUMBER_FORMAT["ABBREVIATION_PRECISION"]
    return f"{sign}{scaled:.{precision}f}{suffixes[exponent]}"


def to_int_strict(value: Any) -> int:
    """
    Convert a base-10 integer string to an int.

    Accepts an optional leading sign and ASCII digits only; surrounding
    whitespace, underscores and decimal points are rejected.

    Args:
        value: String to convert

    Returns:
        Parsed integer

    Raises:
        ConversionError: If the value is not an integer string
    """
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        try:
            return int(value)
        except ValueError as e:
            # Digit strings past the interpreter's conversion limit
            raise ConversionError(
                "Integer string too long", {"value": repr(value[:20]), "length": len(value)}
            ) from e
    raise ConversionError("Invalid integer string", {"value": repr(value)})


@safe_operation(default_value=0)
def to_int(value: Any) -> int:
    """Convert a string to an int, yielding 0 when it cannot be parsed."""
    return to_int_strict(value)


def parse_int(value: Any) -> ConversionResult:
    """
    Convert a string to an int without raising.

    Args:
        value: String to convert

    Returns:
        ConversionResult carrying the int, or 0 and the error on failure
    """
    try:
        return ConversionResult(to_int_strict(value))
    except ConversionError as e:
        return ConversionResult(0, e)


def to_string(value: int) -> str:
    """Convert an int to its decimal string."""
    return str(value)


@with_error_context(lambda value: {"value": repr(value)})
def to_string_f(value: float) -> str:
    """
    Convert a float to a string with two decimal places.

    Args:
        value: Number to format

    Returns:
        Formatted string, e.g. 3.14159 -> "3.14"

    Raises:
        ConversionError: If the value is not numeric
    """
    precision = NUMBER_FORMAT["FLOAT_PRECISION"]
    return f"{value:.{precision}f}"
