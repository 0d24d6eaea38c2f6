"""
Data formatting utilities for quote display.

This module provides number formatting, scalar conversion and text cleanup.
"""

from .format_utils import (
    format_abbreviated,
    format_grouped,
    parse_int,
    scale_magnitude,
    to_int,
    to_int_strict,
    to_string,
    to_string_f,
)
from .text_utils import combine, strip_html


__all__ = [
    # Number formatting
    "format_grouped",
    "format_abbreviated",
    "scale_magnitude",
    # Scalar conversion
    "to_int",
    "to_int_strict",
    "parse_int",
    "to_string",
    "to_string_f",
    # Text cleanup
    "strip_html",
    "combine",
]
