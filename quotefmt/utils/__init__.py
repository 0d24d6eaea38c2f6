"""
Utility modules for quote formatting.

This package contains number and text formatting, date rendering and the
shared error handling decorators.
"""

from .data import (
    combine,
    format_abbreviated,
    format_grouped,
    parse_int,
    strip_html,
    to_int,
    to_int_strict,
    to_string,
    to_string_f,
)
from .date import format_timestamp, format_timestamp_short


__all__ = [
    "format_grouped",
    "format_abbreviated",
    "to_int",
    "to_int_strict",
    "parse_int",
    "to_string",
    "to_string_f",
    "strip_html",
    "combine",
    "format_timestamp",
    "format_timestamp_short",
]
