"""
Date utilities for quote timestamps.
"""

from .date_utils import format_timestamp, format_timestamp_short, resolve_timezone, to_datetime


__all__ = [
    "format_timestamp",
    "format_timestamp_short",
    "resolve_timezone",
    "to_datetime",
]
