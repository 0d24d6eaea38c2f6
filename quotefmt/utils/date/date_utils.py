"""
Date utilities for quote timestamps.

This module renders Unix epoch timestamps as fixed-width date strings. The
display zone is injectable: pass a tzinfo or an IANA zone name, or leave it
out to use the configured zone (falling back to the host's local zone).
"""

import datetime
from typing import Optional, Union

import pytz

from ...core.config import DATE_CONFIG
from ...core.errors import ValidationError
from ...core.logging import get_logger


logger = get_logger(__name__)

TimezoneLike = Union[datetime.tzinfo, str, None]


def resolve_timezone(tz: TimezoneLike = None) -> Optional[datetime.tzinfo]:
    """
    Resolve a display time zone.

    Args:
        tz: tzinfo, IANA zone name, or None for the configured zone

    Returns:
        tzinfo, or None when rendering in the host's local zone

    Raises:
        ValidationError: If a zone name is unknown
    """
    if tz is None:
        tz = DATE_CONFIG["TIMEZONE"]
    if tz is None:
        return None

    if isinstance(tz, str):
        try:
            return pytz.timezone(tz)
        except pytz.UnknownTimeZoneError as e:
            raise ValidationError(f"Unknown time zone: {tz}", {"timezone": tz}) from e

    return tz


def to_datetime(timestamp: int, tz: TimezoneLike = None) -> datetime.datetime:
    """
    Convert epoch seconds to a datetime in the display zone.

    Args:
        timestamp: Unix epoch seconds
        tz: Display zone (see resolve_timezone)

    Returns:
        Timezone-aware datetime, or a naive local datetime when no zone is set
    """
    zone = resolve_timezone(tz)
    if zone is None:
        return datetime.datetime.fromtimestamp(timestamp)
    return datetime.datetime.fromtimestamp(timestamp, tz=zone)


def _format(timestamp: int, fmt: str, tz: TimezoneLike) -> str:
    if timestamp == 0:
        return DATE_CONFIG["PLACEHOLDER"]
    try:
        return to_datetime(timestamp, tz).strftime(fmt)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Cannot render timestamp {timestamp}: {e}")
        return DATE_CONFIG["PLACEHOLDER"]


def format_timestamp(timestamp: int, tz: TimezoneLike = None) -> str:
    """
    Format a timestamp as time and date.

    Args:
        timestamp: Unix epoch seconds, 0 when unknown
        tz: Display zone (see resolve_timezone)

    Returns:
        "HH:MM:SS MM/DD/YYYY", or "--" for a zero or unrepresentable timestamp
    """
    return _format(timestamp, DATE_CONFIG["FULL_FORMAT"], tz)


def format_timestamp_short(timestamp: int, tz: TimezoneLike = None) -> str:
    """Format a timestamp as "MM/DD/YYYY", or "--" for a zero timestamp."""
    return _format(timestamp, DATE_CONFIG["SHORT_FORMAT"], tz)
