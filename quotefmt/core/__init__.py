"""
Core functionality for quote formatting.

This package contains configuration, errors, logging and shared types.
"""

from .errors import (
    ConfigError,
    ConversionError,
    DataError,
    MagnitudeOutOfRangeError,
    QuoteFormatError,
    ValidationError,
    format_error_details,
)
from .types import ConversionResult, Direction, MarketState, Quote, QuoteData


__all__ = [
    "QuoteFormatError",
    "ValidationError",
    "DataError",
    "ConversionError",
    "MagnitudeOutOfRangeError",
    "ConfigError",
    "format_error_details",
    "Direction",
    "MarketState",
    "Quote",
    "QuoteData",
    "ConversionResult",
]
