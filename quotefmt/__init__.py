"""
Quote Formatting Package

Presentation helpers that render financial quote data as human-readable,
optionally ANSI-colored terminal text.

This package features:
- Price direction classification and market state labels
- Bold and directional color escape sequences
- Grouped and abbreviated (K/M/B/T) number rendering
- HTML artifact stripping for upstream text fields
- Timestamp rendering with an injectable time zone
- Quote tables for terminal display
"""

import logging

from .core.logging import (
    configure_default_logging,
    configure_logging,
    enable_debug_for_module,
    get_logger,
    set_log_level,
)


# Set up default logging if not already configured
if not logging.root.handlers:
    configure_default_logging()

from .core.errors import (
    ConfigError,
    ConversionError,
    DataError,
    MagnitudeOutOfRangeError,
    QuoteFormatError,
    ValidationError,
)
from .core.types import ConversionResult, Direction, MarketState, Quote, QuoteData
from .presentation import (
    QuoteFormatter,
    QuoteTable,
    bold,
    color,
    market_state_label,
    price_direction,
    quote_direction,
)
from .utils import (
    combine,
    format_abbreviated,
    format_grouped,
    format_timestamp,
    format_timestamp_short,
    parse_int,
    strip_html,
    to_int,
    to_int_strict,
    to_string,
    to_string_f,
)


__version__ = "1.0.0"
__author__ = "Roo"

__all__ = [
    # Types
    "Direction",
    "MarketState",
    "Quote",
    "QuoteData",
    "ConversionResult",
    # Direction and styling
    "price_direction",
    "quote_direction",
    "market_state_label",
    "bold",
    "color",
    # Numbers and conversion
    "format_grouped",
    "format_abbreviated",
    "to_int",
    "to_int_strict",
    "parse_int",
    "to_string",
    "to_string_f",
    # Text and dates
    "strip_html",
    "combine",
    "format_timestamp",
    "format_timestamp_short",
    # Tables
    "QuoteFormatter",
    "QuoteTable",
    # Error types
    "QuoteFormatError",
    "ValidationError",
    "DataError",
    "ConversionError",
    "MagnitudeOutOfRangeError",
    "ConfigError",
    # Logging
    "configure_logging",
    "configure_default_logging",
    "get_logger",
    "set_log_level",
    "enable_debug_for_module",
]
