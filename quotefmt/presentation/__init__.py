"""
Presentation layer for quote data.

This package contains the terminal styling helpers and the quote table.
"""

from .console import QuoteFormatter, QuoteTable
from .formatter import (
    AnsiCode,
    bold,
    color,
    market_state_label,
    price_direction,
    quote_direction,
)


__all__ = [
    "AnsiCode",
    "bold",
    "color",
    "price_direction",
    "quote_direction",
    "market_state_label",
    "QuoteFormatter",
    "QuoteTable",
]
