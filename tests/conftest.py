"""
Global pytest fixtures for quotefmt tests.

This file contains test fixtures that can be used across all test files.
"""

from unittest.mock import Mock

import pytest
import pytz

from quotefmt.core.types import MarketState, QuoteData
from quotefmt.presentation.console import QuoteFormatter


# 2021-06-15 13:45:30 UTC
FIXED_TIMESTAMP = 1623764730


@pytest.fixture
def utc():
    """UTC zone used to pin date rendering."""
    return pytz.utc


@pytest.fixture
def up_quote():
    """
    Create a quote trading above its previous close.

    Returns:
        QuoteData: Quote with HTML artifacts in its name.
    """
    return QuoteData(
        symbol="AAPL",
        short_name="Apple&nbsp;Inc. &amp; Co",
        regular_market_price=150.25,
        regular_market_previous_close=148.75,
        regular_market_change=1.5,
        regular_market_change_percent=1.0084,
        regular_market_volume=75_123_456,
        market_cap=2_450_000_000_000,
        market_state=MarketState.REGULAR,
        regular_market_time=FIXED_TIMESTAMP,
    )


@pytest.fixture
def down_quote():
    """Create a quote trading below its previous close."""
    return QuoteData(
        symbol="XOM",
        short_name="Exxon Mobil",
        regular_market_price=95.0,
        regular_market_previous_close=100.0,
        regular_market_change=-5.0,
        regular_market_change_percent=-5.0,
        regular_market_volume=999,
        market_cap=400_000_000_000,
        market_state="POST",
        regular_market_time=FIXED_TIMESTAMP,
    )


@pytest.fixture
def flat_quote():
    """Create an unchanged quote with no quote time."""
    return QuoteData(
        symbol="KO",
        short_name="Coca-Cola",
        regular_market_price=60.0,
        regular_market_previous_close=60.0,
        market_state=MarketState.CLOSED,
    )


@pytest.fixture
def mock_quote():
    """
    Create a mock quote exposing only the two price fields.

    Returns:
        Mock: Object satisfying the Quote protocol.
    """
    quote = Mock()
    quote.regular_market_price = 10.0
    quote.regular_market_previous_close = 12.0
    return quote


@pytest.fixture
def plain_formatter():
    """QuoteFormatter without colors, rendering times in UTC."""
    return QuoteFormatter(show_colors=False, tz="UTC")
