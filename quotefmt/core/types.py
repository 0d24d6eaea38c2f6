"""
Core data types for quote formatting.

This module defines the enumerations and data structures shared by the
formatting helpers.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Protocol, Union


class Direction(IntEnum):
    """Price direction relative to a reference price."""

    FLAT = 0
    DOWN = 1
    UP = 2


class MarketState(Enum):
    """Trading session state as reported by the market-data provider."""

    REGULAR = "REGULAR"
    PRE = "PRE"
    PREPRE = "PREPRE"
    POST = "POST"
    POSTPOST = "POSTPOST"
    CLOSED = "CLOSED"


class Quote(Protocol):
    """Anything exposing a current and a previous-close price."""

    regular_market_price: float
    regular_market_previous_close: float


@dataclass
class QuoteData:
    """
    Quote container for hosts that do not bring their own quote type.

    Attributes:
        symbol: Ticker symbol
        short_name: Display name of the instrument
        regular_market_price: Current price
        regular_market_previous_close: Previous session close
        regular_market_change: Absolute change from previous close
        regular_market_change_percent: Percentage change from previous close
        regular_market_volume: Traded volume
        market_cap: Market capitalization
        market_state: Session state, enum member or provider string
        regular_market_time: Quote time as Unix epoch seconds (0 if unknown)
    """

    symbol: str
    short_name: str = ""
    regular_market_price: float = 0.0
    regular_market_previous_close: float = 0.0
    regular_market_change: float = 0.0
    regular_market_change_percent: float = 0.0
    regular_market_volume: int = 0
    market_cap: int = 0
    market_state: Union[MarketState, str, None] = None
    regular_market_time: int = 0


@dataclass
class ConversionResult:
    """
    Outcome of a fallible conversion.

    Attributes:
        value: Converted value, or the fallback when conversion failed
        error: The error that caused the failure, if any
    """

    value: Any
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
