"""
Console presentation of quote tables.

This module composes the formatting helpers into display rows and renders
a list of quotes as a terminal table.
"""

from typing import Dict, Iterable, List, Optional

import pandas as pd
from tabulate import tabulate, tabulate_formats

from ..core.config import DISPLAY, NUMBER_FORMAT
from ..core.errors import ConfigError, MagnitudeOutOfRangeError
from ..core.logging import get_logger
from ..core.types import Direction, QuoteData
from ..utils.data import format_abbreviated, strip_html, to_string_f
from ..utils.date import format_timestamp
from ..utils.date.date_utils import TimezoneLike
from .formatter import bold, color, market_state_label, quote_direction


logger = get_logger(__name__)


class QuoteFormatter:
    """
    Format quotes into display rows.

    Each row maps the configured column names to display strings. Colors
    follow the quote's direction against its previous close.
    """

    def __init__(self, show_colors: Optional[bool] = None, tz: TimezoneLike = None):
        """
        Initialize a quote formatter.

        Args:
            show_colors: Emit ANSI sequences (default from DISPLAY config)
            tz: Display zone for quote times (default from DATE_CONFIG)
        """
        self.show_colors = DISPLAY["SHOW_COLORS"] if show_colors is None else show_colors
        self.tz = tz

    def format_symbol(self, quote: QuoteData) -> str:
        return bold(quote.symbol) if self.show_colors else quote.symbol

    def format_name(self, quote: QuoteData) -> str:
        return strip_html(quote.short_name or "")[: DISPLAY["MAX_NAME_LENGTH"]]

    def format_change(self, quote: QuoteData) -> str:
        """
        Format the absolute and percentage change, e.g. "+1.50 (2.00%)".

        Args:
            quote: Quote to format

        Returns:
            Change text, colored when colors are enabled
        """
        text = (
            f"{to_string_f(quote.regular_market_change)} "
            f"({to_string_f(quote.regular_market_change_percent)}%)"
        )
        direction = quote_direction(quote)
        if self.show_colors:
            return color(text, direction)
        if direction == Direction.UP:
            return "+" + text
        return text

    def format_magnitude(self, value: int) -> str:
        """Abbreviate a volume or market cap, "--" when out of range."""
        try:
            return format_abbreviated(value)
        except MagnitudeOutOfRangeError as e:
            logger.warning(f"Cannot abbreviate {value}: {e}")
            return NUMBER_FORMAT["PLACEHOLDER"]

    def format_row(self, quote: QuoteData) -> Dict[str, str]:
        """
        Format a quote as a display row.

        Args:
            quote: Quote to format

        Returns:
            Dictionary keyed by DISPLAY["QUOTE_COLUMNS"]
        """
        row = {
            "SYMBOL": self.format_symbol(quote),
            "NAME": self.format_name(quote),
            "PRICE": to_string_f(quote.regular_market_price),
            "CHANGE": self.format_change(quote),
            "VOLUME": self.format_magnitude(quote.regular_market_volume),
            "MKT CAP": self.format_magnitude(quote.market_cap),
            "STATE": market_state_label(quote.market_state),
            "TIME": format_timestamp(quote.regular_market_time, self.tz),
        }
        return {column: row[column] for column in DISPLAY["QUOTE_COLUMNS"]}


class QuoteTable:
    """Render quotes as a terminal table."""

    def __init__(self, formatter: Optional[QuoteFormatter] = None, tablefmt: Optional[str] = None):
        """
        Initialize a quote table.

        Args:
            formatter: Row formatter (default: QuoteFormatter with config defaults)
            tablefmt: tabulate table format (default from DISPLAY config)

        Raises:
            ConfigError: If the table format is not known to tabulate
        """
        self.formatter = formatter or QuoteFormatter()
        self.tablefmt = tablefmt or DISPLAY["TABLE_FORMAT"]
        if self.tablefmt not in tabulate_formats:
            raise ConfigError(
                f"Unknown table format: {self.tablefmt}", {"tablefmt": self.tablefmt}
            )

    def to_frame(self, quotes: Iterable[QuoteData]) -> pd.DataFrame:
        """
        Build a DataFrame of formatted rows.

        Args:
            quotes: Quotes in display order

        Returns:
            DataFrame with one row per quote and the configured columns
        """
        rows: List[Dict[str, str]] = [self.formatter.format_row(q) for q in quotes]
        return pd.DataFrame(rows, columns=DISPLAY["QUOTE_COLUMNS"])

    def render(self, quotes: Iterable[QuoteData]) -> str:
        """
        Render quotes as a table string.

        Cell text is kept verbatim; numeric-looking cells are not realigned.

        Args:
            quotes: Quotes in display order

        Returns:
            Table text
        """
        df = self.to_frame(quotes)
        logger.debug(f"Rendering {len(df)} quotes as {self.tablefmt} table")
        return tabulate(
            df,
            headers="keys",
            tablefmt=self.tablefmt,
            showindex=False,
            disable_numparse=True,
        )
