"""
Display formatting utilities for quote data.

This module classifies price direction, maps market states to display
labels and wraps text in the terminal escape sequences used for bold and
directional color.
"""

from enum import Enum
from typing import Union

from ..core.config import ANSI, MARKET_STATE_LABELS
from ..core.logging import get_logger
from ..core.types import Direction, MarketState, Quote


logger = get_logger(__name__)


class AnsiCode(Enum):
    """SGR codes for terminal output."""

    RESET = ANSI["RESET"]
    BOLD = ANSI["BOLD"]
    RED = ANSI["RED"]
    GREEN = ANSI["GREEN"]

    @property
    def sequence(self) -> str:
        return f"{ANSI['ESC']}[{self.value}m"


DIRECTION_COLORS = {
    Direction.UP: AnsiCode.GREEN,
    Direction.DOWN: AnsiCode.RED,
}


def price_direction(last: float, close: float) -> Direction:
    """
    Classify a price against a reference price.

    No tolerance is applied; round first if near-equal prices should be flat.

    Args:
        last: Current price
        close: Reference (previous close) price

    Returns:
        Direction.UP, Direction.DOWN or Direction.FLAT
    """
    if last > close:
        return Direction.UP
    if last < close:
        return Direction.DOWN
    return Direction.FLAT


def quote_direction(quote: Quote) -> Direction:
    """Classify a quote's current price against its previous close."""
    return price_direction(quote.regular_market_price, quote.regular_market_previous_close)


def market_state_label(state: Union[MarketState, str, None]) -> str:
    """
    Map a market state to its display label.

    Args:
        state: MarketState member or the provider's raw state string

    Returns:
        "Open", "Pre-Market", "After-Hours" or "Closed"
    """
    key = state.value if isinstance(state, MarketState) else state
    label = MARKET_STATE_LABELS.get(key) if isinstance(key, str) else None
    if label is None:
        if key not in (None, MarketState.CLOSED.value):
            logger.debug(f"Unrecognized market state {key!r}, showing as closed")
        return MARKET_STATE_LABELS["FALLBACK"]
    return label


def bold(text: str) -> str:
    """Wrap text in bold-on and reset sequences."""
    return f"{AnsiCode.BOLD.sequence}{text}{AnsiCode.RESET.sequence}"


def color(text: str, direction: Direction) -> str:
    """
    Color text according to price direction.

    Flat text is returned unchanged. Up text gets a leading "+" and green,
    down text gets red. The text is split on single spaces and each token is
    wrapped in its own color sequence pair. One space follows the first
    token; the remaining tokens are joined without a separator.

    Args:
        text: Text to color, typically a price change
        direction: Price direction

    Returns:
        Colored text, e.g. color("1,234", Direction.UP) ->
        "\\033[32m+1,234\\033[0m "
    """
    if direction == Direction.FLAT:
        return text

    code = DIRECTION_COLORS[direction]
    if direction == Direction.UP:
        text = "+" + text

    pre = code.sequence
    post = AnsiCode.RESET.sequence

    out = ""
    for i, token in enumerate(text.split(" ")):
        out += pre + token + post
        if i == 0:
            out += " "
    return out
