"""
Text cleanup utilities for upstream string fields.

Quote names and descriptions arrive with HTML artifacts; these helpers
turn them into plain text for terminal display.
"""

import html
from typing import Iterable


NBSP_ENTITY = "&nbsp;"


def strip_html(text: str) -> str:
    """
    Strip HTML artifacts from a string.

    Every literal "&nbsp;" is removed first, then the remaining HTML
    entities are decoded. Malformed entities are left as they are.

    Args:
        text: Raw upstream text

    Returns:
        Plain text, e.g. "A&nbsp;B &amp; C" -> "AB & C"
    """
    return html.unescape(text.replace(NBSP_ENTITY, ""))


def combine(parts: Iterable[str], sep: str = " ") -> str:
    """Join display fragments with a separator."""
    return sep.join(parts)
