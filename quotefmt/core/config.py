"""
Configuration settings for quote formatting.

This module defines the escape codes, number and date formats, market state
labels and table settings used throughout the package. It provides a central
location for all configuration values, with a small set of overrides read
from the environment.
"""

import os
from typing import Any, Dict

from dotenv import load_dotenv


# Terminal escape sequences
ANSI = {
    "ESC": "\033",
    "RESET": 0,
    "BOLD": 1,
    "RED": 31,  # Down
    "GREEN": 32,  # Up
}

# Number formatting
NUMBER_FORMAT = {
    # Base for each abbreviation step
    "ABBREVIATION_BASE": 1000,
    # Ordered suffix table, index is the power of the base
    "SUFFIXES": ("-", "K", "M", "B", "T"),
    # Decimal places shown on abbreviated values
    "ABBREVIATION_PRECISION": 2,
    # Decimal places for float to string conversion
    "FLOAT_PRECISION": 2,
    "THOUSANDS_SEPARATOR": ",",
    # Shown when a value cannot be rendered
    "PLACEHOLDER": "--",
}

# Date formatting
DATE_CONFIG = {
    "FULL_FORMAT": "%H:%M:%S %m/%d/%Y",
    "SHORT_FORMAT": "%m/%d/%Y",
    # Returned for a zero timestamp
    "PLACEHOLDER": "--",
    # IANA zone name; None renders in the host's local zone
    "TIMEZONE": None,
}

# Market state display labels
MARKET_STATE_LABELS = {
    "REGULAR": "Open",
    "PRE": "Pre-Market",
    "PREPRE": "Pre-Market",
    "POST": "After-Hours",
    "POSTPOST": "After-Hours",
    "FALLBACK": "Closed",
}

# Display configuration
DISPLAY = {
    "SHOW_COLORS": True,
    "TABLE_FORMAT": "simple",
    # Quote table columns in display order
    "QUOTE_COLUMNS": [
        "SYMBOL",
        "NAME",
        "PRICE",
        "CHANGE",
        "VOLUME",
        "MKT CAP",
        "STATE",
        "TIME",
    ],
    "MAX_NAME_LENGTH": 20,
}

# File paths
PATHS = {
    "LOG_DIR": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs"),
    "DEFAULT_LOG_FILE": None,
}


def load_env_config() -> Dict[str, Any]:
    """
    Load configuration from environment variables.

    Values in a local .env file are loaded first without overriding
    variables already present in the environment.

    Returns:
        Dictionary containing configuration values from environment variables
    """
    load_dotenv()
    config = {}

    if os.environ.get("QUOTEFMT_TIMEZONE"):
        config["DATE_CONFIG.TIMEZONE"] = os.environ["QUOTEFMT_TIMEZONE"]

    if "QUOTEFMT_SHOW_COLORS" in os.environ:
        config["DISPLAY.SHOW_COLORS"] = os.environ["QUOTEFMT_SHOW_COLORS"].lower() == "true"

    if os.environ.get("QUOTEFMT_TABLE_FORMAT"):
        config["DISPLAY.TABLE_FORMAT"] = os.environ["QUOTEFMT_TABLE_FORMAT"]

    return config


def apply_env_config(env_config: Dict[str, Any]) -> None:
    """
    Apply environment variable configuration.

    Args:
        env_config: Dictionary keyed by "SECTION.SETTING"
    """
    for key, value in env_config.items():
        parts = key.split(".")
        if len(parts) == 2:
            module_name, setting_name = parts
            if module_name in globals() and setting_name in globals()[module_name]:
                globals()[module_name][setting_name] = value


ENV_CONFIG = load_env_config()
apply_env_config(ENV_CONFIG)
