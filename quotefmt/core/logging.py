"""
Logging configuration for quote formatting.

This module provides the logging setup used by the package:
- Handler and formatter configuration through dictConfig
- Log level management and debug helpers
"""

import logging
import logging.config
import os
import sys
from typing import Any, Dict, List, Optional, Union

from .config import PATHS
from .errors import ConfigError


# Default logging formats
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        value = getattr(logging, level.upper(), None)
        if not isinstance(value, int):
            raise ConfigError(f"Unknown log level: {level}", {"level": level})
        return value
    return level


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    console_level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    debug: bool = False,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Base logging level (default: INFO)
        log_file: Path to log file; bare file names are placed in PATHS["LOG_DIR"]
            (default: None, uses default path from config)
        console: Whether to log to console (default: True)
        console_level: Console logging level (default: same as base level)
        format_string: Log format string (default: DEFAULT_FORMAT or DEBUG_FORMAT if debug=True)
        debug: Whether to enable debug mode (more verbose logging)

    Raises:
        ConfigError: If a level name is not a logging level

    Side Effects:
        Configures the Python logging system
    """
    level = _to_level(level)
    console_level = level if console_level is None else _to_level(console_level)

    if format_string is None:
        format_string = DEBUG_FORMAT if debug else DEFAULT_FORMAT

    handlers: List[Dict[str, Any]] = []

    if console:
        handlers.append(
            {
                "level": console_level,
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": sys.stdout,
            }
        )

    log_file = log_file or PATHS.get("DEFAULT_LOG_FILE")
    if log_file and not os.path.dirname(log_file):
        # Bare file names go to the package log directory
        log_file = os.path.join(PATHS["LOG_DIR"], log_file)
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        handlers.append(
            {
                "level": level,
                "class": "logging.FileHandler",
                "formatter": "detailed",
                "filename": log_file,
                "encoding": "utf-8",
            }
        )

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": format_string},
            "console": {"format": CONSOLE_FORMAT},
        },
        "handlers": {},
        "loggers": {
            "quotefmt": {
                "level": level,
                "handlers": [],
                "propagate": False,
            },
        },
    }

    for i, handler in enumerate(handlers):
        handler_name = f"handler_{i}"
        logging_config["handlers"][handler_name] = handler
        logging_config["loggers"]["quotefmt"]["handlers"].append(handler_name)

    if handlers:
        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured with level: {logging.getLevelName(level)}")
        if log_file:
            logger.debug(f"Log file: {log_file}")
    else:
        logging.getLogger("quotefmt").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    This is the recommended way to get a logger in the package.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_log_level(level: Union[int, str], logger_name: Optional[str] = None) -> None:
    """
    Set the log level for a specific logger or the root logger.

    Args:
        level: Logging level (can be string like 'INFO' or int like logging.INFO)
        logger_name: Name of logger to set level for (default: None, root logger)
    """
    logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()
    logger.setLevel(_to_level(level))


def enable_debug_for_module(module_name: str) -> None:
    """
    Enable debug logging for a specific module.

    Args:
        module_name: Name of the module to enable debug for
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(logging.DEBUG)

    # Ensure we have at least one handler
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.addHandler(handler)


def disable_logging() -> None:
    """Completely disable all logging."""
    logging.disable(logging.CRITICAL)


def enable_logging() -> None:
    """Re-enable logging after it has been disabled."""
    logging.disable(logging.NOTSET)


def configure_default_logging(environ: Optional[Dict[str, str]] = None) -> None:
    """
    Configure package logging from QUOTEFMT_* environment variables.

    Library usage gets no console output. An invalid QUOTEFMT_LOG_LEVEL
    falls back to INFO with a warning instead of failing the import.

    Args:
        environ: Environment mapping (default: os.environ)
    """
    environ = os.environ if environ is None else environ
    options = {
        "log_file": environ.get("QUOTEFMT_LOG_FILE"),
        "console": False,
        "debug": environ.get("QUOTEFMT_DEBUG", "").lower() == "true",
    }
    try:
        configure_logging(level=environ.get("QUOTEFMT_LOG_LEVEL", "INFO"), **options)
    except ConfigError as e:
        configure_logging(level=logging.INFO, **options)
        logging.getLogger(__name__).warning(f"{e}; using INFO")
