"""
Error handling module for quote formatting.

This module defines the exception hierarchy used by the package. The default
formatting paths never raise; these errors surface through the strict
variants and through explicit bounds checks.
"""

from typing import Any, Dict, Optional


class QuoteFormatError(Exception):
    """
    Base class for all quote formatting errors.

    All exceptions raised by the package inherit from this class.

    Attributes:
        message: Error message
        details: Additional error details
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize a QuoteFormatError.

        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message

        detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({detail_str})"


class ValidationError(QuoteFormatError):
    """
    Error related to validation.

    Raised for arguments of the wrong kind, such as an unknown time zone name.
    """

    pass


class DataError(QuoteFormatError):
    """
    Error related to data handling.

    This class represents errors that occur while converting or scaling
    values for display.
    """

    pass


class ConversionError(DataError):
    """Error raised when a scalar cannot be converted."""

    pass


class MagnitudeOutOfRangeError(DataError):
    """
    Error raised when a number is too large for the suffix table.

    Attributes:
        message: Error message
        value: The value that could not be abbreviated
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        value: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.value = value
        super().__init__(message, details)


class ConfigError(QuoteFormatError):
    """Error related to configuration issues."""

    pass


def format_error_details(error: Exception) -> str:
    """
    Format error details for logging.

    Args:
        error: Exception object

    Returns:
        Formatted error details string
    """
    if isinstance(error, QuoteFormatError):
        if error.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
            return f"{error.__class__.__name__}: {error.message} ({detail_str})"
        return f"{error.__class__.__name__}: {error.message}"

    return f"{error.__class__.__name__}: {str(error)}"
