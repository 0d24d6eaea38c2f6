"""
Standardized error handling utilities.

This module provides utilities for consistent error handling, context
enrichment, error translation and fallback values throughout the package.
"""

import functools
from typing import Any, Callable, Dict, Optional, TypeVar

from ..core.errors import (
    ConversionError,
    DataError,
    QuoteFormatError,
    ValidationError,
)
from ..core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def enrich_error_context(error: QuoteFormatError, context: Dict[str, Any]) -> QuoteFormatError:
    """
    Enrich an error with additional context information.

    Existing detail keys are never overwritten.

    Args:
        error: The original error
        context: Dictionary of context information to add

    Returns:
        The enriched error object
    """
    if error.details is None:
        error.details = {}

    for key, value in context.items():
        if key not in error.details:
            error.details[key] = value

    return error


def translate_error(
    error: Exception,
    default_message: str = "An error occurred",
    context: Optional[Dict[str, Any]] = None,
) -> QuoteFormatError:
    """
    Translate a standard Python exception into the package's error hierarchy.

    Args:
        error: Standard Python exception
        default_message: Default error message if none is provided
        context: Additional context information

    Returns:
        An appropriate error from the package hierarchy

    Example:
        ```
        try:
            int(value)
        except ValueError as e:
            raise translate_error(e, context={"value": value})
        ```
    """
    context = context or {}
    error_type = type(error)
    error_message = str(error) or default_message

    if error_type in (ValueError, TypeError, OverflowError):
        return ConversionError(error_message, context)
    elif error_type is KeyError:
        return DataError(f"Missing key: {error_message}", context)
    elif error_type is AttributeError:
        return DataError(f"Missing attribute: {error_message}", context)
    elif error_type is LookupError:
        return ValidationError(error_message, context)

    return QuoteFormatError(f"Unexpected error: {error_message}", context)


def with_error_context(
    context_provider: Callable[..., Dict[str, Any]],
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to add context information to errors raised by a function.

    Package errors are enriched with the context; other exceptions are
    translated into the package hierarchy first.

    Args:
        context_provider: Function that returns a context dictionary

    Returns:
        Decorated function

    Example:
        ```
        @with_error_context(lambda value: {"value": value})
        def to_int_strict(value):
            return int(value)
        ```
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except QuoteFormatError as e:
                raise enrich_error_context(e, context_provider(*args, **kwargs))
            except Exception as e:
                context = context_provider(*args, **kwargs)
                custom_error = translate_error(e, context=context)
                logger.debug(f"Translated error in {func.__name__}: {str(e)}")
                raise custom_error from e

        return wrapper

    return decorator


def safe_operation(
    default_value: Optional[R] = None,
    log_errors: bool = True,
    reraise: bool = False,
) -> Callable[[Callable[..., R]], Callable[..., Optional[R]]]:
    """
    Decorator to safely execute an operation with fallback to a default value.

    Only package errors are caught; anything else propagates.

    Args:
        default_value: Default value to return if the operation fails
        log_errors: Whether to log errors (at DEBUG level)
        reraise: Whether to re-raise the error after logging

    Returns:
        Decorated function

    Example:
        ```
        @safe_operation(default_value=0)
        def to_int(value):
            return to_int_strict(value)
        ```
    """

    def decorator(func: Callable[..., R]) -> Callable[..., Optional[R]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Optional[R]:
            try:
                return func(*args, **kwargs)
            except QuoteFormatError as e:
                if log_errors:
                    logger.debug(f"Error in {func.__name__}, using {default_value!r}: {str(e)}")
                if reraise:
                    raise
                return default_value

        return wrapper

    return decorator
