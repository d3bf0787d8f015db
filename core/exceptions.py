"""
Custom exceptions for transaction merging.
"""
from typing import Any, Dict, Optional


class MergeTransactionsException(Exception):
    """Base exception for all transaction merge errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MergeTransactionsException):
    """Raised when configuration is invalid."""
    pass


class ParsingError(MergeTransactionsException):
    """Raised when a transaction line cannot be parsed."""
    pass


class MalformedLineError(ParsingError):
    """Raised when a line has fewer fields than a transaction needs."""
    pass


class NumberFormatError(ParsingError):
    """Raised when the amount field is not a decimal number."""
    pass


class DateFormatError(ParsingError):
    """Raised when the date field does not match the date pattern."""
    pass
