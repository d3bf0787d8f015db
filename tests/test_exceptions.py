"""
Unit tests for custom exceptions.
"""
from core.exceptions import (
    MergeTransactionsException,
    ConfigurationError,
    ParsingError,
    MalformedLineError,
    NumberFormatError,
    DateFormatError,
)


def test_base_exception():
    """Test base exception class."""
    exc = MergeTransactionsException("Test error", details={"key": "value"})
    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_exception_hierarchy():
    """Test exception inheritance."""
    assert issubclass(ConfigurationError, MergeTransactionsException)
    assert issubclass(ParsingError, MergeTransactionsException)
    assert issubclass(MalformedLineError, ParsingError)
    assert issubclass(NumberFormatError, ParsingError)
    assert issubclass(DateFormatError, ParsingError)


def test_exception_with_details():
    """Test exception with details dictionary."""
    exc = DateFormatError("bad date", details={"value": "31-13-2020", "format": "%d-%m-%Y"})
    assert exc.message == "bad date"
    assert exc.details["value"] == "31-13-2020"


def test_exception_without_details():
    """Test exception without details."""
    exc = ConfigurationError("Invalid settings")
    assert exc.details == {}
