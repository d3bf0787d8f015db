"""
Unit tests for configuration module.
"""
import pytest

from core.config import DEFAULT_INPUT_FILES, Settings, get_settings, reset_settings
from core.exceptions import ConfigurationError


def test_settings_defaults():
    """Test default configuration values."""
    settings = get_settings()
    assert settings.app_name == "Transaction Merge Utility"
    assert settings.log_level == "DEBUG"
    assert settings.input_files == DEFAULT_INPUT_FILES
    assert settings.delimiter == ","
    assert settings.date_format == "%d-%m-%Y"
    assert settings.text_log_path == "logs.txt"
    assert settings.csv_log_path == "logs.csv"


def test_settings_from_environment(monkeypatch):
    """Test values are read from environment variables."""
    monkeypatch.setenv("INPUT_FILES", '["a.csv", "b.csv"]')
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("DELIMITER", ";")

    settings = get_settings()
    assert settings.input_files == ["a.csv", "b.csv"]
    assert settings.log_level == "INFO"
    assert settings.delimiter == ";"


def test_settings_validation_log_level(monkeypatch):
    """Test log level validation."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()
    assert exc_info.value.details["errors"]


@pytest.mark.parametrize("delimiter", ["", ";;", " ", "-", "."])
def test_settings_validation_delimiter(delimiter):
    """Test delimiter must be one character not used by amounts or dates."""
    with pytest.raises(ValueError):
        Settings(delimiter=delimiter)


def test_settings_validation_input_files():
    """Test an empty input file list is rejected."""
    with pytest.raises(ValueError):
        Settings(input_files=[])


def test_settings_singleton():
    """Test settings singleton behavior."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2

    reset_settings()
    assert get_settings() is not settings1


def test_settings_validation_encoding(monkeypatch):
    """Test an unknown input encoding is a configuration error."""
    monkeypatch.setenv("INPUT_ENCODING", "no-such-codec")

    with pytest.raises(ConfigurationError):
        get_settings()
    assert Settings(encoding="latin-1").encoding == "latin-1"
