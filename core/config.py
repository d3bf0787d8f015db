"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
import codecs
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError

DEFAULT_INPUT_FILES = [
    "transactions1.csv",
    "transactions2.csv",
    "transactions3.csv",
    "transactions4.csv",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Transaction Merge Utility", alias="APP_NAME")
    log_level: str = Field(default="DEBUG", alias="LOG_LEVEL")

    # Input
    input_files: List[str] = Field(default_factory=lambda: list(DEFAULT_INPUT_FILES), alias="INPUT_FILES")
    delimiter: str = Field(default=",", alias="DELIMITER")
    date_format: str = Field(default="%d-%m-%Y", alias="DATE_FORMAT")
    encoding: str = Field(default="utf-8", alias="INPUT_ENCODING")

    # Log sinks
    text_log_path: str = Field(default="logs.txt", alias="TEXT_LOG_PATH")
    csv_log_path: str = Field(default="logs.csv", alias="CSV_LOG_PATH")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v):
        """Delimiter must be one character that cannot occur in amounts or dates."""
        if len(v) != 1 or v.isspace():
            raise ValueError("Delimiter must be a single non-whitespace character")
        if v in "-.0123456789":
            raise ValueError(f"Delimiter {v!r} clashes with amount or date syntax")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Encoding must be a codec Python knows."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown input encoding: {v}")
        return v

    @field_validator("input_files")
    @classmethod
    def validate_input_files(cls, v):
        """At least one input file is required."""
        if not v:
            raise ValueError("At least one input file must be configured")
        return v


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid application settings",
                details={"errors": e.errors(include_url=False)}
            ) from e
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
