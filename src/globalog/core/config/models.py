"""
Configuration models for globalog.

This module defines the Pydantic-based file configuration model and the
environment settings that override it.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...logging.config import LoggingConfig


class GlobalogConfig(BaseModel):
    """Main globalog configuration model."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {
        "extra": "forbid",  # Don't allow extra fields
        "validate_assignment": True,
    }


class GlobalogSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    globalog_log_level: Optional[str] = Field(None, alias="GLOBALOG_LOG_LEVEL")
    globalog_log_format: Optional[str] = Field(None, alias="GLOBALOG_LOG_FORMAT")
    globalog_log_output: Optional[str] = Field(None, alias="GLOBALOG_LOG_OUTPUT")
    globalog_log_file_path: Optional[str] = Field(None, alias="GLOBALOG_LOG_FILE_PATH")
    globalog_label: Optional[str] = Field(None, alias="GLOBALOG_LABEL")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    def logging_overrides(self) -> Dict[str, Any]:
        """Logging config keys set through the environment."""
        overrides = {
            "level": self.globalog_log_level,
            "format": self.globalog_log_format,
            "output": self.globalog_log_output,
            "file_path": self.globalog_log_file_path,
            "label": self.globalog_label,
        }
        return {key: value for key, value in overrides.items() if value}

    def to_logging_config(self) -> LoggingConfig:
        """Default logging configuration with environment overrides applied."""
        return LoggingConfig(**self.logging_overrides())
