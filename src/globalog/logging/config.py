"""
Logging configuration management.

Provides the validated configuration model used to set up handlers and the
global logger label.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_VERSION,
    MIN_LOG_FILE_SIZE_BYTES,
    VALID_LOG_FORMATS,
    VALID_LOG_OUTPUTS,
)
from .severity import Severity


class LoggingConfig(BaseModel):
    """Configuration for the logging system."""

    level: str = Field(DEFAULT_LOG_LEVEL, description="Minimum severity to emit")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )
    label: Optional[str] = Field(
        None, description="Global logger label; detected from the application if unset"
    )
    service_name: str = Field(DEFAULT_SERVICE_NAME, description="Service name in JSON logs")
    version: str = Field(DEFAULT_SERVICE_VERSION, description="Service version in JSON logs")

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v) -> str:
        return Severity.parse(v).name

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(f"format must be one of: {', '.join(VALID_LOG_FORMATS)}")
        return v

    @field_validator("output", mode="before")
    @classmethod
    def validate_output(cls, v) -> List[str]:
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",") if part.strip()]
        for output in v:
            if output not in VALID_LOG_OUTPUTS:
                raise ValueError(
                    f"output must contain only: {', '.join(VALID_LOG_OUTPUTS)}"
                )
        return v

    @property
    def severity(self) -> Severity:
        return Severity[self.level]


def create_default_config() -> LoggingConfig:
    """Create a default logging configuration."""
    return LoggingConfig()
