"""
Configuration-related exceptions.

All exceptions related to configuration parsing, validation, and management.
"""

from typing import Any, List, Optional

from .base import GlobalogError


class ConfigurationError(GlobalogError):
    """Base class for configuration-related errors."""

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
        user_action: Optional[str] = None,
    ):
        super().__init__(message, help_text, error_code, user_action)


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {value!r}, expected {expected}"
        help_text = f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}"
        super().__init__(
            message,
            help_text,
            "CONFIG_INVALID",
            "Run 'globalog config --show' to inspect the effective configuration",
        )


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Please check your configuration file and fix the validation errors listed above"
        super().__init__(message, help_text, "CONFIG_VALIDATION")
