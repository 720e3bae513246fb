"""
Exception hierarchy for globalog.

The logging functions themselves never raise; these exceptions cover loading
and validating configuration and are reported by the CLI.
"""

from .base import GlobalogError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

__all__ = [
    "GlobalogError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
