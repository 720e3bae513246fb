"""
Configuration management for globalog.

Usage:
    from globalog.core.config import ConfigManager

    config = ConfigManager().load_config()
    configure_logging(config.logging)
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from ...logging.config import LoggingConfig
from .manager import ConfigManager, default_config_file
from .models import GlobalogConfig, GlobalogSettings


def get_config_manager(config_file=None):
    """Get a config manager instance."""
    return ConfigManager(config_file)


__all__ = [
    "GlobalogConfig",
    "GlobalogSettings",
    "LoggingConfig",
    "ConfigManager",
    "default_config_file",
    "get_config_manager",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
