"""
Configuration manager for globalog.

Loads the TOML configuration file, applies environment variable overrides and
validates the result.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from ...constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .models import GlobalogConfig, GlobalogSettings


def default_config_file() -> Path:
    """Standard user configuration file location."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Configuration manager with TOML persistence and environment overrides."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[GlobalogConfig] = None

    @property
    def config_directory(self) -> Path:
        """Get the configuration directory."""
        return self.config_file.parent

    def load_config(self) -> GlobalogConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = GlobalogConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
            )
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"])

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            )
        except PermissionError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                help_text=f"Check file permissions for {self.config_file}",
            )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        overrides = GlobalogSettings().logging_overrides()
        if overrides:
            logging_section = dict(config_data.get("logging") or {})
            logging_section.update(overrides)
            config_data["logging"] = logging_section
        return config_data

    def save_config(self, config: Optional[GlobalogConfig] = None) -> None:
        """Save configuration to the TOML file."""
        if config is None:
            config = self.load_config()
        self.export_config(self.config_file, config)
        self._config = config

    def export_config(self, file_path: Path, config: Optional[GlobalogConfig] = None) -> None:
        """Write configuration to a TOML file."""
        if config is None:
            config = self.load_config()

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self._filter_none_values(config.model_dump(mode="json"))

        try:
            with open(file_path, "wb") as f:
                tomli_w.dump(config_dict, f)
        except PermissionError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {file_path}: {e}",
                help_text=f"Check file permissions for {file_path}",
            )

    def _filter_none_values(self, data: Any) -> Any:
        """Recursively filter out None values from nested dictionaries."""
        if isinstance(data, dict):
            return {k: self._filter_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._filter_none_values(item) for item in data if item is not None]
        else:
            return data

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self.save_config(GlobalogConfig())
