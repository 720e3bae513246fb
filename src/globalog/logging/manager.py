"""
Centralized logging configuration and management.

Provides the LoggingManager singleton that configures handlers and owns the
process-wide GlobalLogger handle.
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constants import DEFAULT_LOG_FILE
from .config import LoggingConfig
from .formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)
from .identity import application_identifier
from .loggers import GlobalLogger, LoggerBackend

logger = logging.getLogger(__name__)


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers = []
            self._global_logger: Optional[LoggerBackend] = None
            self._lock = threading.RLock()
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Configure the logging system."""
        self.config = config

        # Clear existing handlers
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        for handler in self.handlers:
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.severity)

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)

        # A handle created before configuration keeps its label unless one is set
        if config.label is not None and isinstance(self._global_logger, GlobalLogger):
            if self._global_logger.label != config.label:
                self.reset()

    def _add_console_handler(self, config: LoggingConfig):
        """Add console handler."""
        if config.format == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:  # console format
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        handler.setLevel(config.severity)
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)

    def _add_file_handler(self, config: LoggingConfig):
        """Add file handler with rotation."""
        file_path = Path(config.file_path or DEFAULT_LOG_FILE).expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )

        if config.format == "json":
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler.setFormatter(create_console_formatter())

        handler.setLevel(config.severity)
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)

    def get_global_logger(self) -> LoggerBackend:
        """Return the process-wide logger handle, creating it on first use."""
        handle = self._global_logger
        if handle is not None:
            return handle
        with self._lock:
            if self._global_logger is None:
                if self.config is None and not logging.getLogger().handlers:
                    self._configure_from_environment()
                label = self._resolve_label()
                self._global_logger = GlobalLogger(label)
                logger.debug("Initialized global logger with label %r", label)
            return self._global_logger

    def set_global_logger(self, handle: LoggerBackend) -> None:
        """Install ``handle`` as the process-wide logger."""
        with self._lock:
            self._global_logger = handle

    def reset(self) -> None:
        """Drop the current handle; the next access creates a new one."""
        with self._lock:
            self._global_logger = None

    def _configure_from_environment(self) -> None:
        config = _config_from_environment()
        try:
            self.configure(config)
        except OSError as e:
            # Unusable log file; keep the environment's level and label
            self.configure(config.model_copy(update={"output": ["console"]}))
            logger.warning(
                "Cannot write log file %s, logging to console only: %s",
                config.file_path or DEFAULT_LOG_FILE,
                e,
            )

    def _resolve_label(self) -> str:
        if self.config is not None and self.config.label is not None:
            return self.config.label
        return application_identifier()


def _config_from_environment() -> LoggingConfig:
    from ..core.config.models import GlobalogSettings

    try:
        return GlobalogSettings().to_logging_config()
    except ValidationError as e:
        logger.warning("Ignoring invalid logging environment settings: %s", e)
        return LoggingConfig()


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)


def get_global_logger() -> LoggerBackend:
    """Return the process-wide logger handle."""
    return logging_manager.get_global_logger()
