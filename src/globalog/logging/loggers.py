"""
The global logger handle.

GlobalLogger wraps a standard library logger named after the application
label and emits records attributed to the caller's file, function and line.
"""

import logging
from typing import Any, Mapping, Optional, Protocol

from .severity import Severity


class LoggerBackend(Protocol):
    """Contract the emission functions rely on."""

    label: str

    def is_enabled(self, severity: Severity) -> bool: ...

    def log(
        self,
        severity: Severity,
        message: Any,
        metadata: Optional[Mapping[str, Any]] = None,
        *,
        file: str,
        function: str,
        line: int,
    ) -> None: ...


class GlobalLogger:
    """Process-wide logger handle backed by a stdlib logger."""

    def __init__(self, label: str = "", logger: Optional[logging.Logger] = None):
        self.label = label
        self.logger = logger or logging.getLogger(label)

    def __repr__(self) -> str:
        return f"GlobalLogger(label={self.label!r})"

    def is_enabled(self, severity: Severity) -> bool:
        """Whether the backend would emit an entry at ``severity``."""
        return self.logger.isEnabledFor(severity)

    def log(
        self,
        severity: Severity,
        message: Any,
        metadata: Optional[Mapping[str, Any]] = None,
        *,
        file: str,
        function: str,
        line: int,
    ) -> None:
        """Emit one entry attributed to the given call site."""
        extra = {"metadata": dict(metadata)} if metadata else None
        record = self.logger.makeRecord(
            self.logger.name,
            int(severity),
            file,
            line,
            str(message),
            (),
            None,
            func=function,
            extra=extra,
        )
        self.logger.handle(record)
