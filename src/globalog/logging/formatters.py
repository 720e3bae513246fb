"""
Log formatters for different output formats.

Provides structured JSON formatting, console formatting, and Rich terminal output.
All formatters render the metadata attached by the global logging functions.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

from ..constants import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_VERSION

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def record_metadata(record: logging.LogRecord) -> Optional[Mapping[str, Any]]:
    """Metadata attached to a record, if any."""
    return getattr(record, "metadata", None)


def format_metadata(metadata: Optional[Mapping[str, Any]]) -> str:
    """Render metadata as space separated ``key=value`` pairs."""
    if not metadata:
        return ""
    return " ".join(f"{key}={value}" for key, value in metadata.items())


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(
        self,
        service_name: str = DEFAULT_SERVICE_NAME,
        version: str = DEFAULT_SERVICE_VERSION,
    ):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "file": record.pathname,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.thread,
            "thread_name": record.threadName,
        }

        metadata = record_metadata(record)
        if metadata:
            log_entry["metadata"] = dict(metadata)

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter that appends metadata as ``key=value`` pairs."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = CONSOLE_DATE_FORMAT):
        super().__init__(fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        suffix = format_metadata(record_metadata(record))
        if not suffix:
            return line
        # Keep the metadata on the message line when a traceback follows.
        head, sep, tail = line.partition("\n")
        return f"{head} {suffix}{sep}{tail}"


class MetadataRichHandler(RichHandler):
    """RichHandler that renders record metadata after the message.

    Messages are rendered as plain text, never parsed as console markup.
    """

    def render_message(self, record: logging.LogRecord, message: str):
        text = super().render_message(record, message)
        suffix = format_metadata(record_metadata(record))
        if suffix:
            text.append(f" {suffix}", style="dim")
        return text


def create_console_formatter() -> logging.Formatter:
    """Create a console formatter for human-readable output."""
    return ConsoleFormatter()


def create_rich_handler() -> logging.Handler:
    """Create a Rich handler for enhanced terminal output."""
    return MetadataRichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )


def create_structured_formatter(
    service_name: str = DEFAULT_SERVICE_NAME, version: str = DEFAULT_SERVICE_VERSION
) -> StructuredFormatter:
    """Create a structured JSON formatter."""
    return StructuredFormatter(service_name, version)
