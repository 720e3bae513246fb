"""
Pytest configuration and shared fixtures for globalog tests.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, NamedTuple, Optional

import pytest

from globalog.logging.callsite import CallSite
from globalog.logging.manager import logging_manager
from globalog.logging.severity import Severity


class RecordedEntry(NamedTuple):
    severity: Severity
    message: Any
    metadata: Optional[Mapping[str, Any]]
    site: CallSite


class RecordingLogger:
    """In-memory backend that records every accepted entry."""

    def __init__(self, label: str = "tests", minimum: int = Severity.TRACE):
        self.label = label
        self.minimum = minimum
        self.entries: List[RecordedEntry] = []

    def is_enabled(self, severity: Severity) -> bool:
        return severity >= self.minimum

    def log(self, severity, message, metadata=None, *, file, function, line):
        self.entries.append(
            RecordedEntry(severity, message, metadata, CallSite(file, function, line))
        )


@pytest.fixture(autouse=True)
def isolated_logging():
    """Give every test a fresh global logger and restore logging state afterwards."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_state = (
        logging_manager.config,
        logging_manager.handlers,
        logging_manager._global_logger,
    )

    logging_manager.config = None
    logging_manager.handlers = []
    logging_manager._global_logger = None

    yield logging_manager

    # Drop whatever handlers the test configured
    for handler in logging_manager.handlers:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(original_level)

    (
        logging_manager.config,
        logging_manager.handlers,
        logging_manager._global_logger,
    ) = original_state


@pytest.fixture
def recording_logger():
    """Install a RecordingLogger as the global logger."""
    recorder = RecordingLogger()
    logging_manager.set_global_logger(recorder)
    return recorder


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure no globalog environment variables leak into the test."""
    for var in list(os.environ):
        if var.upper().startswith("GLOBALOG_"):
            monkeypatch.delenv(var)


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Path for a temporary configuration file."""
    config_dir = tmp_path / ".config" / "globalog"
    config_dir.mkdir(parents=True)
    return config_dir / "config.toml"
