"""
Unit tests for logging formatters.

Tests structured JSON formatting, console formatting, and Rich terminal output.
"""

import json
import logging
import sys

import pytest

from globalog.logging.config import LoggingConfig
from globalog.logging.formatters import (
    ConsoleFormatter,
    MetadataRichHandler,
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
    create_structured_formatter,
    format_metadata,
)
from globalog.logging.functions import logI
from globalog.logging.manager import configure_logging


def make_record(metadata=None, exc_info=None, msg="Test message"):
    record = logging.LogRecord(
        name="tests.app",
        level=logging.WARNING,
        pathname="/srv/app/jobs.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
        func="nightly",
    )
    record.created = 1642684800.0
    if metadata is not None:
        record.metadata = metadata
    return record


@pytest.mark.unit
class TestFormatMetadata:

    def test_renders_pairs_in_order(self):
        assert format_metadata({"b": 1, "a": "x"}) == "b=1 a=x"

    @pytest.mark.parametrize("metadata", [None, {}])
    def test_empty(self, metadata):
        assert format_metadata(metadata) == ""


@pytest.mark.unit
class TestStructuredFormatter:
    """Test cases for StructuredFormatter."""

    def test_init_default_values(self):
        formatter = StructuredFormatter()
        assert formatter.service_name == "globalog"
        assert formatter.version == "unknown"

    def test_format_basic_record(self):
        formatter = StructuredFormatter(service_name="test", version="1.0")

        log_entry = json.loads(formatter.format(make_record()))

        assert log_entry["timestamp"].startswith("2022-01-20T")
        assert log_entry["timestamp"].endswith("+00:00")
        assert log_entry["level"] == "WARNING"
        assert log_entry["message"] == "Test message"
        assert log_entry["service"] == "test"
        assert log_entry["version"] == "1.0"
        assert log_entry["logger"] == "tests.app"
        assert log_entry["file"] == "/srv/app/jobs.py"
        assert log_entry["function"] == "nightly"
        assert log_entry["line"] == 42
        assert "metadata" not in log_entry
        assert "exception" not in log_entry

    def test_format_with_metadata(self):
        formatter = StructuredFormatter()

        log_entry = json.loads(formatter.format(make_record({"job": "reindex", "shards": 4})))

        assert log_entry["metadata"] == {"job": "reindex", "shards": 4}

    def test_non_serializable_metadata_uses_str(self):
        formatter = StructuredFormatter()

        log_entry = json.loads(formatter.format(make_record({"owner": object})))

        assert log_entry["metadata"]["owner"] == str(object)

    def test_format_with_exception(self):
        formatter = StructuredFormatter()
        try:
            raise KeyError("missing")
        except KeyError:
            record = make_record(exc_info=sys.exc_info())

        log_entry = json.loads(formatter.format(record))

        assert log_entry["exception"]["type"] == "KeyError"
        assert "missing" in log_entry["exception"]["message"]
        assert any("KeyError" in line for line in log_entry["exception"]["traceback"])

    def test_factory(self):
        formatter = create_structured_formatter("svc", "3.0")
        assert isinstance(formatter, StructuredFormatter)
        assert formatter.service_name == "svc"


@pytest.mark.unit
class TestConsoleFormatter:
    """Console output appends metadata to the message line."""

    def test_format_without_metadata(self):
        output = ConsoleFormatter().format(make_record())

        assert output.endswith("[ WARNING] tests.app: Test message")

    def test_format_with_metadata(self):
        output = ConsoleFormatter().format(make_record({"attempt": 2, "host": "db1"}))

        assert output.endswith("tests.app: Test message attempt=2 host=db1")

    def test_metadata_stays_on_message_line_with_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record({"attempt": 3}, exc_info=sys.exc_info())

        first_line, _, rest = ConsoleFormatter().format(record).partition("\n")

        assert first_line.endswith("Test message attempt=3")
        assert "RuntimeError: boom" in rest

    def test_factory(self):
        assert isinstance(create_console_formatter(), ConsoleFormatter)


@pytest.mark.unit
class TestRichHandler:
    """Rich output renders metadata after the message."""

    def test_factory_returns_metadata_handler(self):
        handler = create_rich_handler()

        assert isinstance(handler, MetadataRichHandler)
        assert handler.console.stderr is True

    def test_render_message_appends_escaped_metadata(self):
        handler = create_rich_handler()

        text = handler.render_message(make_record({"tag": "[prod]"}), "deployed")

        assert text.plain == "deployed tag=[prod]"

    def test_render_message_keeps_brackets_literal(self):
        handler = create_rich_handler()
        message = "closing [/bold] tag in [/tmp]"

        text = handler.render_message(make_record(msg=message), message)

        assert text.plain == message

    def test_bracketed_message_through_global_logger(self, capsys, monkeypatch):
        monkeypatch.setenv("COLUMNS", "200")
        configure_logging(LoggingConfig(format="rich", label="tests.rich"))

        logI("closing [/bold] tag", {"path": "[/tmp]"})

        err = capsys.readouterr().err
        assert "closing [/bold] tag" in err
        assert "path=[/tmp]" in err
