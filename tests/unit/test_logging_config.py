"""Unit tests for logging configuration.

These tests verify JSON formatting, request ID handling, and logging setup.
"""

import asyncio
import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from furi.config import Config
from furi.logging_config import (
    JsonFormatter,
    RequestIdFilter,
    get_logger,
    request_id_var,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_logger_state():
    """Ensure clean logger state before and after each test."""
    root = logging.getLogger()
    furi_logger = logging.getLogger("furi")

    original_root_handlers = root.handlers[:]
    original_root_level = root.level
    original_furi_level = furi_logger.level

    yield

    for handler in root.handlers:
        if handler not in original_root_handlers:
            handler.close()
    root.handlers = original_root_handlers
    root.setLevel(original_root_level)
    furi_logger.setLevel(original_furi_level)


def make_config(**overrides) -> Config:
    values = {
        "platform": "auto",
        "windows_long_path": False,
        "log_level": "INFO",
        "log_mode": "stderr",
        "log_file": None,
    }
    values.update(overrides)
    return Config(**values)


def make_record(msg: str = "Test message", level: int = logging.INFO, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="furi.test",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJsonFormatter:
    """Tests for JsonFormatter class."""

    def test_json_formatter_basic(self):
        """Test JsonFormatter outputs valid JSON with only the standard fields."""
        log_obj = json.loads(JsonFormatter().format(make_record()))

        assert set(log_obj) == {"timestamp", "level", "logger", "message"}
        assert log_obj["level"] == "INFO"
        assert log_obj["logger"] == "furi.test"
        assert log_obj["message"] == "Test message"
        datetime.fromisoformat(log_obj["timestamp"])

    def test_json_formatter_with_request_id(self):
        """Test JsonFormatter includes request_id when set in context."""
        token = request_id_var.set("req-123")
        try:
            log_obj = json.loads(JsonFormatter().format(make_record()))
        finally:
            request_id_var.reset(token)

        assert log_obj["request_id"] == "req-123"

    def test_json_formatter_omits_empty_request_id(self):
        """Test JsonFormatter omits an empty request_id."""
        token = request_id_var.set("")
        try:
            log_obj = json.loads(JsonFormatter().format(make_record()))
        finally:
            request_id_var.reset(token)

        assert "request_id" not in log_obj

    def test_json_formatter_with_extras(self):
        """Test JsonFormatter copies known extra fields and ignores others."""
        record = make_record()
        record.tool = "uri_to_path"
        record.uri = "file:///dir/foo"
        record.platform = "windows"
        record.error_code = "ERR_INVALID_HOST"
        record.duration_ms = 0.5
        record.unrelated = "ignored"

        log_obj = json.loads(JsonFormatter().format(record))

        assert log_obj["tool"] == "uri_to_path"
        assert log_obj["uri"] == "file:///dir/foo"
        assert log_obj["platform"] == "windows"
        assert log_obj["error_code"] == "ERR_INVALID_HOST"
        assert log_obj["duration_ms"] == 0.5
        assert "unrelated" not in log_obj

    def test_json_formatter_with_exception(self):
        """Test JsonFormatter formats exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        log_obj = json.loads(JsonFormatter().format(make_record(level=logging.ERROR, exc_info=exc_info)))

        assert "Traceback" in log_obj["exception"]
        assert "ValueError: Test error" in log_obj["exception"]

    def test_json_formatter_with_lone_surrogate(self):
        """Test JsonFormatter survives paths decoded with surrogateescape."""
        record = make_record()
        record.path = "/tmp/\udcff"

        output = JsonFormatter().format(record)

        assert output.isascii()
        assert json.loads(output)["path"] == "/tmp/\udcff"

    def test_json_formatter_with_non_ascii(self):
        """Test JsonFormatter keeps non-ASCII messages intact."""
        output = JsonFormatter().format(make_record("Converted /home/usér/日本"))

        assert json.loads(output)["message"] == "Converted /home/usér/日本"


class TestRequestIdFilter:
    """Tests for RequestIdFilter class."""

    def test_request_id_filter(self):
        """Test RequestIdFilter injects request_id into log records."""
        record = make_record()
        token = request_id_var.set("req-456")
        try:
            assert RequestIdFilter().filter(record) is True
        finally:
            request_id_var.reset(token)

        assert record.request_id == "req-456"  # type: ignore[attr-defined]

    def test_request_id_filter_without_context(self):
        """Test RequestIdFilter passes records through untouched without context."""
        record = make_record()

        assert RequestIdFilter().filter(record) is True
        assert not hasattr(record, "request_id")


class TestRequestIdContextVar:
    """Tests for request_id context variable."""

    @pytest.mark.asyncio
    async def test_request_id_context_var_across_async_calls(self):
        """Test concurrent tasks keep their own request_id."""

        async def async_task(request_id: str) -> str | None:
            token = request_id_var.set(request_id)
            try:
                await asyncio.sleep(0.01)
                return request_id_var.get()
            finally:
                request_id_var.reset(token)

        results = await asyncio.gather(async_task("req-1"), async_task("req-2"), async_task("req-3"))

        assert results == ["req-1", "req-2", "req-3"]


class TestGetLogger:
    """Tests for get_logger() function."""

    def test_get_logger_namespace(self):
        """Test get_logger() returns loggers under the furi namespace."""
        assert get_logger("windows").name == "furi.windows"
        assert get_logger("tools").name == "furi.tools"
        assert get_logger("windows") is not get_logger("tools")


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_stderr_mode(self):
        """Test setup_logging() installs one JSON stderr handler."""
        setup_logging(make_config())

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, JsonFormatter)

    def test_setup_logging_file_mode(self, tmp_path: Path):
        """Test setup_logging() installs a rotating file handler in file mode."""
        log_file = tmp_path / "logs" / "furi.log"

        setup_logging(make_config(log_mode="file", log_file=log_file))

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RotatingFileHandler)
        assert log_file.exists()

    def test_setup_logging_file_mode_writes_records(self, tmp_path: Path):
        """Test records logged through get_logger() reach the log file."""
        log_file = tmp_path / "furi.log"
        setup_logging(make_config(log_mode="file", log_file=log_file, log_level="DEBUG"))

        get_logger("test").debug("converted path")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "[DEBUG] furi.test: converted path" in content

    def test_setup_logging_creates_current_log_symlink(self, tmp_path: Path):
        """Test setup_logging() points current.log at the active file."""
        log_file = tmp_path / "furi.log"

        setup_logging(make_config(log_mode="file", log_file=log_file))

        current = tmp_path / "current.log"
        if not current.is_symlink():
            pytest.skip("Symlink creation not supported")
        assert current.resolve() == log_file.resolve()

    def test_setup_logging_both_mode(self, tmp_path: Path):
        """Test setup_logging() installs both handlers in both mode."""
        setup_logging(make_config(log_mode="both", log_file=tmp_path / "furi.log"))

        handler_types = {type(h).__name__ for h in logging.getLogger().handlers}
        assert handler_types == {"StreamHandler", "RotatingFileHandler"}

    def test_setup_logging_replaces_existing_handlers(self):
        """Test calling setup_logging() again does not duplicate handlers."""
        root_logger = logging.getLogger()
        dummy_handler = logging.StreamHandler()
        root_logger.addHandler(dummy_handler)

        setup_logging(make_config())
        setup_logging(make_config())

        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0] is not dummy_handler

    def test_setup_logging_sets_log_level(self):
        """Test setup_logging() applies the level to root and furi loggers."""
        setup_logging(make_config(log_level="WARNING"))

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("furi").level == logging.WARNING

    def test_setup_logging_adds_request_id_filter(self):
        """Test setup_logging() adds RequestIdFilter to handlers."""
        setup_logging(make_config())

        handler = logging.getLogger().handlers[0]
        assert sum(isinstance(f, RequestIdFilter) for f in handler.filters) == 1
