"""Tests for formatter selection and output."""

import json
import logging
import sys

import pytest

from app.core.config import Settings
from app.core.logging import (
    ConsoleFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.request",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "app.request"
        assert data["message"] == "hello"
        assert "timestamp" in data

    def test_request_extras(self):
        record = make_record(
            method="GET", path="/", timestamp="2026-10-19T00:00:00+00:00", status=200
        )

        data = json.loads(JSONFormatter().format(record))

        assert data["method"] == "GET"
        assert data["path"] == "/"
        assert data["status"] == 200
        assert data["request_time"] == "2026-10-19T00:00:00+00:00"
        assert data["timestamp"] != data["request_time"]

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: bad" in data["exception"]


def test_console_formatter_layout():
    line = ConsoleFormatter().format(make_record("→ GET /"))

    assert line.endswith("INFO  app.request: → GET /")


class TestSetupLogging:
    def test_console_handler(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, log_format="console"))

        (handler,) = restore_root_logger.handlers
        assert isinstance(handler.formatter, ConsoleFormatter)
        assert restore_root_logger.level == logging.INFO

    def test_production_uses_json(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, environment="production"))

        (handler,) = restore_root_logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)

    def test_debug_level(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, debug=True))

        assert restore_root_logger.level == logging.DEBUG

    def test_quiets_uvicorn_access(self, restore_root_logger):
        setup_logging(Settings(_env_file=None))

        assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_get_logger_returns_named_logger():
    logger = get_logger("app.request")

    assert logger is logging.getLogger("app.request")
    assert logger.name == "app.request"
