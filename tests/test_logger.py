"""Tests for the JSON log formatter and the environment parsing helpers."""

import importlib
import json
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot import config
from telbot.config import _parse_level, _parse_seconds
from telbot.logger import TelbotLogger, _JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="telbot.client", level=logging.WARNING, pathname=__file__, lineno=1,
        msg="Telegram returned an error", args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# ── _JsonFormatter ───────────────────────────────────────────────────────────


class TestJsonFormatter:
    """Validate the structured log line."""

    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record()))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "telbot.client"
        assert entry["message"] == "Telegram returned an error"
        assert "timestamp" in entry

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(api_endpoint="sendMessage", error_code=400)))
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["error_code"] == 400

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(_JsonFormatter().format(record))
        assert "ValueError: boom" in entry["exc_info"]


# ── TelbotLogger ─────────────────────────────────────────────────────────────


class TestTelbotLogger:
    def test_singleton_logger(self) -> None:
        first = TelbotLogger.get_logger()
        assert first is TelbotLogger.get_logger(logging.DEBUG)
        assert first.name == "telbot"

    def test_set_level(self) -> None:
        logger = TelbotLogger.get_logger()
        previous = logger.level
        TelbotLogger.set_level(logging.ERROR)
        assert logger.level == logging.ERROR
        TelbotLogger.set_level(previous)


# ── config helpers ───────────────────────────────────────────────────────────


class TestConfigHelpers:
    def test_parse_seconds(self) -> None:
        assert _parse_seconds(None, 30.0) == 30.0
        assert _parse_seconds("12.5", 30.0) == 12.5
        assert _parse_seconds("soon", 30.0) == 30.0
        assert _parse_seconds("-1", 30.0) == 30.0

    def test_parse_level(self) -> None:
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level(" Error ") == logging.ERROR
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING

    def test_import_leaves_handlers_alone(self) -> None:
        package_logger = logging.getLogger("telbot")
        before = list(package_logger.handlers)
        importlib.reload(config)
        assert package_logger.handlers == before
        assert logging.getLogger("telbot.config").handlers == []
