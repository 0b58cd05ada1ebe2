"""Tests for logging setup."""

from __future__ import annotations

import json
import logging

import pytest

from idack.core.config import AppSettings
from idack.core.logging_config import ROOT_LOGGER, JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_is_idempotent():
    configure_logging(AppSettings(log_level="DEBUG"))
    logger = configure_logging(AppSettings(log_level="WARNING"))
    ours = [h for h in logger.handlers if getattr(h, "_idack_handler", False)]
    assert len(ours) == 1
    assert logger.level == logging.WARNING


def test_json_format_selected():
    logger = configure_logging(AppSettings(log_format="json"))
    ours = next(h for h in logger.handlers if getattr(h, "_idack_handler", False))
    assert isinstance(ours.formatter, JsonFormatter)


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("idack.test", logging.INFO, __file__, 1, "routed %s", ("ff-1",), None)
    record.outcome = "ISSUE"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "routed ff-1"
    assert payload["outcome"] == "ISSUE"
    assert payload["level"] == "INFO"
