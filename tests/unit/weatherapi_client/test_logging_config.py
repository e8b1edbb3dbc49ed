"""Tests for logging configuration."""

import json
import logging

from weatherapi_client.config import Settings
from weatherapi_client.logging_config import (
    get_logger,
    log_with_context,
    redact_sensitive_data,
    setup_logging,
    setup_logging_from_settings,
)


class TestRedaction:
    """Tests for URL redaction."""

    def test_redacts_api_key(self):
        url = "https://api.weatherapi.com/v1/current.json?key=abc123&q=Berlin&aqi=no"

        assert redact_sensitive_data(url) == (
            "https://api.weatherapi.com/v1/current.json?key=***REDACTED***&q=Berlin&aqi=no"
        )

    def test_leaves_other_params(self):
        url = "https://api.weatherapi.com/v1/ip.json?key=abc123&q=auto:ip"

        assert redact_sensitive_data(url).endswith("&q=auto:ip")

    def test_does_not_touch_similar_names(self):
        url = "https://example.com/?monkey=1"

        assert redact_sensitive_data(url) == url


def test_log_with_context_adds_fields(caplog):
    logger = get_logger("weatherapi_client.tests")

    with caplog.at_level(logging.INFO, logger="weatherapi_client.tests"):
        log_with_context(logger, "info", "Hello", event_type="test_event", status_code=200)

    record = caplog.records[-1]
    assert record.getMessage() == "Hello"
    assert record.event_type == "test_event"
    assert record.status_code == 200


def test_setup_logging_console_only():
    root = logging.getLogger()
    orig_handlers = root.handlers[:]
    orig_level = root.level
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers = orig_handlers
        root.setLevel(orig_level)


def test_setup_logging_json_file(tmp_path):
    root = logging.getLogger()
    orig_handlers = root.handlers[:]
    orig_level = root.level
    log_file = tmp_path / "logs" / "weatherapi.log"
    try:
        setup_logging("INFO", log_file=log_file)

        log_with_context(get_logger("weatherapi_client.tests"), "warning", "Structured", event_type="file_test")
        for handler in root.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "Structured"
        assert payload["event_type"] == "file_test"
        assert payload["levelname"] == "WARNING"
    finally:
        for handler in root.handlers:
            if handler not in orig_handlers:
                handler.close()
        root.handlers = orig_handlers
        root.setLevel(orig_level)


def test_setup_logging_from_settings_uses_log_level():
    root = logging.getLogger()
    orig_handlers = root.handlers[:]
    orig_level = root.level
    try:
        setup_logging_from_settings(Settings(api_key="key", log_level="error"))

        assert root.level == logging.ERROR
        assert root.handlers[0].level == logging.ERROR
    finally:
        root.handlers = orig_handlers
        root.setLevel(orig_level)
