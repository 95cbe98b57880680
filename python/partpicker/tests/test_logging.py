"""Tests for logging configuration."""

import json
import logging

from partpicker.log import JsonFormatter, configure_logging, get_logger


def make_record(msg, *args, **extra):
    record = logging.LogRecord("partpicker.submit", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """One JSON object per record."""

    def test_basic_fields(self):
        """Level, logger and the formatted message are present."""
        payload = json.loads(JsonFormatter().format(make_record("Nothing checked for %s post", "Index")))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "partpicker.submit"
        assert payload["message"] == "Nothing checked for Index post"

    def test_part_extras(self):
        """Part id and name passed via extra= are emitted."""
        record = make_record("Id: %s Name: %s", 2, "Brake Light Switches", part_id=2, part_name="Brake Light Switches")
        payload = json.loads(JsonFormatter().format(record))

        assert payload["part_id"] == 2
        assert payload["part_name"] == "Brake Light Switches"
        assert "page" not in payload


class TestConfigureLogging:
    """Root logger setup."""

    def test_console_format(self, restore_root_logging):
        """Default setup installs one stream handler with the console format."""
        configure_logging(level="debug")

        root = restore_root_logging
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert "%(levelname)s" in root.handlers[0].formatter._fmt

    def test_json_format(self, restore_root_logging):
        """json_logs switches the handler to the JSON formatter."""
        configure_logging(level="INFO", json_logs=True)

        assert isinstance(restore_root_logging.handlers[0].formatter, JsonFormatter)

    def test_get_logger(self):
        """Named loggers are plain stdlib loggers."""
        assert get_logger("partpicker.app") is logging.getLogger("partpicker.app")
