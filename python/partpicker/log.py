"""Logging setup for the part picker.

Standard library logging configured through dictConfig, with a readable
console format by default and a JSON formatter for log shippers.

Usage:
    from partpicker.log import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=False)
    log = get_logger(__name__)
    log.info("Id: %s Name: %s", 2, "Brake Light Switches", extra={"part_id": 2})
"""

import json
import logging
import logging.config
from typing import Any

__all__ = ["configure_logging", "get_logger", "JsonFormatter", "EXTRA_FIELDS"]

# Record attributes copied into JSON output when a call passes them via extra=
EXTRA_FIELDS = ("page", "part_id", "part_name")


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = "INFO", json_logs: bool = False, force: bool = True) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).
        json_logs: Emit one JSON object per line instead of the console format.
        force: Replace any handlers configured earlier.
    """
    formatter_name = "json" if json_logs else "console"
    root = logging.getLogger()
    if force:
        for handler in root.handlers[:]:
            root.removeHandler(handler)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level.upper(),
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level.upper(),
            },
        }
    )


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
