"""
Logging configuration.

Development: human-readable console output.
Production: JSON lines to stdout (LOG_FORMAT=json).
"""

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Optional

from .config import Settings, get_settings


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def get_logging_config(settings: Settings) -> dict:
    """
    Build a dictConfig for the given settings.

    Args:
        settings: Application settings (log_level, log_format, debug)

    Returns:
        logging.config.dictConfig compatible dict
    """
    level = "DEBUG" if settings.debug else settings.log_level.upper()

    if settings.log_format == "json":
        formatter = {"()": "shared.logging_config.JsonFormatter"}
    else:
        formatter = {"format": "[{asctime}] {levelname} {name} {message}", "style": "{"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "shared": {"level": level},
            "modules": {"level": level},
        },
        "root": {"handlers": ["console"], "level": level},
    }


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply logging configuration (defaults to the cached settings)."""
    logging.config.dictConfig(get_logging_config(settings or get_settings()))
