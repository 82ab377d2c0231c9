"""
Logging Configuration

Provides:
- CustomJsonFormatter: single-line JSON records
- setup_logging: YAML dictConfig loader with ${LOG_LEVEL} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import yaml

_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. specbuilder.core.domain)
      - message: Log message
      - any `extra=` fields passed to the logging call
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


# Installed as package data next to this module.
DEFAULT_LOG_CONFIG_PATH = Path(__file__).with_name("logging.yml")


def setup_logging(
    config_path: Union[str, Path] = DEFAULT_LOG_CONFIG_PATH, level: Optional[str] = None
):
    """
    Load the YAML config, substitute environment variables, and initialize logging.
    """
    level = level or os.environ.get("LOG_LEVEL", "INFO")

    if not os.path.exists(config_path):
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Supports ${LOG_LEVEL} format.
        template = string.Template(f.read())

    mapping = os.environ.copy()
    mapping["LOG_LEVEL"] = level

    config = yaml.safe_load(template.safe_substitute(mapping))
    logging.config.dictConfig(config)
