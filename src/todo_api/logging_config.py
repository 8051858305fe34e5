"""Logging setup for the API process."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from .settings import Settings

_PRETTY_FORMAT = '%(asctime)s level=%(levelname)s logger=%(name)s message="%(message)s"'


class KeyValueFormatter(logging.Formatter):
    """key=value line format; the message is escaped to stay inside its quotes."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = record.message
        record.message = message.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        try:
            return super().formatMessage(record)
        finally:
            record.message = message


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


# PUBLIC_INTERFACE
def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger from settings.

    Handlers already installed (e.g. by uvicorn or pytest) are kept; only the
    level and formatter are applied to them.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig()
    root_logger.setLevel(settings.log_level.upper())

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JsonFormatter()
    else:
        formatter = KeyValueFormatter(_PRETTY_FORMAT)
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
