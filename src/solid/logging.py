"""Logging for the SOLID playground.

Examples print their results with ``click.echo`` on stdout. Log records
describe what the examples did (which design ran, which channel was
used) and go to stderr on the ``solid`` logger, so the root logger of a
host application is left alone.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

LOG_FORMATS = ("standard", "json")

HANDLER_NAME = "solid-console"

STANDARD_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install the console handler on the ``solid`` logger.

    Calling it again swaps the previous handler out instead of adding a
    second one. Unknown level names fall back to WARNING and unknown
    formats to "standard".
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT, datefmt="%H:%M:%S"))

    package_logger = logging.getLogger("solid")
    for existing in package_logger.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    return handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
