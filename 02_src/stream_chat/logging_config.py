"""Logging for the stream_chat package.

The library only creates loggers under ``stream_chat``; handlers are installed
by ``setup_logging``, which the receiver entry point calls.
"""

import json
import logging
import logging.config
import os
from datetime import datetime, timezone

PACKAGE_LOGGER = "stream_chat"

# Request fields passed through ``extra=`` by the transport, dispatch and
# webhook receiver, with the type each is rendered as.
CONTEXT_FIELDS: dict[str, type] = {
    "method": str,
    "path": str,
    "status_code": int,
    "error_code": int,
    "cid": str,
    "event_type": str,
    "user_id": str,
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with request context fields at top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name, cast in CONTEXT_FIELDS.items():
            value = getattr(record, name, None)
            if value is not None and value != "":
                log_data[name] = cast(value)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Attach JSON handlers to the ``stream_chat`` logger.

    Args:
        log_level: Level name. Defaults to LOG_LEVEL env var or INFO.
        log_file: Optional rotating log file. Defaults to LOG_FILE env var;
                  without one, records only go to stdout.
    """
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file or os.getenv("LOG_FILE")

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "json",
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JSONFormatter}},
            "handlers": handlers,
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": log_level,
                    "handlers": list(handlers),
                    "propagate": False,
                },
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package (pass ``__name__``)."""
    return logging.getLogger(name)
