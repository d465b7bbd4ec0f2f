"""Core Logging Configuration.

Sets up the root logger once per process:
- JSON formatter for production (one object per line)
- Console formatter for development

Per-request log lines are emitted by app.middleware.logging.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import Settings

# Record attributes copied into JSON output when a caller passes them via `extra=`
EXTRA_FIELDS = ("method", "path", "timestamp", "status", "duration_ms")


class JSONFormatter(logging.Formatter):
    """Single-line JSON formatter.

    Example output:
        {"timestamp": "2026-10-19T14:30:00+00:00", "level": "INFO", "logger": "app.request", ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                # request timestamp must not clobber the emit time
                key = "request_time" if field == "timestamp" else field
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for development.

    Format: 2026-10-19 14:30:00 INFO  app.request: → GET / (2026-10-19T14:30:00.123456+00:00)
    """

    FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self) -> None:
        super().__init__(fmt=self.FORMAT, datefmt=self.DATE_FORMAT)


def setup_logging(settings: Settings) -> None:
    """Configure application logging based on settings.

    Call once at startup, before anything else logs.

    Args:
        settings: Application settings instance containing log configuration.
    """
    level = getattr(logging, settings.effective_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if settings.effective_log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())

    root_logger.addHandler(handler)

    # Request lines come from our middleware; uvicorn's access log would duplicate them
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("app.core").info(
        f"Logging configured: level={settings.effective_log_level}, "
        f"format={settings.effective_log_format}, env={settings.environment}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Usage:
        from app.core.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
