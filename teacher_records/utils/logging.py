"""Logging configuration for the application.

Records carry their context through ``extra=`` (``model``, ``id``,
``path``, ``fields``, ``error``). Production output is one key="value"
line per record; development output is the usual readable line with the
context appended in brackets.
"""

import logging
import sys
from typing import Any, List, Optional, Tuple

from teacher_records.config import Settings, get_settings

# Context keys rendered first, in this order; other extras follow sorted
CONTEXT_FIELDS = ("model", "id", "path", "fields", "error")

STORAGE_LOGGER = "teacher_records.utils.storage"

_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}


def record_context(record: logging.LogRecord) -> List[Tuple[str, Any]]:
    """Collect the ``extra=`` attributes of a record in rendering order."""
    extras = {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }
    ordered = [(key, extras.pop(key)) for key in CONTEXT_FIELDS if key in extras]
    return ordered + sorted(extras.items())


def _quote(value: Any) -> str:
    return '"' + str(value).replace('"', '\\"') + '"'


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one key="value" line per record.

    Fixed keys come first (timestamp, level, logger, message), then the
    record context, then the exception text if any.
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            ("timestamp", self.formatTime(record, self.datefmt)),
            ("level", record.levelname),
            ("logger", record.name),
            ("message", record.getMessage()),
        ]
        parts.extend(record_context(record))
        if record.exc_info:
            parts.append(("exception", self.formatException(record.exc_info)))
        return " ".join(f"{key}={_quote(value)}" for key, value in parts)


class ContextFormatter(logging.Formatter):
    """Readable formatter that appends the record context as ``[k=v ...]``."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = record_context(record)
        if not context:
            return line
        rendered = " ".join(f"{key}={value}" for key, value in context)
        return f"{line} [{rendered}]"


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup application logging configuration.

    Configures the root logger with a stdout handler and a formatter
    chosen by environment. The storage logger gets its own level so file
    I/O chatter can be tuned separately.

    Args:
        settings: Settings to read log levels and environment from.
            Defaults to the global settings instance.
    """
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    formatter_class = (
        StructuredFormatter if settings.is_production else ContextFormatter
    )
    console_handler.setFormatter(
        formatter_class(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    logging.getLogger(STORAGE_LOGGER).setLevel(settings.STORAGE_LOG_LEVEL)

    # Configure third-party loggers to be less verbose
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    root_logger.info(
        "Logging configured",
        extra={
            "log_level": settings.LOG_LEVEL,
            "storage_log_level": settings.STORAGE_LOG_LEVEL,
            "environment": settings.ENVIRONMENT,
        },
    )
