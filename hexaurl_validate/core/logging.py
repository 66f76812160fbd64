"""Log formatting for hexaurl-validate.

Production gets one JSON object per line, development gets colored text.
Rejected identifiers are logged as ``extra`` fields and shortened first,
since an input can be arbitrarily long before validation refuses it.

The library only emits records; applications call ``setup_logging`` once
at startup if they want this package's formatting.

Usage:
    from hexaurl_validate.core.logging import setup_logging, get_logger

    setup_logging()  # once, in the application

    logger = get_logger(__name__)
    logger.debug("HexaURL rejected", extra={"input": value})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from hexaurl_validate.config import get_settings

# Maximum length for truncated values in logs
DEFAULT_TRUNCATE_LENGTH = 100

# Attributes every LogRecord has; anything else came from ``extra``
_STANDARD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def truncate_string(value: str, max_length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
    """Shorten ``value`` to at most ``max_length`` characters, ending in "...".

    Example:
        >>> truncate_string("a" * 30, max_length=8)
        'aaaaa...'
    """
    if len(value) > max_length:
        return f"{value[: max_length - 3]}..."
    return value


def sanitize_value(value: Any, truncate_length: int = DEFAULT_TRUNCATE_LENGTH) -> Any:
    """Truncate long strings, recursing into dicts and lists."""
    if isinstance(value, str):
        return truncate_string(value, truncate_length)
    if isinstance(value, dict):
        return sanitize_for_logging(value, truncate_length)
    if isinstance(value, list):
        return [sanitize_value(item, truncate_length) for item in value]
    return value


def sanitize_for_logging(
    data: dict[str, Any],
    truncate_length: int = DEFAULT_TRUNCATE_LENGTH,
) -> dict[str, Any]:
    """Return a copy of ``data`` with every string shortened to ``truncate_length``."""
    if not isinstance(data, dict):
        return data

    return {key: sanitize_value(value, truncate_length) for key, value in data.items()}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_FIELDS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` fields under ``"extra"``."""

    def __init__(
        self,
        include_extra: bool = True,
        truncate_length: int = DEFAULT_TRUNCATE_LENGTH,
    ):
        super().__init__()
        self.include_extra = include_extra
        self.truncate_length = truncate_length

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            },
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if self.include_extra:
            extra = _extra_fields(record)
            if extra:
                log_entry["extra"] = sanitize_for_logging(extra, self.truncate_length)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable single-line output with the level name colored."""

    # ANSI escapes, keyed by level number
    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, "")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]

        parts = [
            timestamp,
            f"{color}{record.levelname:8}{self.RESET}",
            f"{record.name}:{record.lineno}",
            "-",
            record.getMessage(),
        ]

        if self.include_extra:
            extra = _extra_fields(record)
            if extra:
                parts.append(" ".join(f"{key}={value!r}" for key, value in extra.items()))

        output = " ".join(parts)

        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)

        return output


class InputTruncationFilter(logging.Filter):
    """Logging filter that truncates long string values in log records.

    Never drops records; it only shortens extra fields in place.
    """

    def __init__(self, truncate_length: int = DEFAULT_TRUNCATE_LENGTH):
        super().__init__()
        self.truncate_length = truncate_length

    def filter(self, record: logging.LogRecord) -> bool:
        """Truncate extra fields and let the record through."""
        for key, value in _extra_fields(record).items():
            setattr(record, key, sanitize_value(value, self.truncate_length))
        return True


# Unknown environments log at INFO
ENVIRONMENT_LOG_LEVELS = {
    "development": logging.DEBUG,
    "staging": logging.INFO,
    "production": logging.WARNING,
}


def get_log_level(environment: str, debug: bool) -> int:
    """Pick the root log level; ``debug`` wins over the environment."""
    return logging.DEBUG if debug else ENVIRONMENT_LOG_LEVELS.get(environment, logging.INFO)


def setup_logging(
    level: int | None = None,
    json_format: bool | None = None,
) -> None:
    """Install one stdout handler on the root logger.

    Args:
        level: Root log level. Defaults to the level for ``HEXAURL_ENVIRONMENT``.
        json_format: Emit JSON lines. Defaults to ``HEXAURL_LOG_JSON``, or JSON
            only in production when that is unset.
    """
    settings = get_settings()

    if level is None:
        level = get_log_level(settings.environment, settings.debug)

    if json_format is None:
        json_format = (
            settings.log_json if settings.log_json is not None else settings.is_production
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(InputTruncationFilter(settings.log_truncate_length))

    if json_format:
        handler.setFormatter(JSONFormatter(truncate_length=settings.log_truncate_length))
    else:
        handler.setFormatter(DevelopmentFormatter())

    # Replace rather than add, so repeated calls keep a single handler
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name``; records go through ``setup_logging`` handlers."""
    return logging.getLogger(name)
