import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

_EXTRA_KEYS = (
    "event",
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "detail",
    "email",
    "movie_id",
    "attempt",
    "store",
    "rowcount",
    "error_type",
)


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logs.

    Fields passed through ``extra={...}`` are copied into the payload when they
    belong to the known set of keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class DropHealthcheckAccessLogs(logging.Filter):
    """Drops uvicorn access lines for the health endpoint."""

    _paths = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(path in message for path in self._paths)


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stdout handler and JSON output.

    :param level: Log level name or number.
    """
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.handlers = [handler]

    logging.getLogger("uvicorn.access").addFilter(DropHealthcheckAccessLogs())
