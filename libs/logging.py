from __future__ import annotations

"""Application-wide logging configuration.

Every record is rendered as one JSON line:
- timestamp (UTC ISO8601), level, logger, service, environment, message
- structured extras from `logger.info(msg, extra={...})`, e.g. the
  `source` and `podcasts` fields the catalog loader attaches
- `error: {class, message}` when the record carries an exception, so a
  failed catalog load shows up as `CatalogLoadError` in one line
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from libs.core.settings import get_settings

# Attributes every LogRecord carries; anything else came from `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}

# Loggers that log every outbound request at INFO. The catalog fetch is
# already reported by libs.catalog.loader.
_CHATTY_LOGGERS = ("httpx", "httpcore")


class _JsonFormatter(logging.Formatter):
    """One-line JSON log formatter with stable keys and UTC timestamps."""

    def __init__(self, service: str = "fdr-finder", environment: str = "development") -> None:
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "environment": self.environment,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in entry:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["error"] = {"class": type(exc).__name__, "message": str(exc)[:500]}
        # Values json can't encode (paths, models) fall back to their repr
        return json.dumps(entry, ensure_ascii=False, default=repr)


def setup_logging() -> None:
    """Configure root logger to output one-line JSON logs."""

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(
        _JsonFormatter(service=settings.service_name, environment=settings.environment)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


__all__ = ["setup_logging"]
