"""Root logger setup for the CLI: console plus ``genepool.log``, plain or JSON."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import IO, Any, Mapping

from .settings import Settings, get_settings

__all__ = ["JSONFormatter", "configure_logging"]

LOG_FILE_NAME = "genepool.log"
PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every record carries; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Fields passed through ``extra`` (such as the driver's generation
    summaries) and the formatter's fixed ``context`` become top-level keys.
    """

    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self.context = dict(context or {})

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.context,
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    settings: Settings | None = None,
    *,
    structured: bool | None = None,
    level: int | str = logging.INFO,
    context: Mapping[str, Any] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Replace the root handlers with a console handler and a file handler.

    ``structured=None`` follows ``settings.structured_logging``; ``context`` is
    only used by the JSON format.
    """

    settings = settings or get_settings()
    if structured is None:
        structured = settings.structured_logging
    formatter = (
        JSONFormatter(context)
        if structured
        else logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    settings.logs_dir.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(stream),
        logging.FileHandler(settings.logs_dir / LOG_FILE_NAME, encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)
