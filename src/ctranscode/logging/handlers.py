"""JSON log output for ``--log-json``.

Each record becomes one JSON object per line. Process and stream details
that ctranscode attaches through ``extra={...}`` are promoted to top-level
keys so a log file can be filtered with ``jq`` without digging.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Keys passed via extra= by the runner and the classifier
RECORD_FIELDS: tuple[str, ...] = (
    "command",
    "arg_count",
    "elapsed_seconds",
    "returncode",
    "video_streams",
    "audio_streams",
)


class JSONFormatter(logging.Formatter):
    """Render a log record as a single-line JSON object.

    Output keys: ``time`` (UTC, ISO-8601), ``level``, ``logger``, ``message``,
    any of ``RECORD_FIELDS`` present on the record, and ``exception`` when
    the record carries a traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in RECORD_FIELDS:
            if key in record.__dict__:
                entry[key] = record.__dict__[key]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
