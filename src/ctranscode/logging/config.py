"""Root logger setup driven by LoggingConfig.

Diagnostics go to stderr unless ``--log-file`` (or ``[logging] file``)
names a file; stdout stays reserved for the tool's own echo lines.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from ctranscode.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from ctranscode.config.models import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _make_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Rotating handler for the configured file, or None if it cannot be opened."""
    assert config.file is not None
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to ``config``.

    The level names are validated by LoggingConfig, so they map directly
    onto the logging module's constants.
    """
    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = _make_formatter(config.format)
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(config.level.upper())
    root.handlers[:] = handlers
