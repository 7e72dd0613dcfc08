"""
Logging Setup
=============

Root logger wiring shared by the ``unhyped`` CLI and the API server.

Console output goes to stderr so ``--json`` reports on stdout stay
parseable. LOG_JSON switches every handler to one JSON object per line,
and LOG_FILE adds a size-rotated file next to the console.

Usage:
    from unhyped.orchestrator.logging_config import setup_logging

    setup_logging(level="DEBUG", log_file="logs/unhyped.log")
    setup_logging_from_settings()   # LOG_LEVEL / LOG_JSON / LOG_FILE
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from ..data.config import LoggingConfig, get_settings

# Attributes passed through ``extra=`` that end up in JSON lines
EXTRA_FIELDS = ("product", "score", "verdict", "platform", "duration", "path", "status_code")

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers capped at WARNING
QUIET_LOGGERS = ("httpx", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: ``ts`` (UTC, from the record creation time), ``level``,
    ``logger``, ``msg``, ``exception`` when a traceback is attached, plus
    any EXTRA_FIELDS set on the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (name, getattr(record, name))
            for name in EXTRA_FIELDS
            if getattr(record, name, None) is not None
        )
        return json.dumps(entry, default=str)


def _rotating_file(path: str, max_bytes: int, backup_count: int) -> logging.Handler:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
    )


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    stream=None,
):
    """
    Replace the root handlers with a console handler and an optional file.

    Unknown level names fall back to INFO. Calling it again reconfigures
    from scratch, which the CLI relies on for ``-v``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT, TEXT_DATEFMT)
    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(_rotating_file(log_file, max_bytes, backup_count))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.debug("Root logger at %s (json=%s, file=%s)", level.upper(), json_output, log_file)


def setup_logging_from_settings(config: Optional[LoggingConfig] = None, verbose: bool = False):
    """Apply a LoggingConfig, the cached settings one by default. ``verbose`` forces DEBUG."""
    config = config or get_settings().logging
    setup_logging(
        level="DEBUG" if verbose else config.level,
        json_output=config.json_logs,
        log_file=config.log_file,
    )
