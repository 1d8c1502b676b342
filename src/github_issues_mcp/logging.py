"""Structured JSON logging for github-issues-mcp.

Writes JSONL either to a rotating log file (5MB, 3 backups) or, when no file
is configured, to stderr. Stdout is never used: in stdio mode it carries the
MCP protocol stream.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOGGER_NAME = "github_issues_mcp"
_setup_lock = threading.Lock()
_MAX_BYTES = 5 * 1024 * 1024  # 5MB
_BACKUP_COUNT = 3


class _JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        if hasattr(record, "tool"):
            entry["tool"] = record.tool
        if hasattr(record, "args_data"):
            entry["args"] = record.args_data
        if hasattr(record, "duration_ms"):
            entry["duration_ms"] = record.duration_ms
        if hasattr(record, "error"):
            entry["error"] = record.error
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        return json.dumps(entry, default=str)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler and getattr(handler, "stream", None) is sys.stderr


def setup_logging(log_file: Path | None = None) -> logging.Logger:
    """Attach a JSON handler to the package logger and return it.

    Calling again with the same target is a no-op; a different target
    replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)

    with _setup_lock:
        if log_file is None:
            for h in logger.handlers[:]:
                if _is_stderr_handler(h):
                    return logger
                logger.removeHandler(h)
                h.close()
            handler: logging.Handler = logging.StreamHandler(sys.stderr)
        else:
            target_filename = os.path.abspath(str(log_file))
            for h in logger.handlers[:]:
                if isinstance(h, RotatingFileHandler) and h.baseFilename == target_filename:
                    return logger
                # Different target — drop the stale handler to avoid duplicates.
                logger.removeHandler(h)
                h.close()
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                str(log_file),
                maxBytes=_MAX_BYTES,
                backupCount=_BACKUP_COUNT,
            )

        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
