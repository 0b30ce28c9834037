# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for classwork.

Every diagnostic log entry is a single JSON line with a timestamp, level,
source module and message. Program output (prompts, reports, matrices and the
one-line error messages) is NOT logging and never goes through here.

How this works:
  - Every module asks `get_logger(__name__)` for a logger under the
    `classwork` namespace. Those loggers carry no handlers of their own, they
    propagate to the `classwork` root logger.
  - The root logger owns the handlers: one for stderr and optionally one for
    a file. It never propagates to Python's global root logger.
  - `configure_logging` is called once by the CLI to set the level and the
    optional log file for the whole package.

The default level is WARNING. The programs only emit INFO/DEBUG entries on
their normal and bad-input paths, so at the default level stderr carries
nothing but the program's own error line.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "classwork.grades.statistics", "msg": "...", ...}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "classwork"
DEFAULT_LOG_LEVEL = "WARNING"


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Each log entry contains four mandatory fields:
      ts     — ISO 8601 UTC timestamp
      level  — log level name
      module — the logger name (usually the Python module path)
      msg    — the formatted message string

    Fields passed through the `extra` kwarg are merged into the object, which
    is how callers attach context like row numbers or matrix shapes.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        # Skip internal LogRecord attributes, keep only caller-supplied extras.
        standard_attrs = {
            "name",
            "msg",
            "args",
            "created",
            "relativeCreated",
            "exc_info",
            "exc_text",
            "stack_info",
            "lineno",
            "funcName",
            "pathname",
            "filename",
            "module",
            "levelno",
            "levelname",
            "processName",
            "process",
            "threadName",
            "thread",
            "message",
            "msecs",
            "taskName",
        }
        for key, value in record.__dict__.items():
            if key not in standard_attrs and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class _StderrHandler(logging.StreamHandler):
    """
    A StreamHandler that always writes to the *current* sys.stderr, so a
    stderr swapped in after the logger was built (pytest capture, for one)
    still receives the output.
    """

    def __init__(self) -> None:
        super().__init__(stream=sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:  # type: ignore[no-untyped-def]
        pass


_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def _root_logger() -> logging.Logger:
    """Return the package root logger, attaching the stderr handler on first use."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = _StderrHandler()
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
        root.setLevel(_resolve_log_level(DEFAULT_LOG_LEVEL))
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a structured JSON logger for a module.

    Every module should call this once at the top with `__name__` and use the
    returned logger. Names outside the `classwork` namespace are nested under
    it so their output still goes through the package handlers.
    """
    _root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Set the package-wide log level and optional log file.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  stderr and the file.

    Returns:
        The configured `classwork` root logger.
    """
    level = _resolve_log_level(log_level)
    root = _root_logger()
    root.setLevel(level)

    if log_file is not None:
        target = os.path.abspath(log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target
            for h in root.handlers
        )
        if not already_attached:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)

    return root
