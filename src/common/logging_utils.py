"""Centralized logging helpers.

Provides a single ``configure_logging`` entry point plus small utilities used
for structured DEBUG traces (``extra_context``, ``Timer``) and for keeping
credentials out of log lines (``safe_url``).
"""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

try:
    from ..constants import Constants
except ImportError:
    from constants import Constants

_WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as GitHub Actions workflow commands.

    Warnings and errors become ``::warning::`` / ``::error::`` annotations and
    DEBUG records ``::debug::`` lines; INFO is printed as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        # Workflow commands are single-line; escape per the runner's rules
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def _level_from_env() -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(stream=None) -> None:
    """Install the root handler once, honoring SETUP_GOP_LOG_LEVEL."""
    root = logging.getLogger()
    root.setLevel(_level_from_env())

    for handler in root.handlers:
        if getattr(handler, "_setup_gop_handler", False):
            return

    handler = logging.StreamHandler(stream or sys.stdout)
    if os.environ.get(Constants.ENV_GITHUB_ACTIONS, "").lower() == "true":
        handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    handler._setup_gop_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def add_file_handler(path: str) -> logging.Handler:
    """Mirror all log records into ``path``."""
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in kwargs.items() if value is not None}


def safe_url(url: Optional[str]) -> str:
    """Strip userinfo (tokens, passwords) from a URL before logging it."""
    if not url:
        return ""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<unparseable url>"
    if not parts.username and not parts.password:
        return url
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, f"***@{host}", parts.path, parts.query, parts.fragment))


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.monotonic()
        self._end = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.monotonic()

    def duration_ms(self) -> int:
        """Elapsed milliseconds, measured up to now while still running."""
        end = self._end if self._end is not None else time.monotonic()
        return int((end - self._start) * 1000)
