"""structlog configuration.

Logs never go to stdout: the stdio transport owns it. By default events
are written to stderr; set ``DEVWEB_LOG_FILE`` to write them to a file
instead, and ``DEVWEB_DEBUG=1`` for debug-level output.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

ENV_DEBUG = "DEVWEB_DEBUG"
ENV_LOG_FILE = "DEVWEB_LOG_FILE"

_log_stream: TextIO | None = None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def configure_logging(
    debug: bool | None = None,
    log_file: Path | None = None,
) -> None:
    """Configure structlog for the process.

    Args:
        debug: Force debug logging on/off (default: from DEVWEB_DEBUG)
        log_file: Write logs here instead of stderr
            (default: from DEVWEB_LOG_FILE)
    """
    global _log_stream

    if debug is None:
        debug = _env_flag(ENV_DEBUG)
    if log_file is None:
        env_path = os.environ.get(ENV_LOG_FILE)
        log_file = Path(env_path) if env_path else None

    stream: TextIO = sys.stderr
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        if _log_stream is not None:
            _log_stream.close()
        _log_stream = log_file.open("a", encoding="utf-8")
        stream = _log_stream

    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial: Any) -> Any:
    """Get a logger bound to a component name."""
    return structlog.get_logger(f"devweb_mcp.{name}", **initial)
