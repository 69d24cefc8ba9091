"""Structured logging for amcapital.

structlog renders on top of the standard library handlers. Level, output
format and the log directory come from ``AppSettings``; a simulation run
can bind its report id so every event it emits carries it.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from amcapital.core.settings import AppSettings, get_settings

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE_NAME = "amcapital.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_configured: bool = False


def _build_handlers(log_dir: Path) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    # Test runs only log to stdout
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers

    try:
        log_dir.mkdir(exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            str(log_dir / LOG_FILE_NAME),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ))
    except OSError:
        # Read-only deployments log to stdout only
        pass
    return handlers


def _build_processors(json_output: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
    settings: AppSettings | None = None,
) -> structlog.BoundLogger:
    """Set up logging once per process.

    Args:
        level: DEBUG, INFO, WARNING or ERROR; defaults to ``AMCAPITAL_LOG_LEVEL``
        json_output: JSON lines instead of console output; defaults to
            ``AMCAPITAL_JSON_LOGS``
        settings: Settings to read defaults from (cached settings otherwise)

    Returns:
        The root structlog logger.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.json_logs

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        handlers=_build_handlers(LOG_DIR),
        force=True,
    )

    structlog.configure(
        processors=_build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to ``name`` (usually ``__name__``); configures logging on first use."""
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger


def bind_context(**values: Any) -> None:
    """Attach key/values to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_context(*keys: str) -> None:
    """Drop the given context keys, or all of them when none are given."""
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()
