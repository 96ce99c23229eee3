"""Logging setup: structlog events rendered through stdlib logging handlers."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    dict_tracebacks,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

from scriptpace.config.settings import ScriptPaceSettings

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _event_metadata() -> list[Any]:
    """Processors adding timestamp, level and logger name to every event."""
    return [TimeStamper(fmt="iso"), add_log_level, add_logger_name]


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "structured":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
            drop_missing=True,
        )
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.rich_traceback,
    )


def _build_handlers(settings: ScriptPaceSettings, level: int) -> list[logging.Handler]:
    """Stderr handler plus, when ``log_file`` is set, a rotating file handler."""
    formatter = ProcessorFormatter(
        processor=_renderer(settings.log_format),
        # Records from plain stdlib loggers get the same metadata
        foreign_pre_chain=_event_metadata(),
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def configure_logging(settings: ScriptPaceSettings) -> None:
    """Install ScriptPace's log handlers and structlog processor chain.

    Replaces any handlers already on the root logger, so calling it again
    with new settings (for example after ``--debug``) takes full effect.

    Raises:
        ValueError: If ``settings.log_level`` names no logging level. Only
            settings built without validation can get this far.
    """
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        raise ValueError(
            f"Invalid log level '{settings.log_level}'. "
            "Expected one of: CRITICAL, ERROR, WARNING, INFO, DEBUG"
        )

    logging.basicConfig(
        level=level, handlers=_build_handlers(settings, level), force=True
    )

    processors: list[Any] = [merge_contextvars, filter_by_level, *_event_metadata()]
    if settings.log_format != "console":
        processors.append(dict_tracebacks)
    if settings.debug:
        processors.append(
            CallsiteParameterAdder(
                [
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            )
        )
    # Final rendering is left to the handlers' ProcessorFormatter
    processors.append(ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger named ``name`` without touching configuration."""
    return structlog.get_logger(name)
