"""Settings and logging for ScriptPace.

Logging is configured from the current settings the first time any module
asks for a logger through ``get_logger``.
"""

from __future__ import annotations

from typing import Any

from scriptpace.config import logging as _logging
from scriptpace.config import settings as _settings
from scriptpace.config.logging import configure_logging
from scriptpace.config.settings import (
    ScriptPaceSettings,
    get_settings,
    set_settings,
    settings_for_command,
)

__all__ = [
    "ScriptPaceSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings",
    "set_settings",
    "settings_for_command",
]

_configured = False
_loggers: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Return the logger for ``name``, configuring logging on first use."""
    global _configured
    if name not in _loggers:
        if not _configured:
            configure_logging(get_settings())
            _configured = True
        _loggers[name] = _logging.get_logger(name)
    return _loggers[name]


def reset_settings() -> None:
    """Forget settings and logging state; the next lookup reloads both."""
    global _configured
    _settings.reset_settings()
    _configured = False
    _loggers.clear()
