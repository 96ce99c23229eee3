"""Input validators for ScriptPace CLI."""

from __future__ import annotations

from scriptpace.cli.validators.base import ValidationError, require_text
from scriptpace.cli.validators.file_validator import (
    ConfigFileValidator,
    FileValidator,
    ReportPathValidator,
)

__all__ = [
    "ConfigFileValidator",
    "FileValidator",
    "ReportPathValidator",
    "ValidationError",
    "require_text",
]
