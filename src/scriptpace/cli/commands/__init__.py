"""ScriptPace CLI commands."""

from __future__ import annotations

from scriptpace.cli.commands.analyze import analyze_command
from scriptpace.cli.commands.config import config_app
from scriptpace.cli.commands.export import export_command

__all__ = [
    "analyze_command",
    "config_app",
    "export_command",
]
