"""Output formatters for ScriptPace CLI."""

from __future__ import annotations

from scriptpace.cli.formatters.analysis_formatter import AnalysisFormatter
from scriptpace.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpace.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "AnalysisFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
]
