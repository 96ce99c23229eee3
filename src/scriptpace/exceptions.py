"""Errors raised by ScriptPace.

Every error carries a one-line message, an optional hint telling the user
what to change, and optional details for logs and JSON output.
"""

from __future__ import annotations

from typing import Any

# Keys people commonly write in config files, mapped to the real setting names
RENAMED_CONFIG_KEYS = {
    "dialogue_rate": "dialogue_wpm",
    "action_rate": "action_wpm",
    "description_rate": "description_wpm",
    "output_dir": "report_output_dir",
    "title": "report_title",
}


class ScriptPaceError(Exception):
    """Base class for ScriptPace errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render message, hint and details as the text shown to users."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(ScriptPaceError):
    """A config file is unreadable, malformed, or uses unknown key names."""


class AnalysisInputError(ScriptPaceError):
    """The analyzer was handed something other than text."""


class ScriptPaceFileNotFoundError(ScriptPaceError):
    """A screenplay or config file is missing."""


class ReportExportError(ScriptPaceError):
    """The PDF report could not be written."""


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject config mappings that use a known wrong name for a setting.

    All misnamed keys are reported together.

    Raises:
        ConfigurationError: If any key in RENAMED_CONFIG_KEYS is present
    """
    renames = {
        wrong: correct
        for wrong, correct in RENAMED_CONFIG_KEYS.items()
        if wrong in config
    }
    if not renames:
        return

    listed = ", ".join(
        f"'{correct}' instead of '{wrong}'" for wrong, correct in renames.items()
    )
    raise ConfigurationError(
        message=f"Unknown configuration key(s): {', '.join(renames)}",
        hint=f"Use {listed}",
        details={"renames": renames},
    )
