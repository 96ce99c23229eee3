"""JSON output for CLI commands."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from scriptpace.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpace.exceptions import ScriptPaceError


def to_jsonable(data: Any) -> Any:
    """Convert analysis results, settings, and plain values to JSON data.

    Scalars are wrapped as ``{"value": ...}`` so output is always an object
    or an array.
    """
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, dict | list | tuple):
        return data
    return {"value": data}


class JsonFormatter(OutputFormatter[Any]):
    """Indented JSON for results and for success/error envelopes."""

    indent = 2

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        return self._dump(to_jsonable(data))

    def success(self, message: str, data: Any = None) -> str:
        """Envelope for a command that finished, with optional result data."""
        envelope: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            envelope["data"] = data
        return self._dump(envelope)

    def error(self, error: Exception, code: int = 1) -> str:
        """Envelope for a failed command.

        ScriptPace errors contribute their bare message and, when set, their
        hint; other exceptions their string form.
        """
        envelope: dict[str, Any] = {"success": False, "error": str(error), "code": code}
        if isinstance(error, ScriptPaceError):
            envelope["error"] = error.message
            if error.hint:
                envelope["hint"] = error.hint
        return self._dump(envelope)

    def _dump(self, payload: Any) -> str:
        return json.dumps(payload, indent=self.indent, default=str)
