"""Shared pieces of the CLI output formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """How a command prints its result: rich text for people, JSON for scripts."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_flag(cls, json_output: bool) -> OutputFormat:
        """Map a command's ``--json`` flag to a format."""
        return cls.JSON if json_output else cls.TEXT


class OutputFormatter(ABC, Generic[T]):
    """Renders one kind of command result in either output format."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> str:
        """Render ``data`` as a string in the requested format."""

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> None:
        """Render ``data`` and write it to stdout."""
        rendered = self.format(data, format_type)
        if format_type is OutputFormat.JSON:
            # Bypass rich so JSON is never wrapped or styled
            print(rendered)
            return
        self.console.print(rendered)
