"""Screenplay input and result reporting shared by ScriptPace commands."""

import sys
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from scriptpace.cli.formatters.json_formatter import JsonFormatter
from scriptpace.cli.validators.base import ValidationError
from scriptpace.cli.validators.file_validator import FileValidator
from scriptpace.config import get_logger
from scriptpace.exceptions import ScriptPaceError, ScriptPaceFileNotFoundError

logger = get_logger(__name__)


class CLIHandler:
    """Reads screenplays for a command and reports how the command ended.

    Args:
        console: Rich console for human-readable output
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> NoReturn:
        """Log and report a failed command, then exit with ``exit_code``.

        Tracebacks are logged only for errors ScriptPace did not anticipate.

        Raises:
            typer.Exit: Always
        """
        anticipated = isinstance(error, ValidationError | ScriptPaceError)
        logger.error(
            "Command failed",
            error=str(error),
            error_type=type(error).__name__,
            exc_info=None if anticipated else error,
        )

        if json_output:
            print(self.json_formatter.error(error, exit_code))
        else:
            self.console.print(f"[red]{escape(self._describe(error))}[/red]")
        raise typer.Exit(exit_code)

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, ValidationError):
            return f"Validation Error: {error}"
        if isinstance(error, ScriptPaceError):
            # Formatted with its own "Error:" prefix, hint and details
            return str(error)
        return f"Error: {error}"

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Report a finished command as a green line or a JSON envelope."""
        if json_output:
            print(self.json_formatter.success(message, data))
        else:
            self.console.print(f"[green]{escape(message)}[/green]")

    def read_screenplay(self, path: Path | None) -> str:
        """Return screenplay text from ``path``, or stdin for None or ``-``.

        Files are decoded as UTF-8 with any byte order mark dropped.
        Undecodable bytes become U+FFFD instead of failing the command.

        Raises:
            ValidationError: If the path is not a file, or nothing is piped
                in when reading stdin
            ScriptPaceFileNotFoundError: If the file vanishes before reading
        """
        if path is None or str(path) == "-":
            if sys.stdin.isatty():
                raise ValidationError(
                    "No screenplay given. Pass a file path or pipe text on stdin",
                    "path",
                )
            return sys.stdin.read()

        resolved = FileValidator(must_exist=True).validate(path)
        try:
            return resolved.read_text(encoding="utf-8-sig", errors="replace")
        except FileNotFoundError as e:
            raise ScriptPaceFileNotFoundError(
                message=f"Screenplay file not found: {resolved}",
                hint="Check the path and try again",
                details={"path": str(resolved)},
            ) from e
