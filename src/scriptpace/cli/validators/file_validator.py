"""Path checks for screenplay inputs, report outputs, and config files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from scriptpace.cli.validators.base import ValidationError
from scriptpace.config.settings import CONFIG_SUFFIXES


class FileValidator:
    """Resolve a path and check that it names a usable file.

    Args:
        must_exist: Reject paths that do not exist yet
        extensions: Allowed suffixes, compared case-insensitively. None
            allows any suffix.
    """

    def __init__(
        self, must_exist: bool = True, extensions: Iterable[str] | None = None
    ) -> None:
        self.must_exist = must_exist
        self.extensions = (
            tuple(ext.lower() for ext in extensions) if extensions else None
        )

    def validate(self, value: str | Path) -> Path:
        """Return the absolute path, or raise ValidationError."""
        path = Path(value).expanduser().resolve()

        if path.exists():
            if not path.is_file():
                raise ValidationError(f"Path is not a file: {path}")
        elif self.must_exist:
            raise ValidationError(f"File does not exist: {path}")

        if self.extensions and path.suffix.lower() not in self.extensions:
            raise ValidationError(
                f"Invalid file extension: {path.suffix or '(none)'}. "
                f"Expected one of: {', '.join(self.extensions)}"
            )
        return path


class ReportPathValidator(FileValidator):
    """Where ``scriptpace export`` may write its PDF.

    The file may be new, but it must end in ``.pdf`` and its parent, if it
    exists, must be a directory.
    """

    def __init__(self) -> None:
        super().__init__(must_exist=False, extensions=[".pdf"])

    def validate(self, value: str | Path) -> Path:
        path = super().validate(value)
        if path.parent.exists() and not path.parent.is_dir():
            raise ValidationError(f"Parent path is not a directory: {path.parent}")
        return path


class ConfigFileValidator(FileValidator):
    """An existing YAML, TOML, or JSON config file."""

    def __init__(self) -> None:
        super().__init__(must_exist=True, extensions=CONFIG_SUFFIXES)
