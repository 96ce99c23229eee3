"""ScriptPace configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptpace.exceptions import (
    ConfigurationError,
    ScriptPaceFileNotFoundError,
    check_config_keys,
)

if TYPE_CHECKING:
    from scriptpace.analyzer.models import ReadingRates

CONFIG_SUFFIXES = (".yaml", ".yml", ".toml", ".json")


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML, TOML, or JSON config file into a mapping of settings.

    Raises:
        ScriptPaceFileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported, the file does not
            parse, or it holds something other than known setting names
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in CONFIG_SUFFIXES:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix or path.name}",
            hint=f"Use one of: {', '.join(CONFIG_SUFFIXES)}",
            details={"file": str(path)},
        )

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ScriptPaceFileNotFoundError(
            message=f"Configuration file not found: {path}",
            hint="Check the --config path",
            details={"file": str(path)},
        ) from e

    try:
        if suffix == ".toml":
            data = tomllib.loads(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            message=f"Could not parse configuration file {path.name}",
            hint="Fix the syntax error and try again",
            details={"file": str(path), "reason": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            message="Configuration file must contain a mapping of settings",
            hint="Write settings as top-level key/value pairs",
            details={"file": str(path), "found": type(data).__name__},
        )

    check_config_keys(data)
    return data


def discover_config_files() -> list[Path]:
    """Return the config files present in the standard locations.

    User-wide files (``~/.config/scriptpace/config.*``) come first so that
    project files (``./scriptpace.*``) override them.
    """
    user_dir = Path.home() / ".config" / "scriptpace"
    candidates = [user_dir / f"config{suffix}" for suffix in CONFIG_SUFFIXES]
    candidates += [Path.cwd() / f"scriptpace{suffix}" for suffix in CONFIG_SUFFIXES]
    return [path for path in candidates if path.is_file()]


class ScriptPaceSettings(BaseSettings):
    """ScriptPace configuration settings.

    Values are resolved in this order, first match wins: explicit overrides
    (CLI flags such as ``--title``), config files (later files win),
    ``SCRIPTPACE_*`` environment variables, a ``.env`` file, then the
    defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTPACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Add call-site details to log output",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Also write logs to this file, rotated at 10MB",
    )

    # Reading rates, in words per minute
    dialogue_wpm: float = Field(
        default=150.0,
        description="Reading rate for dialogue lines (fast-paced)",
        gt=0,
    )
    action_wpm: float = Field(
        default=100.0,
        description="Reading rate for asterisk-wrapped action lines",
        gt=0,
    )
    description_wpm: float = Field(
        default=75.0,
        description="Reading rate for descriptive prose",
        gt=0,
    )

    # Report
    report_output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where PDF reports are written",
    )
    report_title: str = Field(
        default="Script Analysis Report",
        description="Title printed at the top of the PDF report",
        min_length=1,
    )

    @field_validator("report_output_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand ``~`` and environment variables, then make the path absolute."""
        if v is None:
            return None
        if not isinstance(v, str | Path):
            raise ValueError(f"Expected a path, got {type(v).__name__}: {v!r}")
        return Path(os.path.expandvars(str(v))).expanduser().resolve()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept log levels and formats in any case."""
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "log_level" else v.lower()

    def reading_rates(self) -> ReadingRates:
        """Build the analyzer's reading rates from these settings."""
        # Imported here to avoid a config <-> analyzer import cycle
        from scriptpace.analyzer.models import ReadingRates

        return ReadingRates(
            dialogue=self.dialogue_wpm,
            action=self.action_wpm,
            description=self.description_wpm,
        )

    def report_path(self, filename: str) -> Path:
        """Default location for a report file named ``filename``."""
        return self.report_output_dir / filename

    @classmethod
    def load(
        cls, config_files: Iterable[Path | str] = (), **overrides: Any
    ) -> ScriptPaceSettings:
        """Build settings from config files plus explicit overrides.

        Args:
            config_files: Files to read in order; later files win
            **overrides: Setting values that beat every other source.
                None values are ignored so unset CLI flags can be passed
                straight through.
        """
        values: dict[str, Any] = {}
        for config_file in config_files:
            values.update(read_config_file(config_file))
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> ScriptPaceSettings:
        """Return a copy with the non-None overrides applied and validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return type(self)(**(self.model_dump() | changes))


_settings: ScriptPaceSettings | None = None


def get_settings() -> ScriptPaceSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ScriptPaceSettings.load(discover_config_files())
    return _settings


def set_settings(settings: ScriptPaceSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the process-wide settings so the next lookup reloads them."""
    global _settings
    _settings = None


def settings_for_command(
    config_file: Path | None = None, **overrides: Any
) -> ScriptPaceSettings:
    """Resolve the settings one CLI command runs with.

    Without ``config_file`` the process-wide settings are used. With it, the
    file is layered over the discovered config files. Non-None overrides
    apply last in both cases.
    """
    if config_file is None:
        return get_settings().with_overrides(**overrides)
    return ScriptPaceSettings.load([*discover_config_files(), config_file], **overrides)
