"""The ``scriptpace`` command-line application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from scriptpace import __version__
from scriptpace.cli.commands import analyze_command, config_app, export_command
from scriptpace.cli.formatters.json_formatter import JsonFormatter
from scriptpace.cli.validators import ConfigFileValidator
from scriptpace.config import (
    configure_logging,
    get_logger,
    get_settings,
    reset_settings,
    set_settings,
    settings_for_command,
)

DESCRIPTION = "Screenplay pacing analysis and PDF reports"

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptpace",
    help=DESCRIPTION,
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="analyze")(analyze_command)
app.command(name="export")(export_command)
app.add_typer(config_app, name="config")


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the installed ScriptPace version."""
    if json_output:
        info = {"name": "ScriptPace", "version": __version__, "description": DESCRIPTION}
        print(JsonFormatter().format(info))
    else:
        console.print(f"ScriptPace v{__version__}")


def _apply_log_flags(verbose: bool, debug: bool) -> None:
    """Raise the log level for this run and reconfigure logging.

    The level goes through the environment so settings reloaded later in the
    run keep it.
    """
    if not (verbose or debug):
        return
    os.environ["SCRIPTPACE_LOG_LEVEL"] = "DEBUG" if debug else "INFO"
    if debug:
        os.environ["SCRIPTPACE_DEBUG"] = "true"
    reset_settings()
    configure_logging(get_settings())
    logger.info("Log level raised", level=os.environ["SCRIPTPACE_LOG_LEVEL"])


def _load_global_config(config: Path) -> None:
    """Make the given config file the settings every command starts from."""
    try:
        config_path = ConfigFileValidator().validate(config)
        set_settings(settings_for_command(config_path))
    except Exception as e:
        console.print(f"[red]Failed to load configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    logger.debug("Loaded configuration", config_file=str(config_path))


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress at INFO level"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log at DEBUG level with call sites"),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file applied to every command",
            envvar="SCRIPTPACE_CONFIG",
        ),
    ] = None,
) -> None:
    """Analyze screenplays and export pacing reports."""
    _apply_log_flags(verbose, debug)
    if config:
        _load_global_config(config)


def main() -> None:
    """Run the ``scriptpace`` console script."""
    app()


if __name__ == "__main__":
    main()
