"""Configuration display commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.tree import Tree

from scriptpace.cli.formatters.json_formatter import JsonFormatter
from scriptpace.cli.utils.cli_handler import CLIHandler
from scriptpace.config import ScriptPaceSettings, settings_for_command

console = Console()

config_app = typer.Typer(
    name="config",
    help="Inspect ScriptPace configuration",
    pretty_exceptions_enable=False,
)


def _group_for(field_name: str) -> str:
    if field_name.startswith("log_") or field_name == "debug":
        return "logging"
    if field_name.endswith("_wpm"):
        return "reading rates"
    if field_name.startswith("report_"):
        return "report"
    return "application"


def _show_config_tree(settings: ScriptPaceSettings) -> None:
    """Display configuration as a tree grouped by concern."""
    tree = Tree("[bold cyan]ScriptPace Configuration[/bold cyan]")

    groups: dict[str, list[tuple[str, Any]]] = {}
    for field_name in type(settings).model_fields:
        value = getattr(settings, field_name)
        if value is None:
            continue
        groups.setdefault(_group_for(field_name), []).append((field_name, value))

    for group_name, items in sorted(groups.items()):
        branch = tree.add(f"[bold]{group_name}[/bold]")
        for field_name, value in sorted(items):
            branch.add(f"{field_name}: [green]{value}[/green]")

    console.print(tree)


@config_app.command(name="show")
def config_show(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Display the effective configuration after merging all sources."""
    handler = CLIHandler(console)
    try:
        settings = settings_for_command(config)
        if json_output:
            print(JsonFormatter().format(settings))
        else:
            _show_config_tree(settings)
    except Exception as e:
        handler.handle_error(e, json_output)
