"""CLI command for scriptpace analyze."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpace.cli.formatters.analysis_formatter import AnalysisFormatter
from scriptpace.cli.formatters.base import OutputFormat
from scriptpace.cli.utils.cli_handler import CLIHandler
from scriptpace.config import get_logger, settings_for_command

logger = get_logger(__name__)
console = Console()


def analyze_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="Screenplay text file (default: read from stdin)"),
    ] = None,
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
    """Analyze a screenplay for speakers, scenes, and reading time.

    Examples:
        scriptpace analyze pilot.txt
        cat pilot.txt | scriptpace analyze --json
    """
    handler = CLIHandler(console)

    try:
        from scriptpace.analyzer import ScreenplayAnalyzer
        from scriptpace.report.reading_time import build_report_data

        settings = settings_for_command(config)
        text = handler.read_screenplay(path)

        analyzer = ScreenplayAnalyzer(settings.reading_rates())
        result = analyzer.analyze(text)
        report = build_report_data(result, settings=settings)
        logger.info(
            "Analyzed screenplay",
            source=str(path) if path else "stdin",
            scenes=result.scenes,
            speakers=result.total_dialogue_blocks,
        )

        formatter = AnalysisFormatter(console)
        formatter.print(report, OutputFormat.from_flag(json_output))

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
