"""CLI command for scriptpace export."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptpace.cli.utils.cli_handler import CLIHandler
from scriptpace.cli.validators import ReportPathValidator, require_text
from scriptpace.config import get_logger, settings_for_command

logger = get_logger(__name__)
console = Console()


def export_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="Screenplay text file (default: read from stdin)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="PDF file to write (default: ScriptAnalysis_<date>.pdf)",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Report title"),
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
    """Analyze a screenplay and export the results as a PDF report.

    Examples:
        scriptpace export pilot.txt
        scriptpace export pilot.txt -o reports/pilot.pdf --title "Pilot"
    """
    handler = CLIHandler(console)

    try:
        from scriptpace.analyzer import ScreenplayAnalyzer
        from scriptpace.report import ReportExporter, build_report_data

        output_path = ReportPathValidator().validate(output) if output else None
        if title is not None:
            require_text(title, "title")

        settings = settings_for_command(config, report_title=title)
        text = handler.read_screenplay(path)

        result = ScreenplayAnalyzer(settings.reading_rates()).analyze(text)
        report = build_report_data(result, settings=settings)
        written = ReportExporter(settings).export(report, output_path)
        logger.debug("Export finished", output_path=str(written))

        handler.handle_success(
            f"Report written to {written}",
            data={"path": str(written), "reading_time": report.reading_time},
            json_output=json_output,
        )

    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
