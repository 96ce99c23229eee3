"""Formatter for screenplay analysis results."""

from __future__ import annotations

import io
import json
from typing import Any

from rich.console import Console
from rich.table import Table

from scriptpace.cli.formatters.base import OutputFormat, OutputFormatter
from scriptpace.report.reading_time import ReportData


class AnalysisFormatter(OutputFormatter[ReportData]):
    """Render an analysis as rich tables or JSON."""

    def format(
        self, data: ReportData, format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        """Format an analysis.

        Args:
            data: Analysis with its reading time
            format_type: TEXT for tables, JSON for a machine-readable dump

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return json.dumps(self.to_payload(data), indent=2)
        return self._format_tables(data)

    @staticmethod
    def to_payload(data: ReportData) -> dict[str, Any]:
        """Analysis fields plus the derived reading time."""
        payload = data.analysis.to_dict()
        payload["reading_time"] = data.reading_time
        return payload

    def _format_tables(self, data: ReportData) -> str:
        analysis = data.analysis

        summary = Table(title=data.title, show_header=False)
        summary.add_column("Metric", style="cyan")
        summary.add_column("Value", style="white")
        summary.add_row("Total Words", str(analysis.total_words))
        summary.add_row("Dialogue Blocks", str(analysis.total_dialogue_blocks))
        summary.add_row("Estimated Reading Time", f"{data.reading_time} minutes")
        summary.add_row("Scenes", str(analysis.scenes))

        tables: list[Table] = [summary]

        if analysis.speakers:
            characters = Table(title="Characters", show_header=True)
            characters.add_column("#", justify="right")
            characters.add_column("Name", style="bold")
            for index, speaker in enumerate(analysis.speakers, start=1):
                characters.add_row(str(index), speaker)
            tables.append(characters)

        if analysis.character_relations:
            relations = Table(title="Character Interactions", show_header=True)
            relations.add_column("Characters")
            relations.add_column("Interactions", justify="right")
            for relation in analysis.character_relations:
                relations.add_row(
                    " & ".join(relation.characters), str(relation.interactions)
                )
            tables.append(relations)

        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=False, width=100)
        for table in tables:
            temp_console.print(table)
        return string_io.getvalue()
