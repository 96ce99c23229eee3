"""Bridge from an analysis result to the data the PDF report needs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date

from scriptpace.analyzer.models import AnalysisResult
from scriptpace.config import ScriptPaceSettings, get_settings


@dataclass
class ReportData:
    """Everything the report exporter renders.

    Attributes:
        analysis: Result of analyzing the screenplay
        reading_time: Estimated reading time in whole minutes
        title: Title printed at the top of the report
        generated_on: Date used in the report filename
    """

    analysis: AnalysisResult
    reading_time: int
    title: str = "Script Analysis Report"
    generated_on: date = field(default_factory=date.today)


def estimate_reading_time(result: AnalysisResult, seconds_per_minute: int = 60) -> int:
    """Estimate reading time in minutes.

    The weighted word time approximates seconds of reading, so the estimate
    is that total in minutes, rounded up. An empty analysis reads in 0 minutes.
    """
    if result.total_words <= 0:
        return 0
    return math.ceil(result.total_words / seconds_per_minute)


def build_report_data(
    result: AnalysisResult,
    title: str | None = None,
    generated_on: date | None = None,
    settings: ScriptPaceSettings | None = None,
) -> ReportData:
    """Attach reading time and report metadata to an analysis result."""
    settings = settings or get_settings()
    return ReportData(
        analysis=result,
        reading_time=estimate_reading_time(result),
        title=title or settings.report_title,
        generated_on=generated_on or date.today(),
    )
