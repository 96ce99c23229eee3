"""Report generation for ScriptPace analyses."""

from __future__ import annotations

from .pdf import ReportExporter, report_filename
from .reading_time import ReportData, build_report_data, estimate_reading_time

__all__ = [
    "ReportData",
    "ReportExporter",
    "build_report_data",
    "estimate_reading_time",
    "report_filename",
]
