"""PDF rendering of screenplay analysis reports with ReportLab."""

from __future__ import annotations

from pathlib import Path

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from scriptpace.config import ScriptPaceSettings, get_logger, get_settings
from scriptpace.exceptions import ReportExportError
from scriptpace.report.reading_time import ReportData

logger = get_logger(__name__)

# Layout in points, measured from the top-left corner of the page
MARGIN_LEFT = 50
ITEM_INDENT = 60
TOP_Y = 50
PAGE_BREAK_Y = 650
TITLE_FONT_SIZE = 18
BODY_FONT_SIZE = 12
TEXT_GRAY = 40 / 255

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def report_filename(report: ReportData) -> str:
    """Return the default report filename, e.g. ``ScriptAnalysis_2024-05-01.pdf``."""
    return f"ScriptAnalysis_{report.generated_on.isoformat()}.pdf"


class _PageWriter:
    """Writes lines top-down and starts new pages when the cursor runs low."""

    def __init__(self, pdf: canvas.Canvas) -> None:
        self.pdf = pdf
        self.page_height = letter[1]
        self.y = TOP_Y
        self.pages = 1
        self.font = FONT_REGULAR
        self.font_size = BODY_FONT_SIZE

    def set_font(self, font: str, size: int) -> None:
        self.font = font
        self.font_size = size
        self.pdf.setFont(font, size)

    def text(self, x: float, value: str) -> None:
        self.pdf.drawString(x, self.page_height - self.y, value)

    def ensure_room(self) -> None:
        if self.y > PAGE_BREAK_Y:
            self.pdf.showPage()
            self.pages += 1
            self.y = TOP_Y
            # showPage resets the graphics state
            self.pdf.setFillGray(TEXT_GRAY)
            self.pdf.setFont(self.font, self.font_size)

    def heading(self, value: str) -> None:
        self.ensure_room()
        self.set_font(FONT_BOLD, BODY_FONT_SIZE)
        self.text(MARGIN_LEFT, value)
        self.set_font(FONT_REGULAR, BODY_FONT_SIZE)


class ReportExporter:
    """Render an analysis report as a paginated letter-size PDF."""

    def __init__(self, settings: ScriptPaceSettings | None = None) -> None:
        """Initialize exporter.

        Args:
            settings: Settings supplying the default output directory
        """
        self.settings = settings or get_settings()

    def export(self, report: ReportData, output_path: Path | None = None) -> Path:
        """Write the report to disk.

        Args:
            report: Analysis plus reading time to render
            output_path: Target file. Defaults to ``ScriptAnalysis_<date>.pdf``
                in the configured report directory.

        Returns:
            Path of the written PDF

        Raises:
            ReportExportError: If the file cannot be written
        """
        if output_path is None:
            output_path = self.settings.report_path(report_filename(report))

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            pdf = canvas.Canvas(str(output_path), pagesize=letter)
            pages = self._render(pdf, report)
            pdf.save()
        except OSError as e:
            raise ReportExportError(
                message=f"Failed to write report to {output_path}",
                hint="Check that the output directory exists and is writable",
                details={"output_path": str(output_path), "reason": str(e)},
            ) from e

        logger.info(
            "Report exported",
            output_path=str(output_path),
            pages=pages,
            speakers=len(report.analysis.speakers),
        )
        return output_path

    def _render(self, pdf: canvas.Canvas, report: ReportData) -> int:
        analysis = report.analysis
        pdf.setTitle(report.title)
        pdf.setFillGray(TEXT_GRAY)

        writer = _PageWriter(pdf)
        writer.set_font(FONT_REGULAR, TITLE_FONT_SIZE)
        writer.text(MARGIN_LEFT, report.title)

        writer.y = 90
        writer.heading("Characters:")
        writer.y += 20
        for index, speaker in enumerate(analysis.speakers, start=1):
            writer.ensure_room()
            writer.text(ITEM_INDENT, f"{index}. {speaker}")
            writer.y += 15

        writer.y += 30
        writer.heading("Key Metrics:")
        writer.y += 20
        metrics = [
            f"Total Words: {analysis.total_words}",
            f"Dialogue Blocks: {analysis.total_dialogue_blocks}",
            f"Estimated Reading Time: {report.reading_time} minutes",
            f"Scenes: {analysis.scenes}",
        ]
        for metric in metrics:
            writer.ensure_room()
            writer.text(ITEM_INDENT, f"• {metric}")
            writer.y += 20

        if analysis.character_relations:
            writer.y += 30
            writer.heading("Character Interactions:")
            writer.y += 20
            for relation in analysis.character_relations:
                first, second = relation.characters
                writer.ensure_room()
                writer.text(
                    ITEM_INDENT, f"{first} & {second}: {relation.interactions}"
                )
                writer.y += 15

        return writer.pages
