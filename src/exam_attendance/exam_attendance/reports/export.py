from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..attendance.board import AttendanceBoard
from ..core.enums import ExportFormat
from ..core.exceptions import RenderError, ValidationError
from .renderers.base import RenderedArtifact, ReportRenderer
from .renderers.docx_renderer import DocxReportRenderer
from .renderers.pdf_renderer import PdfReportRenderer
from .renderers.xlsx_renderer import XlsxReportRenderer
from .service import ReportService

logger = logging.getLogger(__name__)

_LABELS = {
    ExportFormat.XLSX: "attendance sheet",
    ExportFormat.PDF: "PDF report",
    ExportFormat.DOCX: "Word document",
}


def default_renderers() -> dict[ExportFormat, ReportRenderer]:
    return {
        ExportFormat.XLSX: XlsxReportRenderer(),
        ExportFormat.PDF: PdfReportRenderer(),
        ExportFormat.DOCX: DocxReportRenderer(),
    }


class ReportExportService:
    def __init__(
        self,
        reports: ReportService,
        *,
        renderers: Optional[Mapping[ExportFormat, ReportRenderer]] = None,
    ):
        self._reports = reports
        self._renderers = dict(renderers) if renderers is not None else default_renderers()

    def export(self, board: AttendanceBoard, fmt: ExportFormat | str) -> RenderedArtifact:
        try:
            fmt = ExportFormat(fmt)
        except ValueError:
            raise ValidationError(f"Unsupported export format: {fmt}")

        renderer = self._renderers.get(fmt)
        if renderer is None:
            raise ValidationError(f"Unsupported export format: {fmt.value}")

        report = self._reports.build_report(board)
        if report is None:
            raise RenderError("Please select an exam session first.")

        try:
            artifact = renderer.render(report)
        except Exception as e:
            logger.exception("Rendering %s for exam %s failed", fmt.value, report.exam_id)
            raise RenderError(f"Failed to generate {_LABELS[fmt]}.") from e

        logger.info("Generated %s (%d bytes)", artifact.filename, len(artifact.content))
        return artifact
