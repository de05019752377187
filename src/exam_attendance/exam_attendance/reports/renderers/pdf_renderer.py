from __future__ import annotations

import io
from functools import partial
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import CondPageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...core.constants import REPORT_TITLE, TEACHER_SIGNATURE_LINE
from ..model import ROW_HEADERS, ReportModel
from .base import ReportRenderer

HEADER_COLOR = colors.Color(41 / 255, 128 / 255, 185 / 255)
MARGIN = 15 * mm
# A department heading needs this much room below it, otherwise it moves to the next page.
MIN_TABLE_SPACE = 40 * mm


class _SignatureCanvas(canvas.Canvas):
    """Buffers pages so the signature line can be drawn on the last one."""

    def __init__(self, *args, signature_line: str = TEACHER_SIGNATURE_LINE, **kwargs):
        super().__init__(*args, **kwargs)
        self._signature_line = signature_line
        self._pages: list[dict] = []

    def showPage(self):
        self._pages.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._pages)
        for index, page in enumerate(self._pages, start=1):
            self.__dict__.update(page)
            if index == total:
                self.setFont("Helvetica", 12)
                self.drawString(MARGIN, 20 * mm, self._signature_line)
            super().showPage()
        super().save()


def _table(headers, rows, *, font_size: int) -> Table:
    table = Table([list(headers), *[list(r) for r in rows]], repeatRows=1, hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), font_size),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    return table


class PdfReportRenderer(ReportRenderer):
    extension = "pdf"
    mimetype = "application/pdf"
    canvas_class = _SignatureCanvas

    def __init__(self, *, signature_line: str = TEACHER_SIGNATURE_LINE):
        self._signature_line = signature_line

    def render_bytes(self, report: ReportModel) -> bytes:
        styles = getSampleStyleSheet()
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            # Leave room for the signature line drawn on the last page.
            bottomMargin=30 * mm,
            title=REPORT_TITLE,
            subject=report.header.subject,
        )

        story = [Paragraph(REPORT_TITLE, styles["Title"]), Spacer(1, 4 * mm)]
        for label, value in report.header.items():
            story.append(Paragraph(escape(f"{label} {value}"), styles["Normal"]))
        story.append(Spacer(1, 6 * mm))

        summary = [r.as_tuple() for r in report.summary_rows()]
        summary.append(report.total_row().as_tuple())
        story.append(_table(("Department", "Total", "Present", "Absent", "Rate"), summary, font_size=10))

        for group in report.departments:
            story.append(Spacer(1, 8 * mm))
            story.append(CondPageBreak(MIN_TABLE_SPACE))
            story.append(Paragraph(escape(f"{group.name} Department"), styles["Heading2"]))
            story.append(_table(ROW_HEADERS, [r.as_tuple() for r in group.rows], font_size=9))

        doc.build(story, canvasmaker=partial(self.canvas_class, signature_line=self._signature_line))
        return buf.getvalue()

