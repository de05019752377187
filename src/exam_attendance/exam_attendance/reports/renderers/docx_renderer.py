from __future__ import annotations

import io

from docx import Document
from docx.shared import Pt

from ...core.constants import REPORT_TITLE, TEACHER_SIGNATURE_LINE
from ..model import ROW_HEADERS, ReportModel
from .base import ReportRenderer


def _heading(doc, text: str, size: int) -> None:
    run = doc.add_paragraph().add_run(text)
    run.bold = True
    run.font.size = Pt(size)


def _table(doc, headers, rows) -> None:
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = "Table Grid"
    for cell, text in zip(table.rows[0].cells, headers):
        cell.text = ""
        cell.paragraphs[0].add_run(str(text)).bold = True
    for row in rows:
        cells = table.add_row().cells
        for cell, text in zip(cells, row):
            cell.text = str(text)


class DocxReportRenderer(ReportRenderer):
    extension = "docx"
    mimetype = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def render_bytes(self, report: ReportModel) -> bytes:
        doc = Document()

        _heading(doc, REPORT_TITLE, 16)
        doc.add_paragraph()
        for label, value in report.header.items():
            doc.add_paragraph(f"{label} {value}")
        doc.add_paragraph()

        _heading(doc, "Department Summary", 14)
        summary = [r.as_tuple() for r in report.summary_rows()]
        summary.append(report.total_row().as_tuple())
        _table(doc, ("Department", "Total", "Present", "Absent", "Rate"), summary)

        for group in report.departments:
            doc.add_paragraph()
            _heading(doc, f"{group.name} Department", 14)
            _table(doc, ROW_HEADERS, [r.as_tuple() for r in group.rows])

        doc.add_paragraph()
        doc.add_paragraph(TEACHER_SIGNATURE_LINE)

        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()
