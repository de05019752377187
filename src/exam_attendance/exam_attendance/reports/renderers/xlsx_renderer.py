from __future__ import annotations

import io
import re

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ...core.constants import REPORT_TITLE, SHEET_NAME_LIMIT
from ..model import ROW_HEADERS, SUMMARY_HEADERS, ReportModel
from .base import ReportRenderer

_INVALID_SHEET_CHARS = re.compile(r"[\\/*?:\[\]]")

HEADER_FILL = PatternFill("solid", start_color="2980B9")
HEADER_FONT = Font(bold=True, color="FFFFFF")
TITLE_FONT = Font(bold=True, size=14)
THIN = Side(style="thin")
BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)


def sheet_title(name: str, taken: set[str]) -> str:
    """Excel caps sheet names at 31 chars; keep them unique after cutting."""
    base = _INVALID_SHEET_CHARS.sub("_", name).strip() or "Sheet"
    title = base[:SHEET_NAME_LIMIT]
    n = 2
    while title.lower() in taken:
        suffix = f" ({n})"
        title = base[: SHEET_NAME_LIMIT - len(suffix)] + suffix
        n += 1
    taken.add(title.lower())
    return title


class XlsxReportRenderer(ReportRenderer):
    extension = "xlsx"
    mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def render_bytes(self, report: ReportModel) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = "Summary"
        taken = {"summary"}

        ws.append([REPORT_TITLE])
        ws["A1"].font = TITLE_FONT
        ws.append([])
        for label, value in report.header.items():
            ws.append([label, value])
        ws.append([])

        self._write_table(ws, SUMMARY_HEADERS, [r.as_tuple() for r in report.summary_rows()])
        ws.append([])
        total_row = report.total_row().as_tuple()
        ws.append(list(total_row))
        for cell in ws[ws.max_row]:
            cell.font = Font(bold=True)

        for group in report.departments:
            sheet = wb.create_sheet(sheet_title(group.name, taken))
            sheet.append([f"{group.name} Department - Attendance List"])
            sheet["A1"].font = TITLE_FONT
            sheet.append([])
            self._write_table(sheet, ROW_HEADERS, [r.as_tuple() for r in group.rows])

        for sheet in wb.worksheets:
            self._fit_columns(sheet)

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    @staticmethod
    def _write_table(ws, headers, rows) -> None:
        ws.append(list(headers))
        for cell in ws[ws.max_row]:
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.border = BORDER
            cell.alignment = Alignment(horizontal="center", vertical="center")

        for row in rows:
            ws.append(list(row))
            for cell in ws[ws.max_row]:
                cell.border = BORDER

    @staticmethod
    def _fit_columns(ws) -> None:
        widths: dict[int, int] = {}
        for row in ws.iter_rows(min_row=3):
            for cell in row:
                if cell.value is not None:
                    widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
        for column, width in widths.items():
            ws.column_dimensions[get_column_letter(column)].width = min(max(width + 2, 10), 40)
