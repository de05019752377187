from __future__ import annotations

import logging
from typing import Optional

from ..attendance.board import AttendanceBoard
from ..core.constants import BLANK_SIGNATURE
from .model import DepartmentGroup, ReportHeader, ReportModel, ReportRow

logger = logging.getLogger(__name__)


class ReportService:
    def build_report(self, board: AttendanceBoard, exam_id: Optional[str] = None) -> Optional[ReportModel]:
        """Build the report for `exam_id` (default: the board's selected exam).

        Returns None when the id does not match a loaded exam session. Another exam is read
        through a copy of the board, so the caller's selection is left as it was.
        """

        exam_id = exam_id or board.selected_exam_id
        session = board.session_by_id(exam_id)
        if session is None:
            return None
        if exam_id != board.selected_exam_id:
            board = board.for_exam(exam_id)

        resolver = board.resolver()
        groups: dict[str, list[ReportRow]] = {}
        for student in board.students:
            groups.setdefault(student.department_name, []).append(
                ReportRow(
                    reg_no=student.reg_no,
                    name=student.name,
                    signature=student.signature or BLANK_SIGNATURE,
                    is_present=board.is_present(student.student_id),
                    seat_number=board.seat_for(student.student_id, resolver),
                )
            )

        center = session.center
        header = ReportHeader(
            center_name=center.name if center else "",
            center_code=center.code if center else "",
            venue=session.venue,
            subject=session.subject,
            date=session.date_label,
            start_time=session.start_time_label,
        )
        report = ReportModel(
            exam_id=session.exam_id,
            header=header,
            departments=tuple(DepartmentGroup(name=name, rows=tuple(rows)) for name, rows in groups.items()),
        )
        logger.debug("Report for exam %s: %d rows in %d departments", exam_id, report.row_count, len(report.departments))
        return report
