from __future__ import annotations

import copy
import logging
from typing import Optional

from ..common.store import store_call
from ..core.constants import ALL_DEPARTMENTS, NO_SEAT_PLACEHOLDER
from ..core.enums import AttendanceTab
from ..core.exceptions import ValidationError
from ..exams.model import ExamCenter, ExamSession
from ..exams.repository import ExamRepository
from ..seating.model import SeatingGroup
from ..seating.repository import SeatingRepository
from ..seating.resolver import SeatResolver
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord, BoardStats, DepartmentStats
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _percentage(present: int, total: int) -> float:
    return round(present / total * 100, 1) if total > 0 else 0.0


class AttendanceBoard:
    """View state of the exam attendance screen plus the data it has loaded.

    Reads go through the roster store only in `refresh_*`; every query method works on the
    loaded snapshot. Writers call the matching `refresh_*` after a successful mutation.
    """

    def __init__(
        self,
        *,
        exams: ExamRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
        seating: SeatingRepository,
    ):
        self._exams = exams
        self._students = students
        self._attendance = attendance
        self._seating = seating

        self.selected_exam_id: Optional[str] = None
        self.selected_center_id: Optional[str] = None
        self.department_filter: str = ALL_DEPARTMENTS
        self.search_query: str = ""
        self.tab: AttendanceTab = AttendanceTab.ALL

        self.exam_sessions: list[ExamSession] = []
        self.students: list[Student] = []
        self.records: list[AttendanceRecord] = []
        self.seating_groups: list[SeatingGroup] = []

    # ---- loading -------------------------------------------------------

    def load(self) -> "AttendanceBoard":
        self.refresh_exams()
        self.refresh_students()
        self.refresh_attendance()
        self.refresh_seating()
        return self

    def refresh_exams(self) -> None:
        self.exam_sessions = list(store_call("load exam sessions", self._exams.list_sessions))

    def refresh_students(self) -> None:
        self.students = list(store_call("load students", self._students.list_all))

    def refresh_attendance(self) -> None:
        if not self.selected_exam_id:
            self.records = []
            return
        self.records = list(store_call("load attendance", self._attendance.list_for_exam, self.selected_exam_id))

    def refresh_seating(self) -> None:
        if not self.selected_exam_id:
            self.seating_groups = []
            return
        self.seating_groups = list(
            store_call("load seating arrangements", self._seating.list_for_exam, self.selected_exam_id)
        )

    # ---- selection -----------------------------------------------------

    def select_exam(self, exam_id: Optional[str]) -> None:
        exam_id = str(exam_id or "").strip() or None
        if exam_id == self.selected_exam_id:
            return
        self.selected_exam_id = exam_id
        self.refresh_attendance()
        self.refresh_seating()

    def for_exam(self, exam_id: Optional[str]) -> "AttendanceBoard":
        """A copy of this board showing `exam_id`; this board keeps its own selection."""

        other = copy.copy(self)
        other.select_exam(exam_id)
        return other

    def select_center(self, center_id: Optional[str]) -> None:
        """Select a center; if the current exam is not held there, switch to its first exam."""

        self.selected_center_id = str(center_id or "").strip() or None
        if not self.selected_center_id:
            return

        center_exams = [
            e for e in self.exam_sessions if e.center is not None and e.center.center_id == self.selected_center_id
        ]
        if center_exams and not any(e.exam_id == self.selected_exam_id for e in center_exams):
            logger.debug("Center %s selected, switching to exam %s", self.selected_center_id, center_exams[0].exam_id)
            self.select_exam(center_exams[0].exam_id)

    def set_filters(
        self,
        *,
        department: Optional[str] = None,
        search: Optional[str] = None,
        tab: Optional[str] = None,
    ) -> None:
        self.department_filter = (department or "").strip() or ALL_DEPARTMENTS
        self.search_query = (search or "").strip()
        try:
            self.tab = AttendanceTab(tab) if tab else AttendanceTab.ALL
        except ValueError:
            raise ValidationError(f"Unknown attendance filter: {tab}")

    @property
    def selected_exam(self) -> Optional[ExamSession]:
        return self.session_by_id(self.selected_exam_id)

    def session_by_id(self, exam_id: Optional[str]) -> Optional[ExamSession]:
        if not exam_id:
            return None
        for session in self.exam_sessions:
            if session.exam_id == exam_id:
                return session
        return None

    def exam_centers(self) -> list[ExamCenter]:
        seen: dict[str, ExamCenter] = {}
        for session in self.exam_sessions:
            if session.center is not None and session.center.center_id not in seen:
                seen[session.center.center_id] = session.center
        return list(seen.values())

    # ---- lookups -------------------------------------------------------

    def student_by_id(self, student_id: str) -> Optional[Student]:
        for student in self.students:
            if student.student_id == student_id:
                return student
        return None

    def record_for(self, student_id: str) -> Optional[AttendanceRecord]:
        for record in self.records:
            if record.exam_id == self.selected_exam_id and record.student_id == student_id:
                return record
        return None

    def is_present(self, student_id: str) -> bool:
        return self.record_for(student_id) is not None

    def resolver(self) -> SeatResolver:
        return SeatResolver(self.students, self.seating_groups)

    def seat_for(self, student_id: str, resolver: Optional[SeatResolver] = None) -> str:
        record = self.record_for(student_id)
        if record and record.seat_number:
            return record.seat_number
        return (resolver or self.resolver()).resolve_seat(student_id) or NO_SEAT_PLACEHOLDER

    def departments(self) -> list[str]:
        names: list[str] = [ALL_DEPARTMENTS]
        for student in self.students:
            if student.department_name not in names:
                names.append(student.department_name)
        return names

    # ---- filtered view -------------------------------------------------

    def _matches_search(self, student: Student) -> bool:
        if not self.search_query:
            return True
        query = self.search_query.lower()
        return (
            query in student.name.lower()
            or query in student.reg_no.lower()
            or (student.department is not None and query in student.department.lower())
        )

    def _matches_department(self, student: Student) -> bool:
        return self.department_filter == ALL_DEPARTMENTS or student.department_name == self.department_filter

    def _matches_tab(self, student: Student) -> bool:
        if self.tab == AttendanceTab.PRESENT:
            return self.is_present(student.student_id)
        if self.tab == AttendanceTab.ABSENT:
            return not self.is_present(student.student_id)
        return True

    def filtered_students(self) -> list[Student]:
        return [
            s for s in self.students if self._matches_search(s) and self._matches_department(s) and self._matches_tab(s)
        ]

    def stats(self) -> BoardStats:
        students = self.filtered_students()
        present = sum(1 for s in students if self.is_present(s.student_id))
        return BoardStats(
            total=len(students),
            present=present,
            absent=len(students) - present,
            rate=_percentage(present, len(students)),
        )

    def department_stats(self) -> list[DepartmentStats]:
        out: list[DepartmentStats] = []
        for name in self.departments()[1:]:
            members = [s for s in self.students if s.department_name == name]
            if not members:
                continue
            present = sum(1 for s in members if self.is_present(s.student_id))
            out.append(
                DepartmentStats(
                    name=name,
                    total=len(members),
                    present=present,
                    absent=len(members) - present,
                    rate=_percentage(present, len(members)),
                )
            )
        out.sort(key=lambda d: d.total, reverse=True)
        return out

    def rows(self) -> list[dict]:
        """Rows for the attendance table (filtered)."""

        resolver = self.resolver()
        return [
            {
                "student_id": s.student_id,
                "reg_no": s.reg_no,
                "name": s.name,
                "department": s.department_name,
                "seat": self.seat_for(s.student_id, resolver),
                "present": self.is_present(s.student_id),
                "signature": s.signature or "",
            }
            for s in self.filtered_students()
        ]
