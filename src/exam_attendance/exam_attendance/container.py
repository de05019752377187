from __future__ import annotations

from dataclasses import dataclass

from .attendance.board import AttendanceBoard
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_BATCH_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .exams.mysql_exam_repository import MySQLExamRepository
from .reports.export import ReportExportService
from .reports.service import ReportService
from .seating.mysql_seating_repository import MySQLSeatingRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    exams_repo: MySQLExamRepository
    students_repo: MySQLStudentRepository
    seating_repo: MySQLSeatingRepository
    attendance_repo: MySQLAttendanceRepository

    attendance_service: AttendanceService
    student_service: StudentService
    report_service: ReportService
    export_service: ReportExportService

    def new_board(self) -> AttendanceBoard:
        """Fresh, unloaded board; each request builds its own view state."""

        return AttendanceBoard(
            exams=self.exams_repo,
            students=self.students_repo,
            attendance=self.attendance_repo,
            seating=self.seating_repo,
        )


def build_container(*, db_config: dict, batch_max_workers: int = DEFAULT_BATCH_MAX_WORKERS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    exams_repo = MySQLExamRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    seating_repo = MySQLSeatingRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    report_service = ReportService()

    return Container(
        conn=conn,
        exams_repo=exams_repo,
        students_repo=students_repo,
        seating_repo=seating_repo,
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo, max_workers=batch_max_workers),
        student_service=StudentService(students_repo),
        report_service=report_service,
        export_service=ReportExportService(report_service),
    )
