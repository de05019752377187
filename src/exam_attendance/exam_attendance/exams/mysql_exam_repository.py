from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_time
from .model import ExamCenter, ExamSession
from .repository import ExamRepository


class MySQLExamRepository(ExamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_sessions(self) -> Sequence[ExamSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.subject, e.date, e.start_time, e.venue,
                       c.id AS center_id, c.name AS center_name, c.code AS center_code
                FROM exams e
                LEFT JOIN exam_centers c ON c.id = e.center_id
                ORDER BY e.date ASC
                """
            )
            rows = fetchall(cur)
            return [
                ExamSession(
                    exam_id=str(r["id"]),
                    subject=r["subject"],
                    exam_date=normalize_mysql_date(r["date"]),
                    start_time=normalize_mysql_time(r.get("start_time")),
                    venue=r.get("venue") or "",
                    center=(
                        ExamCenter(center_id=str(r["center_id"]), name=r["center_name"], code=r["center_code"])
                        if r.get("center_id")
                        else None
                    ),
                )
                for r in rows
            ]
