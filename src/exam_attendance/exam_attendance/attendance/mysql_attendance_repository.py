from __future__ import annotations

import uuid
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["id"]),
        exam_id=str(r["exam_id"]),
        student_id=str(r["student_id"]),
        seat_number=r.get("seat_number") or "",
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_exam(self, exam_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, exam_id, student_id, seat_number
                FROM exam_attendance
                WHERE exam_id=%s
                """,
                (str(exam_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(self, *, exam_id: str, student_id: str, seat_number: str) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO exam_attendance(id, exam_id, student_id, seat_number)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE seat_number=VALUES(seat_number)
                """,
                (str(uuid.uuid4()), str(exam_id), str(student_id), seat_number),
            )

            # On update the generated id is discarded; read back the stored row.
            cur.execute(
                "SELECT id, exam_id, student_id, seat_number FROM exam_attendance WHERE exam_id=%s AND student_id=%s",
                (str(exam_id), str(student_id)),
            )
            return _to_record(fetchone(cur))

    def delete(self, *, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM exam_attendance WHERE id=%s", (str(record_id),))
            return cur.rowcount > 0
