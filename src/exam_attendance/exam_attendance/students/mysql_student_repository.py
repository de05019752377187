from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student.create(
        student_id=r["id"],
        reg_no=r["roll_number"],
        name=r["name"],
        department=r.get("department"),
        signature=r.get("signature"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, roll_number, name, department, signature
                FROM students
                ORDER BY name ASC
                """
            )
            return [_to_student(r) for r in fetchall(cur)]

    def update_signature(self, *, student_id: str, signature: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE students SET signature=%s WHERE id=%s", (signature, str(student_id)))
            cur.execute(
                "SELECT id, roll_number, name, department, signature FROM students WHERE id=%s",
                (str(student_id),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None
