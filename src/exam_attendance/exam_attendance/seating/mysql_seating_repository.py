from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SeatingAssignment, SeatingGroup
from .repository import SeatingRepository


class MySQLSeatingRepository(SeatingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_exam(self, exam_id: str) -> Sequence[SeatingGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT sa.id AS arrangement_id, sa.exam_id,
                       a.seat_no, a.reg_no, a.student_name, a.department
                FROM seating_arrangements sa
                LEFT JOIN seating_assignments a ON a.arrangement_id = sa.id
                WHERE sa.exam_id=%s
                ORDER BY sa.id ASC, a.id ASC
                """,
                (str(exam_id),),
            )
            rows = fetchall(cur)

        # One row per assignment; fold them back into their arrangement.
        grouped: dict[str, list[SeatingAssignment]] = {}
        for r in rows:
            items = grouped.setdefault(str(r["arrangement_id"]), [])
            if r.get("reg_no") is not None:
                items.append(
                    SeatingAssignment(
                        seat_no=str(r["seat_no"]),
                        reg_no=str(r["reg_no"]),
                        student_name=r.get("student_name"),
                        department=r.get("department"),
                    )
                )

        return [
            SeatingGroup(arrangement_id=arrangement_id, exam_id=str(exam_id), assignments=tuple(items))
            for arrangement_id, items in grouped.items()
        ]
