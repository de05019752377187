from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..common.store import store_call
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository

if TYPE_CHECKING:
    from ..attendance.board import AttendanceBoard

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def capture_signature(self, board: "AttendanceBoard", student_id: str, signature: str) -> Student:
        """Save a student's signature and reload the board's student list.

        Presence is untouched; this works with or without a selected exam.
        """

        student_id = require_non_empty(student_id, "Student")
        signature = (signature or "").strip()

        updated = store_call(
            "save student signature",
            self._students.update_signature,
            student_id=student_id,
            signature=signature,
        )
        if updated is None:
            raise ValidationError("Student not found")

        board.refresh_students()
        logger.info("Signature saved for student %s", student_id)
        return updated
