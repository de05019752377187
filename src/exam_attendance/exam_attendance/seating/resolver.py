from __future__ import annotations

from typing import Optional, Sequence

from ..students.model import Student
from .model import SeatingGroup


class SeatResolver:
    """Finds a student's seat in the seating groups of one exam session.

    Matching is by registration number, not by student id: seating plans are authored
    separately and only know the registration number. Two students sharing a registration
    number therefore resolve to the same seat.
    """

    def __init__(self, students: Sequence[Student], groups: Sequence[SeatingGroup]):
        self._students = {s.student_id: s for s in students}
        self._groups = list(groups)

    def resolve_seat(self, student_id: str) -> Optional[str]:
        student = self._students.get(student_id)
        if not student:
            return None

        for group in self._groups:
            seat = group.seat_for_reg_no(student.reg_no)
            if seat is not None:
                # First matching assignment wins, even with a blank seat label.
                return seat or None
        return None

    def has_assignment(self, student_id: str) -> bool:
        return self.resolve_seat(student_id) is not None
