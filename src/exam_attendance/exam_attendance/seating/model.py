from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SeatingAssignment:
    seat_no: str
    reg_no: str
    student_name: Optional[str] = None
    department: Optional[str] = None


@dataclass(frozen=True)
class SeatingGroup:
    """One seating arrangement of an exam session and its assignments."""

    arrangement_id: str
    exam_id: str
    assignments: tuple[SeatingAssignment, ...] = ()

    def seat_for_reg_no(self, reg_no: str) -> Optional[str]:
        for assignment in self.assignments:
            if assignment.reg_no == reg_no:
                return assignment.seat_no
        return None
