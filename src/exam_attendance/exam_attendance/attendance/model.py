from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi có mặt của thí sinh trong một ca thi.

    The record existing is the presence flag; there is no separate boolean.
    """

    record_id: str
    exam_id: str
    student_id: str
    seat_number: str


@dataclass(frozen=True)
class MarkResult:
    student_id: str
    seat_number: str
    warning: Optional[str] = None


@dataclass(frozen=True)
class BatchResult:
    marked: int
    department: Optional[str] = None
    warning: Optional[str] = None

    @property
    def message(self) -> str:
        if self.warning:
            return self.warning
        if self.department is not None:
            return f"Marked attendance for {self.marked} students in {self.department} department"
        return f"Marked attendance for {self.marked} students"


@dataclass(frozen=True)
class BoardStats:
    total: int
    present: int
    absent: int
    rate: float


@dataclass(frozen=True)
class DepartmentStats:
    name: str
    total: int
    present: int
    absent: int
    rate: float
