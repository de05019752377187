from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import blank_to_none
from ..core.constants import UNASSIGNED_DEPARTMENT


def normalize_department(value: Optional[str]) -> str:
    return blank_to_none(value) or UNASSIGNED_DEPARTMENT


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Thí sinh.

    `department` and `signature` are None when the store holds NULL or an empty string;
    the conversion happens once, in `Student.create`.
    """

    student_id: str
    reg_no: str
    name: str
    department: Optional[str] = None
    signature: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        student_id: str,
        reg_no: str,
        name: str,
        department: Optional[str] = None,
        signature: Optional[str] = None,
    ) -> "Student":
        return cls(
            student_id=str(student_id),
            reg_no=str(reg_no),
            name=name,
            department=blank_to_none(department),
            signature=blank_to_none(signature),
        )

    @property
    def department_name(self) -> str:
        return normalize_department(self.department)
