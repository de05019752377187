from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_exam(self, exam_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, exam_id: str, student_id: str, seat_number: str) -> AttendanceRecord:
        """Create or overwrite the record keyed by (exam_id, student_id)."""

        raise NotImplementedError

    def delete(self, *, record_id: str) -> bool:
        raise NotImplementedError
