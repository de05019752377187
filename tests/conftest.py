from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from datetime import date, time
from typing import Optional

import pytest

from src.exam_attendance.exam_attendance.attendance.board import AttendanceBoard
from src.exam_attendance.exam_attendance.attendance.model import AttendanceRecord
from src.exam_attendance.exam_attendance.exams.model import ExamCenter, ExamSession
from src.exam_attendance.exam_attendance.seating.model import SeatingAssignment, SeatingGroup
from src.exam_attendance.exam_attendance.students.model import Student


@dataclass
class InMemoryExams:
    sessions: list[ExamSession] = field(default_factory=list)

    def list_sessions(self):
        return sorted(self.sessions, key=lambda s: s.exam_date)


@dataclass
class InMemoryStudents:
    students: list[Student] = field(default_factory=list)

    def list_all(self):
        return sorted(self.students, key=lambda s: s.name)

    def update_signature(self, *, student_id: str, signature: str) -> Optional[Student]:
        for i, s in enumerate(self.students):
            if s.student_id == student_id:
                self.students[i] = replace(s, signature=signature or None)
                return self.students[i]
        return None


@dataclass
class InMemorySeating:
    groups_by_exam: dict[str, list[SeatingGroup]] = field(default_factory=dict)

    def list_for_exam(self, exam_id: str):
        return list(self.groups_by_exam.get(exam_id, []))


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple[str, str], AttendanceRecord] = {}
        self._id = 0
        self._lock = threading.Lock()
        self.upsert_calls: list[tuple[str, str, str]] = []
        self.fail_for: set[str] = set()
        self.list_calls = 0

    def list_for_exam(self, exam_id: str):
        self.list_calls += 1
        return [r for (e, _), r in self._by_key.items() if e == exam_id]

    def upsert(self, *, exam_id: str, student_id: str, seat_number: str) -> AttendanceRecord:
        with self._lock:
            self.upsert_calls.append((exam_id, student_id, seat_number))
            if student_id in self.fail_for:
                raise ConnectionError("store unavailable")
            existing = self._by_key.get((exam_id, student_id))
            if existing:
                rec = replace(existing, seat_number=seat_number)
            else:
                self._id += 1
                rec = AttendanceRecord(
                    record_id=f"rec-{self._id}",
                    exam_id=exam_id,
                    student_id=student_id,
                    seat_number=seat_number,
                )
            self._by_key[(exam_id, student_id)] = rec
            return rec

    def delete(self, *, record_id: str) -> bool:
        for key, rec in list(self._by_key.items()):
            if rec.record_id == record_id:
                del self._by_key[key]
                return True
        return False

    def snapshot(self, exam_id: str) -> dict[str, str]:
        return {s: r.seat_number for (e, s), r in self._by_key.items() if e == exam_id}


@dataclass
class RosterStore:
    exams: InMemoryExams
    students: InMemoryStudents
    seating: InMemorySeating
    attendance: InMemoryAttendance

    def board(self, exam_id: Optional[str] = None) -> AttendanceBoard:
        board = AttendanceBoard(
            exams=self.exams,
            students=self.students,
            attendance=self.attendance,
            seating=self.seating,
        ).load()
        board.select_exam(exam_id)
        return board


CENTER = ExamCenter(center_id="c1", name="Main Campus", code="MC-01")
OTHER_CENTER = ExamCenter(center_id="c2", name="North Campus", code="NC-02")


@pytest.fixture
def exam_session() -> ExamSession:
    return ExamSession(
        exam_id="E",
        subject="Mathematics",
        exam_date=date(2026, 11, 2),
        start_time=time(9, 0),
        venue="Hall A",
        center=CENTER,
    )


@pytest.fixture
def store(exam_session) -> RosterStore:
    """Session E: A (R1, CS), B (R2, CS), C (R3, EE); only R1 has a seat (A12)."""

    other = ExamSession(
        exam_id="F",
        subject="Physics",
        exam_date=date(2026, 11, 4),
        start_time=time(13, 30),
        venue="Hall B",
        center=OTHER_CENTER,
    )
    students = [
        Student.create(student_id="A", reg_no="R1", name="Alice", department="CS"),
        Student.create(student_id="B", reg_no="R2", name="Bao", department="CS"),
        Student.create(student_id="C", reg_no="R3", name="Chi", department="EE"),
    ]
    seating = {
        "E": [
            SeatingGroup(
                arrangement_id="arr-1",
                exam_id="E",
                assignments=(SeatingAssignment(seat_no="A12", reg_no="R1", student_name="Alice", department="CS"),),
            )
        ]
    }
    return RosterStore(
        exams=InMemoryExams([exam_session, other]),
        students=InMemoryStudents(students),
        seating=InMemorySeating(seating),
        attendance=InMemoryAttendance(),
    )
