from __future__ import annotations

import pytest

from src.exam_attendance.exam_attendance.core.exceptions import ValidationError
from src.exam_attendance.exam_attendance.students.model import Student
from src.exam_attendance.exam_attendance.students.service import StudentService


def test_capture_signature_updates_student_and_reloads_board(store):
    board = store.board("E")

    StudentService(store.students).capture_signature(board, "B", "  bao-sig ")

    assert board.student_by_id("B").signature == "bao-sig"
    assert board.is_present("B") is False


def test_capture_signature_works_without_selected_exam(store):
    board = store.board(None)

    student = StudentService(store.students).capture_signature(board, "A", "alice")

    assert student.signature == "alice"


def test_capture_signature_for_unknown_student(store):
    board = store.board("E")

    with pytest.raises(ValidationError):
        StudentService(store.students).capture_signature(board, "nobody", "x")


def test_student_create_normalizes_blank_fields():
    s = Student.create(student_id=1, reg_no="R1", name="A", department="  ", signature="")

    assert s.student_id == "1"
    assert s.department is None
    assert s.signature is None
    assert s.department_name == "Unassigned"
