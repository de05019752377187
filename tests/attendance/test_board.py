from __future__ import annotations

import pytest

from src.exam_attendance.exam_attendance.attendance.service import AttendanceService
from src.exam_attendance.exam_attendance.core.exceptions import StoreError, ValidationError
from src.exam_attendance.exam_attendance.students.model import Student


def test_exam_centers_are_unique_in_first_seen_order(store):
    board = store.board()

    assert [c.center_id for c in board.exam_centers()] == ["c1", "c2"]


def test_select_center_switches_to_first_exam_of_center(store):
    board = store.board("E")

    board.select_center("c2")
    assert board.selected_exam_id == "F"

    board.select_center("c2")
    assert board.selected_exam_id == "F"


def test_select_center_keeps_exam_already_at_center(store):
    board = store.board("E")

    board.select_center("c1")

    assert board.selected_exam_id == "E"


def test_departments_normalize_missing_department(store):
    store.students.students.append(Student.create(student_id="D", reg_no="R4", name="Dung", department=None))
    board = store.board("E")

    assert board.departments() == ["all", "CS", "EE", "Unassigned"]


def test_seat_prefers_committed_record_then_live_resolution(store):
    board = store.board("E")
    AttendanceService(store.attendance).record_signature_marker(board, "A", "sig-A")

    assert board.seat_for("A") == "sig-A"
    assert board.seat_for("B") == "-"

    AttendanceService(store.attendance).unmark(board, "A")
    assert board.seat_for("A") == "A12"


def test_filters_combine_search_department_and_tab(store):
    board = store.board("E")
    AttendanceService(store.attendance).mark_present(board, "A")

    board.set_filters(department="CS")
    assert [s.student_id for s in board.filtered_students()] == ["A", "B"]

    board.set_filters(department="CS", tab="absent")
    assert [s.student_id for s in board.filtered_students()] == ["B"]

    board.set_filters(search="r3")
    assert [s.student_id for s in board.filtered_students()] == ["C"]

    board.set_filters(search="ee", tab="present")
    assert board.filtered_students() == []


def test_unknown_tab_is_rejected(store):
    board = store.board("E")

    with pytest.raises(ValidationError):
        board.set_filters(tab="late")


def test_stats_follow_filtered_view(store):
    board = store.board("E")
    AttendanceService(store.attendance).mark_present(board, "A")

    stats = board.stats()
    assert (stats.total, stats.present, stats.absent) == (3, 1, 2)
    assert stats.rate == pytest.approx(33.3)

    board.set_filters(department="EE")
    assert board.stats().rate == 0.0


def test_department_stats_sorted_by_size(store):
    board = store.board("E")
    AttendanceService(store.attendance).mark_department_present(board, "CS")

    stats = board.department_stats()

    assert [d.name for d in stats] == ["CS", "EE"]
    assert (stats[0].present, stats[0].rate) == (2, 100.0)
    assert (stats[1].present, stats[1].absent) == (0, 1)


def test_rows_describe_filtered_students(store):
    board = store.board("E")

    rows = board.rows()

    assert rows[0] == {
        "student_id": "A",
        "reg_no": "R1",
        "name": "Alice",
        "department": "CS",
        "seat": "A12",
        "present": False,
        "signature": "",
    }


def test_read_failures_surface_as_store_errors(store):
    def broken():
        raise ConnectionError("down")

    store.students.list_all = broken

    with pytest.raises(StoreError, match="load students"):
        store.board("E")
