from __future__ import annotations

import pytest
from flask import Flask

from src.exam_attendance.exam_attendance.attendance import controller as attendance_controller
from src.exam_attendance.exam_attendance.attendance.service import AttendanceService
from src.exam_attendance.exam_attendance.container import Container
from src.exam_attendance.exam_attendance.exams import controller as exams_controller
from src.exam_attendance.exam_attendance.reports.export import ReportExportService
from src.exam_attendance.exam_attendance.reports.service import ReportService
from src.exam_attendance.exam_attendance.students import controller as students_controller
from src.exam_attendance.exam_attendance.students.service import StudentService


@pytest.fixture
def client(store):
    report_service = ReportService()
    container = Container(
        conn=None,
        exams_repo=store.exams,
        students_repo=store.students,
        seating_repo=store.seating,
        attendance_repo=store.attendance,
        attendance_service=AttendanceService(store.attendance, max_workers=2),
        student_service=StudentService(store.students),
        report_service=report_service,
        export_service=ReportExportService(report_service),
    )
    app = Flask(__name__)
    app.config["TESTING"] = True
    exams_controller.register(app, container)
    students_controller.register(app, container)
    attendance_controller.register(app, container)
    return app.test_client()


def test_list_exams(client):
    body = client.get("/api/exams").get_json()

    assert [s["id"] for s in body["sessions"]] == ["E", "F"]
    assert [c["code"] for c in body["centers"]] == ["MC-01", "NC-02"]


def test_mark_and_view_board(client):
    res = client.post("/api/attendance/mark", json={"exam_id": "E", "student_id": "B"})
    assert res.status_code == 200
    assert res.get_json()["warning"] == "No seating assignment found for this student."

    body = client.get("/api/attendance?exam_id=E&tab=present").get_json()
    assert [r["student_id"] for r in body["rows"]] == ["B"]
    assert body["rows"][0]["seat"] == "Not Assigned"
    assert body["departments"] == ["all", "CS", "EE"]


def test_mark_without_exam_is_bad_request(client, store):
    res = client.post("/api/attendance/mark", json={"student_id": "A"})

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "Please select an exam session first."}
    assert store.attendance.upsert_calls == []


def test_batch_endpoints(client, store):
    assert client.post("/api/attendance/mark-all", json={"exam_id": "E"}).get_json()["marked"] == 1

    body = client.post("/api/attendance/mark-department", json={"exam_id": "E", "department": "EE"}).get_json()
    assert body["message"] == "Marked attendance for 1 students in EE department"
    assert store.attendance.snapshot("E") == {"A": "A12", "C": "Not Assigned"}


def test_batch_failure_is_reported_once(client, store):
    store.attendance.fail_for.add("B")

    res = client.post("/api/attendance/mark-department", json={"exam_id": "E", "department": "CS"})

    assert res.status_code == 502
    assert res.get_json()["message"] == "Failed to mark attendance for CS department students"


def test_unmark(client, store):
    client.post("/api/attendance/mark", json={"exam_id": "E", "student_id": "A"})

    body = client.post("/api/attendance/unmark", json={"exam_id": "E", "student_id": "A"}).get_json()

    assert body["removed"] is True
    assert store.attendance.snapshot("E") == {}


def test_signature_capture(client, store):
    res = client.put("/api/students/A/signature", json={"signature": "alice"})

    assert res.status_code == 200
    assert res.get_json()["student"]["signature"] == "alice"


def test_export_download(client):
    res = client.get("/api/attendance/export/docx?exam_id=E")

    assert res.status_code == 200
    assert "attendance-Mathematics-2026-11-02.docx" in res.headers["Content-Disposition"]


def test_export_without_exam(client):
    res = client.get("/api/attendance/export/xlsx")

    assert res.status_code == 422


def test_mark_for_unknown_exam_is_bad_request(client, store):
    res = client.post("/api/attendance/mark", json={"exam_id": "missing-exam", "student_id": "A"})

    assert res.status_code == 400
    assert res.get_json()["message"] == "Please select an exam session first."
    assert store.attendance.upsert_calls == []
