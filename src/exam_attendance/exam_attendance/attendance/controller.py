from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, request, send_file

from ..common.responses import error_response, ok
from ..container import Container
from .board import AttendanceBoard


def register(app: Flask, container: Container) -> None:
    def _params() -> dict:
        data = request.get_json(silent=True) or {}
        merged = request.args.to_dict()
        merged.update(request.form.to_dict())
        merged.update(data)
        return merged

    def _board(params: dict) -> AttendanceBoard:
        board = container.new_board()
        board.refresh_exams()
        board.refresh_students()
        board.select_exam(params.get("exam_id"))
        board.select_center(params.get("center_id"))
        return board

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        params = _params()
        try:
            board = _board(params)
            board.set_filters(department=params.get("department"), search=params.get("q"), tab=params.get("tab"))
        except Exception as e:
            return error_response(e)

        return ok(
            exam_id=board.selected_exam_id,
            departments=board.departments(),
            rows=board.rows(),
            stats=asdict(board.stats()),
            department_stats=[asdict(d) for d in board.department_stats()],
        )

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="api_attendance_mark")
    def api_attendance_mark():
        params = _params()
        try:
            result = container.attendance_service.mark_present(_board(params), params.get("student_id", ""))
            return ok(
                "Attendance and seating updated successfully",
                seat_number=result.seat_number,
                warning=result.warning,
            )
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/unmark", methods=["POST"], endpoint="api_attendance_unmark")
    def api_attendance_unmark():
        params = _params()
        try:
            removed = container.attendance_service.unmark(_board(params), params.get("student_id", ""))
            return ok("Attendance record removed successfully" if removed else "", removed=removed)
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/mark-all", methods=["POST"], endpoint="api_attendance_mark_all")
    def api_attendance_mark_all():
        params = _params()
        try:
            result = container.attendance_service.mark_all_present(_board(params))
            return ok(result.message, marked=result.marked, warning=result.warning)
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/mark-department", methods=["POST"], endpoint="api_attendance_mark_department")
    def api_attendance_mark_department():
        params = _params()
        try:
            result = container.attendance_service.mark_department_present(
                _board(params), params.get("department", "")
            )
            return ok(result.message, marked=result.marked, warning=result.warning)
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/signature-marker", methods=["POST"], endpoint="api_attendance_signature_marker")
    def api_attendance_signature_marker():
        params = _params()
        try:
            result = container.attendance_service.record_signature_marker(
                _board(params), params.get("student_id", ""), params.get("signature", "")
            )
            return ok("Attendance and seating updated successfully", seat_number=result.seat_number)
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/export/<fmt>", methods=["GET"], endpoint="api_attendance_export")
    def api_attendance_export(fmt: str):
        params = _params()
        try:
            artifact = container.export_service.export(_board(params), fmt)
        except Exception as e:
            return error_response(e)

        return send_file(
            io.BytesIO(artifact.content),
            mimetype=artifact.mimetype,
            as_attachment=True,
            download_name=artifact.filename,
        )
