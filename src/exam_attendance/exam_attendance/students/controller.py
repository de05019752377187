from __future__ import annotations

from flask import Flask, request

from ..common.responses import error_response, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<student_id>/signature", methods=["PUT"], endpoint="api_student_signature")
    def api_student_signature(student_id: str):
        data = request.get_json(silent=True) or {}
        try:
            board = container.new_board()
            student = container.student_service.capture_signature(board, student_id, data.get("signature", ""))
            return ok(
                "Student signature saved successfully",
                student={"id": student.student_id, "signature": student.signature or ""},
            )
        except Exception as e:
            return error_response(e)
