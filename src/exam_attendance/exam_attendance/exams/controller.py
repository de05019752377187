from __future__ import annotations

from flask import Flask

from ..common.responses import error_response, ok
from ..container import Container


def _session_dict(session) -> dict:
    return {
        "id": session.exam_id,
        "subject": session.subject,
        "date": session.date_label,
        "start_time": session.start_time_label,
        "venue": session.venue,
        "center_id": session.center.center_id if session.center else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/exams", methods=["GET"], endpoint="api_exams")
    def api_exams():
        try:
            board = container.new_board()
            board.refresh_exams()
            return ok(
                sessions=[_session_dict(s) for s in board.exam_sessions],
                centers=[{"id": c.center_id, "name": c.name, "code": c.code} for c in board.exam_centers()],
            )
        except Exception as e:
            return error_response(e)
