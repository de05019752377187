from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import NoExamSelectedError, RenderError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def ok(message: str = "", **payload):
    body = {"success": True}
    if message:
        body["message"] = message
    body.update(payload)
    return jsonify(body), 200


def error_response(e: Exception):
    """Map an exception to a JSON error; the screen keeps working after any of them."""

    if isinstance(e, (NoExamSelectedError, ValidationError)):
        status = 400
    elif isinstance(e, RenderError):
        status = 422
    elif isinstance(e, StoreError):
        status = 502
    else:
        logger.exception("Unexpected error")
        return jsonify({"success": False, "message": "Unexpected system error"}), 500
    return jsonify({"success": False, "message": str(e)}), status
