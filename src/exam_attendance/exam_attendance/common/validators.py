from __future__ import annotations

from typing import Optional

from ..core.exceptions import NoExamSelectedError, ValidationError


def require_non_empty(value, field_name: str) -> str:
    value = "" if value is None else str(value)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_exam_selected(exam_id: Optional[str]) -> str:
    if not exam_id or not str(exam_id).strip():
        raise NoExamSelectedError()
    return str(exam_id).strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Collapse empty/whitespace strings coming from the store into None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None
