from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence

from ..common.store import store_call
from ..common.validators import require_exam_selected, require_non_empty
from ..core.constants import DEFAULT_BATCH_MAX_WORKERS, NOT_ASSIGNED_SEAT
from ..core.exceptions import NoExamSelectedError, StoreError
from .board import AttendanceBoard
from .model import BatchResult, MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _selected_exam_id(board: AttendanceBoard) -> str:
    """The selected exam id, provided it names a session the board has loaded."""

    exam_id = require_exam_selected(board.selected_exam_id)
    if board.selected_exam is None:
        logger.warning("Exam %s is not a known exam session", exam_id)
        raise NoExamSelectedError()
    return exam_id


class AttendanceService:
    """Marks and unmarks students for the exam selected on a board.

    Every operation checks the board has a selected exam before touching the store and
    refreshes the board's attendance after a write.

    Batch marks are best effort: upserts run concurrently, and when any of them fails the
    whole batch is reported as one failure while the upserts that succeeded stay committed.
    """

    def __init__(self, attendance: AttendanceRepository, *, max_workers: int = DEFAULT_BATCH_MAX_WORKERS):
        self._attendance = attendance
        self._max_workers = max(1, int(max_workers))

    def is_present(self, board: AttendanceBoard, student_id: str) -> bool:
        return board.is_present(student_id)

    def mark_present(self, board: AttendanceBoard, student_id: str) -> MarkResult:
        exam_id = _selected_exam_id(board)
        student_id = require_non_empty(student_id, "Student")

        seat = board.resolver().resolve_seat(student_id)
        warning = None
        if not seat:
            warning = "No seating assignment found for this student."
            logger.warning("Exam %s: no seating assignment for student %s", exam_id, student_id)

        record = store_call(
            "update attendance",
            self._attendance.upsert,
            exam_id=exam_id,
            student_id=student_id,
            seat_number=seat or NOT_ASSIGNED_SEAT,
        )
        board.refresh_attendance()
        return MarkResult(student_id=student_id, seat_number=record.seat_number, warning=warning)

    def mark_all_present(self, board: AttendanceBoard) -> BatchResult:
        """Mark every student holding a seat in the selected exam; the rest are skipped."""

        exam_id = _selected_exam_id(board)

        resolver = board.resolver()
        batch: list[tuple[str, str]] = []
        for student in board.students:
            seat = resolver.resolve_seat(student.student_id)
            if seat:
                batch.append((student.student_id, seat))

        if not batch:
            warning = "No students have seating assignments for this exam."
            logger.warning("Exam %s: %s", exam_id, warning)
            return BatchResult(marked=0, warning=warning)

        self._run_batch(board, exam_id, batch, failure="Failed to mark attendance for all students")
        return BatchResult(marked=len(batch))

    def mark_department_present(self, board: AttendanceBoard, department: str) -> BatchResult:
        """Mark every student of a department; unseated ones get the "Not Assigned" seat."""

        exam_id = _selected_exam_id(board)
        department = require_non_empty(department, "Department")

        members = [s for s in board.students if s.department_name == department]
        if not members:
            warning = f"No students found in the {department} department."
            logger.warning("Exam %s: %s", exam_id, warning)
            return BatchResult(marked=0, department=department, warning=warning)

        resolver = board.resolver()
        batch = [(s.student_id, resolver.resolve_seat(s.student_id) or NOT_ASSIGNED_SEAT) for s in members]

        self._run_batch(
            board,
            exam_id,
            batch,
            failure=f"Failed to mark attendance for {department} department students",
        )
        return BatchResult(marked=len(batch), department=department)

    def unmark(self, board: AttendanceBoard, student_id: str) -> bool:
        """Remove the student's record. Returns False when there was nothing to remove."""

        _selected_exam_id(board)

        record = board.record_for(student_id)
        if not record:
            return False

        store_call("remove attendance record", self._attendance.delete, record_id=record.record_id)
        board.refresh_attendance()
        return True

    def record_signature_marker(self, board: AttendanceBoard, student_id: str, signature: str) -> MarkResult:
        """Store a signature in the record's seat field, marking the student present."""

        exam_id = _selected_exam_id(board)
        student_id = require_non_empty(student_id, "Student")
        signature = require_non_empty(signature, "Signature")

        record = store_call(
            "update attendance",
            self._attendance.upsert,
            exam_id=exam_id,
            student_id=student_id,
            seat_number=signature,
        )
        board.refresh_attendance()
        return MarkResult(student_id=student_id, seat_number=record.seat_number)

    def _run_batch(
        self,
        board: AttendanceBoard,
        exam_id: str,
        batch: Sequence[tuple[str, str]],
        *,
        failure: str,
    ) -> None:
        failed = 0
        workers = min(self._max_workers, len(batch))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._attendance.upsert, exam_id=exam_id, student_id=student_id, seat_number=seat)
                for student_id, seat in batch
            ]
            for future in as_completed(futures):
                try:
                    future.result()
                except Exception:
                    failed += 1
                    logger.exception("Exam %s: attendance upsert failed", exam_id)

        # Whatever did commit must show up, failure or not.
        board.refresh_attendance()

        if failed:
            logger.error("Exam %s: %d of %d attendance upserts failed", exam_id, failed, len(batch))
            raise StoreError(failure)
        logger.info("Exam %s: marked %d students present", exam_id, len(batch))
