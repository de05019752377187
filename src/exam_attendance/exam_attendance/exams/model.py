from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class ExamCenter:
    center_id: str
    name: str
    code: str


@dataclass(frozen=True)
class ExamSession:
    """Read-only reference: one sitting of one subject at one venue."""

    exam_id: str
    subject: str
    exam_date: date
    start_time: Optional[time]
    venue: str
    center: Optional[ExamCenter] = None

    @property
    def date_label(self) -> str:
        return self.exam_date.strftime("%Y-%m-%d")

    @property
    def start_time_label(self) -> str:
        return self.start_time.strftime("%H:%M:%S") if self.start_time else ""
