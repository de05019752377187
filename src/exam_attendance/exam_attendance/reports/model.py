from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ROW_HEADERS = ("Registration No", "Name", "Present", "Seat Number", "Student Signature")
SUMMARY_HEADERS = ("Department", "Total Students", "Present", "Absent", "Attendance Rate")


def attendance_rate(present: int, total: int) -> int:
    """present/total as a whole percent, halves rounded up; 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * present + total) // (2 * total)


@dataclass(frozen=True)
class ReportHeader:
    center_name: str
    center_code: str
    venue: str
    subject: str
    date: str
    start_time: str

    def items(self) -> list[tuple[str, str]]:
        return [
            ("Center Name:", self.center_name),
            ("Center Code:", self.center_code),
            ("Room:", self.venue),
            ("Subject:", self.subject),
            ("Date:", self.date),
            ("Time:", self.start_time),
        ]


@dataclass(frozen=True)
class ReportRow:
    reg_no: str
    name: str
    signature: str
    is_present: bool
    seat_number: str

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        return (self.reg_no, self.name, "Yes" if self.is_present else "No", self.seat_number, self.signature)


@dataclass(frozen=True)
class SummaryRow:
    label: str
    total: int
    present: int
    absent: int
    rate: int

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        return (self.label, str(self.total), str(self.present), str(self.absent), f"{self.rate}%")


@dataclass(frozen=True)
class DepartmentGroup:
    name: str
    rows: tuple[ReportRow, ...]

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def present(self) -> int:
        return sum(1 for r in self.rows if r.is_present)

    @property
    def absent(self) -> int:
        return self.total - self.present

    @property
    def rate(self) -> int:
        return attendance_rate(self.present, self.total)

    def summary(self) -> SummaryRow:
        return SummaryRow(label=self.name, total=self.total, present=self.present, absent=self.absent, rate=self.rate)


@dataclass(frozen=True)
class ReportModel:
    """Renderer-agnostic attendance report for one exam session."""

    exam_id: str
    header: ReportHeader
    departments: tuple[DepartmentGroup, ...]

    @property
    def row_count(self) -> int:
        return sum(d.total for d in self.departments)

    def summary_rows(self) -> list[SummaryRow]:
        return [d.summary() for d in self.departments]

    def total_row(self) -> SummaryRow:
        total = self.row_count
        present = sum(d.present for d in self.departments)
        return SummaryRow(label="Total", total=total, present=present, absent=total - present, rate=attendance_rate(present, total))

    def department(self, name: str) -> Optional[DepartmentGroup]:
        for group in self.departments:
            if group.name == name:
                return group
        return None

    def artifact_name(self, extension: str) -> str:
        stem = f"attendance-{self.header.subject}-{self.header.date}"
        for ch in '/\\:':
            stem = stem.replace(ch, "_")
        return f"{stem}.{extension}"
