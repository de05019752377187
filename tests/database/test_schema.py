from __future__ import annotations

import re
from pathlib import Path

from src.exam_attendance.exam_attendance.database.bootstrap import _iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def _columns(table: str) -> dict[str, str]:
    for stmt in _iter_sql_statements(SCHEMA.read_text(encoding="utf-8")):
        m = re.search(rf"CREATE TABLE IF NOT EXISTS {table}\s*\((.*)\)\s*$", stmt, re.S)
        if not m:
            continue
        cols = {}
        for line in m.group(1).splitlines():
            line = line.strip().rstrip(",")
            if not line or line.startswith("--"):
                continue
            name, _, definition = line.partition(" ")
            cols[name] = definition
        return cols
    raise AssertionError(f"table {table} not in schema.sql")


def test_attendance_seat_column_fits_a_student_signature():
    seat = _columns("exam_attendance")["seat_number"]
    signature = _columns("students")["signature"]

    assert seat.split()[0] == signature.split()[0] == "TEXT"
    assert "NOT NULL" in seat


def test_one_attendance_record_per_exam_and_student():
    cols = _columns("exam_attendance")

    assert cols["UNIQUE"] == "KEY uq_exam_student (exam_id, student_id)"
