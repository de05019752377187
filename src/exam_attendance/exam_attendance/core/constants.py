"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

NOT_ASSIGNED_SEAT = "Not Assigned"
UNASSIGNED_DEPARTMENT = "Unassigned"
ALL_DEPARTMENTS = "all"

BLANK_SIGNATURE = "_____________"
NO_SEAT_PLACEHOLDER = "-"
TEACHER_SIGNATURE_LINE = "Teacher Signature: _________________"

REPORT_TITLE = "Exam Attendance Report"
SHEET_NAME_LIMIT = 31

DEFAULT_BATCH_MAX_WORKERS = 8
