from __future__ import annotations

from enum import Enum


class AttendanceTab(str, Enum):
    """Bộ lọc theo trạng thái có mặt trên màn hình điểm danh."""

    ALL = "all"
    PRESENT = "present"
    ABSENT = "absent"


class ExportFormat(str, Enum):
    """Định dạng file báo cáo có thể tải về."""

    XLSX = "xlsx"
    PDF = "pdf"
    DOCX = "docx"
