"""
Course attendance report.

Builds a student x meeting attendance matrix from exported row-table
documents and renders it as a static HTML report.

Usage:
    >>> from attendance_report import RecordLoader, ReportConfig, build_matrix
    >>>
    >>> config = ReportConfig(source_dir=Path("source_data"))
    >>> data = RecordLoader(config).load()
    >>> matrix, meetings, stats = build_matrix(data.records, data.meetings)
"""

from .loading import RecordLoader
from .matrix import build_matrix, classify_status
from .models import AttendanceReport, AttendanceStatus, Meeting, StudentStats
from .utils.config import ReportConfig

__all__ = [
    "AttendanceReport",
    "AttendanceStatus",
    "Meeting",
    "RecordLoader",
    "ReportConfig",
    "StudentStats",
    "build_matrix",
    "classify_status",
]

__version__ = "0.1.0"
