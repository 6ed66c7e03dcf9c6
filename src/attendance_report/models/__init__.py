"""
Data models for the attendance report.
"""

from .dataset import LoadedData, LoadIssue
from .matrix import AttendanceMatrix, AttendanceReport, StudentStats
from .records import (
    STUB_MEETING_DATE,
    AttendanceRecord,
    AttendanceStatus,
    Meeting,
    Student,
)
from .result import Result, ResultStatus

__all__ = [
    "STUB_MEETING_DATE",
    "AttendanceMatrix",
    "AttendanceRecord",
    "AttendanceReport",
    "AttendanceStatus",
    "LoadedData",
    "LoadIssue",
    "Meeting",
    "Result",
    "ResultStatus",
    "Student",
    "StudentStats",
]
