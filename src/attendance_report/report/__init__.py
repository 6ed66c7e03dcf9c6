"""
Report emitters: HTML page, CSV exports and the JSON run report.
"""

from .exports import export_csv, matrix_frame, save_run_report, summary_frame
from .html_report import HtmlReportWriter
from .rows import (
    NOT_REQUIRED,
    MeetingColumn,
    StudentRow,
    build_student_rows,
    ratio_class,
    resolve_student,
    summarize,
)

__all__ = [
    "NOT_REQUIRED",
    "HtmlReportWriter",
    "MeetingColumn",
    "StudentRow",
    "build_student_rows",
    "export_csv",
    "matrix_frame",
    "ratio_class",
    "resolve_student",
    "save_run_report",
    "summarize",
    "summary_frame",
]
