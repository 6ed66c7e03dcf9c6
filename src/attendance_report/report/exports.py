"""
Tabular and JSON exports of the attendance report.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Mapping, Sequence

import pandas as pd

from ..models.dataset import LoadIssue
from ..models.matrix import AttendanceReport
from ..utils.config import ReportConfig
from ..utils.file_utils import save_csv, save_json
from .rows import NOT_REQUIRED, build_student_rows, summarize


logger = logging.getLogger(__name__)


SUMMARY_CSV = "attendance_summary.csv"
MATRIX_CSV = "attendance_matrix.csv"
RUN_REPORT_JSON = "run_report.json"

SUMMARY_COLUMNS = ["name", "student_id", "attended", "absent", "total", "ratio"]


def summary_frame(report: AttendanceReport, names: Mapping[str, str]) -> pd.DataFrame:
    """
    Per-student summary, one row per student in report order.

    The ratio stays a 2-decimal string so the CSV matches the HTML report.
    """
    records = [
        {
            "name": row.student.full_name,
            "student_id": row.student.student_id,
            "attended": row.stats.attended,
            "absent": row.stats.absent,
            "total": row.stats.total,
            "ratio": row.stats.ratio,
        }
        for row in build_student_rows(report, names)
    ]
    return pd.DataFrame(records, columns=SUMMARY_COLUMNS)


def matrix_frame(report: AttendanceReport, names: Mapping[str, str]) -> pd.DataFrame:
    """
    Attendance matrix with one column per sorted meeting.

    Columns are labelled "<date> <start time> [<meeting id>]" and cells are
    "attended", "absent" or empty for not required.
    """
    meeting_columns = []
    for meeting in report.sorted_meetings:
        when = " ".join(part for part in (meeting.date, meeting.start_time) if part)
        meeting_columns.append(f"{when} [{meeting.meeting_id}]")

    records = []
    for row in build_student_rows(report, names):
        record = {"name": row.student.full_name, "student_id": row.student.student_id}
        for column, cell in zip(meeting_columns, row.cells):
            record[column] = "" if cell == NOT_REQUIRED else cell
        records.append(record)

    return pd.DataFrame(records, columns=["name", "student_id"] + meeting_columns)


def export_csv(
    report: AttendanceReport,
    names: Mapping[str, str],
    output_dir: Path
) -> List[Path]:
    """
    Write the summary and matrix CSV files.

    Returns:
        Paths of the files written successfully
    """
    written = []
    for filename, frame in (
        (SUMMARY_CSV, summary_frame(report, names)),
        (MATRIX_CSV, matrix_frame(report, names)),
    ):
        path = output_dir / filename
        if save_csv(frame, path):
            written.append(path)

    logger.info(f"Wrote {len(written)} CSV files to {output_dir}")
    return written


def save_run_report(
    config: ReportConfig,
    report: AttendanceReport,
    record_count: int,
    issues: Sequence[LoadIssue]
) -> Path:
    """
    Save a JSON summary of the run, including skipped inputs.

    Args:
        config: Run configuration
        report: Matrix builder output
        record_count: Number of journal records loaded
        issues: Inputs skipped during loading

    Returns:
        Path of the JSON file
    """
    summary = summarize(report)
    data = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "source_dir": str(config.source_dir),
        "output_dir": str(config.output_dir),
        "summary": {
            "students": summary["students"],
            "meetings": summary["meetings"],
            "stub_meetings": sum(1 for m in report.sorted_meetings if m.is_stub),
            "journal_records": record_count,
            "matrix_cells": summary["records"],
            "average_ratio": summary["average_ratio"],
        },
        "issues": [issue.to_dict() for issue in issues],
    }

    path = config.output_dir / RUN_REPORT_JSON
    save_json(data, path)
    return path
