"""
Shared fixtures: row-table documents written to a temporary source directory.
"""

import json
from pathlib import Path

import pytest

from attendance_report.utils.config import ABSENCE_MARKER_ID, ReportConfig


def row_table(*tables):
    """Wrap lists of rows into a row-table document."""
    return {"tbl": [{"r": list(rows)} for rows in tables]}


def write_document(path: Path, document) -> Path:
    """Write a document as JSON text, the way the exports are stored."""
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def write_rows():
    """Write ``*tables`` (lists of rows) as a row-table document to a path."""
    def _write(path: Path, *tables) -> Path:
        return write_document(path, row_table(*tables))
    return _write


@pytest.fixture
def source_dir(tmp_path):
    """Source directory with a roster, two meeting files and a journal."""
    directory = tmp_path / "source_data"
    directory.mkdir()

    write_document(
        directory / "students_list.txt",
        row_table(
            [
                {"studentId": "S1", "personFullname": "Ann Lee"},
                {"studentId": "S2", "personFullname": "Bob Stone"},
            ],
            [
                {"studentId": "S3", "personFullname": "Cara Diaz"},
                {"studentId": "S4"},
            ],
        ),
    )
    write_document(
        directory / "meeting_01.txt",
        row_table([
            {
                "id": "M1",
                "courseId": "C1",
                "meetingDate": "2024-01-10",
                "startTime": "09:00",
                "endTime": "10:30",
                "lessonType": "Lecture",
                "code": "LEC",
                "teacherId": "T1",
            }
        ]),
    )
    write_document(
        directory / "meeting_02.txt",
        row_table([
            {
                "id": "M2",
                "courseId": "C1",
                "meetingDate": "2024-01-03",
                "startTime": "13:00",
                "endTime": "14:30",
                "lessonTypeEn": "Seminar",
                "code": "SEM",
                "teacherId": "T2",
            }
        ]),
    )
    write_document(
        directory / "attendance_journal.txt",
        row_table(
            [
                {"studentId": "S1", "courseMeetingId": "M1", "point1Id": "X"},
                {"studentId": "S1", "courseMeetingId": "M2", "point1Id": ABSENCE_MARKER_ID},
                {"studentId": "S2", "courseMeetingId": "M1", "point1Id": ABSENCE_MARKER_ID},
            ],
            [
                {"studentId": "S2", "courseMeetingId": "M2", "point1Id": None},
                {"studentId": "S5", "courseMeetingId": "M_unknown", "point1Id": "Y"},
            ],
        ),
    )
    return directory


@pytest.fixture
def config(source_dir, tmp_path):
    """Configuration pointing at the fixture source directory."""
    return ReportConfig(source_dir=source_dir, output_dir=tmp_path / "output")
