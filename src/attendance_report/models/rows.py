"""
Raw row shapes of the exported row-table documents.

Every input file is a JSON document ``{"tbl": [{"r": [row, ...]}, ...]}``.
These TypedDicts describe the row fields the loader reads; exports carry
many more fields, which are ignored.
"""

from typing import Any, Dict, List, TypedDict


class RosterRow(TypedDict, total=False):
    """
    Row of the student roster (``students_list.txt``).

    Examples:
        >>> row: RosterRow = {"studentId": "S1", "personFullname": "Ann Lee"}
    """

    studentId: str
    personFullname: str


class MeetingRow(TypedDict, total=False):
    """
    Row of a per-meeting metadata file.

    ``lessonTypeEn`` is used when ``lessonType`` is missing.

    Examples:
        >>> row: MeetingRow = {
        ...     "id": "M1",
        ...     "courseId": "C7",
        ...     "meetingDate": "2024-01-10",
        ...     "startTime": "09:00",
        ...     "endTime": "10:30",
        ...     "lessonType": "Lecture",
        ...     "code": "LEC",
        ...     "teacherId": "T3"
        ... }
    """

    id: str
    courseId: str
    meetingDate: str
    lessonType: str
    lessonTypeEn: str
    code: str
    startTime: str
    endTime: str
    teacherId: str


class JournalRow(TypedDict, total=False):
    """
    Row of the attendance journal (``attendance_journal.txt``).

    ``point1Id`` holds the attendance marker; one fixed value means absent.
    """

    studentId: str
    courseMeetingId: str
    point1Id: str


class RowTable(TypedDict, total=False):
    """One table of a row-table document."""

    r: List[Dict[str, Any]]


class RowTableDocument(TypedDict, total=False):
    """Top level of a row-table document."""

    tbl: List[RowTable]
