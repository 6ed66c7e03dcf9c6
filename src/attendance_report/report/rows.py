"""
Presentation rows derived from the matrix builder output.

The HTML report and the CSV exports both consume these rows, so student
ordering, placeholder names and cell states are decided in one place.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping

from ..models.matrix import AttendanceReport, StudentStats
from ..models.records import Meeting, Student


NOT_REQUIRED = "not-required"


def resolve_student(student_id: str, names: Mapping[str, str]) -> Student:
    """
    Look up a student's roster name.

    Students missing from the roster get a placeholder name containing
    their id, so they are still listed.

    Examples:
        >>> resolve_student("S2", {}).full_name
        'Unknown (S2)'
    """
    name = names.get(student_id)
    if not name:
        name = f"Unknown ({student_id})"
    return Student(student_id=student_id, full_name=name)


def ratio_class(ratio: float) -> str:
    """CSS class for an attendance percentage."""
    if ratio >= 80:
        return "excellent"
    if ratio >= 60:
        return "good"
    if ratio >= 40:
        return "warning"
    return "poor"


@dataclass(frozen=True)
class MeetingColumn:
    """Header data for one meeting column."""

    meeting_id: str
    date: str
    start_time: str
    lesson_type: str
    label: str
    is_stub: bool

    @classmethod
    def from_meeting(cls, meeting: Meeting) -> 'MeetingColumn':
        return cls(
            meeting_id=meeting.meeting_id,
            date="Unknown" if meeting.is_stub or not meeting.date else meeting.date,
            start_time=meeting.start_time,
            lesson_type=meeting.lesson_type or "Class",
            label=meeting.lesson_code or meeting.lesson_type or "Class",
            is_stub=meeting.is_stub
        )


@dataclass(frozen=True)
class StudentRow:
    """
    One student line of the report.

    Attributes:
        student: Student with roster or placeholder name
        stats: Attendance statistics
        cells: One status per sorted meeting: "attended", "absent" or
            "not-required"
    """

    student: Student
    stats: StudentStats
    cells: List[str]

    @property
    def ratio_class(self) -> str:
        return ratio_class(self.stats.ratio_value)


def build_student_rows(
    report: AttendanceReport,
    names: Mapping[str, str]
) -> List[StudentRow]:
    """
    Build report rows sorted by display name.

    Names are compared case-insensitively with the student id as a
    tie-breaker, so the order is stable across runs.
    """
    rows = []
    for student_id, stats in report.student_stats.items():
        cells_by_meeting = report.matrix.get(student_id, {})
        cells = []
        for meeting in report.sorted_meetings:
            status = cells_by_meeting.get(meeting.meeting_id)
            cells.append(status.value if status is not None else NOT_REQUIRED)
        rows.append(
            StudentRow(
                student=resolve_student(student_id, names),
                stats=stats,
                cells=cells
            )
        )

    rows.sort(key=lambda row: (row.student.full_name.casefold(), row.student.student_id))
    return rows


def summarize(report: AttendanceReport) -> Dict[str, object]:
    """
    Headline numbers for the report.

    Returns:
        Dictionary with students, records, meetings and average_ratio
    """
    return {
        "students": len(report.student_stats),
        "records": report.record_count,
        "meetings": len(report.sorted_meetings),
        "average_ratio": report.average_ratio
    }
