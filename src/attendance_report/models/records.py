"""
Typed records built once at the loader boundary.

The matrix builder and the report emitter only ever see these shapes,
never the raw exported rows.
"""

from dataclasses import dataclass
from enum import Enum


# Sorts after every real "YYYY-MM-DD" date
STUB_MEETING_DATE = "9999-99-99"


class AttendanceStatus(Enum):
    """
    Status of an observed (student, meeting) cell.

    A pair with no journal row at all is "not required"; that state is
    represented by the missing cell, not by a member of this enum.
    """

    ATTENDED = "attended"
    ABSENT = "absent"


@dataclass(frozen=True)
class Student:
    """
    Roster entry.

    Attributes:
        student_id: Unique student identifier
        full_name: Display name from the roster
    """

    student_id: str
    full_name: str


@dataclass(frozen=True)
class Meeting:
    """
    A single course meeting (lesson).

    Attributes:
        meeting_id: Unique meeting identifier
        course_id: Course the meeting belongs to
        date: Meeting date, "YYYY-MM-DD" so that string order is date order
        start_time: Start time, e.g. "09:00"
        end_time: End time
        lesson_type: Human readable lesson type ("Lecture", "Seminar", ...)
        lesson_code: Short lesson code
        teacher_id: Teacher identifier

    Examples:
        >>> Meeting(meeting_id="M1", date="2024-01-10", start_time="09:00")
        >>> Meeting.stub("M_unknown").is_stub
        True
    """

    meeting_id: str
    course_id: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    lesson_type: str = ""
    lesson_code: str = ""
    teacher_id: str = ""
    is_stub: bool = False

    @classmethod
    def stub(cls, meeting_id: str) -> 'Meeting':
        """
        Create a placeholder for a meeting missing from the metadata files.

        Args:
            meeting_id: Identifier seen in the attendance journal

        Returns:
            Meeting dated STUB_MEETING_DATE with empty time fields
        """
        return cls(meeting_id=meeting_id, date=STUB_MEETING_DATE, is_stub=True)

    @property
    def sort_key(self):
        """Key ordering meetings by date then start time, stubs last."""
        return (self.is_stub, self.date, self.start_time)


@dataclass(frozen=True)
class AttendanceRecord:
    """
    One journal row: a marker for a student at a meeting.

    Attributes:
        student_id: Student identifier
        meeting_id: Meeting identifier (``courseMeetingId`` in the export)
        marker_id: Attendance marker (``point1Id``), may be empty
    """

    student_id: str
    meeting_id: str
    marker_id: str = ""
