"""
Attendance matrix builder.

Reduces journal records into a sparse student x meeting matrix, orders
the meetings chronologically and derives per-student statistics.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from ..models.matrix import AttendanceMatrix, AttendanceReport, StudentStats
from ..models.records import AttendanceRecord, AttendanceStatus, Meeting
from ..utils.config import ABSENCE_MARKER_ID


logger = logging.getLogger(__name__)


def classify_status(
    marker_id: Optional[str],
    absence_marker: str = ABSENCE_MARKER_ID
) -> AttendanceStatus:
    """
    Classify a journal marker.

    Only the absence marker means absent. Every other value, including an
    empty or missing marker, means attended.

    Examples:
        >>> classify_status("110000148")
        <AttendanceStatus.ABSENT: 'absent'>
        >>> classify_status("")
        <AttendanceStatus.ATTENDED: 'attended'>
    """
    if marker_id == absence_marker:
        return AttendanceStatus.ABSENT
    return AttendanceStatus.ATTENDED


def fold_records(
    records: Iterable[AttendanceRecord],
    absence_marker: str = ABSENCE_MARKER_ID
) -> AttendanceMatrix:
    """
    Fold records into the matrix in input order.

    A later record for the same (student, meeting) pair replaces the
    earlier one; duplicates are never aggregated.
    """
    matrix: AttendanceMatrix = {}
    for record in records:
        row = matrix.setdefault(record.student_id, {})
        row[record.meeting_id] = classify_status(record.marker_id, absence_marker)
    return matrix


def resolve_meetings(
    meeting_ids: Iterable[str],
    known_meetings: Mapping[str, Meeting]
) -> List[Meeting]:
    """
    Look up meeting ids, substituting stub meetings for unknown ids.

    The returned list keeps the order of ``meeting_ids``.
    """
    resolved = []
    stubs = 0
    for meeting_id in meeting_ids:
        meeting = known_meetings.get(meeting_id)
        if meeting is None:
            meeting = Meeting.stub(meeting_id)
            stubs += 1
        resolved.append(meeting)

    if stubs:
        logger.info(f"{stubs} journal meetings have no metadata file")
    return resolved


def sort_meetings(meetings: Iterable[Meeting]) -> List[Meeting]:
    """
    Order meetings by date, then start time.

    Both are compared as plain strings. Stub meetings come after every
    dated meeting. The sort is stable, so ties keep their input order.
    """
    return sorted(meetings, key=lambda meeting: meeting.sort_key)


def compute_student_stats(matrix: AttendanceMatrix) -> Dict[str, StudentStats]:
    """
    Count attended and absent cells for every student in the matrix.

    Only the student's own cells are counted. Students without journal
    rows are not in the matrix and get no entry.
    """
    stats = {}
    for student_id, cells in matrix.items():
        attended = sum(1 for status in cells.values() if status is AttendanceStatus.ATTENDED)
        absent = sum(1 for status in cells.values() if status is AttendanceStatus.ABSENT)
        stats[student_id] = StudentStats.from_counts(student_id, attended, absent)
    return stats


def build_matrix(
    records: Iterable[AttendanceRecord],
    known_meetings: Mapping[str, Meeting],
    absence_marker: str = ABSENCE_MARKER_ID
) -> AttendanceReport:
    """
    Build the attendance matrix, the sorted meeting list and the stats.

    Args:
        records: Journal records in document order
        known_meetings: meeting_id -> Meeting from the metadata files
        absence_marker: Marker value classified as absent

    Returns:
        AttendanceReport(matrix, sorted_meetings, student_stats)

    Examples:
        >>> report = build_matrix(data.records, data.meetings)
        >>> matrix, meetings, stats = report
    """
    records = list(records)
    matrix = fold_records(records, absence_marker)

    # dict preserves first-encounter order for the stable sort
    meeting_ids = dict.fromkeys(record.meeting_id for record in records)
    sorted_meetings = sort_meetings(resolve_meetings(meeting_ids, known_meetings))

    student_stats = compute_student_stats(matrix)

    logger.info(
        f"Processed {len(student_stats)} students across {len(sorted_meetings)} meetings"
    )
    return AttendanceReport(
        matrix=matrix,
        sorted_meetings=sorted_meetings,
        student_stats=student_stats
    )
