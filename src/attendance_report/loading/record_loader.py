"""
Record loader for exported course attendance data.

Turns the roster, the per-meeting metadata files and the attendance
journal into typed records. A single unreadable or malformed file never
stops the run: it becomes a LoadIssue and an empty substitute.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..models.dataset import LoadedData, LoadIssue
from ..models.records import AttendanceRecord, Meeting, Student
from ..models.result import Result
from ..models.rows import MeetingRow
from ..utils.config import ReportConfig
from ..utils.file_utils import load_json
from ..validation.row_validators import (
    JournalRowValidator,
    MeetingRowValidator,
    RosterRowValidator,
)
from .row_table import field_text, is_row_table, iter_rows


logger = logging.getLogger(__name__)


class RecordLoader:
    """
    Loads the input files of one source directory.

    Examples:
        >>> loader = RecordLoader(ReportConfig(source_dir=Path("source_data")))
        >>> data = loader.load()
        >>> print(len(data.records), len(data.issues))
    """

    def __init__(self, config: ReportConfig):
        """
        Initialize RecordLoader.

        Args:
            config: Run configuration (paths and reserved file names)
        """
        self.config = config
        self.roster_validator = RosterRowValidator()
        self.meeting_validator = MeetingRowValidator()
        self.journal_validator = JournalRowValidator()

    def _read_row_table(self, path: Path) -> Result[Dict[str, Any]]:
        """Read a file and check that it is a row-table document."""
        result = load_json(path)
        if result.is_failure:
            return result
        if not is_row_table(result.value):
            return Result.failure(f"Not a row-table document (missing 'tbl' list): {path}")
        return result

    def load_students(self) -> Result[List[Student]]:
        """
        Load roster entries from the student list.

        Rows missing the student id or the full name are skipped.

        Returns:
            Result with the students in document order
        """
        result = self._read_row_table(self.config.roster_path)
        if result.is_failure:
            return Result.failure(result.message, result.error)

        students = []
        for row in iter_rows(result.value):
            if not self.roster_validator.validate(row).is_valid:
                continue
            students.append(
                Student(
                    student_id=field_text(row, "studentId"),
                    full_name=field_text(row, "personFullname")
                )
            )

        return Result.success(students)

    def load_student_names(self) -> Result[Dict[str, str]]:
        """
        Load the student id -> full name mapping.

        A student listed twice keeps the last name seen.

        Returns:
            Result with the mapping, or the failure of the roster read
        """
        result = self.load_students().map(
            lambda students: {s.student_id: s.full_name for s in students}
        )
        if result.is_success:
            logger.info(f"Loaded {len(result.value)} unique student names")
        return result

    def list_meeting_files(self) -> List[Path]:
        """
        List per-meeting metadata files in the source directory.

        Sorted by name so that, when two files define the same meeting id,
        the outcome does not depend on directory listing order.
        """
        return sorted(
            path for path in self.config.source_dir.iterdir()
            if self.config.is_metadata_file(path)
        )

    def _meeting_from_row(self, row: MeetingRow) -> Meeting:
        return Meeting(
            meeting_id=field_text(row, "id"),
            course_id=field_text(row, "courseId"),
            date=field_text(row, "meetingDate"),
            start_time=field_text(row, "startTime"),
            end_time=field_text(row, "endTime"),
            lesson_type=field_text(row, "lessonType") or field_text(row, "lessonTypeEn"),
            lesson_code=field_text(row, "code"),
            teacher_id=field_text(row, "teacherId")
        )

    def load_meetings(self) -> Tuple[Dict[str, Meeting], List[LoadIssue]]:
        """
        Load meetings from every metadata file.

        Later files overwrite meetings with the same id. A file that cannot
        be read or parsed is reported and skipped; the remaining files are
        still loaded.

        Returns:
            Tuple of (meeting_id -> Meeting, issues for skipped files)
        """
        meetings: Dict[str, Meeting] = {}
        issues: List[LoadIssue] = []

        files = self.list_meeting_files()
        logger.info(f"Loading {len(files)} meeting files")

        for path in files:
            result = self._read_row_table(path)
            if result.is_failure:
                issues.append(LoadIssue(source=path, message=result.message, error=result.error))
                continue

            for row in iter_rows(result.value):
                validation = self.meeting_validator.validate(row)
                if not validation.is_valid:
                    continue
                for warning in validation.warnings:
                    logger.debug(f"{path.name}: {warning}")

                meeting = self._meeting_from_row(row)
                meetings[meeting.meeting_id] = meeting

        logger.info(f"Loaded {len(meetings)} meetings")
        return meetings, issues

    def load_attendance_records(self) -> Result[List[AttendanceRecord]]:
        """
        Load the attendance journal as a flat list of records.

        Row order is preserved within and across tables; it decides which
        record wins when a student/meeting pair appears more than once.
        Rows without a student id or meeting id are skipped.

        Returns:
            Result with the records, or the failure of the journal read
        """
        result = self._read_row_table(self.config.journal_path)
        if result.is_failure:
            return Result.failure(result.message, result.error)

        records = []
        skipped = 0
        for row in iter_rows(result.value):
            if not self.journal_validator.validate(row).is_valid:
                skipped += 1
                continue
            records.append(
                AttendanceRecord(
                    student_id=field_text(row, "studentId"),
                    meeting_id=field_text(row, "courseMeetingId"),
                    marker_id=field_text(row, "point1Id")
                )
            )

        if skipped:
            logger.debug(f"Skipped {skipped} journal rows without student or meeting id")
        logger.info(f"Loaded {len(records)} attendance records")
        return Result.success(records)

    def load(self) -> LoadedData:
        """
        Load roster, meetings and journal.

        Failures are converted into LoadIssue entries with empty data in
        place of the failed file. This method does not raise for malformed
        input files.

        Returns:
            LoadedData for the matrix builder and the report writers
        """
        data = LoadedData()

        names_result = self.load_student_names()
        if names_result.is_failure:
            data.issues.append(
                LoadIssue(
                    source=self.config.roster_path,
                    message=names_result.message,
                    error=names_result.error
                )
            )
        data.student_names = names_result.unwrap_or({})

        data.meetings, meeting_issues = self.load_meetings()
        data.issues.extend(meeting_issues)

        records_result = self.load_attendance_records()
        if records_result.is_failure:
            data.issues.append(
                LoadIssue(
                    source=self.config.journal_path,
                    message=records_result.message,
                    error=records_result.error
                )
            )
        data.records = records_result.unwrap_or([])

        for issue in data.issues:
            logger.warning(f"Skipped input {issue.source.name}: {issue.message}")

        return data
