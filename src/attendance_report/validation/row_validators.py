"""
Validators for the three row roles of the exported documents.

A row with errors is skipped by the loader without a diagnostic;
warnings keep the row and are only logged at DEBUG level.
"""

from ..models.rows import JournalRow, MeetingRow, RosterRow
from .validators import Validator, ValidationResult


class RosterRowValidator(Validator):
    """Roster rows need both a student id and a full name."""

    REQUIRED_FIELDS = ["studentId", "personFullname"]

    def validate(self, data: RosterRow) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        for error in self.validate_required_fields(data, self.REQUIRED_FIELDS):
            result.add_error(error)
        return result


class MeetingRowValidator(Validator):
    """
    Meeting rows need an id.

    Everything else is optional. A date outside "YYYY-MM-DD" is kept but
    flagged, because such dates do not sort chronologically.

    Examples:
        >>> validator = MeetingRowValidator()
        >>> validator.validate({"id": "M1", "meetingDate": "10.01.2024"}).warnings
        ['Invalid meetingDate format: 10.01.2024 (expected YYYY-MM-DD)']
    """

    REQUIRED_FIELDS = ["id"]

    def validate(self, data: MeetingRow) -> ValidationResult:
        result = ValidationResult(is_valid=True)

        for error in self.validate_required_fields(data, self.REQUIRED_FIELDS):
            result.add_error(error)

        if not result.is_valid:
            return result

        meeting_date = data.get("meetingDate")
        if meeting_date:
            warning = self.validate_date_format(meeting_date, "meetingDate")
            if warning:
                result.add_warning(warning)
        else:
            result.add_warning(f"Meeting {data['id']} has no meetingDate")

        return result


class JournalRowValidator(Validator):
    """Journal rows need the student and the meeting they refer to."""

    REQUIRED_FIELDS = ["studentId", "courseMeetingId"]

    def validate(self, data: JournalRow) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        for error in self.validate_required_fields(data, self.REQUIRED_FIELDS):
            result.add_error(error)
        return result
