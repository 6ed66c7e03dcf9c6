"""
Unit tests for row validation.
"""

import pytest

from attendance_report.validation.row_validators import (
    JournalRowValidator,
    MeetingRowValidator,
    RosterRowValidator,
)
from attendance_report.validation.validators import ValidationResult


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_add_error_invalidates(self):
        result = ValidationResult(is_valid=True)
        result.add_error("First error").add_error("Second error")

        assert not result.is_valid
        assert len(result.errors) == 2

    def test_warning_keeps_validity(self):
        result = ValidationResult(is_valid=True)
        result.add_warning("Odd date")

        assert result.is_valid
        assert result.has_warnings

    def test_get_summary(self):
        result = ValidationResult(is_valid=True)
        assert result.get_summary() == "Validation passed"

        result.add_error("Missing required field: id")
        summary = result.get_summary()
        assert "Errors (1)" in summary
        assert "Missing required field: id" in summary


class TestRosterRowValidator:
    """Test cases for RosterRowValidator."""

    @pytest.fixture
    def validator(self):
        return RosterRowValidator()

    def test_complete_row(self, validator):
        assert validator.validate({"studentId": "S1", "personFullname": "Ann"}).is_valid

    @pytest.mark.parametrize("row", [
        {"studentId": "S1"},
        {"personFullname": "Ann"},
        {"studentId": "S1", "personFullname": ""},
        {"studentId": None, "personFullname": "Ann"},
    ])
    def test_incomplete_row(self, validator, row):
        assert not validator.validate(row).is_valid


class TestMeetingRowValidator:
    """Test cases for MeetingRowValidator."""

    @pytest.fixture
    def validator(self):
        return MeetingRowValidator()

    def test_missing_id(self, validator):
        result = validator.validate({"meetingDate": "2024-01-10"})

        assert not result.is_valid
        assert any("id" in error for error in result.errors)

    def test_valid_meeting(self, validator):
        result = validator.validate({"id": "M1", "meetingDate": "2024-01-10"})

        assert result.is_valid
        assert not result.has_warnings

    def test_unsortable_date_is_a_warning(self, validator):
        result = validator.validate({"id": "M1", "meetingDate": "10.01.2024"})

        assert result.is_valid
        assert any("meetingDate format" in warning for warning in result.warnings)

    def test_missing_date_is_a_warning(self, validator):
        result = validator.validate({"id": "M1"})

        assert result.is_valid
        assert result.has_warnings


class TestJournalRowValidator:
    """Test cases for JournalRowValidator."""

    def test_marker_is_optional(self):
        result = JournalRowValidator().validate({"studentId": "S1", "courseMeetingId": "M1"})

        assert result.is_valid

    def test_missing_meeting_id(self):
        result = JournalRowValidator().validate({"studentId": "S1", "point1Id": "X"})

        assert not result.is_valid
        assert any("courseMeetingId" in error for error in result.errors)
