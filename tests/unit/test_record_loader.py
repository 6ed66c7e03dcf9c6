"""
Unit tests for RecordLoader.
"""

import json

import pytest

from attendance_report.loading.record_loader import RecordLoader
from attendance_report.models.records import AttendanceRecord, Meeting


class TestRecordLoader:
    """Test cases for RecordLoader against a temporary source directory."""

    @pytest.fixture
    def loader(self, config):
        return RecordLoader(config)

    def test_load_student_names(self, loader):
        result = loader.load_student_names()

        assert result.is_success
        # S4 has no name and is skipped
        assert result.value == {"S1": "Ann Lee", "S2": "Bob Stone", "S3": "Cara Diaz"}

    def test_duplicate_roster_entry_keeps_last(self, loader, source_dir, write_rows):
        write_rows(
            source_dir / "students_list.txt",
            [
                {"studentId": "S1", "personFullname": "Ann Old"},
                {"studentId": "S1", "personFullname": "Ann New"},
            ],
        )

        assert loader.load_student_names().value == {"S1": "Ann New"}

    def test_missing_roster_is_a_failure(self, loader, source_dir):
        (source_dir / "students_list.txt").unlink()

        result = loader.load_student_names()

        assert result.is_failure
        assert "not found" in result.message

    def test_list_meeting_files(self, loader, source_dir):
        (source_dir / "readme.md").write_text("notes", encoding="utf-8")
        (source_dir / "nested.txt").mkdir()

        names = [path.name for path in loader.list_meeting_files()]

        assert names == ["meeting_01.txt", "meeting_02.txt"]

    def test_load_meetings(self, loader):
        meetings, issues = loader.load_meetings()

        assert issues == []
        assert set(meetings) == {"M1", "M2"}
        assert meetings["M1"] == Meeting(
            meeting_id="M1",
            course_id="C1",
            date="2024-01-10",
            start_time="09:00",
            end_time="10:30",
            lesson_type="Lecture",
            lesson_code="LEC",
            teacher_id="T1",
        )

    def test_lesson_type_falls_back_to_english_name(self, loader):
        meetings, _ = loader.load_meetings()

        assert meetings["M2"].lesson_type == "Seminar"

    def test_meeting_rows_without_id_are_skipped(self, loader, source_dir, write_rows):
        write_rows(source_dir / "meeting_03.txt", [{"meetingDate": "2024-02-01"}, {"id": "M3"}])

        meetings, issues = loader.load_meetings()

        assert issues == []
        assert set(meetings) == {"M1", "M2", "M3"}
        assert meetings["M3"].date == ""

    def test_later_meeting_file_overwrites_same_id(self, loader, source_dir, write_rows):
        write_rows(source_dir / "meeting_99.txt", [{"id": "M1", "meetingDate": "2024-05-05"}])

        meetings, _ = loader.load_meetings()

        assert meetings["M1"].date == "2024-05-05"
        assert meetings["M1"].lesson_type == ""

    def test_corrupt_meeting_file_does_not_block_others(self, loader, source_dir):
        (source_dir / "meeting_00.txt").write_text("{not json", encoding="utf-8")
        (source_dir / "meeting_05.txt").write_text(json.dumps({"rows": []}), encoding="utf-8")

        meetings, issues = loader.load_meetings()

        assert set(meetings) == {"M1", "M2"}
        assert sorted(issue.source.name for issue in issues) == ["meeting_00.txt", "meeting_05.txt"]
        assert any("Invalid JSON" in issue.message for issue in issues)
        assert any("row-table" in issue.message for issue in issues)

    def test_load_attendance_records_preserves_order(self, loader):
        result = loader.load_attendance_records()

        assert result.is_success
        assert result.value == [
            AttendanceRecord("S1", "M1", "X"),
            AttendanceRecord("S1", "M2", "110000148"),
            AttendanceRecord("S2", "M1", "110000148"),
            AttendanceRecord("S2", "M2", ""),
            AttendanceRecord("S5", "M_unknown", "Y"),
        ]

    def test_journal_rows_without_ids_are_skipped(self, loader, source_dir, write_rows):
        write_rows(
            source_dir / "attendance_journal.txt",
            [
                {"courseMeetingId": "M1", "point1Id": "X"},
                {"studentId": "S1", "point1Id": "X"},
                {"studentId": "S1", "courseMeetingId": "M1"},
            ],
        )

        result = loader.load_attendance_records()

        assert result.value == [AttendanceRecord("S1", "M1", "")]

    def test_numeric_identifiers_become_text(self, loader, source_dir, write_rows):
        write_rows(
            source_dir / "attendance_journal.txt",
            [{"studentId": 7, "courseMeetingId": 12, "point1Id": 110000148}],
        )

        record = loader.load_attendance_records().value[0]

        assert record == AttendanceRecord("7", "12", "110000148")

    def test_load_collects_everything(self, loader):
        data = loader.load()

        assert not data.has_issues
        assert len(data.student_names) == 3
        assert len(data.meetings) == 2
        assert len(data.records) == 5

    def test_load_substitutes_empty_data_for_broken_files(self, loader, source_dir):
        (source_dir / "students_list.txt").write_text("[]", encoding="utf-8")
        (source_dir / "attendance_journal.txt").write_text("", encoding="utf-8")

        data = loader.load()

        assert data.student_names == {}
        assert data.records == []
        assert len(data.meetings) == 2
        assert {issue.source.name for issue in data.issues} == {
            "students_list.txt",
            "attendance_journal.txt",
        }

    def test_load_logs_skipped_inputs(self, loader, source_dir, caplog):
        (source_dir / "attendance_journal.txt").unlink()

        with caplog.at_level("WARNING", logger="attendance_report"):
            data = loader.load()

        assert data.records == []
        assert "attendance_journal.txt" in caplog.text
