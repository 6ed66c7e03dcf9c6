"""
Unit tests for row-table traversal.
"""

from attendance_report.loading.row_table import field_text, is_row_table, iter_rows


class TestRowTable:
    """Test cases for row-table helpers."""

    def test_is_row_table(self):
        assert is_row_table({"tbl": []})
        assert not is_row_table({"tbl": {}})
        assert not is_row_table({"rows": []})
        assert not is_row_table([{"tbl": []}])
        assert not is_row_table(None)

    def test_rows_in_document_order(self):
        document = {"tbl": [{"r": [{"n": 1}, {"n": 2}]}, {"r": [{"n": 3}]}]}

        assert [row["n"] for row in iter_rows(document)] == [1, 2, 3]

    def test_malformed_tables_and_rows_are_skipped(self):
        document = {
            "tbl": [
                {"r": [{"n": 1}, "junk", None]},
                {"rows": [{"n": 99}]},
                "junk",
                {"r": {"n": 98}},
                {"r": [{"n": 2}]},
            ]
        }

        assert [row["n"] for row in iter_rows(document)] == [1, 2]

    def test_field_text(self):
        row = {"id": 42, "name": "Ann", "empty": None}

        assert field_text(row, "id") == "42"
        assert field_text(row, "name") == "Ann"
        assert field_text(row, "empty") == ""
        assert field_text(row, "missing") == ""
