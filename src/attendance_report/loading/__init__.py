"""
Loading of exported row-table documents.
"""

from .record_loader import RecordLoader
from .row_table import field_text, is_row_table, iter_rows

__all__ = [
    "RecordLoader",
    "field_text",
    "is_row_table",
    "iter_rows",
]
