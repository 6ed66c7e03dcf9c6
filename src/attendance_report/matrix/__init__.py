"""
Attendance matrix construction and statistics.
"""

from .builder import (
    build_matrix,
    classify_status,
    compute_student_stats,
    fold_records,
    resolve_meetings,
    sort_meetings,
)

__all__ = [
    "build_matrix",
    "classify_status",
    "compute_student_stats",
    "fold_records",
    "resolve_meetings",
    "sort_meetings",
]
