"""
Matrix builder output models.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple

from .records import AttendanceStatus, Meeting


# student_id -> meeting_id -> status; a missing cell means "not required"
AttendanceMatrix = Dict[str, Dict[str, AttendanceStatus]]


@dataclass(frozen=True)
class StudentStats:
    """
    Per-student attendance summary.

    Attributes:
        student_id: Student identifier
        attended: Number of attended meetings
        absent: Number of missed meetings
        total: attended + absent
        ratio: Attendance percentage with 2 decimals ("0.00" when total is 0)

    Examples:
        >>> StudentStats.from_counts("S1", attended=3, absent=1).ratio
        '75.00'
    """

    student_id: str
    attended: int
    absent: int
    total: int
    ratio: str

    @classmethod
    def from_counts(cls, student_id: str, attended: int, absent: int) -> 'StudentStats':
        """Build stats from raw counts, deriving total and ratio."""
        total = attended + absent
        ratio = f"{attended / total * 100:.2f}" if total > 0 else "0.00"
        return cls(
            student_id=student_id,
            attended=attended,
            absent=absent,
            total=total,
            ratio=ratio
        )

    @property
    def ratio_value(self) -> float:
        """Ratio as a float, for thresholds and averages."""
        return float(self.ratio)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary representation of the stats
        """
        return {
            "student_id": self.student_id,
            "attended": self.attended,
            "absent": self.absent,
            "total": self.total,
            "ratio": self.ratio
        }


class AttendanceReport(NamedTuple):
    """
    Result of building the attendance matrix.

    Unpacks as ``(matrix, sorted_meetings, student_stats)``.
    """

    matrix: AttendanceMatrix
    sorted_meetings: List[Meeting]
    student_stats: Dict[str, StudentStats]

    @property
    def record_count(self) -> int:
        """Number of distinct observed cells."""
        return sum(stats.total for stats in self.student_stats.values())

    @property
    def average_ratio(self) -> str:
        """Mean of the per-student ratios with 2 decimals."""
        if not self.student_stats:
            return "0.00"
        values = [stats.ratio_value for stats in self.student_stats.values()]
        return f"{sum(values) / len(values):.2f}"
