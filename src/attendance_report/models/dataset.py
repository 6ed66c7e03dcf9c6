"""
Loaded input data and recoverable load issues.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .records import AttendanceRecord, Meeting


@dataclass
class LoadIssue:
    """
    An input file that could not be used.

    Attributes:
        source: Path of the offending file
        message: What went wrong
        error: Underlying exception, if any
    """

    source: Path
    message: str
    error: Optional[Exception] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary with source, message and error type
        """
        return {
            "source": str(self.source),
            "message": self.message,
            "error": type(self.error).__name__ if self.error else None
        }


@dataclass
class LoadedData:
    """
    Everything the record loader produced for one run.

    Attributes:
        student_names: student_id -> full name from the roster
        meetings: meeting_id -> Meeting from the metadata files
        records: Journal rows in document order
        issues: Files that were skipped or substituted with empty data
    """

    student_names: Dict[str, str] = field(default_factory=dict)
    meetings: Dict[str, Meeting] = field(default_factory=dict)
    records: List[AttendanceRecord] = field(default_factory=list)
    issues: List[LoadIssue] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if any input file was skipped."""
        return len(self.issues) > 0
