"""
Row validation for exported attendance documents.
"""

from .row_validators import JournalRowValidator, MeetingRowValidator, RosterRowValidator
from .validators import ValidationResult, Validator

__all__ = [
    "JournalRowValidator",
    "MeetingRowValidator",
    "RosterRowValidator",
    "ValidationResult",
    "Validator",
]
