"""
Validation framework for exported rows.

This module provides:
- Abstract Validator interface
- ValidationResult for consistent validation reporting
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class ValidationResult:
    """
    Result of row validation.

    Attributes:
        is_valid: Whether the row is usable
        errors: List of error messages (row is skipped)
        warnings: List of warning messages (row is kept)
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> 'ValidationResult':
        """
        Add an error message.

        Args:
            message: Error message to add

        Returns:
            Self for method chaining
        """
        self.errors.append(message)
        self.is_valid = False
        return self

    def add_warning(self, message: str) -> 'ValidationResult':
        """
        Add a warning message.

        Args:
            message: Warning message to add

        Returns:
            Self for method chaining
        """
        self.warnings.append(message)
        return self

    @property
    def has_errors(self) -> bool:
        """Check if there are errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are warnings."""
        return len(self.warnings) > 0

    def get_summary(self) -> str:
        """
        Get validation summary.

        Returns:
            Human-readable summary of validation results
        """
        if self.is_valid and not self.has_warnings:
            return "Validation passed"

        parts = []

        if self.has_errors:
            parts.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                parts.append(f"  - {error}")

        if self.has_warnings:
            parts.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                parts.append(f"  - {warning}")

        return "\n".join(parts)


class Validator(ABC):
    """
    Abstract base class for row validators.

    Subclasses implement validate() for one row role (roster, meeting,
    journal).
    """

    @abstractmethod
    def validate(self, data: Any) -> ValidationResult:
        """
        Validate a row.

        Args:
            data: Row to validate

        Returns:
            ValidationResult with errors and warnings
        """

    def validate_required_fields(
        self,
        data: dict,
        required_fields: List[str]
    ) -> List[str]:
        """
        Validate that required fields exist and are not empty.

        Exports write missing values as null or as an empty string; both
        count as missing.

        Args:
            data: Dictionary to check
            required_fields: List of required field names

        Returns:
            List of error messages for missing fields
        """
        errors = []
        for name in required_fields:
            value = data.get(name)
            if value is None or value == "":
                errors.append(f"Missing required field: {name}")
        return errors

    def validate_date_format(
        self,
        date_str: Any,
        field_name: str = "date"
    ) -> Optional[str]:
        """
        Validate date format (YYYY-MM-DD).

        Args:
            date_str: Date value to validate
            field_name: Name of the field (for error message)

        Returns:
            Error message if invalid, None if valid
        """
        pattern = r'^\d{4}-\d{2}-\d{2}$'
        if not isinstance(date_str, str) or not re.match(pattern, date_str):
            return f"Invalid {field_name} format: {date_str} (expected YYYY-MM-DD)"
        return None
