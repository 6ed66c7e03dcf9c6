"""
Run configuration.

Configuration is an explicit value handed to the loader, the builder and
the report writers. Defaults match the layout of the exported course data;
environment variables (optionally from a .env file) and command-line
options override them.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


DEFAULT_SOURCE_DIR = "source_data"
DEFAULT_OUTPUT_DIR = "output"
ATTENDANCE_FILE = "attendance_journal.txt"
STUDENTS_FILE = "students_list.txt"

# point1Id value recorded when a student was absent
ABSENCE_MARKER_ID = "110000148"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class ReportConfig:
    """
    Attendance report configuration.

    Attributes:
        source_dir: Directory with the exported input files
        output_dir: Directory receiving the generated report
        journal_filename: Reserved name of the attendance journal
        roster_filename: Reserved name of the student roster
        metadata_suffixes: Suffixes of per-meeting metadata files
        absence_marker: Marker value classified as absent
        log_level: Logging level name
        log_file: Optional rotating log file
        export_csv: Whether to write the CSV exports

    Examples:
        >>> config = ReportConfig(source_dir=Path("data"), output_dir=Path("out"))
        >>> config.journal_path
        PosixPath('data/attendance_journal.txt')
    """

    source_dir: Path = Path(DEFAULT_SOURCE_DIR)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    journal_filename: str = ATTENDANCE_FILE
    roster_filename: str = STUDENTS_FILE
    metadata_suffixes: Tuple[str, ...] = field(default=(".txt",))
    absence_marker: str = ABSENCE_MARKER_ID
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    export_csv: bool = True

    @classmethod
    def from_env(cls) -> 'ReportConfig':
        """
        Build configuration from environment variables.

        Reads ATTENDANCE_SOURCE_DIR, ATTENDANCE_OUTPUT_DIR,
        ATTENDANCE_ABSENCE_MARKER and LOG_LEVEL after loading a .env file
        if one exists. Unset variables keep their defaults.

        Returns:
            ReportConfig instance
        """
        load_dotenv()

        return cls(
            source_dir=Path(os.getenv("ATTENDANCE_SOURCE_DIR", DEFAULT_SOURCE_DIR)),
            output_dir=Path(os.getenv("ATTENDANCE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            absence_marker=os.getenv("ATTENDANCE_ABSENCE_MARKER", ABSENCE_MARKER_ID),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper()
        )

    def with_overrides(self, **overrides) -> 'ReportConfig':
        """
        Return a copy with the given non-None fields replaced.

        Examples:
            >>> config.with_overrides(output_dir=Path("reports"), log_level=None)
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    @property
    def journal_path(self) -> Path:
        """Path of the attendance journal."""
        return self.source_dir / self.journal_filename

    @property
    def roster_path(self) -> Path:
        """Path of the student roster."""
        return self.source_dir / self.roster_filename

    def is_metadata_file(self, path: Path) -> bool:
        """
        Check whether a file in the source directory holds meeting metadata.

        Any regular file with a metadata suffix qualifies, except the
        journal and the roster.
        """
        if path.name in (self.journal_filename, self.roster_filename):
            return False
        return path.is_file() and path.suffix in self.metadata_suffixes

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if the configuration is usable

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if not self.source_dir.exists():
            errors.append(f"Source directory not found: {self.source_dir}")
        elif not self.source_dir.is_dir():
            errors.append(f"Source path is not a directory: {self.source_dir}")

        if self.output_dir.exists() and not self.output_dir.is_dir():
            errors.append(f"Output path is not a directory: {self.output_dir}")

        if not self.absence_marker:
            errors.append("Absence marker must not be empty")

        if not self.metadata_suffixes:
            errors.append("At least one metadata file suffix is required")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True

    def create_output_directories(self):
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
