"""
Course attendance report generator.

Reads the exported roster, meeting files and attendance journal from a
source directory and writes a static, searchable, printable report.

Usage:
    attendance-report [--source DIR] [--output DIR] [--log-level LEVEL]

Examples:
    # Default directories (./source_data -> ./output)
    attendance-report

    # Custom directories
    attendance-report --source ./my_data
    attendance-report -s ./data -o ./reports

    # Verbose run with a log file
    attendance-report --log-level DEBUG --log-file output/logs/attendance.log
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .loading.record_loader import RecordLoader
from .matrix.builder import build_matrix
from .report.exports import export_csv, save_run_report
from .report.html_report import INDEX_FILE, HtmlReportWriter
from .utils.config import ReportConfig
from .utils.logger import setup_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="attendance-report",
        description="Build a course attendance report from exported data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "-s", "--source",
        type=Path,
        help="Directory with the exported source data (default: ./source_data)"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Directory for the generated report (default: ./output)"
    )

    parser.add_argument(
        "--absence-marker",
        help="point1Id value that marks a student as absent"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO or LOG_LEVEL env var)"
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file (rotated at 10MB)"
    )

    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Skip the CSV exports"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ReportConfig:
    """
    Combine environment configuration with command-line overrides.

    Relative paths are resolved against the current working directory.
    """
    config = ReportConfig.from_env().with_overrides(
        source_dir=args.source,
        output_dir=args.output,
        absence_marker=args.absence_marker,
        log_level=args.log_level,
        log_file=args.log_file,
        export_csv=False if args.no_csv else None
    )
    return config.with_overrides(
        source_dir=config.source_dir.resolve(),
        output_dir=config.output_dir.resolve()
    )


def display_summary(students: int, meetings: int, records: int, average_ratio: str):
    """Print the run summary."""
    print("\n" + "=" * 60)
    print("ATTENDANCE SUMMARY")
    print("=" * 60)
    print(f"Students:             {students}")
    print(f"Meetings:             {meetings}")
    print(f"Journal records:      {records}")
    print(f"Average attendance:   {average_ratio}%")
    print("=" * 60)


def run(config: ReportConfig, logger: logging.Logger) -> int:
    """
    Generate the report for a validated configuration.

    Returns:
        Process exit code
    """
    print(f"Source directory: {config.source_dir}")
    print(f"Output directory: {config.output_dir}")

    config.create_output_directories()

    print("\n[1/4] Loading source data...")
    loader = RecordLoader(config)
    data = loader.load()
    print(
        f"✓ {len(data.student_names)} students, {len(data.meetings)} meetings, "
        f"{len(data.records)} attendance records"
    )
    if data.has_issues:
        print(f"✗ Skipped {len(data.issues)} input files (see log)")

    print("\n[2/4] Building attendance matrix...")
    report = build_matrix(data.records, data.meetings, config.absence_marker)
    print(
        f"✓ {len(report.student_stats)} students across "
        f"{len(report.sorted_meetings)} meetings"
    )

    print("\n[3/4] Writing HTML report...")
    HtmlReportWriter(config.output_dir).write(report, data.student_names)
    print(f"✓ Open {config.output_dir / INDEX_FILE} in a browser")

    print("\n[4/4] Writing exports...")
    if config.export_csv:
        for path in export_csv(report, data.student_names, config.output_dir):
            print(f"✓ {path.name}")
    run_report = save_run_report(config, report, len(data.records), data.issues)
    print(f"✓ {run_report.name}")

    display_summary(
        students=len(report.student_stats),
        meetings=len(report.sorted_meetings),
        records=len(data.records),
        average_ratio=report.average_ratio
    )
    logger.info("Report generation complete")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_arguments(argv)

    try:
        config = build_config(args)
        config.validate()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print("Use --source to point at the exported data directory.", file=sys.stderr)
        return 1

    logger = setup_logger(
        "attendance_report",
        level=getattr(logging, config.log_level),
        log_file=config.log_file
    )

    try:
        return run(config, logger)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        logger.info("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\nERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
