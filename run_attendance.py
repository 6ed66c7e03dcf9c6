#!/usr/bin/env python3
"""
Course attendance report script.

Usage:
    python run_attendance.py [--source DIR] [--output DIR]

Same as the installed ``attendance-report`` command.
"""

import sys

from attendance_report.cli import main


if __name__ == "__main__":
    sys.exit(main())
