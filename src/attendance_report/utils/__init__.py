"""
Configuration, logging and file helpers.
"""

from .config import ABSENCE_MARKER_ID, ReportConfig
from .file_utils import load_json, save_csv, save_json, save_text
from .logger import setup_logger

__all__ = [
    "ABSENCE_MARKER_ID",
    "ReportConfig",
    "load_json",
    "save_csv",
    "save_json",
    "save_text",
    "setup_logger",
]
