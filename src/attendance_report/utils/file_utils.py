"""
File operation utilities.

Reading the exported JSON documents and writing the report artifacts
(JSON, CSV, plain text).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from ..models.result import Result


logger = logging.getLogger(__name__)


def load_json(filepath: Path) -> Result[Any]:
    """
    Load a JSON document from a UTF-8 text file.

    The exported course files carry a ``.txt`` suffix but contain JSON.

    Args:
        filepath: Path to the file

    Returns:
        Result with the parsed document, or a failure describing why the
        file could not be read or parsed

    Examples:
        >>> result = load_json(Path("source_data/attendance_journal.txt"))
        >>> if result.is_success:
        ...     print(len(result.value["tbl"]))
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        logger.debug(f"Loaded JSON file: {filepath}")
        return Result.success(data)

    except FileNotFoundError as e:
        return Result.failure(f"File not found: {filepath}", e)

    except json.JSONDecodeError as e:
        return Result.failure(f"Invalid JSON in file {filepath}: {e}", e)

    except (OSError, UnicodeDecodeError) as e:
        return Result.failure(f"Failed to read file {filepath}: {e}", e)


def save_json(data: Dict[str, Any], filepath: Path) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary data to save
        filepath: Path to save the JSON file

    Returns:
        True if save successful, False otherwise
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.debug(f"Saved JSON file: {filepath}")
        return True

    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save JSON file {filepath}: {e}", exc_info=True)
        return False


def save_csv(df: pd.DataFrame, filepath: Path) -> bool:
    """
    Save DataFrame to CSV file.

    Args:
        df: Pandas DataFrame to save
        filepath: Path to save the CSV file

    Returns:
        True if save successful, False otherwise

    Examples:
        >>> df = pd.DataFrame({"name": ["Ann"], "ratio": ["100.00"]})
        >>> save_csv(df, Path("output/attendance_summary.csv"))
        True
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        df.to_csv(filepath, index=False, encoding='utf-8')

        logger.debug(f"Saved CSV file: {filepath}")
        return True

    except OSError as e:
        logger.error(f"Failed to save CSV file {filepath}: {e}", exc_info=True)
        return False


def save_text(content: str, filepath: Path) -> bool:
    """
    Save text content (HTML, CSS, JS) to a UTF-8 file.

    Args:
        content: Text to write
        filepath: Destination path

    Returns:
        True if save successful, False otherwise
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.debug(f"Saved text file: {filepath}")
        return True

    except OSError as e:
        logger.error(f"Failed to save file {filepath}: {e}", exc_info=True)
        return False
