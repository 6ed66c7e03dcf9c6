"""
Row-table document traversal.

All exported files share one shape::

    {"tbl": [{"r": [row, row, ...]}, {"r": [...]}, ...]}
"""

from typing import Any, Dict, Iterator

from ..models.rows import RowTableDocument


def is_row_table(document: Any) -> bool:
    """
    Minimal shape check for a row-table document.

    Args:
        document: Parsed JSON value

    Returns:
        True if the document is an object whose ``tbl`` is a list
    """
    return isinstance(document, dict) and isinstance(document.get("tbl"), list)


def iter_rows(document: RowTableDocument) -> Iterator[Dict[str, Any]]:
    """
    Yield the rows of a row-table document in document order.

    Tables without an ``r`` list and rows that are not objects are skipped.

    Args:
        document: Parsed row-table document (see is_row_table)

    Yields:
        Row dictionaries, table by table

    Examples:
        >>> doc = {"tbl": [{"r": [{"id": "M1"}]}, {"r": [{"id": "M2"}]}]}
        >>> [row["id"] for row in iter_rows(doc)]
        ['M1', 'M2']
    """
    for table in document.get("tbl", []):
        if not isinstance(table, dict):
            continue
        rows = table.get("r")
        if not isinstance(rows, list):
            continue
        for row in rows:
            if isinstance(row, dict):
                yield row


def field_text(row: Dict[str, Any], name: str) -> str:
    """
    Read a field as text, mapping missing/null values to "".

    Exports are inconsistent about numeric identifiers, so ids are
    compared as strings everywhere.
    """
    value = row.get(name)
    if value is None:
        return ""
    return str(value)
