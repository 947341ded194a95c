"""Map rows to dicts keyed by a header row."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .models import DuplicateColumnError


def mapped_by_header(
    rows: Sequence[Sequence[str]],
    header_row: int = 0,
    first_data_row: int = 1,
) -> List[Dict[str, str]]:
    """Convert data rows to dicts using the header row values as keys.

    Args:
        rows: Rows as returned by the reader
        header_row: Index of the header row (typically 0)
        first_data_row: Index of the first data row (typically 1)

    Returns:
        One dict per data row. Columns with an empty header are skipped;
        rows shorter than the header only map the columns they have.

    Raises:
        DuplicateColumnError: If the header names a column twice
    """
    if not rows:
        return []

    headers = rows[header_row]
    named = [(index, name) for index, name in enumerate(headers) if name]

    seen = set()
    for _, name in named:
        if name in seen:
            raise DuplicateColumnError(column=name)
        seen.add(name)

    records = []
    for row in rows[first_data_row:]:
        records.append(
            {name: row[index] for index, name in named if index < len(row)}
        )
    return records


__all__ = ["mapped_by_header"]
