"""Tidy CSV writer: pad fields so columns line up.

The output is not RFC 4180 compliant because of the added whitespace, but
the reader strips unquoted padding, so it reads back to the same values.
Rows with a single field are treated as comments: they are written as-is
and do not affect column widths.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, TextIO

from ..models import CsvConfig
from .csv_writer import QUOTE, Output, format_value


def is_comment(row: Sequence[Any]) -> bool:
    """Check whether ``row`` is a single-field comment row."""
    return len(row) == 1


def _render(
    rows: Iterable[Iterable[Any]], separator: str
) -> List[List[str]]:
    return [[format_value(value, separator) for value in row] for row in rows]


def _widths(rendered: List[List[str]]) -> List[int]:
    widths: List[int] = []
    for row in rendered:
        if is_comment(row):
            continue
        for index, text in enumerate(row):
            if index < len(widths):
                widths[index] = max(widths[index], len(text))
            else:
                widths.append(len(text))
    return widths


def column_widths(
    rows: Iterable[Iterable[Any]], separator: str = ","
) -> List[int]:
    """Maximum rendered width per column over all multi-field rows."""
    return _widths(_render(rows, separator))


def _write_tidy(
    dest: TextIO, rows: Iterable[Iterable[Any]], config: CsvConfig
) -> None:
    separator = config.separator
    rendered = _render(rows, separator)
    widths = _widths(rendered)
    joiner = separator + " "

    for row_index, row in enumerate(rendered):
        if row_index:
            dest.write(config.line_terminator)
        if is_comment(row):
            dest.write(row[0] or QUOTE * 2)
            continue
        last = len(row) - 1
        dest.write(
            joiner.join(
                text if index == last else text.ljust(widths[index])
                for index, text in enumerate(row)
            )
        )


def format_tidy_csv(
    rows: Iterable[Iterable[Any]], config: Optional[CsvConfig] = None
) -> str:
    """Render rows as tidy CSV text.

    Example:
        >>> print(format_tidy_csv([["1", "1234", "12"], ["123", "12345"]]))
        1  , 1234 , 12
        123, 12345
    """
    buffer = io.StringIO()
    _write_tidy(buffer, rows, config or CsvConfig())
    return buffer.getvalue()


def write_tidy_csv(
    rows: Iterable[Iterable[Any]],
    output: Output = None,
    config: Optional[CsvConfig] = None,
    encoding: str = "utf-8",
) -> None:
    """Write rows as tidy CSV to a stream, a file path, or stdout."""
    config = config or CsvConfig()

    if isinstance(output, (str, Path)):
        with open(output, "w", encoding=encoding, newline="") as f:
            _write_tidy(f, rows, config)
        return

    _write_tidy(output if output is not None else sys.stdout, rows, config)


__all__ = ["column_widths", "format_tidy_csv", "is_comment", "write_tidy_csv"]
