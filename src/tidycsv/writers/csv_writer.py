"""CSV writer: serialize rows with minimal but correct quoting."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO

from ..models import CsvConfig

QUOTE = '"'

Output = TextIO | str | Path | None


def needs_quotes(text: str, separator: str) -> bool:
    """Check whether ``text`` must be quoted to survive a round trip.

    RFC 4180 requires quotes for a separator, quote, CR or LF. Leading or
    trailing whitespace is quoted as well, because the reader strips it
    from unquoted fields.
    """
    if not text:
        return False
    if text[0].isspace() or text[-1].isspace():
        return True
    return any(ch in text for ch in (separator, QUOTE, "\r", "\n"))


def format_value(value: Any, separator: str = ",") -> str:
    """Render one field, quoting it when required. None renders empty."""
    if value is None:
        return ""
    text = str(value)
    if needs_quotes(text, separator):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def format_row(row: Iterable[Any], separator: str = ",") -> str:
    """Render one row without a line terminator.

    A row holding one empty field is written as ``""``; an empty line would
    read back as no row at all.
    """
    fields = [format_value(value, separator) for value in row]
    if fields == [""]:
        return QUOTE * 2
    return separator.join(fields)


def _write_rows(
    dest: TextIO, rows: Iterable[Iterable[Any]], config: CsvConfig
) -> None:
    first = True
    for row in rows:
        if not first:
            dest.write(config.line_terminator)
        dest.write(format_row(row, config.separator))
        first = False


def format_csv(
    rows: Iterable[Iterable[Any]], config: Optional[CsvConfig] = None
) -> str:
    '''Render rows as CSV text.

    Rows are joined by the line terminator; nothing follows the last row.

    Example:
        >>> format_csv([["a", '"b"', "c"]])
        'a,"""b""",c'
    '''
    buffer = io.StringIO()
    _write_rows(buffer, rows, config or CsvConfig())
    return buffer.getvalue()


def write_csv(
    rows: Iterable[Iterable[Any]],
    output: Output = None,
    config: Optional[CsvConfig] = None,
    encoding: str = "utf-8",
) -> None:
    """Write rows as CSV.

    Args:
        rows: Rows of values; values are converted with str()
        output: Text stream, file path, or None for stdout
        config: Separator and line terminator (defaults if None)
        encoding: Encoding used when ``output`` is a path
    """
    config = config or CsvConfig()

    if isinstance(output, (str, Path)):
        with open(output, "w", encoding=encoding, newline="") as f:
            _write_rows(f, rows, config)
        return

    _write_rows(output if output is not None else sys.stdout, rows, config)


__all__ = ["format_csv", "format_row", "format_value", "needs_quotes", "write_csv"]
