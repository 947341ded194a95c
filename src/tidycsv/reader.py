"""Row reader: drives the field scanner across an input stream."""

from __future__ import annotations

import io
import logging
from itertools import chain
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple, Union

from .detection import detect_stream_separator
from .models import CsvConfig, DetectionConfig
from .scanner import FieldScanner, iter_chars

logger = logging.getLogger(__name__)

Source = Union[TextIO, str]


def _as_stream(source: Source) -> TextIO:
    if isinstance(source, str):
        return io.StringIO(source)
    return source


def _is_empty(row: List[str]) -> bool:
    return all(not field for field in row)


def _rows(chars, config: CsvConfig) -> Iterator[List[str]]:
    scanner = FieldScanner(
        chars,
        separator=config.separator,
        skip_comments=config.skip_comments,
    )
    for row in scanner:
        if not row:
            continue
        if config.skip_empty_rows and _is_empty(row):
            continue
        yield row


def iter_rows(
    source: Source, config: Optional[CsvConfig] = None
) -> Iterator[List[str]]:
    """Yield rows of fields from a text stream or string.

    Blank lines produce no row. I/O errors from the stream propagate
    unchanged; an unterminated quoted field raises MalformedQuoteError.
    """
    config = config or CsvConfig()
    yield from _rows(iter_chars(_as_stream(source)), config)


def read_all(
    source: Source, config: Optional[CsvConfig] = None
) -> List[List[str]]:
    '''Read every row from ``source`` using the configured separator.

    Example:
        >>> read_all('"a","""b""","c"')
        [['a', '"b"', 'c']]
    '''
    rows = list(iter_rows(source, config))
    logger.debug("Read %d rows", len(rows))
    return rows


def read_with_detection(
    source: Source,
    config: Optional[CsvConfig] = None,
    detection: Optional[DetectionConfig] = None,
) -> Tuple[List[List[str]], str]:
    """Detect the separator on a prefix of ``source``, then read every row.

    The separator in ``config`` is ignored. The sampled prefix is chained
    back in front of the remaining stream, so non-seekable streams work.

    Returns:
        Tuple of (rows, detected separator)
    """
    config = config or CsvConfig()
    stream = _as_stream(source)

    separator, prefix = detect_stream_separator(
        stream, detection, skip_comments=config.skip_comments
    )
    config = config.model_copy(update={"separator": separator})

    chars = chain(prefix, iter_chars(stream))
    rows = list(_rows(chars, config))
    logger.debug("Read %d rows with separator %r", len(rows), separator)
    return rows, separator


def read_csv(
    source: Source,
    config: Optional[CsvConfig] = None,
    detection: Optional[DetectionConfig] = None,
) -> List[List[str]]:
    """Read every row, auto-detecting the separator first."""
    rows, _ = read_with_detection(source, config, detection)
    return rows


def read_file(
    path: str | Path,
    config: Optional[CsvConfig] = None,
    encoding: str = "utf-8",
    detect: bool = False,
    detection: Optional[DetectionConfig] = None,
) -> List[List[str]]:
    """Read a CSV file; the file is closed on every exit path."""
    with open(path, encoding=encoding, newline="") as f:
        if detect:
            return read_csv(f, config, detection)
        return read_all(f, config)


__all__ = ["iter_rows", "read_all", "read_csv", "read_file", "read_with_detection"]
