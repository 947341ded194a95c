"""CLI helper utilities shared across commands."""

import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO, Tuple

import click

from ..context import Settings
from ..models import CsvConfig
from ..reader import read_all, read_with_detection

STDIO = "-"


def fail(message: str) -> None:
    """Print an error message and exit with status 1.

    Raises:
        SystemExit: Always
    """
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@contextmanager
def open_source(source: Optional[str], encoding: str) -> Iterator[TextIO]:
    """Open SOURCE for reading, or use stdin for None and '-'."""
    if not source or source == STDIO:
        yield sys.stdin
        return
    with open(source, encoding=encoding, newline="") as f:
        yield f


@contextmanager
def open_target(target: Optional[str], encoding: str) -> Iterator[TextIO]:
    """Open TARGET for writing, or use stdout for None and '-'."""
    if not target or target == STDIO:
        yield sys.stdout
        return
    with open(target, "w", encoding=encoding, newline="") as f:
        yield f


def build_config(
    settings: Settings,
    separator: Optional[str] = None,
    skip_comments: bool = False,
    skip_empty_rows: bool = False,
) -> CsvConfig:
    """Build a CsvConfig from resolved settings and per-command options."""
    return CsvConfig(
        separator=separator or settings.write_separator,
        line_terminator=settings.line_terminator,
        skip_comments=skip_comments,
        skip_empty_rows=skip_empty_rows,
    )


def read_rows(
    settings: Settings, stream: TextIO, config: CsvConfig
) -> Tuple[List[List[str]], str]:
    """Read all rows, detecting the separator when settings ask for it.

    Returns:
        Tuple of (rows, separator used)
    """
    if settings.auto_detect:
        return read_with_detection(stream, config)
    return read_all(stream, config), config.separator
