"""CLI context for passing resolved settings between commands."""

import os
from dataclasses import dataclass
from typing import Optional

import click

from .models import DEFAULT_LINE_TERMINATOR, DEFAULT_SEPARATOR

SEPARATOR_ENV = "TIDYCSV_SEPARATOR"
LINE_TERMINATOR_ENV = "TIDYCSV_LINE_TERMINATOR"

# Separator value that asks for auto-detection.
AUTO = "auto"

_ESCAPES = {"\\t": "\t", "tab": "\t", "\\n": "\n", "\\r\\n": "\r\n", "\\r": "\r"}


def parse_separator(value: str) -> str:
    """Parse a separator from the command line; supports \\t and tab."""
    if value.lower() == AUTO:
        return AUTO
    return _ESCAPES.get(value, value)


def parse_line_terminator(value: str) -> str:
    """Parse a line terminator; supports \\n, \\r\\n and \\r spellings."""
    return _ESCAPES.get(value, value)


def display_separator(separator: str) -> str:
    """Inverse of parse_separator for printing."""
    return "\\t" if separator == "\t" else separator


@dataclass(frozen=True)
class Settings:
    """Resolved global options."""

    separator: str
    line_terminator: str

    @property
    def auto_detect(self) -> bool:
        return self.separator == AUTO

    @property
    def write_separator(self) -> str:
        """Separator for output; 'auto' writes with the default comma."""
        return DEFAULT_SEPARATOR if self.auto_detect else self.separator


def resolve_settings(
    separator_option: Optional[str] = None,
    line_terminator_option: Optional[str] = None,
) -> Settings:
    """Resolve global options.

    Resolution order:
    1. CLI flag (explicit override)
    2. $TIDYCSV_SEPARATOR / $TIDYCSV_LINE_TERMINATOR
    3. Defaults: 'auto' (detect when reading, comma when writing) and '\\n'

    Reads fresh from the environment each time.
    """
    separator = separator_option or os.environ.get(SEPARATOR_ENV)
    terminator = line_terminator_option or os.environ.get(LINE_TERMINATOR_ENV)

    return Settings(
        separator=parse_separator(separator) if separator else AUTO,
        line_terminator=(
            parse_line_terminator(terminator)
            if terminator
            else DEFAULT_LINE_TERMINATOR
        ),
    )


class TidyContext:
    def __init__(self):
        self.settings = resolve_settings()
        self.verbose = False


pass_context = click.make_pass_decorator(TidyContext, ensure=True)
