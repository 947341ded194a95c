"""Errors raised while reading and mapping CSV data."""

from __future__ import annotations

from dataclasses import dataclass


class CsvError(Exception):
    """Base class for CSV errors."""


@dataclass
class MalformedQuoteError(CsvError):
    """A quoted field was still open at end of input."""

    line: int

    def __str__(self) -> str:
        return f"Unterminated quoted field starting on line {self.line}"


@dataclass
class DuplicateColumnError(CsvError):
    """Header row names the same column twice."""

    column: str

    def __str__(self) -> str:
        return f"Duplicate column: {self.column}"


__all__ = ["CsvError", "DuplicateColumnError", "MalformedQuoteError"]
