"""Pydantic configuration models and error types."""

from .config import (
    DEFAULT_CANDIDATES,
    DEFAULT_LINE_TERMINATOR,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_SEPARATOR,
    CsvConfig,
    DetectionConfig,
)
from .errors import CsvError, DuplicateColumnError, MalformedQuoteError

__all__ = [
    "DEFAULT_CANDIDATES",
    "DEFAULT_LINE_TERMINATOR",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_SEPARATOR",
    "CsvConfig",
    "CsvError",
    "DetectionConfig",
    "DuplicateColumnError",
    "MalformedQuoteError",
]
