"""tidycsv: quote-aware CSV reading, writing, tidy formatting and separator detection."""

from .detection import detect_separator, score_rows
from .models import (
    CsvConfig,
    CsvError,
    DetectionConfig,
    DuplicateColumnError,
    MalformedQuoteError,
)
from .reader import iter_rows, read_all, read_csv, read_file, read_with_detection
from .records import mapped_by_header
from .scanner import FieldScanner, FieldState
from .writers import format_csv, format_tidy_csv, write_csv, write_tidy_csv

__all__ = [
    "__version__",
    "CsvConfig",
    "CsvError",
    "DetectionConfig",
    "DuplicateColumnError",
    "FieldScanner",
    "FieldState",
    "MalformedQuoteError",
    "detect_separator",
    "format_csv",
    "format_tidy_csv",
    "iter_rows",
    "mapped_by_header",
    "read_all",
    "read_csv",
    "read_file",
    "read_with_detection",
    "score_rows",
    "write_csv",
    "write_tidy_csv",
]

__version__ = "0.1.0"
