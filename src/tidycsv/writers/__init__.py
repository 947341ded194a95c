"""Writers for plain and tidy CSV output."""

from .csv_writer import format_csv, format_row, format_value, needs_quotes, write_csv
from .tidy_writer import column_widths, format_tidy_csv, is_comment, write_tidy_csv

__all__ = [
    "column_widths",
    "format_csv",
    "format_row",
    "format_tidy_csv",
    "format_value",
    "is_comment",
    "needs_quotes",
    "write_csv",
    "write_tidy_csv",
]
