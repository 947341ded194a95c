"""Configuration models for reading, writing and separator detection."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULT_SEPARATOR = ","
DEFAULT_LINE_TERMINATOR = "\n"
DEFAULT_CANDIDATES = (",", ";", ":", "\t")
DEFAULT_SAMPLE_SIZE = 4096

# Characters that can never delimit fields.
_RESERVED = {'"', "\r", "\n"}


def _check_separator(value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"Separator must be a single character, got {value!r}")
    if value in _RESERVED:
        raise ValueError(f"{value!r} cannot be used as a separator")
    return value


class CsvConfig(BaseModel):
    """Options shared by the reader and the writers."""

    separator: str = DEFAULT_SEPARATOR
    line_terminator: str = DEFAULT_LINE_TERMINATOR
    skip_comments: bool = False  # Drop lines starting with '#'
    skip_empty_rows: bool = False  # Drop rows without any non-empty field

    @field_validator("separator")
    @classmethod
    def separator_is_char(cls, v: str) -> str:
        return _check_separator(v)

    @field_validator("line_terminator")
    @classmethod
    def terminator_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Line terminator must not be empty")
        return v


class DetectionConfig(BaseModel):
    """Options for separator auto-detection.

    Candidates are listed in priority order: when two candidates score the
    same, the first one wins. Rows containing one of ``expected_values``
    weigh heavily in favor of the candidate that produced them.
    """

    candidates: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CANDIDATES)
    )
    sample_size: int = Field(default=DEFAULT_SAMPLE_SIZE, gt=0)
    expected_values: List[str] = Field(default_factory=list)

    @field_validator("candidates")
    @classmethod
    def candidates_valid(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one candidate separator is required")
        for candidate in v:
            _check_separator(candidate)
        if len(v) != len(set(v)):
            raise ValueError("Duplicate candidate separators are not allowed")
        return v


__all__ = [
    "DEFAULT_CANDIDATES",
    "DEFAULT_LINE_TERMINATOR",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_SEPARATOR",
    "CsvConfig",
    "DetectionConfig",
]
