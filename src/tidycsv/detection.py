"""Separator auto-detection.

Each candidate separator is used to tokenize a sample of the input, and the
resulting rows are scored by how uniform their field counts are. This is a
heuristic: a separator that never repeats across rows, or a decimal or
thousands separator that collides with a candidate, can be misdetected.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

from .models import DEFAULT_CANDIDATES, DetectionConfig
from .scanner import FieldScanner

logger = logging.getLogger(__name__)

# Weight of a row that contains one of the expected cell values.
EXPECTED_VALUE_SCORE = 1000


def trim_sample(text: str, size: int) -> str:
    """Cut ``text`` to ``size`` characters, dropping a trailing partial line.

    Text that fits is returned unchanged. When the cut leaves no line break
    at all the partial line is kept, since it is the only evidence there is.
    """
    if len(text) <= size:
        return text
    cut = text[:size]
    end = max(cut.rfind("\n"), cut.rfind("\r"))
    if end < 0:
        return cut
    return cut[: end + 1]


def score_rows(
    rows: Sequence[Sequence[str]], expected_values: Iterable[str] = ()
) -> int:
    """Score how consistently ``rows`` share a field count.

    Scoring:
    - Each row with the same field count as the previous row adds
      ``count - 1`` (the first row matches itself)
    - If every row has the same count, ``(count - 1) * len(rows)`` more
    - Each row containing an expected value adds EXPECTED_VALUE_SCORE

    Single-field rows contribute nothing, so a candidate that never splits
    anything scores zero.
    """
    if not rows:
        return 0

    expected = set(expected_values)
    score = 0
    count = len(rows[0])
    uniform = True

    for row in rows:
        if len(row) == count:
            score += count - 1
        else:
            count = len(row)
            uniform = False

        if expected and expected.intersection(row):
            score += EXPECTED_VALUE_SCORE

    if uniform:
        score += (count - 1) * len(rows)

    return score


def tokenize_sample(
    sample: str, separator: str, skip_comments: bool = False
) -> List[List[str]]:
    """Split ``sample`` into rows, tolerating a quote cut off by sampling."""
    scanner = FieldScanner(
        sample, separator, strict=False, skip_comments=skip_comments
    )
    return [row for row in scanner if row]


def detect_separator(
    sample: str,
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    expected_values: Iterable[str] = (),
    skip_comments: bool = False,
) -> str:
    """Return the candidate separator that best explains ``sample``.

    Ties go to the candidate listed first. When no candidate scores above
    zero the first candidate is returned; detection never fails.
    """
    if not candidates:
        raise ValueError("At least one candidate separator is required")

    expected_values = list(expected_values)
    best = candidates[0]
    best_score = 0

    for candidate in candidates:
        rows = tokenize_sample(sample, candidate, skip_comments)
        score = score_rows(rows, expected_values)
        logger.debug("Separator %r scored %d over %d rows", candidate, score, len(rows))
        if score > best_score:
            best = candidate
            best_score = score

    if best_score == 0:
        logger.debug(
            "No separator stands out, falling back to %r", candidates[0]
        )

    return best


def detect_stream_separator(
    stream: TextIO,
    detection: Optional[DetectionConfig] = None,
    skip_comments: bool = False,
) -> Tuple[str, str]:
    """Detect the separator from the start of ``stream``.

    Returns:
        Tuple of (separator, prefix). The prefix is everything read from the
        stream and must be re-chained in front of the rest by the caller.
    """
    detection = detection or DetectionConfig()
    prefix = stream.read(detection.sample_size + 1)
    sample = trim_sample(prefix, detection.sample_size)
    separator = detect_separator(
        sample,
        detection.candidates,
        detection.expected_values,
        skip_comments,
    )
    return separator, prefix


__all__ = [
    "EXPECTED_VALUE_SCORE",
    "detect_separator",
    "detect_stream_separator",
    "score_rows",
    "tokenize_sample",
    "trim_sample",
]
