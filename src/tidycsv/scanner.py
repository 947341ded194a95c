"""Quote-aware field scanner.

Turns a stream of characters into the fields of one record at a time.
Unlike RFC 4180, unquoted leading and trailing whitespace is removed, and
text surrounding a quoted span within the same field is discarded:

    ignore-"a"-ignore  ->  a
    x "b"              ->  b

Only '\\n' ends a record. A '\\r' outside quotes is plain whitespace, so
CRLF input is handled by trimming.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, TextIO

from .models.errors import MalformedQuoteError

QUOTE = '"'
COMMENT = "#"

CHUNK_SIZE = 8192


class FieldState(Enum):
    """Where the scanner is relative to a quoted span."""

    UNQUOTED = "unquoted"
    QUOTED = "quoted"
    # A quote was seen inside a quoted span: escape or terminator.
    QUOTE_IN_QUOTED = "quote_in_quoted"
    # The quoted span ended; the rest of the field is ignored.
    CLOSED = "closed"


def iter_chars(stream: TextIO, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """Yield single characters from a text stream, reading in chunks."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield from chunk


class FieldScanner:
    """Scan records from a character iterator.

    Args:
        chars: Source characters (any iterable of single-char strings)
        separator: Field separator
        strict: Raise MalformedQuoteError for a quote left open at end of
            input; when False the open span is closed silently
        skip_comments: Discard lines whose first non-blank char is '#'
    """

    def __init__(
        self,
        chars,
        separator: str = ",",
        strict: bool = True,
        skip_comments: bool = False,
    ):
        self._chars = iter(chars)
        self.separator = separator
        self.strict = strict
        self.skip_comments = skip_comments
        self.line = 1
        self._exhausted = False

    def __iter__(self) -> Iterator[List[str]]:
        while True:
            row = self.scan_row()
            if row is None:
                return
            yield row

    def _skip_line(self) -> None:
        for ch in self._chars:
            if ch == "\n":
                self.line += 1
                return
        self._exhausted = True

    def scan_row(self) -> Optional[List[str]]:
        """Scan the next line.

        Returns:
            The fields of the line, an empty list for a blank line, or None
            when the input is exhausted before any record started.
        """
        if self._exhausted:
            return None

        separator = self.separator
        row: List[str] = []
        value: List[str] = []
        trailing = 0  # unquoted whitespace at the end of value
        state = FieldState.UNQUOTED
        row_started = False
        quote_line = self.line

        for ch in self._chars:
            if state is FieldState.QUOTED:
                if ch == QUOTE:
                    state = FieldState.QUOTE_IN_QUOTED
                else:
                    if ch == "\n":
                        self.line += 1
                    value.append(ch)
                continue

            if state is FieldState.QUOTE_IN_QUOTED:
                if ch == QUOTE:
                    value.append(QUOTE)
                    state = FieldState.QUOTED
                    continue
                state = FieldState.CLOSED

            if ch == "\n":
                self.line += 1
                break

            if ch == separator:
                row.append("".join(value[: len(value) - trailing]))
                value.clear()
                trailing = 0
                state = FieldState.UNQUOTED
                row_started = True
            elif ch == QUOTE:
                # Anything before the quote is not part of the value.
                value.clear()
                trailing = 0
                state = FieldState.QUOTED
                quote_line = self.line
                row_started = True
            elif ch.isspace():
                if state is FieldState.UNQUOTED and value:
                    value.append(ch)
                    trailing += 1
            elif state is FieldState.CLOSED:
                continue
            else:
                if ch == COMMENT and self.skip_comments and not row_started:
                    self._skip_line()
                    return [] if not self._exhausted else None
                value.append(ch)
                trailing = 0
                row_started = True
        else:
            self._exhausted = True
            if state is FieldState.QUOTED and self.strict:
                raise MalformedQuoteError(line=quote_line)

        if not row_started:
            return None if self._exhausted else []

        row.append("".join(value[: len(value) - trailing]))
        return row


def scan_text(
    text: str, separator: str = ",", strict: bool = True
) -> List[List[str]]:
    """Scan every non-blank line of ``text`` into rows."""
    return [row for row in FieldScanner(text, separator, strict) if row]


__all__ = ["FieldScanner", "FieldState", "iter_chars", "scan_text"]
