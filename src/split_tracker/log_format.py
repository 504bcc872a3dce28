"""Text encoding of the interval log.

The log is an append-only stream of ``start|end,`` records interleaved with
single-character markers: ``?`` closes the current day and a newline closes
the current week.
"""

from __future__ import annotations

import enum
from typing import Iterator, Union

from .models import MAX_TIMESTAMP, IntervalRecord

_DIGITS = frozenset("0123456789")
_SEPARATOR = "|"
_TERMINATOR = ","


class Marker(str, enum.Enum):
    DAY = "?"
    WEEK = "\n"


Token = Union[IntervalRecord, Marker]


class LogFormatError(ValueError):
    """Raised when the interval log contains a malformed record."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Malformed interval log at offset {position}: {reason}")
        self.position = position
        self.reason = reason


class _State(enum.Enum):
    EXPECT_RECORD_OR_MARKER = enum.auto()
    IN_START = enum.auto()
    IN_END = enum.auto()


def encode_interval(start: int, end: int) -> str:
    """Render one interval record, validating the pair first."""
    if start < 0 or end < 0:
        raise ValueError(f"Timestamps must be non-negative, got {start}..{end}")
    if end > MAX_TIMESTAMP:
        raise ValueError(f"Timestamp {end} exceeds the supported range")
    if end < start:
        raise ValueError(f"Interval ends before it starts: {start}..{end}")
    return f"{start}{_SEPARATOR}{end}{_TERMINATOR}"


def tokenize(text: str) -> Iterator[Token]:
    """Yield markers and interval records in log order.

    Raises :class:`LogFormatError` on the first malformed record; nothing after
    it is produced.
    """
    state = _State.EXPECT_RECORD_OR_MARKER
    start_digits: list[str] = []
    end_digits: list[str] = []
    record_offset = 0

    for offset, char in enumerate(text):
        if state is _State.EXPECT_RECORD_OR_MARKER:
            if char == Marker.DAY.value:
                yield Marker.DAY
            elif char == Marker.WEEK.value:
                yield Marker.WEEK
            elif char in _DIGITS:
                state = _State.IN_START
                record_offset = offset
                start_digits = [char]
                end_digits = []
            else:
                raise LogFormatError(offset, f"unexpected character {char!r}")
        elif state is _State.IN_START:
            if char in _DIGITS:
                start_digits.append(char)
            elif char == _SEPARATOR:
                state = _State.IN_END
            else:
                raise LogFormatError(offset, f"expected digit or '|', found {char!r}")
        else:
            if char in _DIGITS:
                end_digits.append(char)
            elif char == _TERMINATOR:
                if not end_digits:
                    raise LogFormatError(offset, "record has no end timestamp")
                yield _build_record(record_offset, start_digits, end_digits)
                state = _State.EXPECT_RECORD_OR_MARKER
            else:
                raise LogFormatError(offset, f"expected digit or ',', found {char!r}")

    if state is not _State.EXPECT_RECORD_OR_MARKER:
        raise LogFormatError(record_offset, "unterminated record at end of log")


def _build_record(offset: int, start_digits: list[str], end_digits: list[str]) -> IntervalRecord:
    start = int("".join(start_digits))
    end = int("".join(end_digits))
    if end > MAX_TIMESTAMP:
        raise LogFormatError(offset, "timestamp exceeds the 128-bit range")
    if end < start:
        raise LogFormatError(offset, f"record ends before it starts ({start}|{end})")
    return IntervalRecord(start=start, end=end)
