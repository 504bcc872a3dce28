"""Domain models for tracked intervals and their aggregated totals."""

from __future__ import annotations

from dataclasses import dataclass

# Timestamps are unsigned 128-bit millisecond values.
MAX_TIMESTAMP = 2**128 - 1


@dataclass(frozen=True, slots=True)
class IntervalRecord:
    """A single start/stop pair, in milliseconds since the epoch."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Grand total plus the week/day grouping replayed from the log."""

    total: int
    weeks: tuple[tuple[int, ...], ...]

    @property
    def week_totals(self) -> list[int]:
        return [sum(days) for days in self.weeks]
