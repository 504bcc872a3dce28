"""Replay the interval log into week and day totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Any, Optional

from .log_format import Marker, Token, tokenize
from .models import AggregationResult

logger = logging.getLogger(__name__)

# Closed days and weeks are kept as (item, rest) chains, newest first.
_Chain = Optional[tuple[Any, Any]]


def _unwind(chain: _Chain) -> tuple:
    items = []
    while chain is not None:
        item, chain = chain
        items.append(item)
    items.reverse()
    return tuple(items)


@dataclass(frozen=True, slots=True)
class _Accumulator:
    total: int = 0
    day: int = 0
    week_days: _Chain = None
    weeks: _Chain = None

    def close_day(self) -> "_Accumulator":
        # A day with no time is never emitted, so repeated markers are no-ops.
        if self.day == 0:
            return self
        return replace(self, day=0, week_days=(self.day, self.week_days))

    def close_week(self) -> "_Accumulator":
        closed = self.close_day()
        return replace(
            closed, week_days=None, weeks=(_unwind(closed.week_days), closed.weeks)
        )

    def add(self, duration: int) -> "_Accumulator":
        return replace(self, total=self.total + duration, day=self.day + duration)

    def finish(self) -> tuple[tuple[int, ...], ...]:
        closed = self.close_day()
        if closed.week_days is not None:
            closed = closed.close_week()
        return _unwind(closed.weeks)


def _step(acc: _Accumulator, token: Token) -> _Accumulator:
    if token is Marker.DAY:
        return acc.close_day()
    if token is Marker.WEEK:
        return acc.close_week()
    return acc.add(token.duration)


def aggregate(text: str) -> Optional[AggregationResult]:
    """Aggregate the full log text.

    Returns ``None`` when no week holds a single day, meaning there is no
    time logged. Raises :class:`~split_tracker.log_format.LogFormatError` if
    any record is malformed.
    """
    acc = reduce(_step, tokenize(text), _Accumulator())
    weeks = acc.finish()
    if not any(weeks):
        logger.debug("No time recorded in %d characters of log.", len(text))
        return None
    logger.debug("Aggregated %d week(s), total %d ms.", len(weeks), acc.total)
    return AggregationResult(total=acc.total, weeks=weeks)
