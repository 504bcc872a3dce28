"""Render tracked time for console output."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.table import Table

from .ledger import ActivityLedger
from .models import AggregationResult

NO_TIME_MESSAGE = "You have no time currently logged."
ZERO_DURATION_LABEL = "0 Seconds"

_UNITS = (("Hour", 3_600_000, None), ("Minute", 60_000, 60), ("Second", 1000, 60))


def format_duration(ms: int) -> str:
    """Spell out the nonzero hours, minutes and seconds in ``ms``.

    ``format_duration(3661000) == "1 Hour 1 Minute 1 Second"``. Anything under
    one second renders as the empty string.
    """
    if ms < 0:
        raise ValueError(f"Duration must be non-negative, got {ms}")
    parts: list[str] = []
    for unit, size, modulus in _UNITS:
        value = ms // size
        if modulus is not None:
            value %= modulus
        if value == 0:
            continue
        parts.append(f"{value} {unit}s" if value > 1 else f"{value} {unit}")
    return " ".join(parts)


def describe_duration(ms: int) -> str:
    return format_duration(ms) or ZERO_DURATION_LABEL


def render_report(result: Optional[AggregationResult]) -> str:
    if result is None:
        return NO_TIME_MESSAGE

    lines = [f"<====> Total time spent: {describe_duration(result.total)} <====>", ""]
    weeks = zip(result.weeks, result.week_totals)
    for index, (days, week_total) in enumerate(weeks, start=1):
        lines.extend(_render_week(index, days, week_total))
        lines.append("")
    lines.append("<==================================>")
    return "\n".join(lines)


def _render_week(index: int, days: Sequence[int], week_total: int) -> list[str]:
    lines = [f"\t<===> Week {index} Info <===>"]
    for day_index, day in enumerate(days, start=1):
        lines.append(f"\t\tDay {day_index} ==> {describe_duration(day)}")
    lines.append("")
    lines.append(f"\t\tWeek Total ==> {describe_duration(week_total)}")
    return lines


def build_ledger_table(ledger: ActivityLedger) -> Table:
    """Summarize ledger entries per description."""
    table = Table(show_footer=True)
    table.add_column("Description", footer="Total", footer_style="bold")
    table.add_column(
        "Time Spent", footer=describe_duration(ledger.total_ms), footer_style="italic"
    )
    for description, spent in ledger.totals_by_description():
        table.add_row(description, describe_duration(spent))
    return table
