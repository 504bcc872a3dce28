"""Command-line interface for the split tracker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from .aggregation import aggregate
from .clock import current_millis
from .config import TrackerSettings
from .ledger import ActivityLedger, LedgerEntry, LedgerFormatError
from .log_format import LogFormatError
from .reporting import NO_TIME_MESSAGE, build_ledger_table, describe_duration, render_report
from .storage import IntervalLog

logger = logging.getLogger(__name__)

app = typer.Typer(help="Manual split-based time tracker.")
split_app = typer.Typer(help="Split the current time counter.", no_args_is_help=True)
activity_app = typer.Typer(
    help="Track time against a free-text activity description.", no_args_is_help=True
)
app.add_typer(split_app, name="split")
app.add_typer(activity_app, name="activity")


@app.callback(no_args_is_help=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    log_path: Optional[Path] = typer.Option(
        None,
        "--log",
        envvar="SPLIT_TRACKER_LOG",
        path_type=Path,
        help="Location of the interval log.",
    ),
    ledger_path: Optional[Path] = typer.Option(
        None,
        "--ledger",
        envvar="SPLIT_TRACKER_LEDGER",
        path_type=Path,
        help="Location of the activity ledger CSV.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    ctx.obj = TrackerSettings.resolve(log_path=log_path, ledger_path=ledger_path)


@app.command()
def track(ctx: typer.Context) -> None:
    """Begin the time tracker; press Enter to stop it."""
    start, end = _time_until_enter()
    IntervalLog(ctx.obj.log_path).append_interval(start, end)
    typer.echo(f"You have successfully tracked {describe_duration(end - start)}.")


@split_app.command("day")
def split_day(ctx: typer.Context) -> None:
    """Split on the day."""
    IntervalLog(ctx.obj.log_path).append_day_marker()
    typer.echo("Started a new day.")


@split_app.command("week")
def split_week(ctx: typer.Context) -> None:
    """Split on the week."""
    IntervalLog(ctx.obj.log_path).append_week_marker()
    typer.echo("Started a new week.")


@app.command("show")
def show(ctx: typer.Context) -> None:
    """Show the time tracked."""
    interval_log = IntervalLog(ctx.obj.log_path)
    try:
        text = interval_log.read_text()
        result = None if text is None else aggregate(text)
    except LogFormatError as exc:
        logger.error("Failed to aggregate %s: %s", interval_log.path, exc)
        _fail(f"Your time log at {interval_log.path} is corrupted: {exc}")
    typer.echo(render_report(result))


@app.command("clear")
def clear(ctx: typer.Context) -> None:
    """Clear tracker information."""
    IntervalLog(ctx.obj.log_path).clear()
    typer.echo("Your tracking progress has been cleared.")


@app.command("export")
def export(
    ctx: typer.Context,
    file: Path = typer.Argument(..., path_type=Path, help="File to export the time log to."),
) -> None:
    """Export the time log to a new file."""
    interval_log = IntervalLog(ctx.obj.log_path)
    if not interval_log.exists():
        typer.echo(NO_TIME_MESSAGE)
        return
    try:
        interval_log.export_to(file)
    except IsADirectoryError:
        _fail("The target file is a directory, cannot write to it.")
    except FileExistsError:
        _fail(f"The target file {file} already exists, refusing to overwrite it.")
    typer.echo(f"Exported your time log to {file}.")


app.command("s", hidden=True)(show)
app.command("c", hidden=True)(clear)
app.command("e", hidden=True)(export)


@activity_app.command("track")
def activity_track(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="What the tracked time was spent on."),
) -> None:
    """Track time against a description; press Enter to stop."""
    ledger_path = ctx.obj.ledger_path
    ledger = _load_ledger(ledger_path)
    start, end = _time_until_enter()
    ledger.insert_entry(
        LedgerEntry(entry_date=start, time_spent=end - start, description=description)
    )
    ledger.write_to(ledger_path)
    typer.echo(
        f"You have successfully tracked {describe_duration(end - start)} on {description}."
    )


@activity_app.command("show")
def activity_show(ctx: typer.Context) -> None:
    """Show time spent per activity description."""
    ledger = _load_ledger(ctx.obj.ledger_path)
    if not len(ledger):
        typer.echo("You have no activities currently logged.")
        return
    Console().print(build_ledger_table(ledger))


def _time_until_enter() -> tuple[int, int]:
    start = current_millis()
    typer.echo("Your tracker has started, press Enter to stop the tracker: ", nl=False)
    sys.stdin.readline()
    end = current_millis()
    if end < start:
        logger.warning("Clock moved backwards by %d ms; recording zero time.", start - end)
        end = start
    return start, end


def _load_ledger(path: Path) -> ActivityLedger:
    try:
        return ActivityLedger.read_from(path)
    except LedgerFormatError as exc:
        logger.error("%s", exc)
        _fail(f"Your activity ledger at {path} is corrupted.")


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)
