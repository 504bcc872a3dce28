from __future__ import annotations

import pytest
from typer.testing import CliRunner

from split_tracker import cli
from split_tracker.ledger import ActivityLedger

runner = CliRunner()


@pytest.fixture
def paths(tmp_path, monkeypatch):
    log_path = tmp_path / "intervals.log"
    ledger_path = tmp_path / "activities.csv"
    monkeypatch.setenv("SPLIT_TRACKER_LOG", str(log_path))
    monkeypatch.setenv("SPLIT_TRACKER_LEDGER", str(ledger_path))
    return log_path, ledger_path


@pytest.fixture
def clock(monkeypatch):
    """Feed ``current_millis`` from a list of timestamps."""
    stamps: list[int] = []
    monkeypatch.setattr(cli, "current_millis", lambda: stamps.pop(0))
    return stamps


def test_track_appends_interval(paths, clock):
    log_path, _ = paths
    clock.extend([1000, 62000])

    result = runner.invoke(cli.app, ["track"], input="\n")

    assert result.exit_code == 0, result.output
    assert "You have successfully tracked 1 Minute 1 Second." in result.output
    assert log_path.read_text() == "1000|62000,"


def test_track_under_a_second(paths, clock):
    clock.extend([1000, 1200])

    result = runner.invoke(cli.app, ["track"], input="\n")

    assert "You have successfully tracked 0 Seconds." in result.output


def test_track_with_clock_going_backwards_records_zero(paths, clock):
    log_path, _ = paths
    clock.extend([5000, 4000])

    result = runner.invoke(cli.app, ["track"], input="\n")

    assert result.exit_code == 0, result.output
    assert log_path.read_text() == "5000|5000,"


def test_split_and_show(paths, clock):
    clock.extend([0, 1000, 2000, 5000])
    runner.invoke(cli.app, ["track"], input="\n")
    runner.invoke(cli.app, ["split", "day"])
    runner.invoke(cli.app, ["track"], input="\n")
    runner.invoke(cli.app, ["split", "week"])

    log_path, _ = paths
    assert log_path.read_text() == "0|1000,?2000|5000,\n"

    result = runner.invoke(cli.app, ["show"])
    assert result.exit_code == 0, result.output
    assert "Total time spent: 4 Seconds" in result.output
    assert "Day 1 ==> 1 Second" in result.output
    assert "Day 2 ==> 3 Seconds" in result.output
    assert "Week 2" not in result.output


def test_show_without_log(paths):
    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 0
    assert "You have no time currently logged." in result.output


def test_show_alias(paths):
    log_path, _ = paths
    log_path.write_text("0|7200000,")

    result = runner.invoke(cli.app, ["s"])

    assert "Total time spent: 2 Hours" in result.output


def test_show_corrupted_log_fails(paths):
    log_path, _ = paths
    log_path.write_text("0|1000,12")

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 1
    assert "corrupted" in result.output


def test_clear(paths):
    log_path, _ = paths
    log_path.write_text("0|1000,")

    result = runner.invoke(cli.app, ["clear"])

    assert result.exit_code == 0
    assert "cleared" in result.output
    assert not log_path.exists()
    assert runner.invoke(cli.app, ["c"]).exit_code == 0


def test_export(paths, tmp_path):
    log_path, _ = paths
    log_path.write_text("0|1000,?")
    target = tmp_path / "backup.log"

    result = runner.invoke(cli.app, ["export", str(target)])

    assert result.exit_code == 0, result.output
    assert target.read_text() == "0|1000,?"

    again = runner.invoke(cli.app, ["e", str(target)])
    assert again.exit_code == 1
    assert "already exists" in again.output


def test_export_to_directory(paths, tmp_path):
    log_path, _ = paths
    log_path.write_text("0|1000,")

    result = runner.invoke(cli.app, ["export", str(tmp_path)])

    assert result.exit_code == 1
    assert "is a directory" in result.output


def test_activity_track_and_show(paths, clock):
    _, ledger_path = paths
    clock.extend([0, 60000, 100, 2100])

    first = runner.invoke(cli.app, ["activity", "track", "writing"], input="\n")
    runner.invoke(cli.app, ["activity", "track", "writing"], input="\n")

    assert first.exit_code == 0, first.output
    assert "1 Minute on writing" in first.output
    ledger = ActivityLedger.read_from(ledger_path)
    assert [entry.time_spent for entry in ledger.entries] == [60000, 2000]

    result = runner.invoke(cli.app, ["activity", "show"])
    assert result.exit_code == 0, result.output
    assert "writing" in result.output
    assert "1 Minute 2 Seconds" in result.output


def test_activity_show_empty(paths):
    result = runner.invoke(cli.app, ["activity", "show"])

    assert "no activities" in result.output


def test_activity_show_corrupted_ledger(paths):
    _, ledger_path = paths
    ledger_path.write_text("Entry Date MS,Time Spent MS,Description\nx,1,a\n")

    result = runner.invoke(cli.app, ["activity", "show"])

    assert result.exit_code == 1
    assert "corrupted" in result.output


def test_show_log_with_undecodable_byte_fails(paths):
    log_path, _ = paths
    log_path.write_bytes(b"0|1000,\xff")

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 1
    assert "corrupted" in result.output


def test_show_log_without_time(paths):
    log_path, _ = paths
    log_path.write_text("0|0,\n")

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 0
    assert "You have no time currently logged." in result.output
    assert "Week 1" not in result.output
