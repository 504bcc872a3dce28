"""Default on-disk locations for the interval log and activity ledger."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "SplitTracker"

LOG_FILENAME = "intervals.log"
LEDGER_FILENAME = "activities.csv"


def get_data_dir() -> Path:
    """Per-user data directory, created on first use."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False, roaming=True, ensure_exists=True)
    return dirs.user_data_path


def get_log_path() -> Path:
    return get_data_dir() / LOG_FILENAME


def get_ledger_path() -> Path:
    return get_data_dir() / LEDGER_FILENAME
