from __future__ import annotations

import pytest

from split_tracker.storage import IntervalLog


@pytest.fixture
def interval_log(tmp_path):
    return IntervalLog(tmp_path / "intervals.log")
