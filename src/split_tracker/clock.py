"""Wall-clock source for interval timestamps."""

from __future__ import annotations

import time


def current_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
