"""Configuration for the tracker's storage locations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .paths import get_ledger_path, get_log_path


@dataclass(slots=True)
class TrackerSettings:
    """Where the interval log and the activity ledger live."""

    log_path: Path
    ledger_path: Path

    @classmethod
    def resolve(
        cls,
        log_path: Optional[Path] = None,
        ledger_path: Optional[Path] = None,
    ) -> "TrackerSettings":
        return cls(
            log_path=Path(log_path) if log_path is not None else get_log_path(),
            ledger_path=Path(ledger_path) if ledger_path is not None else get_ledger_path(),
        )
