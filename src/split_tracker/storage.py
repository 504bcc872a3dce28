"""File access for the append-only interval log."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from .log_format import LogFormatError, Marker, encode_interval

logger = logging.getLogger(__name__)


class IntervalLog:
    """Appends records and markers to the log file and reads it back whole."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def append_interval(self, start: int, end: int) -> None:
        self._append(encode_interval(start, end))
        logger.debug("Appended interval %d..%d to %s", start, end, self.path)

    def append_day_marker(self) -> None:
        self._append(Marker.DAY.value)
        logger.debug("Appended day marker to %s", self.path)

    def append_week_marker(self) -> None:
        self._append(Marker.WEEK.value)
        logger.debug("Appended week marker to %s", self.path)

    def read_text(self) -> Optional[str]:
        """Return the full log, or ``None`` when nothing was ever recorded."""
        if not self.path.exists():
            return None
        raw = self.path.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LogFormatError(exc.start, f"undecodable byte {raw[exc.start]:#04x}") from exc

    def clear(self) -> bool:
        if not self.path.exists():
            return False
        self.path.unlink()
        logger.info("Removed interval log %s", self.path)
        return True

    def export_to(self, target: Path) -> None:
        target = Path(target)
        if target.is_dir():
            raise IsADirectoryError(f"Export target {target} is a directory")
        if not self.path.exists():
            raise FileNotFoundError(f"No interval log at {self.path}")
        with self.path.open("rb") as source, target.open("xb") as destination:
            shutil.copyfileobj(source, destination)
        logger.info("Exported interval log %s to %s", self.path, target)

    def _append(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="ascii", newline="") as handle:
            handle.write(text)
