"""CSV ledger of tracked time keyed by a free-text activity description."""

from __future__ import annotations

import csv
import logging
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class LedgerFormatError(ValueError):
    """Raised when a ledger CSV row cannot be parsed."""


class LedgerEntry(BaseModel):
    entry_date: int = Field(alias="Entry Date MS", ge=0)
    time_spent: int = Field(alias="Time Spent MS", ge=0)
    description: str = Field(alias="Description")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


FIELDNAMES = [field.alias for field in LedgerEntry.model_fields.values()]


class ActivityLedger:
    """Ordered collection of ledger entries backed by a CSV file."""

    def __init__(self, entries: Optional[Iterable[LedgerEntry]] = None) -> None:
        self.entries: list[LedgerEntry] = list(entries or [])

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def read_from(cls, path: Path) -> "ActivityLedger":
        path = Path(path)
        if not path.exists():
            return cls()
        entries: list[LedgerEntry] = []
        with path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                if None in row:
                    raise LedgerFormatError(
                        f"Too many columns in ledger row {reader.line_num} of {path}"
                    )
                try:
                    entries.append(LedgerEntry.model_validate(row))
                except ValidationError as exc:
                    raise LedgerFormatError(
                        f"Invalid ledger row {reader.line_num} in {path}: {exc}"
                    ) from exc
        logger.debug("Loaded %d ledger entries from %s", len(entries), path)
        return cls(entries)

    def write_to(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
            writer.writeheader()
            for entry in self.entries:
                writer.writerow(entry.model_dump(by_alias=True))
        logger.debug("Wrote %d ledger entries to %s", len(self.entries), path)

    def insert_entry(self, entry: LedgerEntry) -> None:
        self.entries.append(entry)

    @property
    def total_ms(self) -> int:
        return sum(entry.time_spent for entry in self.entries)

    def totals_by_description(self) -> list[tuple[str, int]]:
        totals: defaultdict[str, int] = defaultdict(int)
        for entry in self.entries:
            totals[entry.description] += entry.time_spent
        return sorted(totals.items(), key=lambda item: (-item[1], item[0]))
