"""Port for reading partners, goods and documents linked to journals."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ScopedRecord:
    """Record linked to at least one journal of the effective scope."""

    id: str
    name: str
    kind: str


class ScopedRecordsRepositoryPort(Protocol):
    """Port filtering records by an exact journal id match."""

    def fetch_records(
        self,
        kind: str,
        journal_ids: Sequence[str],
    ) -> list[ScopedRecord]:
        """Return records of ``kind`` linked to any of ``journal_ids``."""


__all__ = ["ScopedRecord", "ScopedRecordsRepositoryPort"]
