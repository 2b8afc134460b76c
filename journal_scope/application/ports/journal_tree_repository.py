"""Port for retrieving the journal hierarchy."""

from typing import Protocol

from journal_scope.domain.models.journals import JournalRecord


class JournalTreeRepositoryPort(Protocol):
    """Port exposing every journal row of the hierarchy."""

    def fetch_journals(self) -> list[JournalRecord]:
        """Return all journals as flat rows."""


__all__ = ["JournalTreeRepositoryPort"]
