"""SQLAlchemy-backed repository for the journal hierarchy."""

from sqlalchemy import text

from journal_scope.application.ports.database import DatabaseEnginePort
from journal_scope.application.ports.journal_tree_repository import (
    JournalTreeRepositoryPort,
)
from journal_scope.domain.models.journals import JournalRecord


SELECT_JOURNALS_SQL = text(
    """
    SELECT id, code, name, parent_id
    FROM journals
    ORDER BY code, id
    """
)


class SqlAlchemyJournalTreeRepository(JournalTreeRepositoryPort):
    """Repository reading the ``journals`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the journal engine.
        """
        self._db_port = db_port

    def fetch_journals(self) -> list[JournalRecord]:
        """Return every journal row."""
        engine = self._db_port.get_journal_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_JOURNALS_SQL).all()
        return [
            JournalRecord(
                id=str(row.id),
                name=row.name or "",
                parent_id=str(row.parent_id) if row.parent_id else None,
                code=row.code,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyJournalTreeRepository"]
