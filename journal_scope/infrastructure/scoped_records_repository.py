"""SQLAlchemy-backed repository for records linked to journals."""

from collections.abc import Sequence

from sqlalchemy import bindparam, text

from journal_scope.application.ports.database import DatabaseEnginePort
from journal_scope.application.ports.scoped_records_repository import (
    ScopedRecord,
    ScopedRecordsRepositoryPort,
)
from journal_scope.domain.exceptions import UnknownRecordKindError


SELECT_PARTNERS_SQL = text(
    """
    SELECT DISTINCT p.id, p.name
    FROM partners p
    JOIN journal_partner_links l ON l.partner_id = p.id
    WHERE l.journal_id IN :journal_ids
    ORDER BY p.name, p.id
    """
).bindparams(bindparam("journal_ids", expanding=True))

SELECT_GOODS_SQL = text(
    """
    SELECT DISTINCT g.id, g.label AS name
    FROM goods g
    JOIN journal_good_links l ON l.good_id = g.id
    WHERE l.journal_id IN :journal_ids
    ORDER BY name, g.id
    """
).bindparams(bindparam("journal_ids", expanding=True))

SELECT_DOCUMENTS_SQL = text(
    """
    SELECT DISTINCT d.id, d.ref_no AS name
    FROM documents d
    WHERE d.journal_id IN :journal_ids
    ORDER BY name, d.id
    """
).bindparams(bindparam("journal_ids", expanding=True))

_QUERIES_BY_KIND = {
    "partners": SELECT_PARTNERS_SQL,
    "goods": SELECT_GOODS_SQL,
    "documents": SELECT_DOCUMENTS_SQL,
}


class SqlAlchemyScopedRecordsRepository(ScopedRecordsRepositoryPort):
    """Repository matching link rows on exact journal ids."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the journal engine.
        """
        self._db_port = db_port

    def fetch_records(
        self,
        kind: str,
        journal_ids: Sequence[str],
    ) -> list[ScopedRecord]:
        """Return records of ``kind`` linked to any of ``journal_ids``.

        Raises:
            UnknownRecordKindError: If ``kind`` has no query.
        """
        query = _QUERIES_BY_KIND.get(kind)
        if query is None:
            raise UnknownRecordKindError(kind)
        if not journal_ids:
            return []
        engine = self._db_port.get_journal_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"journal_ids": list(journal_ids)},
            ).all()
        return [
            ScopedRecord(id=str(row.id), name=row.name or "", kind=kind)
            for row in rows
        ]


__all__ = ["SqlAlchemyScopedRecordsRepository"]
