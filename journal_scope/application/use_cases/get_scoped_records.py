"""Use case to read partners, goods or documents inside a journal scope."""

from collections.abc import Sequence

from journal_scope.application.ports.scoped_records_repository import (
    ScopedRecord,
    ScopedRecordsRepositoryPort,
)
from journal_scope.domain.constants import RECORD_KINDS
from journal_scope.domain.exceptions import UnknownRecordKindError
from journal_scope.infrastructure.logging.logger import get_app_logger


class GetScopedRecordsUseCase:
    """Filter records by the effective journal ids of a selection.

    The ids are already ancestor-closed, so the repository only performs an
    exact id match and never walks the tree.
    """

    def __init__(
        self,
        repository: ScopedRecordsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port reading records linked to journals.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: str,
        effective_ids: Sequence[str],
    ) -> list[ScopedRecord]:
        """Return records of ``kind`` linked to any journal in scope.

        Args:
            kind: One of ``partners``, ``goods`` or ``documents``.
            effective_ids: Effective journal ids of the current selection.

        Returns:
            list[ScopedRecord]: Matching records; empty for an empty scope.

        Raises:
            UnknownRecordKindError: If ``kind`` is not supported.
        """
        if kind not in RECORD_KINDS:
            raise UnknownRecordKindError(kind)
        journal_ids = list(dict.fromkeys(effective_ids))
        if not journal_ids:
            self._logger.debug(f"Empty scope, no {kind} queried")
            return []
        records = self._repository.fetch_records(kind, journal_ids)
        self._logger.info(
            f"Fetched {len(records)} {kind} for {len(journal_ids)} journals"
        )
        return records


__all__ = ["GetScopedRecordsUseCase"]
