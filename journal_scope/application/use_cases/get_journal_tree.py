"""Use case to read the journal hierarchy as an immutable tree snapshot."""

from journal_scope.application.ports.journal_tree_repository import (
    JournalTreeRepositoryPort,
)
from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.services.tree_builder import build_tree_from_records
from journal_scope.infrastructure.logging.logger import get_app_logger


class GetJournalTreeUseCase:
    """Fetch every journal and index it into a ``JournalTree``."""

    def __init__(
        self,
        repository: JournalTreeRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> JournalTree:
        """Return a fresh snapshot of the journal hierarchy."""
        records = self._repository.fetch_journals()
        tree = build_tree_from_records(records, self._logger)
        self._logger.info(
            f"Loaded {len(tree)} journals ({len(tree.root_ids)} top-level)"
        )
        return tree


__all__ = ["GetJournalTreeUseCase"]
