"""Composition root for wiring infrastructure adapters."""

from journal_scope.application.ports.database import DatabaseEnginePort
from journal_scope.application.ports.journal_tree_repository import (
    JournalTreeRepositoryPort,
)
from journal_scope.application.ports.scheduler import SchedulerPort
from journal_scope.application.ports.scoped_records_repository import (
    ScopedRecordsRepositoryPort,
)
from journal_scope.application.use_cases.journal_interaction import (
    JournalInteractionController,
)
from journal_scope.application.use_cases.multi_level_selection import (
    MultiLevelSelectionSession,
)
from journal_scope.domain.models.journals import JournalTree
from journal_scope.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from journal_scope.infrastructure.journal_tree_repository import (
    SqlAlchemyJournalTreeRepository,
)
from journal_scope.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from journal_scope.infrastructure.scheduler import ThreadingTimerScheduler
from journal_scope.infrastructure.scoped_records_repository import (
    SqlAlchemyScopedRecordsRepository,
)
from journal_scope.infrastructure.settings import SelectionSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_journal_tree_repository(
    db_port: DatabaseEnginePort | None = None,
) -> JournalTreeRepositoryPort:
    """Return the journal tree repository."""
    return SqlAlchemyJournalTreeRepository(
        db_port or build_database_adapter()
    )


def build_scoped_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ScopedRecordsRepositoryPort:
    """Return the repository for records linked to journals."""
    return SqlAlchemyScopedRecordsRepository(
        db_port or build_database_adapter()
    )


def build_scheduler() -> SchedulerPort:
    """Return the scheduler used for click disambiguation."""
    return ThreadingTimerScheduler()


def build_selection_session(
    tree: JournalTree,
    settings: SelectionSettings | None = None,
) -> MultiLevelSelectionSession:
    """Return a selection session rooted at the configured top."""
    resolved = settings or SelectionSettings.from_env()
    return MultiLevelSelectionSession(
        tree,
        top=resolved.top,
        logger=get_app_logger(),
    )


def build_interaction_controller(
    session: MultiLevelSelectionSession,
    settings: SelectionSettings | None = None,
    scheduler: SchedulerPort | None = None,
) -> JournalInteractionController:
    """Return a click controller driving ``session``."""
    resolved = settings or SelectionSettings.from_env()
    return JournalInteractionController(
        session,
        scheduler or build_scheduler(),
        resolved.click_window_seconds,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_journal_tree_repository",
    "build_scoped_records_repository",
    "build_scheduler",
    "build_selection_session",
    "build_interaction_controller",
]
