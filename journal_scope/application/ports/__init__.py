"""Application ports package."""

from .database import DatabaseEnginePort
from .journal_tree_repository import JournalTreeRepositoryPort
from .scheduler import ScheduledTask, SchedulerPort
from .scoped_records_repository import (
    ScopedRecord,
    ScopedRecordsRepositoryPort,
)

__all__ = [
    "DatabaseEnginePort",
    "JournalTreeRepositoryPort",
    "ScheduledTask",
    "SchedulerPort",
    "ScopedRecord",
    "ScopedRecordsRepositoryPort",
]
