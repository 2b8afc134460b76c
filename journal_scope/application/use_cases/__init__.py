"""Application use cases package."""

from .click_disambiguator import ClickDisambiguator
from .get_journal_tree import GetJournalTreeUseCase
from .get_scoped_records import GetScopedRecordsUseCase
from .journal_interaction import JournalInteractionController
from .legacy_journal_selection import (
    LegacyJournalSelection,
    LegacySelectionState,
    PartialSelection,
)
from .multi_level_selection import MultiLevelSelectionSession

__all__ = [
    "ClickDisambiguator",
    "GetJournalTreeUseCase",
    "GetScopedRecordsUseCase",
    "JournalInteractionController",
    "LegacyJournalSelection",
    "LegacySelectionState",
    "PartialSelection",
    "MultiLevelSelectionSession",
]
