"""Domain models package."""

from .journals import JournalNode, JournalRecord, JournalTree
from .selection import (
    EMPTY_SCOPE,
    VIRTUAL_ROOT,
    CycleState,
    EffectiveScope,
    JournalRoot,
    LevelState,
    RootContext,
    SelectionSnapshot,
    VirtualRoot,
    root_context_from_id,
    root_context_to_id,
)

__all__ = [
    "JournalNode",
    "JournalRecord",
    "JournalTree",
    "CycleState",
    "EffectiveScope",
    "EMPTY_SCOPE",
    "JournalRoot",
    "LevelState",
    "RootContext",
    "SelectionSnapshot",
    "VirtualRoot",
    "VIRTUAL_ROOT",
    "root_context_from_id",
    "root_context_to_id",
]
