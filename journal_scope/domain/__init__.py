"""Domain package for journal trees, selection state and scope rules."""

from .constants import DEFAULT_CLICK_WINDOW_MS, RECORD_KINDS, ROOT_JOURNAL_ID
from .exceptions import (
    InvalidJournalTreeError,
    JournalScopeError,
    UnknownRecordKindError,
)
from .models import (
    VIRTUAL_ROOT,
    CycleState,
    EffectiveScope,
    JournalNode,
    JournalRecord,
    JournalRoot,
    JournalTree,
    LevelState,
    RootContext,
    SelectionSnapshot,
    VirtualRoot,
)
from .services import (
    calculate_effective_ids,
    find_node_by_id,
    find_parent_of_node,
    find_path_to_root,
    resolve_effective_scope,
)

__all__ = [
    "DEFAULT_CLICK_WINDOW_MS",
    "RECORD_KINDS",
    "ROOT_JOURNAL_ID",
    "InvalidJournalTreeError",
    "JournalScopeError",
    "UnknownRecordKindError",
    "VIRTUAL_ROOT",
    "CycleState",
    "EffectiveScope",
    "JournalNode",
    "JournalRecord",
    "JournalRoot",
    "JournalTree",
    "LevelState",
    "RootContext",
    "SelectionSnapshot",
    "VirtualRoot",
    "calculate_effective_ids",
    "find_node_by_id",
    "find_parent_of_node",
    "find_path_to_root",
    "resolve_effective_scope",
]
