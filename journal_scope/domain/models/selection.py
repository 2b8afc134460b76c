"""Domain models for multi-level journal selection."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from journal_scope.domain.constants import ROOT_JOURNAL_ID
from journal_scope.domain.models.journals import JournalNode


@dataclass(frozen=True)
class VirtualRoot:
    """Root context spanning the whole journal tree."""

    @property
    def journal_id(self) -> None:
        return None


@dataclass(frozen=True)
class JournalRoot:
    """Root context anchored on a real journal."""

    journal_id: str


RootContext = VirtualRoot | JournalRoot

VIRTUAL_ROOT = VirtualRoot()


def root_context_from_id(journal_id: str | None) -> RootContext:
    """Map an external root id (possibly the sentinel) to a root context."""
    if not journal_id or journal_id == ROOT_JOURNAL_ID:
        return VIRTUAL_ROOT
    return JournalRoot(journal_id)


def root_context_to_id(root: RootContext) -> str:
    """Map a root context back to its external id form."""
    return root.journal_id or ROOT_JOURNAL_ID


class CycleState(Enum):
    """Ordinal steps of the click cycle for a journal with children."""

    PARENT_SELECTED_CHILDREN_UNSELECTED = 1
    PARENT_SELECTED_CHILDREN_ALL_SELECTED = 2
    PARENT_SELECTED_CHILDREN_HIDDEN = 3
    UNSELECTED = 4


@dataclass(frozen=True)
class LevelState:
    """Everything the renderer needs to draw one depth of the tree.

    Attributes:
        nodes: Candidate journals at this depth.
        selected_ids: Selected subset of ``nodes`` in selection order.
        visibility_map: Expansion flag per selected parent of the previous
            depth.
        should_show_level: Whether the level is rendered at all.
    """

    nodes: tuple[JournalNode, ...]
    selected_ids: tuple[str, ...] = ()
    visibility_map: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )
    should_show_level: bool = True

    @property
    def node_ids(self) -> tuple[str, ...]:
        return tuple(node.id for node in self.nodes)


@dataclass(frozen=True)
class EffectiveScope:
    """Ancestor-closed journal ids used to filter records."""

    ids: tuple[str, ...] = ()
    terminal_id: str | None = None


EMPTY_SCOPE = EffectiveScope()


@dataclass(frozen=True)
class SelectionSnapshot:
    """Atomically published view of a selection session."""

    root: RootContext
    levels: tuple[LevelState, ...]
    scope: EffectiveScope


__all__ = [
    "VirtualRoot",
    "JournalRoot",
    "RootContext",
    "VIRTUAL_ROOT",
    "root_context_from_id",
    "root_context_to_id",
    "CycleState",
    "LevelState",
    "EffectiveScope",
    "EMPTY_SCOPE",
    "SelectionSnapshot",
]
