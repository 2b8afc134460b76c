"""Two-row journal selection kept for screens built on ``level2``/``level3``.

Unlike the multi-level session, this variant stores two flat id lists and
relies on the caller to pass the expansion state of each first-row journal.
It also supports a flat (non-hierarchical) mode where one journal is picked
from a list.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from journal_scope.domain.constants import DEFAULT_ROOT_FILTER, ROOT_JOURNAL_ID
from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.services.scope import (
    calculate_effective_ids,
    compute_terminal_id,
)
from journal_scope.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PartialSelection:
    """Fields to overwrite in an update; None keeps the current value."""

    top_level_id: str | None = None
    level2_ids: Sequence[str] | None = None
    level3_ids: Sequence[str] | None = None


@dataclass(frozen=True)
class LegacySelectionState:
    """Published state of the two-row selection."""

    top_level_id: str
    level2_ids: tuple[str, ...] = ()
    level3_ids: tuple[str, ...] = ()
    flat_id: str | None = None
    root_filter: tuple[str, ...] = DEFAULT_ROOT_FILTER
    effective_ids: tuple[str, ...] = ()


class LegacyJournalSelection:
    """Two-row selection with visibility-aware effective ids."""

    def __init__(
        self,
        tree: JournalTree,
        restricted_journal_id: str | None = None,
        logger=None,
    ) -> None:
        self._tree = tree
        self._restricted_id = restricted_journal_id or ROOT_JOURNAL_ID
        self._logger = logger or get_app_logger()
        self._state = self._initial_state()

    @property
    def state(self) -> LegacySelectionState:
        return self._state

    @property
    def effective_ids(self) -> tuple[str, ...]:
        return self._state.effective_ids

    def update_selections(
        self,
        partial: PartialSelection,
        visibility_map: Mapping[str, bool],
    ) -> LegacySelectionState:
        """Merge ``partial`` into the state and recompute effective ids.

        Args:
            partial: Fields to overwrite.
            visibility_map: Whether each first-row journal currently shows
                its children.

        Returns:
            LegacySelectionState: The new state.
        """
        level2_ids = tuple(
            self._state.level2_ids
            if partial.level2_ids is None
            else partial.level2_ids
        )
        level3_ids = tuple(
            self._state.level3_ids
            if partial.level3_ids is None
            else partial.level3_ids
        )
        effective_ids = calculate_effective_ids(
            level2_ids,
            level3_ids,
            self._tree,
            visibility_map,
        )
        self._state = replace(
            self._state,
            top_level_id=partial.top_level_id or self._state.top_level_id,
            level2_ids=level2_ids,
            level3_ids=level3_ids,
            effective_ids=tuple(effective_ids),
        )
        return self._state

    def reset_selections(self) -> LegacySelectionState:
        """Return to the restricted journal (or the root) with no selection."""
        self._state = self._initial_state()
        return self._state

    def set_selected_flat_journal_id(
        self,
        journal_id: str | None,
    ) -> LegacySelectionState:
        """Select a single journal in flat mode."""
        self._state = LegacySelectionState(
            top_level_id=self._restricted_id,
            flat_id=journal_id,
            root_filter=self._state.root_filter,
            effective_ids=(journal_id,) if journal_id else (),
        )
        return self._state

    def selected_journal_id(self, is_hierarchy_mode: bool) -> str | None:
        """Return the journal records should be locked on, if any.

        Args:
            is_hierarchy_mode: False when the flat list is in use.

        Returns:
            str | None: The flat pick, or the single terminal of the
            effective ids in hierarchy mode.
        """
        if not is_hierarchy_mode:
            return self._state.flat_id
        return compute_terminal_id(self._tree, self._state.effective_ids)

    def replace_tree(self, tree: JournalTree) -> LegacySelectionState:
        """Swap in a refreshed tree and reset the selection."""
        self._tree = tree
        self._logger.info("Journal tree replaced, legacy selection reset")
        return self.reset_selections()

    def _initial_state(self) -> LegacySelectionState:
        return LegacySelectionState(top_level_id=self._restricted_id)


__all__ = [
    "PartialSelection",
    "LegacySelectionState",
    "LegacyJournalSelection",
]
