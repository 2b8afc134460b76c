"""Multi-level journal selection session.

The session owns the canonical selection state for one journal tree view:
the root context, the selected ids per depth, the expansion flag of each
selected parent and the click cycle step of each (depth, journal) pair.
Every mutation runs to completion under a lock and publishes a single
immutable ``SelectionSnapshot``; observers never see an intermediate level.
Selections made by clicks are saved per root context and can be restored
explicitly. Operations that cannot apply (stale ids, levels that are not
rendered) leave the snapshot untouched and return it as is.
"""

from collections.abc import Mapping
import threading

from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.models.selection import (
    VIRTUAL_ROOT,
    CycleState,
    EffectiveScope,
    JournalRoot,
    LevelState,
    RootContext,
    SelectionSnapshot,
)
from journal_scope.domain.services.cycle_engine import (
    LevelSelections,
    apply_cycle_step,
    expansion_for_step,
    next_cycle_state,
    toggle_terminal,
)
from journal_scope.domain.services.levels import (
    build_levels,
    combined_visibility_map,
    deepest_selected_level,
    has_children_at_level,
    node_color_index,
)
from journal_scope.domain.services.scope import resolve_effective_scope
from journal_scope.domain.services.tree_queries import (
    find_node_by_id,
    find_parent_of_node,
)
from journal_scope.infrastructure.logging.logger import get_app_logger


class MultiLevelSelectionSession:
    """Selection state machine over an immutable journal tree."""

    def __init__(
        self,
        tree: JournalTree,
        top: RootContext = VIRTUAL_ROOT,
        logger=None,
    ) -> None:
        """Initialize an empty selection at ``top``.

        Args:
            tree: Current journal tree snapshot.
            top: Highest root context the user may reach, usually the
                virtual root or a restricted journal.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._lock = threading.RLock()
        self._logger = logger or get_app_logger()
        self._tree = tree
        self._top = self._usable_root(top)
        self._root: RootContext = self._top
        self._selections: LevelSelections = ()
        self._expanded: Mapping[str, bool] = {}
        self._cycle_states: dict[tuple[int, str], CycleState] = {}
        self._saved: dict[
            str | None, tuple[LevelSelections, Mapping[str, bool]]
        ] = {}
        self._snapshot = self._commit(self._top, (), {})

    @property
    def tree(self) -> JournalTree:
        return self._tree

    @property
    def top(self) -> RootContext:
        return self._top

    @property
    def snapshot(self) -> SelectionSnapshot:
        return self._snapshot

    @property
    def root(self) -> RootContext:
        return self._snapshot.root

    @property
    def levels_data(self) -> tuple[LevelState, ...]:
        return self._snapshot.levels

    @property
    def effective_scope(self) -> EffectiveScope:
        return self._snapshot.scope

    @property
    def effective_ids(self) -> tuple[str, ...]:
        return self._snapshot.scope.ids

    @property
    def selected_terminal_id(self) -> str | None:
        return self._snapshot.scope.terminal_id

    @property
    def deepest_selected_level(self) -> int:
        return deepest_selected_level(self._snapshot.levels)

    @property
    def combined_visibility_map(self) -> dict[str, bool]:
        return combined_visibility_map(self._snapshot.levels)

    @property
    def has_saved_selection(self) -> bool:
        """True when the current root has a non-empty saved selection."""
        saved = self._saved.get(self._root.journal_id)
        return saved is not None and any(saved[0])

    def has_children_at_level(self, level_index: int) -> bool:
        return has_children_at_level(self._snapshot.levels, level_index)

    def node_color_index(self, node_id: str, level_index: int) -> int | None:
        """Return the colour slot inherited from the level-0 ancestor."""
        return node_color_index(
            self._tree,
            self._snapshot.levels,
            node_id,
            level_index,
        )

    def cycle_state(self, level_index: int, node_id: str) -> CycleState | None:
        """Return the last executed cycle step for a journal, if any."""
        return self._cycle_states.get((level_index, node_id))

    def handle_level_selection(
        self,
        level_index: int,
        node_id: str,
    ) -> SelectionSnapshot:
        """Apply one click on ``node_id`` at ``level_index``.

        Childless journals toggle and clear every deeper level. Journals with
        children advance their four-step cycle, which updates their own
        membership and their children's one level down, then clears every
        level below that.

        Args:
            level_index: Depth the journal was clicked at.
            node_id: Clicked journal id.

        Returns:
            SelectionSnapshot: The new snapshot, or the current one when the
            click could not apply.
        """
        with self._lock:
            node = find_node_by_id(self._tree, node_id)
            if node is None:
                self._logger.debug(f"Ignored click on stale journal {node_id}")
                return self._snapshot
            if not self._is_candidate(level_index, node_id):
                self._logger.debug(
                    f"Ignored click on {node_id}: not shown at level "
                    f"{level_index}"
                )
                return self._snapshot

            key = (level_index, node_id)
            if node.is_terminal:
                self._cycle_states.pop(key, None)
                selections = toggle_terminal(
                    self._selections,
                    level_index,
                    node_id,
                )
                snapshot = self._commit(self._root, selections, self._expanded)
                self._save_current()
                return snapshot

            step = next_cycle_state(self._cycle_states.get(key))
            self._cycle_states[key] = step
            selections = apply_cycle_step(
                self._selections,
                level_index,
                node,
                step,
            )
            expanded = dict(self._expanded)
            flag = expansion_for_step(step)
            if flag is None:
                expanded.pop(node_id, None)
            else:
                expanded[node_id] = flag
            self._logger.debug(
                f"Journal {node_id} at level {level_index} -> {step.name}"
            )
            snapshot = self._commit(self._root, selections, expanded)
            self._save_current()
            return snapshot

    def set_root_context(
        self,
        root: RootContext,
        preselect_id: str | None = None,
    ) -> SelectionSnapshot:
        """Re-root the view and discard every selection and cycle step.

        Args:
            root: New root context.
            preselect_id: Optional journal to select at the new level 0.

        Returns:
            SelectionSnapshot: The fresh snapshot, or the current one when
            ``root`` is not part of the tree.
        """
        with self._lock:
            journal_id = root.journal_id
            if journal_id is not None and journal_id not in self._tree:
                self._logger.debug(
                    f"Ignored re-root to stale journal {journal_id}"
                )
                return self._snapshot
            self._cycle_states = {}
            selections = ((preselect_id,),) if preselect_id else ()
            self._logger.debug(
                f"Root context set to {root.journal_id or 'ROOT'}"
            )
            return self._commit(root, selections, {})

    def drill_into(self, level_index: int, node_id: str) -> SelectionSnapshot:
        """Double-click navigation on a journal.

        A selected journal becomes the new root context. An unselected one
        re-roots the view on its parent and is pre-selected there.
        """
        with self._lock:
            node = find_node_by_id(self._tree, node_id)
            if node is None or not self._is_candidate(level_index, node_id):
                self._logger.debug(f"Ignored drill into {node_id}")
                return self._snapshot
            if node_id in self._snapshot.levels[level_index].selected_ids:
                return self.set_root_context(JournalRoot(node_id))
            parent = find_parent_of_node(node_id, self._tree)
            new_root = JournalRoot(parent.id) if parent else self._top
            return self.set_root_context(new_root, preselect_id=node_id)

    def navigate_up_one_level(self) -> SelectionSnapshot:
        """Move the root context one level up, keeping the old root selected.

        Does nothing at the configured top.
        """
        with self._lock:
            current = self._root
            if current == self._top or current.journal_id is None:
                return self._snapshot
            parent = find_parent_of_node(current.journal_id, self._tree)
            new_root = JournalRoot(parent.id) if parent else self._top
            return self.set_root_context(
                new_root,
                preselect_id=current.journal_id,
            )

    def select_all_visible(self) -> SelectionSnapshot:
        """Select every level-0 journal and all of their children."""
        with self._lock:
            top_nodes = self._snapshot.levels[0].nodes
            child_ids: dict[str, None] = {}
            expanded: dict[str, bool] = {}
            for node in top_nodes:
                if node.children:
                    expanded[node.id] = True
                    child_ids.update(dict.fromkeys(node.children))
            self._cycle_states = {}
            selections = (
                tuple(node.id for node in top_nodes),
                tuple(child_ids),
            )
            return self._commit(self._root, selections, expanded)

    def select_parents_only(self) -> SelectionSnapshot:
        """Select every level-0 journal with children shown but unselected."""
        with self._lock:
            top_nodes = self._snapshot.levels[0].nodes
            self._cycle_states = {}
            expanded = {node.id: True for node in top_nodes if node.children}
            selections = (tuple(node.id for node in top_nodes),)
            return self._commit(self._root, selections, expanded)

    def clear_all_selections(self) -> SelectionSnapshot:
        """Deselect everything while keeping the root context."""
        with self._lock:
            self._cycle_states = {}
            return self._commit(self._root, (), {})

    def reset_selections(self) -> SelectionSnapshot:
        """Return to the configured top with nothing selected or saved."""
        with self._lock:
            self._cycle_states = {}
            self._saved = {}
            return self._commit(self._top, (), {})

    def restore_last_selection(self) -> SelectionSnapshot:
        """Re-apply the selection last made by clicks under this root.

        Returns:
            SelectionSnapshot: The restored snapshot, or the current one
            when nothing was saved for the current root.
        """
        with self._lock:
            saved = self._saved.get(self._root.journal_id)
            if saved is None:
                return self._snapshot
            selections, expanded = saved
            self._cycle_states = {}
            self._logger.debug(
                f"Restored saved selection under "
                f"{self._root.journal_id or 'ROOT'}"
            )
            return self._commit(self._root, selections, expanded)

    def replace_tree(self, tree: JournalTree) -> SelectionSnapshot:
        """Swap in a refreshed tree and invalidate every selection.

        The root context survives when it still exists in ``tree``,
        otherwise the view falls back to the configured top. Saved
        selections are dropped.
        """
        with self._lock:
            self._tree = tree
            self._top = self._usable_root(self._top)
            root = self._usable_root(self._root, fallback=self._top)
            self._cycle_states = {}
            self._saved = {}
            self._logger.info(
                f"Journal tree replaced ({len(tree)} journals), "
                "selection reset"
            )
            return self._commit(root, (), {})

    def _save_current(self) -> None:
        self._saved[self._root.journal_id] = (
            self._selections,
            dict(self._expanded),
        )

    def _usable_root(
        self,
        root: RootContext,
        fallback: RootContext = VIRTUAL_ROOT,
    ) -> RootContext:
        if root.journal_id is None or root.journal_id in self._tree:
            return root
        self._logger.warning(
            f"Root journal {root.journal_id} is not in the tree, "
            f"using {fallback.journal_id or 'ROOT'}"
        )
        return fallback

    def _is_candidate(self, level_index: int, node_id: str) -> bool:
        levels = self._snapshot.levels
        if level_index < 0 or level_index >= len(levels):
            return False
        return node_id in levels[level_index].node_ids

    def _commit(
        self,
        root: RootContext,
        selections: LevelSelections,
        expanded: Mapping[str, bool],
    ) -> SelectionSnapshot:
        result = build_levels(self._tree, root, selections, expanded)
        scope = resolve_effective_scope(
            self._tree,
            result.levels,
            self._logger,
        )
        self._root = root
        self._selections = result.selections
        self._expanded = result.expanded
        self._snapshot = SelectionSnapshot(
            root=root,
            levels=result.levels,
            scope=scope,
        )
        return self._snapshot


__all__ = ["MultiLevelSelectionSession"]
