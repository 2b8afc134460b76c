"""Derivation of per-depth ``LevelState`` views from raw selections."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from journal_scope.domain.models.journals import JournalNode, JournalTree
from journal_scope.domain.models.selection import LevelState, RootContext
from journal_scope.domain.services.cycle_engine import (
    LevelSelections,
    freeze_selections,
)
from journal_scope.domain.services.tree_queries import find_parent_of_node


@dataclass(frozen=True)
class LevelsResult:
    """Rendered levels plus the reconciled state they were built from.

    Attributes:
        levels: One ``LevelState`` per rendered depth.
        selections: Selections with ids missing from their level dropped.
        expanded: Expansion flags restricted to still-selected journals.
    """

    levels: tuple[LevelState, ...]
    selections: LevelSelections
    expanded: Mapping[str, bool]


def build_levels(
    tree: JournalTree,
    root: RootContext,
    selections: LevelSelections,
    expanded: Mapping[str, bool],
) -> LevelsResult:
    """Build the levels shown for ``root`` and reconcile the selections.

    Level 0 holds the children of the root context. Level k holds the
    children of every selected level k-1 journal whose children are
    expanded. Construction stops after the first level without a selection,
    so an empty trailing level is still emitted when selected parents have
    no visible children.

    Args:
        tree: Current tree snapshot.
        root: Root context whose children form level 0.
        selections: Raw selected ids per depth.
        expanded: Expansion flag per selected parent; parents without an
            entry are expanded.

    Returns:
        LevelsResult: Levels together with the reconciled selections.
    """
    nodes: tuple[JournalNode, ...] = tree.subtree(root.journal_id) or ()
    visibility: dict[str, bool] = {}
    levels: list[LevelState] = []
    reconciled: list[tuple[str, ...]] = []

    depth = 0
    while True:
        candidate_ids = {node.id for node in nodes}
        raw = selections[depth] if depth < len(selections) else ()
        selected = tuple(
            dict.fromkeys(item for item in raw if item in candidate_ids)
        )
        levels.append(
            LevelState(
                nodes=nodes,
                selected_ids=selected,
                visibility_map=MappingProxyType(visibility),
                should_show_level=True,
            )
        )
        reconciled.append(selected)
        if not selected:
            break

        next_nodes: dict[str, JournalNode] = {}
        visibility = {}
        for parent_id in selected:
            children = tree.children_of(parent_id)
            if not children:
                visibility[parent_id] = False
                continue
            is_expanded = expanded.get(parent_id, True)
            visibility[parent_id] = is_expanded
            if is_expanded:
                for child in children:
                    next_nodes.setdefault(child.id, child)
        nodes = tuple(next_nodes.values())
        depth += 1

    selected_everywhere = {item for level in reconciled for item in level}
    kept_flags = {
        node_id: flag
        for node_id, flag in expanded.items()
        if node_id in selected_everywhere
    }
    return LevelsResult(
        levels=tuple(levels),
        selections=freeze_selections(reconciled),
        expanded=MappingProxyType(kept_flags),
    )


def deepest_selected_level(levels: Sequence[LevelState]) -> int:
    """Return the deepest depth with a selection, or -1."""
    for index in range(len(levels) - 1, -1, -1):
        if levels[index].selected_ids:
            return index
    return -1


def combined_visibility_map(levels: Sequence[LevelState]) -> dict[str, bool]:
    """Merge the visibility maps of every level."""
    combined: dict[str, bool] = {}
    for level in levels:
        combined.update(level.visibility_map)
    return combined


def has_children_at_level(
    levels: Sequence[LevelState],
    level_index: int,
) -> bool:
    """Return True when the level below ``level_index`` has candidates."""
    if level_index < 0 or level_index >= len(levels) - 1:
        return False
    return bool(levels[level_index + 1].nodes)


def node_color_index(
    tree: JournalTree,
    levels: Sequence[LevelState],
    node_id: str,
    level_index: int,
) -> int | None:
    """Return the position of the node's level-0 ancestor among level 0.

    Level-0 journals carry their own colour, so they return None, as do
    journals not shown at ``level_index``.
    """
    if level_index <= 0 or level_index >= len(levels):
        return None
    if node_id not in levels[level_index].node_ids:
        return None
    current_id = node_id
    for _ in range(level_index):
        parent = find_parent_of_node(current_id, tree)
        if parent is None:
            return None
        current_id = parent.id
    top_ids = levels[0].node_ids
    return top_ids.index(current_id) if current_id in top_ids else None


__all__ = [
    "LevelsResult",
    "build_levels",
    "deepest_selected_level",
    "combined_visibility_map",
    "has_children_at_level",
    "node_color_index",
]
