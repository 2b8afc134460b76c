"""Effective-scope resolution: selections to ancestor-closed journal ids."""

from collections.abc import Iterable, Mapping, Sequence
from logging import Logger

from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.models.selection import (
    EMPTY_SCOPE,
    EffectiveScope,
    LevelState,
)
from journal_scope.domain.services.levels import deepest_selected_level
from journal_scope.domain.services.tree_queries import (
    find_node_by_id,
    find_path_to_root,
)


def _close_over_ancestors(
    ids: Iterable[str],
    tree: JournalTree,
    closed: dict[str, None],
    logger: Logger | None,
) -> None:
    for node_id in ids:
        for path_id in find_path_to_root(node_id, tree, logger):
            closed.setdefault(path_id, None)


def compute_terminal_id(
    tree: JournalTree,
    ids: Sequence[str],
) -> str | None:
    """Return the single id none of whose children are in ``ids``.

    Args:
        tree: Tree snapshot used to look up children.
        ids: Ancestor-closed id set.

    Returns:
        str | None: The unambiguous leaf, or None when there are zero or
        several.
    """
    id_set = set(ids)
    terminals = []
    for node_id in ids:
        node = find_node_by_id(tree, node_id)
        children = node.children if node is not None else ()
        if not any(child_id in id_set for child_id in children):
            terminals.append(node_id)
    return terminals[0] if len(terminals) == 1 else None


def resolve_effective_scope(
    tree: JournalTree,
    levels: Sequence[LevelState],
    logger: Logger | None = None,
) -> EffectiveScope:
    """Collapse per-level selections into the effective scope.

    Only the deepest level with a selection contributes; each of its ids
    brings its full path to the top of the tree. Ids keep first-seen order,
    so equal inputs always give equal outputs.

    Args:
        tree: Tree snapshot used for ancestor lookups.
        levels: Rendered levels after reconciliation.
        logger: Optional logger for malformed tree warnings.

    Returns:
        EffectiveScope: Ids and the terminal id, if unambiguous.
    """
    deepest = deepest_selected_level(levels)
    if deepest < 0:
        return EMPTY_SCOPE
    closed: dict[str, None] = {}
    _close_over_ancestors(levels[deepest].selected_ids, tree, closed, logger)
    ids = tuple(closed)
    return EffectiveScope(ids=ids, terminal_id=compute_terminal_id(tree, ids))


def calculate_effective_ids(
    level2_ids: Sequence[str],
    level3_ids: Sequence[str],
    tree: JournalTree,
    visibility_map: Mapping[str, bool],
) -> list[str]:
    """Two-level scope used by the flat ``level2``/``level3`` selection.

    Every level-3 id contributes its path. A level-2 journal contributes its
    path when it is childless, or when none of its children are selected
    and its children are not expanded. Expanded but unselected children
    leave the parent out: the user is browsing, not committing.

    Args:
        level2_ids: Selected first-row journals.
        level3_ids: Selected second-row journals.
        tree: Tree snapshot.
        visibility_map: Expansion flag per level-2 journal.

    Returns:
        list[str]: Ancestor-closed ids in first-seen order.
    """
    if len(tree) == 0:
        return []

    closed: dict[str, None] = {}
    level3_set = set(level3_ids)
    _close_over_ancestors(level3_ids, tree, closed, None)

    for level2_id in level2_ids:
        node = find_node_by_id(tree, level2_id)
        if node is None:
            continue
        if not node.is_terminal:
            if any(child_id in level3_set for child_id in node.children):
                continue
            if visibility_map.get(level2_id) is True:
                continue
        _close_over_ancestors((level2_id,), tree, closed, None)

    return list(closed)


__all__ = [
    "compute_terminal_id",
    "resolve_effective_scope",
    "calculate_effective_ids",
]
