"""Click cycle for journals with children and the selection changes it makes.

Selections are stored per depth as ordered id tuples. Every function here is
pure: it receives the current selections and returns new ones.
"""

from collections.abc import Sequence

from journal_scope.domain.models.journals import JournalNode
from journal_scope.domain.models.selection import CycleState


LevelSelections = tuple[tuple[str, ...], ...]

CYCLE_ORDER = tuple(CycleState)

_EXPANSION_BY_STEP = {
    CycleState.PARENT_SELECTED_CHILDREN_UNSELECTED: True,
    CycleState.PARENT_SELECTED_CHILDREN_ALL_SELECTED: True,
    CycleState.PARENT_SELECTED_CHILDREN_HIDDEN: False,
    CycleState.UNSELECTED: None,
}


def next_cycle_state(prior: CycleState | None) -> CycleState:
    """Advance one step, entering at step 1 when nothing was recorded."""
    if prior is None:
        return CYCLE_ORDER[0]
    return CYCLE_ORDER[(CYCLE_ORDER.index(prior) + 1) % len(CYCLE_ORDER)]


def expansion_for_step(step: CycleState) -> bool | None:
    """Return whether the node's children are expanded after ``step``.

    None means the node is no longer selected and its flag is dropped.
    """
    return _EXPANSION_BY_STEP[step]


def freeze_selections(levels: Sequence[Sequence[str]]) -> LevelSelections:
    """Return the canonical form: tuples, without trailing empty levels."""
    frozen = [tuple(level) for level in levels]
    while frozen and not frozen[-1]:
        frozen.pop()
    return tuple(frozen)


def _thaw(selections: LevelSelections, min_length: int) -> list[list[str]]:
    levels = [list(level) for level in selections]
    while len(levels) < min_length:
        levels.append([])
    return levels


def _clear_from(levels: list[list[str]], first_cleared: int) -> None:
    for index in range(first_cleared, len(levels)):
        levels[index] = []


def toggle_terminal(
    selections: LevelSelections,
    level_index: int,
    node_id: str,
) -> LevelSelections:
    """Toggle a childless journal and clear every deeper level."""
    levels = _thaw(selections, level_index + 1)
    own = levels[level_index]
    if node_id in own:
        own.remove(node_id)
    else:
        own.append(node_id)
    _clear_from(levels, level_index + 1)
    return freeze_selections(levels)


def apply_cycle_step(
    selections: LevelSelections,
    level_index: int,
    node: JournalNode,
    step: CycleState,
) -> LevelSelections:
    """Apply one cycle step of ``node`` at ``level_index``.

    The node's own membership and its children's membership one level down
    change according to ``step``; every level below that is cleared.
    """
    levels = _thaw(selections, level_index + 2)
    child_ids = set(node.children)

    own = levels[level_index]
    if step is CycleState.UNSELECTED:
        own = [item for item in own if item != node.id]
    elif node.id not in own:
        own = [*own, node.id]
    levels[level_index] = own

    next_level = [
        item for item in levels[level_index + 1] if item not in child_ids
    ]
    if step is CycleState.PARENT_SELECTED_CHILDREN_ALL_SELECTED:
        next_level.extend(node.children)
    levels[level_index + 1] = next_level

    _clear_from(levels, level_index + 2)
    return freeze_selections(levels)


__all__ = [
    "LevelSelections",
    "CYCLE_ORDER",
    "next_cycle_state",
    "expansion_for_step",
    "freeze_selections",
    "toggle_terminal",
    "apply_cycle_step",
]
