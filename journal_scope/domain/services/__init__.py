"""Domain services package."""

from .cycle_engine import (
    apply_cycle_step,
    expansion_for_step,
    next_cycle_state,
    toggle_terminal,
)
from .levels import (
    build_levels,
    combined_visibility_map,
    deepest_selected_level,
    has_children_at_level,
    node_color_index,
)
from .scope import (
    calculate_effective_ids,
    compute_terminal_id,
    resolve_effective_scope,
)
from .tree_builder import build_tree_from_nested, build_tree_from_records
from .tree_queries import (
    find_node_by_id,
    find_parent_of_node,
    find_path_to_root,
)

__all__ = [
    "apply_cycle_step",
    "expansion_for_step",
    "next_cycle_state",
    "toggle_terminal",
    "build_levels",
    "combined_visibility_map",
    "deepest_selected_level",
    "has_children_at_level",
    "node_color_index",
    "calculate_effective_ids",
    "compute_terminal_id",
    "resolve_effective_scope",
    "build_tree_from_nested",
    "build_tree_from_records",
    "find_node_by_id",
    "find_parent_of_node",
    "find_path_to_root",
]
