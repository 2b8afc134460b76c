"""Builders turning fetched journal data into ``JournalTree`` snapshots."""

from collections.abc import Iterable, Mapping
from logging import Logger
from typing import Any

from journal_scope.domain.exceptions import InvalidJournalTreeError
from journal_scope.domain.models.journals import (
    JournalNode,
    JournalRecord,
    JournalTree,
)


def build_tree_from_records(
    records: Iterable[JournalRecord],
    logger: Logger,
) -> JournalTree:
    """Index flat journal rows into a tree sorted by code at every level.

    Rows whose parent is unknown become top-level journals. A duplicated id
    keeps its first row.

    Args:
        records: Journal rows from storage.
        logger: Logger used for data warnings.

    Returns:
        JournalTree: Immutable snapshot of the hierarchy.
    """
    by_id: dict[str, JournalRecord] = {}
    for record in records:
        if record.id in by_id:
            logger.warning(f"Duplicate journal id {record.id} ignored")
            continue
        by_id[record.id] = record

    children: dict[str, list[str]] = {node_id: [] for node_id in by_id}
    parents: dict[str, str | None] = {}
    root_ids: list[str] = []
    for record in by_id.values():
        parent_id = record.parent_id
        if parent_id == record.id:
            logger.warning(f"Journal {record.id} is its own parent")
            parent_id = None
        if parent_id and parent_id in by_id:
            children[parent_id].append(record.id)
            parents[record.id] = parent_id
            continue
        if parent_id:
            logger.warning(
                f"Journal {record.id} references missing parent {parent_id}"
            )
        parents[record.id] = None
        root_ids.append(record.id)

    def _code(node_id: str) -> str:
        return by_id[node_id].code or node_id

    nodes = {
        node_id: JournalNode(
            id=node_id,
            code=_code(node_id),
            name=record.name,
            parent_id=parents[node_id],
            children=tuple(sorted(children[node_id], key=_code)),
        )
        for node_id, record in by_id.items()
    }
    logger.debug(
        f"Indexed {len(nodes)} journals ({len(root_ids)} top-level)"
    )
    return JournalTree(nodes, sorted(root_ids, key=_code))


def build_tree_from_nested(
    payload: Iterable[Mapping[str, Any]] | None,
    logger: Logger,
) -> JournalTree:
    """Index a nested ``{id, code, name, children}`` payload.

    Sibling order is preserved as delivered. A duplicated id keeps its first
    occurrence; the duplicate and its subtree are skipped.

    Args:
        payload: Top-level nodes, or None for an empty tree.
        logger: Logger used for data warnings.

    Returns:
        JournalTree: Immutable snapshot of the hierarchy.

    Raises:
        InvalidJournalTreeError: If an entry is not a mapping or has no id.
    """
    entries: dict[str, tuple[Mapping[str, Any], str | None]] = {}
    children: dict[str | None, list[str]] = {None: []}
    stack = [(entry, None) for entry in reversed(list(payload or ()))]
    while stack:
        entry, parent_id = stack.pop()
        if not isinstance(entry, Mapping) or entry.get("id") is None:
            raise InvalidJournalTreeError(
                f"Journal entry without id under parent {parent_id}"
            )
        node_id = str(entry["id"])
        if node_id in entries:
            logger.warning(f"Duplicate journal id {node_id} ignored")
            continue
        entries[node_id] = (entry, parent_id)
        children.setdefault(parent_id, []).append(node_id)
        nested = entry.get("children") or ()
        stack.extend((child, node_id) for child in reversed(list(nested)))

    nodes = {
        node_id: JournalNode(
            id=node_id,
            code=str(entry.get("code") or node_id),
            name=str(entry.get("name") or ""),
            parent_id=parent_id,
            children=tuple(children.get(node_id, ())),
        )
        for node_id, (entry, parent_id) in entries.items()
    }
    return JournalTree(nodes, children[None])


__all__ = ["build_tree_from_records", "build_tree_from_nested"]
