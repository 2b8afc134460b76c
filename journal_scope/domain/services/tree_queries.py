"""Read-only traversals over a ``JournalTree`` snapshot."""

from logging import Logger

from journal_scope.domain.models.journals import JournalNode, JournalTree


def find_node_by_id(tree: JournalTree, node_id: str) -> JournalNode | None:
    """Return the journal with ``node_id`` or None when it is not in the tree.

    Callers treat None as a stale reference and ignore the operation.
    """
    return tree.get(node_id)


def find_parent_of_node(node_id: str, tree: JournalTree) -> JournalNode | None:
    """Return the immediate parent, or None for a top-level or unknown id."""
    node = tree.get(node_id)
    if node is None or node.parent_id is None:
        return None
    return tree.get(node.parent_id)


def find_path_to_root(
    node_id: str,
    tree: JournalTree,
    logger: Logger | None = None,
) -> list[str]:
    """Return the ids from the top-level ancestor down to ``node_id``.

    The walk visits each journal at most once, so a malformed parent cycle
    stops after at most ``len(tree)`` steps instead of hanging.

    Args:
        node_id: Journal to start from.
        tree: Snapshot to walk.
        logger: Optional logger for cycle warnings.

    Returns:
        list[str]: Root-first path, empty when ``node_id`` is unknown.
    """
    path: list[str] = []
    seen: set[str] = set()
    current = tree.get(node_id)
    while current is not None:
        if current.id in seen:
            if logger is not None:
                logger.warning(
                    f"Parent cycle detected while walking up from {node_id}"
                )
            break
        seen.add(current.id)
        path.append(current.id)
        current = find_parent_of_node(current.id, tree)
    path.reverse()
    return path


__all__ = ["find_node_by_id", "find_parent_of_node", "find_path_to_root"]
