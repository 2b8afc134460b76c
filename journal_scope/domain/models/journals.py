"""Domain models for the journal (chart-of-accounts) tree."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class JournalRecord:
    """Flat journal row as read from storage."""

    id: str
    name: str
    parent_id: str | None
    code: str | None = None


@dataclass(frozen=True)
class JournalNode:
    """Immutable journal node; children are referenced by id."""

    id: str
    code: str
    name: str
    parent_id: str | None = None
    children: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_terminal(self) -> bool:
        """Return True when the node has no children."""
        return not self.children


class JournalTree:
    """Arena of journal nodes keyed by id.

    The tree is an immutable snapshot: a refreshed hierarchy is a new
    ``JournalTree`` instance, never an in-place edit.
    """

    def __init__(
        self,
        nodes: Mapping[str, JournalNode],
        root_ids: Sequence[str],
    ) -> None:
        self._nodes = MappingProxyType(dict(nodes))
        self._root_ids = tuple(root_ids)

    @property
    def root_ids(self) -> tuple[str, ...]:
        return self._root_ids

    @property
    def roots(self) -> tuple[JournalNode, ...]:
        return tuple(self._nodes[node_id] for node_id in self._root_ids)

    def get(self, node_id: str) -> JournalNode | None:
        return self._nodes.get(node_id)

    def children_of(self, node_id: str) -> tuple[JournalNode, ...]:
        """Return the child nodes of ``node_id`` (empty when unknown)."""
        node = self._nodes.get(node_id)
        if node is None:
            return ()
        return tuple(
            self._nodes[child_id]
            for child_id in node.children
            if child_id in self._nodes
        )

    def subtree(self, root_id: str | None) -> tuple[JournalNode, ...] | None:
        """Return the level-0 candidates below ``root_id``.

        Args:
            root_id: Journal id of the root context, or None for the whole
                tree.

        Returns:
            tuple[JournalNode, ...] | None: Children of the root context, the
            top-level nodes when ``root_id`` is None, or None when the id is
            not part of this snapshot.
        """
        if root_id is None:
            return self.roots
        if root_id not in self._nodes:
            return None
        return self.children_of(root_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[JournalNode]:
        return iter(self._nodes.values())


__all__ = ["JournalRecord", "JournalNode", "JournalTree"]
