"""Tests for journal and selection models."""

from unittest.mock import MagicMock

from journal_scope.domain.constants import ROOT_JOURNAL_ID
from journal_scope.domain.models.selection import (
    VIRTUAL_ROOT,
    JournalRoot,
    LevelState,
    root_context_from_id,
    root_context_to_id,
)
from journal_scope.domain.services.tree_builder import build_tree_from_nested


def test_journal_tree_subtree_variants():
    """subtree distinguishes the whole tree, a journal and unknown ids."""
    tree = build_tree_from_nested(
        [{"id": "1", "children": [{"id": "11"}]}, {"id": "2"}],
        MagicMock(),
    )

    assert [node.id for node in tree.subtree(None)] == ["1", "2"]
    assert [node.id for node in tree.subtree("1")] == ["11"]
    assert tree.subtree("2") == ()
    assert tree.subtree("ghost") is None
    assert "11" in tree
    assert {node.id for node in tree} == {"1", "11", "2"}


def test_root_context_round_trip_with_sentinel():
    """The sentinel and empty ids map to the virtual root."""
    assert root_context_from_id(ROOT_JOURNAL_ID) == VIRTUAL_ROOT
    assert root_context_from_id(None) == VIRTUAL_ROOT
    assert root_context_from_id("7") == JournalRoot("7")
    assert root_context_to_id(VIRTUAL_ROOT) == ROOT_JOURNAL_ID
    assert root_context_to_id(JournalRoot("7")) == "7"
    assert VIRTUAL_ROOT.journal_id is None


def test_level_state_defaults():
    """A level starts with no selection and an empty visibility map."""
    level = LevelState(nodes=())

    assert level.selected_ids == ()
    assert dict(level.visibility_map) == {}
    assert level.should_show_level is True
    assert level.node_ids == ()
