"""Tests for journal tree construction."""

from unittest.mock import MagicMock

import pytest

from journal_scope.domain.exceptions import InvalidJournalTreeError
from journal_scope.domain.models.journals import JournalRecord
from journal_scope.domain.services.tree_builder import (
    build_tree_from_nested,
    build_tree_from_records,
)


def test_build_tree_from_records_sorts_by_code():
    """Roots and children should be ordered by code, not by row order."""
    logger = MagicMock()
    records = [
        JournalRecord(id="b", name="Sales", parent_id=None, code="2"),
        JournalRecord(id="a", name="Purchases", parent_id=None, code="1"),
        JournalRecord(id="a2", name="Imports", parent_id="a", code="12"),
        JournalRecord(id="a1", name="Domestic", parent_id="a", code="11"),
    ]

    tree = build_tree_from_records(records, logger)

    assert tree.root_ids == ("a", "b")
    assert tree.get("a").children == ("a1", "a2")
    assert tree.get("a1").parent_id == "a"
    assert tree.get("b").is_terminal
    assert len(tree) == 4


def test_build_tree_from_records_promotes_orphans_and_self_parents():
    """Missing or self-referencing parents should yield top-level journals."""
    logger = MagicMock()
    records = [
        JournalRecord(id="x", name="Orphan", parent_id="missing"),
        JournalRecord(id="y", name="Loop", parent_id="y"),
    ]

    tree = build_tree_from_records(records, logger)

    assert set(tree.root_ids) == {"x", "y"}
    assert tree.get("x").parent_id is None
    assert tree.get("y").parent_id is None
    assert logger.warning.call_count == 2


def test_build_tree_from_records_keeps_first_duplicate():
    """A repeated id should keep the first row and log a warning."""
    logger = MagicMock()
    records = [
        JournalRecord(id="a", name="First", parent_id=None),
        JournalRecord(id="a", name="Second", parent_id=None),
    ]

    tree = build_tree_from_records(records, logger)

    assert tree.get("a").name == "First"
    assert len(tree) == 1
    logger.warning.assert_called_once()


def test_build_tree_from_nested_preserves_order_and_defaults():
    """Nested payloads keep sibling order; code falls back to the id."""
    logger = MagicMock()
    payload = [
        {"id": 2, "name": "Two", "children": [{"id": 21, "name": "Sub"}]},
        {"id": 1, "code": "A", "name": "One", "children": []},
    ]

    tree = build_tree_from_nested(payload, logger)

    assert tree.root_ids == ("2", "1")
    assert tree.get("21").parent_id == "2"
    assert tree.get("21").code == "21"
    assert tree.get("1").code == "A"
    assert tree.get("1").is_terminal


def test_build_tree_from_nested_skips_duplicate_subtree():
    """A duplicated id should skip the entry together with its children."""
    logger = MagicMock()
    payload = [
        {"id": "1", "children": [{"id": "11"}]},
        {"id": "1", "children": [{"id": "99"}]},
    ]

    tree = build_tree_from_nested(payload, logger)

    assert "99" not in tree
    assert tree.root_ids == ("1",)
    logger.warning.assert_called_once()


def test_build_tree_from_nested_rejects_entry_without_id():
    """Entries without an id cannot be indexed."""
    with pytest.raises(InvalidJournalTreeError):
        build_tree_from_nested([{"name": "nameless"}], MagicMock())


def test_build_tree_from_nested_accepts_none():
    """A missing payload is an empty tree."""
    tree = build_tree_from_nested(None, MagicMock())

    assert len(tree) == 0
    assert tree.subtree(None) == ()
