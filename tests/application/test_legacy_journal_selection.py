"""Tests for the two-row legacy journal selection."""

from unittest.mock import MagicMock

from journal_scope.application.use_cases.legacy_journal_selection import (
    LegacyJournalSelection,
    PartialSelection,
)
from journal_scope.domain.constants import DEFAULT_ROOT_FILTER, ROOT_JOURNAL_ID
from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.services.tree_builder import build_tree_from_nested


def _tree() -> JournalTree:
    return build_tree_from_nested(
        [
            {"id": "1", "children": [{"id": "11"}, {"id": "12"}]},
            {"id": "3"},
        ],
        MagicMock(),
    )


def test_initial_state_uses_root_sentinel():
    """Without a restriction the top level is the root sentinel."""
    selection = LegacyJournalSelection(_tree(), logger=MagicMock())

    assert selection.state.top_level_id == ROOT_JOURNAL_ID
    assert selection.state.root_filter == DEFAULT_ROOT_FILTER
    assert selection.effective_ids == ()


def test_restricted_journal_becomes_top_level():
    """A restricted journal is the initial and reset top level."""
    selection = LegacyJournalSelection(
        _tree(),
        restricted_journal_id="1",
        logger=MagicMock(),
    )
    selection.update_selections(PartialSelection(top_level_id="3"), {})

    state = selection.reset_selections()

    assert state.top_level_id == "1"


def test_update_selections_applies_visibility_rule():
    """Expanded parents without selected children are not in scope."""
    selection = LegacyJournalSelection(_tree(), logger=MagicMock())

    browsing = selection.update_selections(
        PartialSelection(level2_ids=["1"]),
        {"1": True},
    )
    assert browsing.effective_ids == ()

    committed = selection.update_selections(
        PartialSelection(level3_ids=["11"]),
        {"1": True},
    )
    assert committed.level2_ids == ("1",)
    assert committed.effective_ids == ("1", "11")
    assert selection.selected_journal_id(is_hierarchy_mode=True) == "11"


def test_selected_journal_id_is_none_when_ambiguous():
    """Several leaves in scope leave no single journal to lock on."""
    selection = LegacyJournalSelection(_tree(), logger=MagicMock())

    selection.update_selections(
        PartialSelection(level2_ids=["1"], level3_ids=["11", "12"]),
        {"1": True},
    )

    assert selection.selected_journal_id(is_hierarchy_mode=True) is None


def test_flat_mode_selection():
    """Flat mode keeps one journal and ignores the hierarchy rows."""
    selection = LegacyJournalSelection(_tree(), logger=MagicMock())
    selection.update_selections(PartialSelection(level2_ids=["1"]), {})

    state = selection.set_selected_flat_journal_id("3")

    assert state.flat_id == "3"
    assert state.level2_ids == ()
    assert state.effective_ids == ("3",)
    assert selection.selected_journal_id(is_hierarchy_mode=False) == "3"

    cleared = selection.set_selected_flat_journal_id(None)
    assert cleared.effective_ids == ()


def test_replace_tree_resets_and_logs():
    """A refreshed tree resets the selection."""
    logger = MagicMock()
    selection = LegacyJournalSelection(_tree(), logger=logger)
    selection.update_selections(PartialSelection(level2_ids=["3"]), {})

    state = selection.replace_tree(build_tree_from_nested([], MagicMock()))

    assert state.level2_ids == ()
    assert state.effective_ids == ()
    logger.info.assert_called_once()
