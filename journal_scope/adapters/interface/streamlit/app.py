"""Streamlit journal explorer entry point."""

from collections.abc import Sequence

import streamlit as st
import altair as alt

from journal_scope.application.ports.scoped_records_repository import (
    ScopedRecord,
)
from journal_scope.application.use_cases.get_journal_tree import (
    GetJournalTreeUseCase,
)
from journal_scope.application.use_cases.get_scoped_records import (
    GetScopedRecordsUseCase,
)
from journal_scope.application.use_cases.multi_level_selection import (
    MultiLevelSelectionSession,
)
from journal_scope.domain.constants import RECORD_KINDS
from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.models.selection import LevelState
from journal_scope.infrastructure.container import (
    build_journal_tree_repository,
    build_scoped_records_repository,
    build_selection_session,
)


_SESSION_KEY = "journal_selection_session"
_PALETTE = (
    "#4C78A8",
    "#F58518",
    "#54A24B",
    "#E45756",
    "#72B7B2",
    "#B279A2",
)


def _fetch_journal_tree() -> JournalTree:
    """Fetch the journal hierarchy from the database."""
    use_case = GetJournalTreeUseCase(
        repository=build_journal_tree_repository(),
    )
    return use_case.execute()


@st.cache_resource(show_spinner=False)
def _load_journal_tree() -> JournalTree:
    """Cached wrapper around _fetch_journal_tree for Streamlit sessions."""
    return _fetch_journal_tree()


def _fetch_scoped_records(
    kind: str,
    effective_ids: tuple[str, ...],
) -> list[ScopedRecord]:
    """Fetch records of ``kind`` inside the effective scope."""
    use_case = GetScopedRecordsUseCase(
        repository=build_scoped_records_repository(),
    )
    return use_case.execute(kind, effective_ids)


@st.cache_data(show_spinner=False)
def _load_scoped_records(
    kind: str,
    effective_ids: tuple[str, ...],
) -> list[ScopedRecord]:
    """Cached wrapper around _fetch_scoped_records."""
    return _fetch_scoped_records(kind, effective_ids)


def _get_session(tree: JournalTree) -> MultiLevelSelectionSession:
    """Return the selection session of this browser session.

    A session built on another tree snapshot is refreshed in place so the
    root context survives a reload when possible.
    """
    session = st.session_state.get(_SESSION_KEY)
    if session is None:
        session = build_selection_session(tree)
        st.session_state[_SESSION_KEY] = session
    elif session.tree is not tree:
        session.replace_tree(tree)
    return session


def _level_of(levels: Sequence[LevelState], node_id: str) -> int | None:
    """Return the deepest level showing ``node_id``."""
    for index in range(len(levels) - 1, -1, -1):
        if node_id in levels[index].node_ids:
            return index
    return None


def _prepare_level_chart_data(
    levels: Sequence[LevelState],
) -> list[dict[str, object]]:
    """Prepare candidate vs selected counts per level for Altair.

    Args:
        levels: Levels of the current snapshot.

    Returns:
        list[dict[str, object]]: One row per (level, status) pair.
    """
    data: list[dict[str, object]] = []
    for index, level in enumerate(levels):
        selected_count = len(level.selected_ids)
        label = f"Level {index}"
        data.append(
            {"level": label, "status": "Selected", "count": selected_count}
        )
        data.append(
            {
                "level": label,
                "status": "Not selected",
                "count": len(level.nodes) - selected_count,
            }
        )
    return data


def _render_level_chart(levels: Sequence[LevelState]) -> None:
    """Render a stacked bar chart of the selection per level."""
    data = _prepare_level_chart_data(levels)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("level:N", title=None, sort=None),
        y=alt.Y("count:Q", title="Journals"),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(
                domain=["Selected", "Not selected"],
                range=[_PALETTE[0], "#D0D0D0"],
            ),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("level:N"),
            alt.Tooltip("status:N"),
            alt.Tooltip("count:Q"),
        ],
    ).properties(height=220)
    st.altair_chart(chart, width="stretch")


def _render_levels(session: MultiLevelSelectionSession) -> None:
    """Render one row of journal buttons per level."""
    snapshot = session.snapshot
    for index, level in enumerate(snapshot.levels):
        if not level.should_show_level:
            continue
        if not level.nodes:
            hidden = [
                parent_id
                for parent_id, shown in level.visibility_map.items()
                if not shown and session.tree.children_of(parent_id)
            ]
            if hidden:
                st.caption(f"Level {index}")
                st.write(f"Children hidden for {', '.join(hidden)}")
            continue
        st.caption(f"Level {index}")
        columns = st.columns(min(len(level.nodes), 6))
        for position, node in enumerate(level.nodes):
            selected = node.id in level.selected_ids
            color_index = session.node_color_index(node.id, index)
            marker = "" if color_index is None else f" [{color_index + 1}]"
            suffix = "" if node.is_terminal else " ▸"
            columns[position % len(columns)].button(
                f"{node.code} {node.name}{marker}{suffix}",
                key=f"journal_{index}_{node.id}",
                type="primary" if selected else "secondary",
                on_click=session.handle_level_selection,
                args=(index, node.id),
            )


def _render_sidebar(session: MultiLevelSelectionSession) -> None:
    """Render navigation and bulk selection actions."""
    st.sidebar.subheader("Navigation")
    root_id = session.root.journal_id
    root_node = session.tree.get(root_id) if root_id else None
    st.sidebar.caption(
        f"Root: {root_node.name if root_node else 'All journals'}"
    )

    terminal_id = session.selected_terminal_id
    terminal_level = (
        _level_of(session.levels_data, terminal_id) if terminal_id else None
    )
    if st.sidebar.button(
        "Drill into selection",
        disabled=terminal_level is None,
    ):
        session.drill_into(terminal_level, terminal_id)
    if st.sidebar.button("Up one level", disabled=root_id is None):
        session.navigate_up_one_level()

    st.sidebar.subheader("Selection")
    if st.sidebar.button("Select all visible"):
        session.select_all_visible()
    if st.sidebar.button("Parents only"):
        session.select_parents_only()
    if st.sidebar.button("Clear"):
        session.clear_all_selections()
    if st.sidebar.button(
        "Restore last selection",
        disabled=not session.has_saved_selection,
    ):
        session.restore_last_selection()
    if st.sidebar.button("Reset"):
        session.reset_selections()


def _render_records(effective_ids: tuple[str, ...]) -> None:
    """Render one table per record kind inside the scope."""
    tabs = st.tabs([kind.capitalize() for kind in RECORD_KINDS])
    for tab, kind in zip(tabs, RECORD_KINDS):
        with tab:
            records = _load_scoped_records(kind, effective_ids)
            st.caption(f"{len(records)} {kind} in scope")
            data = [{"Id": rec.id, "Name": rec.name} for rec in records]
            st.dataframe(data, width="stretch", hide_index=True, height=320)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Journal Explorer", layout="wide")
    st.title("Journal Explorer")

    tree = _load_journal_tree()
    if not len(tree):
        st.warning("No journals found.")
        return
    session = _get_session(tree)
    _render_sidebar(session)

    levels_col, chart_col = st.columns([3, 1])
    with levels_col:
        _render_levels(session)
    with chart_col:
        _render_level_chart(session.levels_data)

    effective_ids = session.effective_ids
    st.caption(
        f"Effective journals: {', '.join(effective_ids) or '-'} | "
        f"Terminal: {session.selected_terminal_id or '-'}"
    )
    if not effective_ids:
        st.info("Select journals to list their partners, goods and documents.")
        return
    _render_records(effective_ids)


if __name__ == "__main__":  # pragma: no cover
    main()
