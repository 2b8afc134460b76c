"""Tests for the Streamlit journal explorer module."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from journal_scope.adapters.interface.streamlit import app
from journal_scope.application.ports.scoped_records_repository import (
    ScopedRecord,
)
from journal_scope.application.use_cases.multi_level_selection import (
    MultiLevelSelectionSession,
)
from journal_scope.domain.services.tree_builder import build_tree_from_nested


def _tree():
    return build_tree_from_nested(
        [
            {"id": "1", "name": "Sales", "children": [{"id": "11"}]},
            {"id": "2", "name": "Purchases"},
        ],
        MagicMock(),
    )


def _session(tree, **_kwargs):
    return MultiLevelSelectionSession(tree, logger=MagicMock())


class _FakeContainer:
    def __init__(self, owner) -> None:
        self._owner = owner

    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        return False

    def button(self, label, **kwargs):
        self._owner.buttons.append((label, kwargs))
        return False


class _FakeSidebar:
    def __init__(self, pressed: set[str]) -> None:
        self.pressed = pressed
        self.labels: list[str] = []

    def subheader(self, _text):
        return None

    def caption(self, _text):
        return None

    def button(self, label, **_kwargs):
        self.labels.append(label)
        return label in self.pressed


class _FakeStreamlit:
    def __init__(self, pressed: set[str] | None = None) -> None:
        self.session_state: dict = {}
        self.sidebar = _FakeSidebar(pressed or set())
        self.captions: list[str] = []
        self.buttons: list = []
        self.dataframes: list = []
        self.charts: list = []
        self.warning_text = None
        self.info_text = None
        self.config_kwargs = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, _text):
        return None

    def caption(self, text):
        self.captions.append(text)

    def write(self, _text):
        return None

    def warning(self, text):
        self.warning_text = text

    def info(self, text):
        self.info_text = text

    def columns(self, spec):
        count = spec if isinstance(spec, int) else len(spec)
        return [_FakeContainer(self) for _ in range(count)]

    def tabs(self, labels):
        return [_FakeContainer(self) for _ in labels]

    def altair_chart(self, chart, **kwargs):
        self.charts.append((chart, kwargs))

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))


def test_fetch_journal_tree_invokes_use_case(monkeypatch):
    """_fetch_journal_tree should wire the repository into the use case."""
    fake_tree = object()

    class _FakeUseCase:
        def __init__(self, repository):
            self.repository = repository

        def execute(self):
            return fake_tree

    monkeypatch.setattr(app, "build_journal_tree_repository", lambda: "repo")
    monkeypatch.setattr(app, "GetJournalTreeUseCase", _FakeUseCase)

    assert app._fetch_journal_tree() is fake_tree


def test_fetch_scoped_records_invokes_use_case(monkeypatch):
    """_fetch_scoped_records should pass kind and ids through."""
    use_case = MagicMock()
    use_case.execute.return_value = ["record"]
    monkeypatch.setattr(app, "build_scoped_records_repository", lambda: "r")
    monkeypatch.setattr(
        app,
        "GetScopedRecordsUseCase",
        lambda repository: use_case,
    )

    result = app._fetch_scoped_records("goods", ("1",))

    assert result == ["record"]
    use_case.execute.assert_called_once_with("goods", ("1",))


def test_prepare_level_chart_data_counts_selection():
    """Each level yields a selected and a not selected row."""
    session = _session(_tree())
    session.handle_level_selection(0, "1")

    data = app._prepare_level_chart_data(session.levels_data)

    assert data == [
        {"level": "Level 0", "status": "Selected", "count": 1},
        {"level": "Level 0", "status": "Not selected", "count": 1},
        {"level": "Level 1", "status": "Selected", "count": 0},
        {"level": "Level 1", "status": "Not selected", "count": 1},
    ]


def test_level_of_returns_deepest_level():
    """Lookup should find the level rendering a journal."""
    session = _session(_tree())
    session.handle_level_selection(0, "1")

    assert app._level_of(session.levels_data, "11") == 1
    assert app._level_of(session.levels_data, "1") == 0
    assert app._level_of(session.levels_data, "ghost") is None


def test_get_session_reuses_and_refreshes(monkeypatch):
    """The session lives in session_state and follows tree reloads."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_selection_session", _session)
    tree = _tree()

    first = app._get_session(tree)
    again = app._get_session(tree)
    refreshed_tree = _tree()
    refreshed = app._get_session(refreshed_tree)

    assert first is again is refreshed
    assert refreshed.tree is refreshed_tree


def test_main_warns_when_no_journals(monkeypatch):
    """main should warn the user when the tree is empty."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_journal_tree",
        lambda: build_tree_from_nested([], MagicMock()),
    )

    app.main()

    assert fake_st.warning_text is not None
    assert fake_st.buttons == []


def test_main_renders_levels_and_hint_without_selection(monkeypatch):
    """Without a selection the records tables are not rendered."""
    fake_st = _FakeStreamlit()
    tree = _tree()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_journal_tree", lambda: tree)
    monkeypatch.setattr(app, "build_selection_session", _session)

    app.main()

    labels = [label for label, _ in fake_st.buttons]
    assert len(labels) == 2
    assert fake_st.buttons[0][1]["args"] == (0, "1")
    assert fake_st.buttons[0][1]["type"] == "secondary"
    assert fake_st.info_text is not None
    assert fake_st.dataframes == []
    assert len(fake_st.charts) == 1


def test_main_renders_records_for_selection(monkeypatch):
    """Sidebar actions apply before rendering and records are listed."""
    fake_st = _FakeStreamlit(pressed={"Select all visible"})
    tree = _tree()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_journal_tree", lambda: tree)
    monkeypatch.setattr(app, "build_selection_session", _session)
    requested = []

    def _fake_records(kind, effective_ids):
        requested.append((kind, effective_ids))
        return [ScopedRecord(id="p1", name="Acme", kind=kind)]

    monkeypatch.setattr(app, "_load_scoped_records", _fake_records)

    app.main()

    assert requested == [
        ("partners", ("1", "11")),
        ("goods", ("1", "11")),
        ("documents", ("1", "11")),
    ]
    assert len(fake_st.dataframes) == 3
    assert fake_st.dataframes[0][0] == [{"Id": "p1", "Name": "Acme"}]
    assert any("Terminal: 11" in text for text in fake_st.captions)
    session = fake_st.session_state[app._SESSION_KEY]
    assert session.levels_data[0].selected_ids == ("1", "2")
    assert SimpleNamespace(**fake_st.config_kwargs).layout == "wide"


def test_sidebar_restores_last_clicked_selection(monkeypatch):
    """The restore action re-applies the selection made by clicks."""
    fake_st = _FakeStreamlit(pressed={"Restore last selection"})
    monkeypatch.setattr(app, "st", fake_st)
    session = _session(_tree())
    session.handle_level_selection(0, "2")
    session.clear_all_selections()

    app._render_sidebar(session)

    assert "Restore last selection" in fake_st.sidebar.labels
    assert session.effective_ids == ("2",)
