"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from journal_scope.domain.models.selection import VIRTUAL_ROOT, JournalRoot
from journal_scope.infrastructure import settings as settings_module
from journal_scope.infrastructure.settings import SelectionSettings


def test_from_env_defaults(monkeypatch) -> None:
    """Without variables the whole tree and a 200 ms window are used."""
    monkeypatch.delenv("JOURNAL_CLICK_WINDOW_MS", raising=False)
    monkeypatch.delenv("JOURNAL_RESTRICTED_ID", raising=False)

    settings = SelectionSettings.from_env()

    assert settings.click_window_ms == 200
    assert settings.click_window_seconds == 0.2
    assert settings.restricted_journal_id is None
    assert settings.top == VIRTUAL_ROOT


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values should be parsed."""
    monkeypatch.setenv("JOURNAL_CLICK_WINDOW_MS", " 350 ")
    monkeypatch.setenv("JOURNAL_RESTRICTED_ID", "42")

    settings = SelectionSettings.from_env()

    assert settings.click_window_ms == 350
    assert settings.top == JournalRoot("42")


def test_from_env_treats_root_sentinel_as_unrestricted(monkeypatch) -> None:
    """The root sentinel means no restriction."""
    monkeypatch.setenv("JOURNAL_RESTRICTED_ID", "__ROOT__")

    settings = SelectionSettings.from_env()

    assert settings.restricted_journal_id is None


def test_from_env_falls_back_on_invalid_window(monkeypatch) -> None:
    """Bad windows log a warning and use the default."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: fake_logger,
    )

    monkeypatch.setenv("JOURNAL_CLICK_WINDOW_MS", "fast")
    assert SelectionSettings.from_env().click_window_ms == 200

    monkeypatch.setenv("JOURNAL_CLICK_WINDOW_MS", "0")
    assert SelectionSettings.from_env().click_window_ms == 200

    assert fake_logger.warning.call_count == 2
