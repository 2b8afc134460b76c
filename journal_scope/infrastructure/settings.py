"""Settings helpers for the journal selection adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from journal_scope.domain.constants import (
    DEFAULT_CLICK_WINDOW_MS,
    ROOT_JOURNAL_ID,
)
from journal_scope.domain.models.selection import (
    RootContext,
    root_context_from_id,
)
from journal_scope.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SelectionSettings:
    """Settings for the interactive journal selection.

    Attributes:
        click_window_ms: Double-click detection window in milliseconds.
        restricted_journal_id: Journal the user is confined to, or None for
            the whole tree.
    """

    click_window_ms: int = DEFAULT_CLICK_WINDOW_MS
    restricted_journal_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SelectionSettings":
        """Build settings from environment variables.

        Returns:
            SelectionSettings: Settings read from ``JOURNAL_CLICK_WINDOW_MS``
            and ``JOURNAL_RESTRICTED_ID``.
        """
        logger = get_app_logger()
        window = cls._parse_window(
            os.getenv("JOURNAL_CLICK_WINDOW_MS"),
            logger=logger,
        )
        raw_restricted = (os.getenv("JOURNAL_RESTRICTED_ID") or "").strip()
        restricted = None
        if raw_restricted and raw_restricted != ROOT_JOURNAL_ID:
            restricted = raw_restricted
        return cls(click_window_ms=window, restricted_journal_id=restricted)

    @property
    def click_window_seconds(self) -> float:
        return self.click_window_ms / 1000.0

    @property
    def top(self) -> RootContext:
        """Highest root context reachable by navigation."""
        return root_context_from_id(self.restricted_journal_id)

    @staticmethod
    def _parse_window(raw_value: Optional[str], logger) -> int:
        if raw_value is None or not raw_value.strip():
            return DEFAULT_CLICK_WINDOW_MS
        try:
            value = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid JOURNAL_CLICK_WINDOW_MS={raw_value!r}, "
                f"using {DEFAULT_CLICK_WINDOW_MS}"
            )
            return DEFAULT_CLICK_WINDOW_MS
        if value <= 0:
            logger.warning(
                f"JOURNAL_CLICK_WINDOW_MS must be positive, "
                f"using {DEFAULT_CLICK_WINDOW_MS}"
            )
            return DEFAULT_CLICK_WINDOW_MS
        return value


__all__ = ["SelectionSettings"]
