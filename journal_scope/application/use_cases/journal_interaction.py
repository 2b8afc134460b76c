"""Routes raw journal clicks to the selection session.

Each level of the tree is an interaction source with its own click
disambiguator: a single click advances the journal's selection cycle, a
double click re-roots the view.
"""

from journal_scope.application.ports.scheduler import SchedulerPort
from journal_scope.application.use_cases.click_disambiguator import (
    ClickDisambiguator,
)
from journal_scope.application.use_cases.multi_level_selection import (
    MultiLevelSelectionSession,
)
from journal_scope.domain.constants import ROOT_JOURNAL_ID
from journal_scope.domain.models.journals import JournalTree
from journal_scope.domain.models.selection import SelectionSnapshot
from journal_scope.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class JournalInteractionController:
    """Click handling for a journal tree view."""

    def __init__(
        self,
        session: MultiLevelSelectionSession,
        scheduler: SchedulerPort,
        window_seconds: float,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._session = session
        self._scheduler = scheduler
        self._window_seconds = window_seconds
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._disambiguators: dict[int, ClickDisambiguator] = {}
        self._closed = False

    @property
    def session(self) -> MultiLevelSelectionSession:
        return self._session

    def click(self, level_index: int, node_id: str) -> None:
        """Register a click on ``node_id`` rendered at ``level_index``."""
        if self._closed or node_id == ROOT_JOURNAL_ID:
            return
        self._disambiguator(level_index).click(
            node_id,
            on_single=lambda: self._single_click(level_index, node_id),
            on_double=lambda: self._double_click(level_index, node_id),
        )

    def navigate_up_one_level(self) -> SelectionSnapshot:
        """Move the root context up, dropping any pending click."""
        self._cancel_pending()
        self._usage_logger.info("Navigate up one level")
        return self._session.navigate_up_one_level()

    def replace_tree(self, tree: JournalTree) -> SelectionSnapshot:
        """Drop pending clicks, then swap the session onto ``tree``."""
        self._cancel_pending()
        return self._session.replace_tree(tree)

    def close(self) -> None:
        """Cancel every pending click; later clicks are ignored."""
        self._closed = True
        for disambiguator in self._disambiguators.values():
            disambiguator.dispose()
        self._logger.debug("Journal interaction controller closed")

    def _disambiguator(self, level_index: int) -> ClickDisambiguator:
        disambiguator = self._disambiguators.get(level_index)
        if disambiguator is None:
            disambiguator = ClickDisambiguator(
                self._scheduler,
                self._window_seconds,
                logger=self._logger,
            )
            self._disambiguators[level_index] = disambiguator
        return disambiguator

    def _cancel_pending(self) -> None:
        for disambiguator in self._disambiguators.values():
            disambiguator.cancel_pending()

    def _single_click(self, level_index: int, node_id: str) -> None:
        self._usage_logger.info(f"Select {node_id} at level {level_index}")
        self._session.handle_level_selection(level_index, node_id)

    def _double_click(self, level_index: int, node_id: str) -> None:
        self._usage_logger.info(f"Drill into {node_id} at level {level_index}")
        self._cancel_pending()
        self._session.drill_into(level_index, node_id)


__all__ = ["JournalInteractionController"]
