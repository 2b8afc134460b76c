"""Single/double click classification with one cancellable pending slot.

A click arms a timer for its single-click action. A second click on the same
target inside the window cancels that timer and runs the double-click action
instead. A click on another target cancels and drops the pending action: it
neither fires nor counts as a double click.
"""

from collections.abc import Callable
from dataclasses import dataclass
import threading

from journal_scope.application.ports.scheduler import (
    ScheduledTask,
    SchedulerPort,
)
from journal_scope.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class _PendingClick:
    target_id: str
    task: ScheduledTask
    generation: int
    on_single: Callable[[], None]


class ClickDisambiguator:
    """Classify clicks from one interaction source."""

    def __init__(
        self,
        scheduler: SchedulerPort,
        window_seconds: float,
        logger=None,
    ) -> None:
        """Initialize the disambiguator.

        Args:
            scheduler: Port arming the single-click timers.
            window_seconds: Double-click window.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._scheduler = scheduler
        self._window_seconds = window_seconds
        self._logger = logger or get_app_logger()
        self._lock = threading.RLock()
        self._pending: _PendingClick | None = None
        self._generation = 0
        self._disposed = False

    @property
    def pending_target(self) -> str | None:
        pending = self._pending
        return pending.target_id if pending else None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def click(
        self,
        target_id: str,
        on_single: Callable[[], None],
        on_double: Callable[[], None],
    ) -> None:
        """Register a click on ``target_id``.

        Args:
            target_id: Identifier of the clicked item.
            on_single: Action run when the window elapses without a second
                click on the same item.
            on_double: Action run immediately on a second click.
        """
        with self._lock:
            if self._disposed:
                self._logger.debug(f"Click on {target_id} after teardown")
                return
            pending = self._take_pending()
            if pending is not None and pending.target_id == target_id:
                on_double()
                return
            if pending is not None:
                self._logger.debug(
                    f"Dropped pending click on {pending.target_id}"
                )
            self._generation += 1
            generation = self._generation
            task = self._scheduler.call_later(
                self._window_seconds,
                lambda: self._fire(generation),
            )
            self._pending = _PendingClick(
                target_id=target_id,
                task=task,
                generation=generation,
                on_single=on_single,
            )

    def cancel_pending(self) -> bool:
        """Cancel the pending single click, returning True if one existed."""
        with self._lock:
            return self._take_pending() is not None

    def dispose(self) -> None:
        """Cancel any pending click and ignore everything afterwards."""
        with self._lock:
            self._take_pending()
            self._disposed = True

    def _take_pending(self) -> _PendingClick | None:
        pending = self._pending
        self._pending = None
        if pending is not None:
            pending.task.cancel()
        return pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            pending = self._pending
            if (
                self._disposed
                or pending is None
                or pending.generation != generation
            ):
                return
            self._pending = None
            pending.on_single()


__all__ = ["ClickDisambiguator"]
