"""Port for cancellable delayed callbacks."""

from collections.abc import Callable
from typing import Protocol


class ScheduledTask(Protocol):
    """Handle of a pending callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet."""


class SchedulerPort(Protocol):
    """Port arming one-shot timers."""

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        """Run ``callback`` once after ``delay_seconds``."""


__all__ = ["ScheduledTask", "SchedulerPort"]
