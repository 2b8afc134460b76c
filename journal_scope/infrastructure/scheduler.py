"""Thread based scheduler used to delay single-click handling."""

from collections.abc import Callable
import threading

from journal_scope.application.ports.scheduler import (
    ScheduledTask,
    SchedulerPort,
)


class ThreadingTimerScheduler(SchedulerPort):
    """SchedulerPort implementation backed by ``threading.Timer``."""

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        """Run ``callback`` once after ``delay_seconds`` on a daemon thread.

        Args:
            delay_seconds: Delay before the callback fires.
            callback: Zero-argument callable.

        Returns:
            ScheduledTask: The started timer; ``cancel()`` stops it if it
            has not fired yet.
        """
        timer = threading.Timer(max(delay_seconds, 0.0), callback)
        timer.daemon = True
        timer.start()
        return timer


__all__ = ["ThreadingTimerScheduler"]
