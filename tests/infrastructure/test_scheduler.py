"""Tests for the threading timer scheduler."""

import threading

from journal_scope.infrastructure.scheduler import ThreadingTimerScheduler


def test_call_later_runs_callback():
    """The callback should run once the delay elapses."""
    fired = threading.Event()

    task = ThreadingTimerScheduler().call_later(0.01, fired.set)

    assert fired.wait(timeout=2.0) is True
    assert task.daemon is True


def test_cancel_prevents_callback():
    """A cancelled timer never runs its callback."""
    fired = threading.Event()

    task = ThreadingTimerScheduler().call_later(0.5, fired.set)
    task.cancel()

    assert fired.wait(timeout=0.8) is False
