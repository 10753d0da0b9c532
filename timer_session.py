"""
Start/stop state of the break reminder and the repeating timer behind it.
"""
from __future__ import annotations
import tkinter as tk
from typing import Any, Callable, Optional

from notifier import UNSUPPORTED_MESSAGE
from timer_config import DEFAULT_INTERVAL_MINUTES

IDLE_MESSAGE    = 'Click "Start" to begin.'
STOPPED_MESSAGE = 'Notifications stopped. Click "Start" to restart.'

ACTIVATED_TITLE   = "Notification Timer Activated"
DEACTIVATED_TITLE = "Notification Timer Deactivated"
REMINDER_TITLE    = "Time to take a break!"


def interval_phrases(seconds: float) -> tuple[str, str]:
    """('15-minute', '15 minutes') for 900s; falls back to seconds for odd periods."""
    s = int(round(seconds))
    if s >= 60 and s % 60 == 0:
        n, unit = s // 60, "minute"
    else:
        n, unit = s, "second"
    return f"{n}-{unit}", f"{n} {unit}" + ("" if n == 1 else "s")


# ─── Scheduler ────────────────────────────────────────────────
class IntervalHandle:
    """A repeating ``after`` callback.  cancel() stops it for good."""

    def __init__(self, widget: Any, seconds: float, callback: Callable[[], None]):
        self._widget = widget
        self._ms = max(1, int(seconds * 1000))
        self._callback = callback
        self._after_id = None
        self.active = True
        self._arm()

    def _arm(self) -> None:
        self._after_id = self._widget.after(self._ms, self._fire)

    def _fire(self) -> None:
        if not self.active:
            return
        # Re-arm first so an error in the callback doesn't end the schedule
        self._arm()
        self._callback()

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._after_id is not None:
            try:
                self._widget.after_cancel(self._after_id)
            except tk.TclError:
                pass
            self._after_id = None


class TkScheduler:
    """Runs repeating callbacks on the Tk event loop of ``widget``."""

    def __init__(self, widget: Any):
        self.widget = widget

    def call_every(self, seconds: float, callback: Callable[[], None]) -> IntervalHandle:
        return IntervalHandle(self.widget, seconds, callback)


# ─── Session ──────────────────────────────────────────────────
class TimerSession:
    """Run/stop state of one timer view.

    While running, exactly one repeating reminder is scheduled and
    ``interval_handle`` holds it; while stopped the handle is None.
    Use as a context manager to guarantee the handle is released.
    """

    def __init__(self, notifier: Any, scheduler: Any,
                 interval_seconds: float = DEFAULT_INTERVAL_MINUTES * 60,
                 on_change: Optional[Callable[[], None]] = None):
        self.notifier = notifier
        self.scheduler = scheduler
        self.interval_seconds = interval_seconds
        self.on_change = on_change
        self.running = False
        self.interval_handle = None
        self.status_message = IDLE_MESSAGE
        self.span, self.every = interval_phrases(interval_seconds)

    def __enter__(self) -> TimerSession:
        return self

    def __exit__(self, *exc) -> None:
        self.teardown()

    def start(self) -> None:
        if self.running:
            return
        self.notifier.ensure_permission()
        self._release()
        self.running = True
        self.status_message = f"Notifications are active. I will notify you every {self.every}."
        self._notify(ACTIVATED_TITLE, f"The {self.span} timer has started.")
        self.interval_handle = self.scheduler.call_every(self.interval_seconds, self._remind)
        self._changed()

    def stop(self) -> None:
        if not self.running:
            return
        self._release()
        self.running = False
        self.status_message = STOPPED_MESSAGE
        self._notify(DEACTIVATED_TITLE, f"The {self.span} timer has been stopped.")
        self._changed()

    def teardown(self) -> None:
        """Release the timer without notifying; the view is going away."""
        self._release()
        self.running = False

    def _remind(self) -> None:
        self._notify(REMINDER_TITLE, f"It has been {self.every} since you started the timer.")

    def _notify(self, title: str, body: str) -> None:
        if not self.notifier.show(title, body):
            self.status_message = UNSUPPORTED_MESSAGE
            self._changed()

    def _release(self) -> None:
        if self.interval_handle is not None:
            self.interval_handle.cancel()
            self.interval_handle = None

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
