"""
Desktop notification boundary.

Notifications go out through the tray icon (pystray).  On top of that sits a
small permission model: the user is asked once whether the app may show
notifications, and the answer ("granted" / "denied") is remembered.  Until
then the permission is "default" and the first notification triggers the
prompt.  Delivery is best effort: nothing in here raises to the caller.
"""
from __future__ import annotations
from typing import Any, Callable, Optional

UNSUPPORTED_MESSAGE = "Notifications not supported on this system."


class TrayBackend:
    """Shows notifications as tray balloons / toasts of a running pystray Icon."""

    def __init__(self, icon: Optional[Any] = None):
        self.icon = icon

    @property
    def supported(self) -> bool:
        return self.icon is not None and bool(getattr(self.icon, "HAS_NOTIFICATION", False))

    def show(self, title: str, body: str) -> None:
        self.icon.notify(body, title)


class Notifier:

    def __init__(self, backend: Any, ask: Callable[[Callable[[Optional[bool]], None]], None],
                 permission: str = "default",
                 on_permission: Optional[Callable[[str], None]] = None):
        # ask(callback) shows the prompt and later calls callback(allowed);
        # allowed is None when the prompt could not be shown
        self.backend = backend
        self.permission = permission
        self._ask = ask
        self._on_permission = on_permission
        self._waiting: Optional[list[Callable[[str], None]]] = None

    @property
    def supported(self) -> bool:
        return bool(self.backend is not None and self.backend.supported)

    @property
    def pending(self) -> bool:
        return self._waiting is not None

    def permission_state(self) -> str:
        return self.permission

    def request_permission(self, callback: Optional[Callable[[str], None]] = None) -> None:
        """Ask the user for permission; callback(state) runs once it is known.

        Only one prompt is open at a time: requests made while it is showing
        wait for the same answer.
        """
        if self.permission != "default":
            if callback:
                callback(self.permission)
            return
        if self._waiting is not None:
            if callback:
                self._waiting.append(callback)
            return
        self._waiting = [callback] if callback else []
        self._ask(self._resolve)

    def ensure_permission(self) -> None:
        """Fire-and-forget permission request, if one is still needed."""
        if self.supported and self.permission != "granted":
            self.request_permission()

    def _resolve(self, allowed: Optional[bool]) -> None:
        # None: the prompt never got an answer, so ask again next time
        if allowed is not None:
            self.permission = "granted" if allowed else "denied"
            if self._on_permission:
                self._on_permission(self.permission)
        waiting, self._waiting = self._waiting or [], None
        for cb in waiting:
            cb(self.permission)

    def show(self, title: str, body: str) -> bool:
        """Show a notification.  Returns False if the system can't show any."""
        if not self.supported:
            print(f"  [!] {UNSUPPORTED_MESSAGE}")
            return False
        if self.permission == "granted":
            self._emit(title, body)
        elif self.permission != "denied":
            def deliver(state: str) -> None:
                if state == "granted":
                    self._emit(title, body)
            self.request_permission(deliver)
        return True

    def _emit(self, title: str, body: str) -> None:
        try:
            self.backend.show(title, body)
        except Exception as e:
            print(f"  [!] Notification error: {e}")
