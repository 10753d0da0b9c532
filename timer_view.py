"""
Timer Control view: status text plus Start / Stop buttons.
"""
from __future__ import annotations
import tkinter as tk
import platform
from typing import Any, Callable, Optional

from timer_session import TimerSession, TkScheduler

IS_MAC = platform.system() == "Darwin"
IS_WIN = platform.system() == "Windows"
FONT = "Helvetica Neue" if IS_MAC else "Segoe UI" if IS_WIN else "DejaVu Sans"

# ─── Colours ──────────────────────────────────────────────────
C_BG      = "#f3f4f6";  C_CARD    = "#ffffff"
C_TEXT    = "#1f2937";  C_TEXT_DIM = "#4b5563";  C_TEXT_MUT = "#6b7280"
C_START   = "#22c55e";  C_START_HV = "#16a34a";  C_START_OFF = "#86efac"
C_STOP    = "#ef4444";  C_STOP_HV  = "#dc2626";  C_STOP_OFF  = "#fca5a5"


class TimerView(tk.Frame):

    def __init__(self, master: Any, notifier: Any, interval_seconds: float,
                 on_change: Optional[Callable[[], None]] = None):
        super().__init__(master, bg=C_BG)
        self.on_change = on_change
        self.session = TimerSession(notifier, TkScheduler(self), interval_seconds,
                                    on_change=self._changed)
        self._build()
        self._render()
        # Unmount: a destroyed view must not leave its reminder running
        self.bind("<Destroy>", self._on_destroy)

    def _build(self) -> None:
        card = tk.Frame(self, bg=C_CARD, padx=28, pady=24,
                        highlightbackground="#e5e7eb", highlightthickness=1)
        card.place(relx=0.5, rely=0.5, anchor="center")

        tk.Label(card, text="Notification Timer", font=(FONT, 22, "bold"),
                 fg=C_TEXT, bg=C_CARD).pack(pady=(0, 12))

        self._status_var = tk.StringVar()
        tk.Label(card, textvariable=self._status_var, font=(FONT, 11), fg=C_TEXT_DIM,
                 bg=C_CARD, wraplength=320, justify="center").pack(pady=(0, 18))

        self.start_btn = self._btn(card, "Start Notifications", C_START, C_START_HV, self.session.start)
        self.stop_btn = self._btn(card, "Stop Notifications", C_STOP, C_STOP_HV, self.session.stop)

        tk.Label(card, text=f"Reminder every {self.session.every}", font=(FONT, 9),
                 fg=C_TEXT_MUT, bg=C_CARD).pack(pady=(14, 0))

    def _btn(self, p: tk.Frame, text: str, bg: str, hover: str, cmd) -> tk.Button:
        b = tk.Button(p, text=text, font=(FONT, 12, "bold"), bg=bg, fg="white",
                      activebackground=hover, activeforeground="white",
                      disabledforeground=C_TEXT_MUT, relief="flat", width=22,
                      pady=8, cursor="hand2", command=cmd)
        b.pack(fill="x", pady=5)
        return b

    def _render(self) -> None:
        running = self.session.running
        self._status_var.set(self.session.status_message)
        self.start_btn.config(state="disabled" if running else "normal",
                              bg=C_START_OFF if running else C_START,
                              cursor="arrow" if running else "hand2")
        self.stop_btn.config(state="normal" if running else "disabled",
                             bg=C_STOP if running else C_STOP_OFF,
                             cursor="hand2" if running else "arrow")

    def _changed(self) -> None:
        self._render()
        if self.on_change:
            self.on_change()

    def _on_destroy(self, event=None) -> None:
        if event is None or event.widget is self:
            self.session.teardown()
