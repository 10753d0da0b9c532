#!/usr/bin/env python3
"""
Notification Timer — Break Reminder
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

Small desktop window that reminds you to take a break.  Press
"Start Notifications" and a desktop notification pops up every 15 minutes
until you press "Stop Notifications".

Notifications are shown through the system tray icon, so a tray / menu bar
host is needed.  The first notification asks whether the app may show them.

Usage:
    python notification_timer.py
    python notification_timer.py --test           (10-second interval)
    python notification_timer.py --interval 25    (remind every 25 min)
"""
from __future__ import annotations
import sys, platform
import argparse, threading
from typing import Any, Optional

# ─── tkinter check ────────────────────────────────────────────
try:
    import tkinter as tk
    from tkinter import messagebox
except ImportError:
    _s = platform.system()
    print("Error: tkinter is required.")
    if _s == "Darwin":
        print("  brew install python-tk@3.12  (or use python.org installer)")
    elif _s == "Linux":
        print("  sudo apt install python3-tk")
    sys.exit(1)

from PIL import ImageTk

try:
    import pystray
    HAS_TRAY = True
except (ImportError, ValueError):  # gi.require_version raises ValueError
    HAS_TRAY = False

from app_icon import create_bell_icon
from notifier import Notifier, TrayBackend
from timer_config import load_config, save_config, interval_seconds
from timer_session import interval_phrases
from timer_view import TimerView, IS_MAC

APP_NAME = "Notification Timer"
WINDOW_W, WINDOW_H = 800, 600


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Notification Timer break reminder")
    p.add_argument("--test", action="store_true", help="Use a 10-second interval for testing")
    p.add_argument("--interval", type=float, metavar="MINUTES",
                   help="Minutes between reminders (this run only)")
    return p.parse_args(argv)


def make_permission_prompt(root: tk.Misc):
    """Ask for notification permission in a dialog, after the current event."""
    def ask(callback) -> None:
        def prompt():
            try:
                allowed = messagebox.askyesno(
                    APP_NAME, f"Allow {APP_NAME} to show desktop notifications?", parent=root)
            except tk.TclError:
                allowed = None  # no answer: stay undecided
            callback(allowed)
        root.after(0, prompt)
    return ask


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
class NotificationTimerApp:

    def __init__(self, args: argparse.Namespace):
        self.config = load_config()
        self.interval = interval_seconds(self.config, test=args.test, override=args.interval)

        self.root = tk.Tk()
        self.root.title(APP_NAME)
        self.root.geometry(f"{WINDOW_W}x{WINDOW_H}")
        self._icon_photo = ImageTk.PhotoImage(create_bell_icon(64))  # keep a ref: Tk won't
        self.root.iconphoto(True, self._icon_photo)

        self.tray = None
        self.backend = TrayBackend()
        self.notifier = Notifier(self.backend, make_permission_prompt(self.root),
                                 permission=self.config["notification_permission"],
                                 on_permission=self._remember_permission)
        self._start_tray()

        self.view = TimerView(self.root, self.notifier, self.interval,
                              on_change=self._update_tray_icon)
        self.view.pack(fill="both", expand=True)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        if not self.tray:
            self.root.bind_all("<Control-q>", lambda e: self._quit())
            self.root.bind_all("<Control-Q>", lambda e: self._quit())
        self._print_banner()

    def run(self) -> None:
        with self.view.session:
            self.root.mainloop()
        if self.tray:
            self.tray.stop()
        try:
            self.root.destroy()
        except tk.TclError:
            pass

    # ━━━ Window ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def _on_close(self) -> None:
        # macOS convention: closing the window keeps the app in the menu bar
        if IS_MAC and self.tray:
            self.root.withdraw()
        else:
            self._quit()

    def _show_window(self) -> None:
        self.root.deiconify()
        self.root.lift()
        try:
            self.root.focus_force()
        except tk.TclError:
            pass

    def _remember_permission(self, state: str) -> None:
        self.config["notification_permission"] = state
        save_config(self.config)
        if state == "denied":
            print("  [!] Notifications denied. Delete the config file to be asked again.")

    def _print_banner(self) -> None:
        try:
            _, every = interval_phrases(self.interval)
            print()
            print(f"  {APP_NAME} -- reminder every {every}")
            if self.notifier.supported:
                print(f"  [OK] Desktop notifications via tray (permission: {self.notifier.permission})")
            else:
                print("  [!] No tray icon, notifications unavailable.")
                print("      pip install pystray pillow")
            print()
        except (UnicodeEncodeError, OSError):
            pass  # silently skip on consoles that can't print

    # ━━━ System Tray ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def _start_tray(self) -> None:
        if not HAS_TRAY:
            return
        menu = pystray.Menu(
            pystray.MenuItem("Open", lambda icon, item: self.root.after(0, self._show_window),
                             default=True),
            pystray.Menu.SEPARATOR,
            pystray.MenuItem("Quit", self._quit),
        )
        try:
            self.tray = pystray.Icon("notification_timer", create_bell_icon(64, muted=True),
                                     APP_NAME, menu)
        except Exception as e:
            print(f"  [!] Tray icon unavailable: {e}")
            return
        self.backend.icon = self.tray
        threading.Thread(target=self._run_tray, daemon=True).start()

    def _run_tray(self) -> None:
        try:
            self.tray.run()
        except Exception as e:
            print(f"  [!] Tray icon stopped: {e}")

    def _update_tray_icon(self) -> None:
        if self.tray:
            running = self.view.session.running
            try:
                self.tray.icon = create_bell_icon(64, muted=not running)
                self.tray.title = APP_NAME if running else f"{APP_NAME} (stopped)"
            except Exception:
                pass

    def _quit(self, icon: Optional[Any] = None, item: Optional[Any] = None) -> None:
        self.root.after(0, self.root.quit)


def main(argv: Optional[list[str]] = None) -> None:
    NotificationTimerApp(parse_args(argv)).run()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
if __name__ == "__main__":
    main()
