import tkinter as tk

import pytest

from notifier import Notifier
from timer_session import TimerSession, TkScheduler
from tests.fakes import FakeBackend, FakePrompt, FakeWidget


@pytest.fixture
def widget():
    return FakeWidget()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def prompt():
    return FakePrompt()


@pytest.fixture
def make_session(widget, backend, prompt):
    def make(permission="granted", interval=15 * 60, **kw):
        notifier = Notifier(kw.pop("backend", backend), prompt, permission=permission)
        return TimerSession(notifier, TkScheduler(widget), interval, **kw)
    return make


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display")
    root.withdraw()
    yield root
    try:
        root.destroy()
    except tk.TclError:
        pass
